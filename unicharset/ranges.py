"""
Conversion between a flat sorted sequence of code points and the compressed "range list".

A range list mixes bare code points with inclusive [first, last] pairs, in any order.
Compression produces pairs only for runs of three or more: a pair standing in for two
adjacent code points saves nothing, so such runs stay as two singletons.
"""
from .interfaces import CodePoint, RangeList, is_codepoint

def is_pair(item) -> bool: return isinstance(item, (list, tuple)) and len(item) == 2

def expand(range_list:RangeList) -> list:
	""" Every code point mentioned by the range list, in the order mentioned. Duplicates are kept. """
	result = []
	for item in range_list:
		if is_pair(item):
			first, last = item
			result.extend(range(first, last+1))
		else: result.append(item)
	return result

def compress(codepoints) -> RangeList:
	""" Given code points in ascending order without duplicates, return the minimal range list. """
	result = []
	run = []
	for cp in codepoints:
		if run and cp != run[-1] + 1:
			result.extend(_close(run))
			run = []
		run.append(cp)
	result.extend(_close(run))
	return result

def _close(run:list) -> list:
	if len(run) < 3: return run
	return [[run[0], run[-1]]]

def bounds(range_list:RangeList) -> list:
	""" Normalize a range list to (first, last) tuples, including single code points as (cp, cp). """
	return [tuple(item) if is_pair(item) else (item, item) for item in range_list]

def well_formed(item) -> bool:
	""" Is this a plausible range-list element? Used by the strict constructor. """
	if is_pair(item): return all(map(is_codepoint, item))
	return is_codepoint(item)
