"""
Synthesis of a regular-expression fragment which matches a set of code points in UTF-16 text.

The fragment carries no flags, anchors, or groups: that part is up to the caller.

Code points in the BMP are easy: one character class covers them. Supplementary code points
each take two code units, so each becomes a two-unit sequence of high surrogate then low
surrogate. Naively that's one alternative per code point, which explodes quickly. Instead:

	First, group the low surrogates by their high surrogate. A contiguous run of
	supplementary code points shares a high surrogate for up to 1024 code points at a time.

	Second, group the high surrogates by the (rendered) set of low surrogates they go with.
	Large ranges spanning several high surrogates mostly have the complete low block, so
	those all collapse into a single alternative: [highs][lows].

The second grouping is keyed by the rendered text of the low-surrogate class, which is
exactly the text that goes into the pattern, so equal keys mean equal alternatives.

With thanks to http://inimino.org/~inimino/blog/javascript_cset for the idea.
"""
from .interfaces import BMP_LIMIT, LONE_SURROGATE_RANGE
from .ranges import compress
from .surrogates import high_surrogate, low_surrogate, encode_token

VERBOSE = False

def range_string(codepoints) -> str:
	"""
	Render a collection of code points as a regex atom: nothing at all for nothing,
	a bare token for a lone code point, and a bracketed class otherwise.
	This makes no allowance for surrogates: a supplementary code point is rendered as
	its surrogate pair, which only means the right thing outside of brackets.
	"""
	contains_range = False
	parts = []
	for item in compress(sorted(codepoints)):
		if isinstance(item, list):
			contains_range = True
			parts.append(encode_token(item[0]) + '-' + encode_token(item[1]))
		else: parts.append(encode_token(item))
	if not parts: return ''
	if len(parts) == 1 and not contains_range: return parts[0]
	return '[' + ''.join(parts) + ']'

def partition(codepoints) -> tuple:
	""" Split ascending code points into (bmp, lone_surrogates, {high: lows}) with insertion-ordered dict. """
	first, last = LONE_SURROGATE_RANGE
	bmp, surrogates, by_high = set(), set(), {}
	for cp in codepoints:
		if first <= cp <= last: surrogates.add(cp)
		elif cp <= BMP_LIMIT: bmp.add(cp)
		else: by_high.setdefault(high_surrogate(cp), set()).add(low_surrogate(cp))
	return bmp, surrogates, by_high

def group_by_lows(by_high:dict) -> dict:
	""" Invert {high: lows} into {rendered lows: highs}, preserving first-seen order. """
	by_lows = {}
	for high, lows in by_high.items():
		by_lows.setdefault(range_string(lows), set()).add(high)
	return by_lows

def to_regexp(codepoints) -> str:
	""" Given code points in ascending order, return the pattern text matching any one of them. """
	bmp, surrogates, by_high = partition(codepoints)
	by_lows = group_by_lows(by_high)
	if VERBOSE: print("Pattern synthesis: %d BMP, %d lone surrogates, %d high surrogates in %d groups."%(
		len(bmp), len(surrogates), len(by_high), len(by_lows)
	))
	result = []
	if bmp: result.append(range_string(bmp))
	for lows, highs in by_lows.items(): result.append(range_string(highs) + lows)
	if surrogates: result.append(range_string(surrogates))
	return '|'.join(result)
