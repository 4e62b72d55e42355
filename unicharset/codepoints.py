"""
A mutable set of Unicode code points, with the usual set algebra and a variety of ways
to write the set back out: as a sorted list, a compressed range list, a bracketed class,
CSS unicode-range hex notation, or a regular-expression fragment that works on UTF-16.

Membership is a plain mapping from code point to flag. Removing a member flips the flag
rather than deleting the key, and the size is tracked alongside, so adding what's present
or removing what's absent never disturbs the count.

Construction is permissive. You can start from nothing, a single code point, a string,
or a range list like [1, [3, 5], 6]. Anything else gives an empty set, and a range-list
element which is neither a code point nor a pair of code points is passed over.
If you'd rather be told about such mistakes, use `CodePointSet.strict(...)`.
"""
from .interfaces import (
	CodePoint, RangeList, MAX_CODEPOINT,
	InvalidCodepoint, UnsupportedInput, is_codepoint,
)
from . import ranges, regexp, surrogates, unicode_range


class CodePointSet:
	def __init__(self, source=None):
		self.members = {}
		self.size = 0
		if isinstance(source, str): self.add(*surrogates.decode_utf16(source))
		elif is_codepoint(source): self.add(source)
		elif isinstance(source, (list, tuple)):
			self.add(*ranges.expand([item for item in source if ranges.well_formed(item)]))

	@classmethod
	def strict(cls, source) -> "CodePointSet":
		""" Like the constructor, but complain about anything it would otherwise shrug off. """
		if isinstance(source, str): return cls(source)
		if is_codepoint(source): _check_bounds(source, source)
		elif isinstance(source, (list, tuple)):
			for item in source:
				if not ranges.well_formed(item): raise InvalidCodepoint(item)
			for first, last in ranges.bounds(source): _check_bounds(first, last)
		else: raise UnsupportedInput(source)
		return cls(source)

	@staticmethod
	def parse_unicode_range(text:str) -> "CodePointSet": return unicode_range.parse_unicode_range(text)

	def add(self, *codepoints:CodePoint):
		for cp in codepoints:
			if self.members.get(cp) is not True:
				self.members[cp] = True
				self.size += 1

	def remove(self, *codepoints:CodePoint):
		for cp in codepoints:
			if self.members.get(cp) is True:
				self.members[cp] = False
				self.size -= 1

	def contains(self, codepoint:CodePoint) -> bool: return self.members.get(codepoint) is True
	def get_size(self) -> int: return self.size
	def is_empty(self) -> bool: return self.size == 0
	def to_array(self) -> list: return sorted(cp for cp, present in self.members.items() if present)

	def equals(self, other:"CodePointSet") -> bool:
		return self.size == other.get_size() and self.subset(other)

	def subset(self, other:"CodePointSet") -> bool:
		return all(other.contains(cp) for cp in self.to_array())

	def union(self, other:"CodePointSet") -> "CodePointSet":
		return CodePointSet(self.to_array() + other.to_array())

	def intersect(self, other:"CodePointSet") -> "CodePointSet":
		return self._select(other, True)

	def difference(self, other:"CodePointSet") -> "CodePointSet":
		return self._select(other, False)

	def _select(self, other, wanted:bool):
		result = CodePointSet()
		result.add(*(cp for cp in self.to_array() if other.contains(cp) == wanted))
		return result

	def copy(self) -> "CodePointSet": return CodePointSet(self.to_array())

	# Export
	def to_range(self) -> RangeList: return ranges.compress(self.to_array())
	def to_range_string(self) -> str: return regexp.range_string(self.to_array())
	def to_hex_string(self) -> str: return unicode_range.to_hex_string(self.to_array())
	def to_hex_range_string(self) -> str: return unicode_range.to_hex_range_string(self.to_array())
	def to_string(self) -> str: return ''.join(map(surrogates.encode_token, self.to_array()))
	def to_regexp(self) -> str: return regexp.to_regexp(self.to_array())

	# Python protocols
	def __len__(self): return self.size
	def __contains__(self, codepoint): return self.contains(codepoint)
	def __iter__(self): return iter(self.to_array())
	def __str__(self): return self.to_string()
	def __repr__(self): return '%s(%r)' % (type(self).__name__, self.to_range())

	def __eq__(self, other):
		if not isinstance(other, CodePointSet): return NotImplemented
		return self.equals(other)
	__hash__ = None

	def __or__(self, other): return self.union(other) if isinstance(other, CodePointSet) else NotImplemented
	def __and__(self, other): return self.intersect(other) if isinstance(other, CodePointSet) else NotImplemented
	def __sub__(self, other): return self.difference(other) if isinstance(other, CodePointSet) else NotImplemented
	def __le__(self, other): return self.subset(other) if isinstance(other, CodePointSet) else NotImplemented


def _check_bounds(first, last):
	for cp in (first, last):
		if not 0 <= cp <= MAX_CODEPOINT: raise InvalidCodepoint(cp)
