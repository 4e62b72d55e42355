"""
UTF-16 surrogate arithmetic and the printable token encoding of a single code point.

None of this depends on any particular set, so it's all plain functions.

Tokens are meant to be pasted into a regular expression, either bare or inside a
character class. ASCII letters and digits are safe in either place, so they appear
as themselves. Everything else gets a \\uXXXX escape, and a supplementary code point
becomes the escapes of its two surrogates back to back.
"""
from typing import Iterator
from .interfaces import (
	CodePoint, SUPPLEMENTARY_START, BMP_LIMIT,
	HIGH_SURROGATE_BASE, LOW_SURROGATE_BASE, SURROGATE_MASK, SURROGATE_SPAN,
)

def high_surrogate(codepoint:CodePoint) -> int: return (codepoint - SUPPLEMENTARY_START) // SURROGATE_SPAN + HIGH_SURROGATE_BASE
def low_surrogate(codepoint:CodePoint) -> int: return (codepoint - SUPPLEMENTARY_START) % SURROGATE_SPAN + LOW_SURROGATE_BASE
def combine_surrogates(high:int, low:int) -> CodePoint: return ((high & SURROGATE_MASK) << 10) + (low & SURROGATE_MASK) + SUPPLEMENTARY_START

def is_high_surrogate(unit:int) -> bool: return unit & 0xFC00 == HIGH_SURROGATE_BASE
def is_low_surrogate(unit:int) -> bool: return unit & 0xFC00 == LOW_SURROGATE_BASE

def code_units(text:str) -> list:
	"""
	View a Python string as UTF-16 code units. Characters beyond the BMP become pairs;
	lone surrogates (which Python strings may well contain) pass through untouched.
	"""
	data = text.encode('utf-16-le', 'surrogatepass')
	return [int.from_bytes(data[i:i+2], 'little') for i in range(0, len(data), 2)]

def decode_utf16(text:str) -> Iterator[CodePoint]:
	"""
	Yield the code points of a string, combining each well-formed surrogate pair.
	A surrogate without a proper partner is yielded as a code point in its own right,
	and the unit after it gets its own turn.
	"""
	units = code_units(text)
	i = 0
	while i < len(units):
		unit = units[i]
		if is_high_surrogate(unit) and i+1 < len(units) and is_low_surrogate(units[i+1]):
			yield combine_surrogates(unit, units[i+1])
			i += 2
		else:
			yield unit
			i += 1

def is_safe(codepoint:CodePoint) -> bool:
	return 0x30 <= codepoint <= 0x39 or 0x41 <= codepoint <= 0x5A or 0x61 <= codepoint <= 0x7A

def encode_token(codepoint:CodePoint) -> str:
	if is_safe(codepoint): return chr(codepoint)
	if codepoint <= BMP_LIMIT: return '\\u' + ('%X' % (codepoint + 0x10000))[-4:]
	return encode_token(high_surrogate(codepoint)) + encode_token(low_surrogate(codepoint))
