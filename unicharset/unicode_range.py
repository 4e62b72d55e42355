"""
The CSS `unicode-range` notation: comma-separated tokens like U+26, U+0-7F, or U+4??.

Parsing is forgiving: a token that doesn't look right is simply skipped, as a browser
would skip it. A question mark stands for any hex digit, so U+4?? means U+400-4FF.
"""
import re
from .interfaces import CodePoint
from .ranges import compress

SEPARATOR = re.compile(r'\s*,\s*')
TOKEN = re.compile(r'u\+([0-9a-f?]{1,6})(?:-([0-9a-f]{1,6}))?', re.IGNORECASE)

def token_bounds(token:str):
	""" Return the (first, last) code points a single token covers, or None if it's malformed. """
	match = TOKEN.fullmatch(token)
	if match is None: return None
	start, end = match.groups()
	if '?' in start: return int(start.replace('?', '0'), 16), int(start.replace('?', 'f'), 16)
	first = int(start, 16)
	return first, first if end is None else int(end, 16)

def parse_unicode_range(text:str):
	""" Return a CodePointSet of everything the unicode-range text mentions. """
	from .codepoints import CodePointSet
	result = CodePointSet()
	for token in SEPARATOR.split(text.strip()):
		bounds = token_bounds(token)
		if bounds is None: continue
		first, last = bounds
		result.add(*range(first, last+1))
	return result

def hex_token(codepoint:CodePoint) -> str: return 'U+%X' % codepoint

def to_hex_string(codepoints) -> str:
	""" Given code points in ascending order, list each one. """
	return ','.join(map(hex_token, codepoints))

def to_hex_range_string(codepoints) -> str:
	""" Given code points in ascending order, list them compactly. """
	return ','.join(
		hex_token(item[0]) + '-%X' % item[1] if isinstance(item, list) else hex_token(item)
		for item in compress(codepoints)
	)
