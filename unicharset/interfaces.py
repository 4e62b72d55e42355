"""
Definitions shared across the code-point set machinery: a few type aliases,
the design constants of UTF-16, and the exception types this package deals in.

The set itself is permissive: hand it something it doesn't understand and you get
an empty set back. The exceptions here exist for callers who would rather hear
about such things, via the strict constructor.
"""

CodePoint = int
RangeList = list  # Each element is either a CodePoint or a [first, last] pair.

MAX_CODEPOINT : CodePoint = 0x10FFFF
SUPPLEMENTARY_START : CodePoint = 0x10000
BMP_LIMIT : CodePoint = 0xFFFF

HIGH_SURROGATE_BASE = 0xD800
LOW_SURROGATE_BASE = 0xDC00
SURROGATE_MASK = 0x3FF
SURROGATE_SPAN = 0x400

# The bucket of "lone surrogates" for pattern synthesis. Note the five-digit lower bound:
# nothing is ever at least 0xD8000 and at most 0xDBFF, so this bucket is always empty.
# It is kept exactly as the pattern synthesis has always behaved; widening it to the
# genuine high-surrogate block would change which alternative those code points land in.
LONE_SURROGATE_RANGE = (0xD8000, 0xDBFF)


class CharsetError(ValueError):
	""" Base class of all exceptions arising from the code-point set machinery. """

class InvalidCodepoint(CharsetError):
	"""
	Raised by the strict constructor for a value which is not a Unicode scalar,
	or for a range-list element which is neither a code point nor a pair.
	"""
	def __init__(self, value):
		super().__init__(value)
		self.value = value

class UnsupportedInput(CharsetError, TypeError):
	""" Raised by the strict constructor when the input is not a number, string, or range list. """
	def __init__(self, value):
		super().__init__(type(value).__name__)
		self.value = value


def is_codepoint(value) -> bool:
	""" True for plain integers; bool is not a code point, even if Python thinks it's an int. """
	return isinstance(value, int) and not isinstance(value, bool)
