"""
Turn a set of characters into a regular expression (or some other rendering) on STDOUT.

The set may be given as literal text, as a CSS unicode-range string, or as the
contents of a text file. The output is meant for pasting into a JavaScript-style
(UTF-16) pattern: it carries no flags, anchors, or groups.
"""

import sys, os, argparse

from unicharset import regexp
from unicharset.codepoints import CodePointSet

FORMATS = {
	'regexp': CodePointSet.to_regexp,
	'range': CodePointSet.to_range_string,
	'hex': CodePointSet.to_hex_string,
	'hex-range': CodePointSet.to_hex_range_string,
	'string': CodePointSet.to_string,
	'array': lambda cps: ','.join(map(str, cps.to_array())),
}

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m unicharset', description=__doc__,)
	parser.add_argument('source', help='the characters, a unicode-range, or a path to a text file')
	source = parser.add_mutually_exclusive_group()
	source.add_argument('-u', '--unicode-range', action='store_true', help='read the source as CSS unicode-range notation, e.g. "U+0-7F,U+4??"')
	source.add_argument('-f', '--file', action='store_true', help='read the characters from the file named by the source')
	parser.add_argument('--format', choices=sorted(FORMATS), default='regexp', help='how to write out the set (default: regexp)')
	parser.add_argument('--allow-empty', action='store_true', help='do not treat an empty selection as an error')
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk about how the pattern grouping went.")
	return parser.parse_args(argv)

def load(args) -> CodePointSet:
	if args.unicode_range: return CodePointSet.parse_unicode_range(args.source)
	if args.file:
		with open(args.source, encoding='utf-8') as fh: return CodePointSet(fh.read())
	return CodePointSet(args.source)

def main(args):
	if args.verbose: regexp.VERBOSE = True
	if args.file and not os.path.exists(args.source):
		print('Source file %r does not exist.'%args.source, file=sys.stderr)
		sys.exit(1)
	selection = load(args)
	if selection.is_empty() and not args.allow_empty:
		print('The selection is empty and --allow-empty command-line argument was not given.', file=sys.stderr)
		sys.exit(1)
	print(FORMATS[args.format](selection))

if __name__ == '__main__': main(parse_arguments())
