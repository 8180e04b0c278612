#!/usr/bin/env python3
# Checks the case tables against UnicodeData.txt.
#
# Every codepoint of every implemented block must resolve the way the data
# file says, and every table must equal the one `casemap.generate` derives.
# Chunks that have case data but no block are reported as warnings.
import argparse
import sys
from collections import namedtuple

from tqdm import tqdm

from . import generate, resolver, unicode
from .case import format_codepoint


class Mismatch(namedtuple("Mismatch", "codepoint expected actual")):
	def __str__(self):
		return f"{format_codepoint(self.codepoint)}: expected {self.expected!r}, got {self.actual!r}"


def check_codepoints(resolutions, progress=False):
	mismatches = []
	for block in tqdm(resolver.BLOCKS, disable=not progress, unit="block", leave=False):
		for c in range(block.first, block.last + 1):
			expected = resolutions.get(c)
			actual = resolver.resolve(c)
			if actual != expected:
				mismatches.append(Mismatch(c, expected, actual))
	return mismatches

def rule_key(rules):
	# Rules of different shapes can be equal as tuples.
	return [(start, type(rule).__name__, tuple(rule)) for start, rule in rules]

def check_tables(resolutions):
	"""Returns the blocks whose tables differ from the generated ones."""
	return [block for block in resolver.BLOCKS
		if rule_key(block.rules) != rule_key(generate.segments(resolutions, block.first, block.last))]

def unsupported_chunks(resolutions):
	"""Returns the chunks that have case data but no block."""
	return sorted({resolver.chunk(c) for c in resolutions if resolver.block_for(c) is None})

def main():
	p = argparse.ArgumentParser(description="Check the case tables against UnicodeData.txt")
	p.add_argument("unicodedata", nargs="?", default="UnicodeData.txt", help="Path to UnicodeData.txt (Default: UnicodeData.txt)")
	p.add_argument("--download", action="store_true", help=f"Download UnicodeData.txt for Unicode {unicode.UNICODE_VERSION} first")
	p.add_argument("--progress", action="store_true", help="Show progress")
	args = p.parse_args()

	if args.download:
		unicode.download(args.unicodedata)
	resolutions = unicode.case_resolutions(unicode.data(args.unicodedata))

	unclean = False
	for mismatch in check_codepoints(resolutions, progress=args.progress):
		unclean = True
		print(mismatch)
	for block in check_tables(resolutions):
		unclean = True
		print(f"{block.name}: table differs from the generated one (see `python3 -m casemap.generate`)")
	for c in unsupported_chunks(resolutions):
		print(f"Warning: chunk 0x{c:X} has case data but no block", file=sys.stderr)

	if unclean:
		print("Error: case tables don't match UnicodeData.txt.")
		return 1
	print("Success: case tables match UnicodeData.txt.")
	return 0

if __name__ == '__main__':
	sys.exit(main())
