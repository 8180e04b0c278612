# Needs UnicodeData.txt in the current directory (or pass its path).
#
# It can be obtained from unicode.org:
# - http://www.unicode.org/Public/<VERSION>/ucd/UnicodeData.txt
#
# If executed as a script, it will print the rule tables of
# `casemap/blocks.py`:
# python3 -m casemap.generate UnicodeData.txt > tables.txt
import argparse

from . import blocks, resolver, unicode
from .rules import GAP, Exact, Gap, Offset, Pairs, Resolution, Tag

def is_pair(resolutions, c):
	return resolutions.get(c) == Resolution.lowercase_sibling(c + 1) \
		and resolutions.get(c + 1) == Resolution.uppercase_sibling(c)

def segments(resolutions, first, last):
	"""Compresses the resolutions of `first..last` into `(start, rule)` breakpoints."""
	result = []
	c = first
	while c <= last:
		res = resolutions.get(c)
		if res is None:
			end = c
			while end <= last and resolutions.get(end) is None:
				end += 1
			result.append((c, GAP))
			c = end
			continue

		pairs = 0
		while c + 2 * pairs + 1 <= last and is_pair(resolutions, c + 2 * pairs):
			pairs += 1
		if pairs:
			result.append((c, Pairs(c % 2)))
			c += 2 * pairs
			continue

		delta = res.codepoint - c
		length = 1
		while c + length <= last and resolutions.get(c + length) == Resolution(res.tag, c + length + delta):
			length += 1
		if length > 1:
			result.append((c, Offset(res.tag, delta)))
		else:
			result.append((c, Exact(res.tag, res.codepoint)))
		c += length
	return result

def signed_hex(n):
	return f"-0x{-n:X}" if n < 0 else f"0x{n:X}"

def format_rule(rule):
	if isinstance(rule, Gap):
		return "GAP"
	if isinstance(rule, Pairs):
		return "ODD_UPPER" if rule.upper_parity else "EVEN_UPPER"
	case = "uppercase" if rule.tag is Tag.TO_LOWERCASE else "lowercase"
	if isinstance(rule, Offset):
		return f"{case}({signed_hex(rule.delta)})"
	if isinstance(rule, Exact):
		return f"{case}_to(0x{rule.sibling:04X})"
	raise TypeError(f"unknown rule {rule!r}")

def block_names():
	return {id(value): name for name, value in vars(blocks).items() if isinstance(value, blocks.Block)}

def gen_block(variable, block, resolutions, names):
	print(f"{variable} = Block(\"{block.name}\", 0x{block.first:04X}, 0x{block.last:04X}, (")
	for start, rule in segments(resolutions, block.first, block.last):
		line = f"\t(0x{start:04X}, {format_rule(rule)}),"
		if isinstance(rule, Exact):
			line += f" # {names.get(start, '')}"
		print(line)
	print("))")

def gen_tables(ud):
	resolutions = unicode.case_resolutions(ud)
	names = unicode.names(ud)
	variables = block_names()
	for i, block in enumerate(resolver.BLOCKS):
		if i:
			print()
		gen_block(variables[id(block)], block, resolutions, names)

def main():
	p = argparse.ArgumentParser(description="Print the case rule tables derived from UnicodeData.txt")
	p.add_argument("unicodedata", nargs="?", default="UnicodeData.txt", help="Path to UnicodeData.txt (Default: UnicodeData.txt)")
	p.add_argument("--download", action="store_true", help=f"Download UnicodeData.txt for Unicode {unicode.UNICODE_VERSION} first")
	args = p.parse_args()

	if args.download:
		unicode.download(args.unicodedata)
	gen_tables(unicode.data(args.unicodedata))

if __name__ == '__main__':
	main()
