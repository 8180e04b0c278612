from pathlib import Path

from casemap import generate, unicode
from casemap.rules import (
	EVEN_UPPER,
	GAP,
	ODD_UPPER,
	Exact,
	Offset,
	Pairs,
	Resolution,
	lowercase,
	lowercase_to,
	uppercase,
	uppercase_to,
)

ROOT = Path(__file__).resolve().parent.parent
UNICODEDATA = Path(__file__).resolve().parent / "data" / "UnicodeData-13.0.0-cased.txt"

def lower(c):
	return Resolution.lowercase_sibling(c)

def upper(c):
	return Resolution.uppercase_sibling(c)

def kinds(segments):
	return [(start, type(rule), rule) for start, rule in segments]


def test_segments_pairs():
	resolutions = {0x10: lower(0x11), 0x11: upper(0x10), 0x12: lower(0x13), 0x13: upper(0x12)}
	assert kinds(generate.segments(resolutions, 0x10, 0x1F)) == [
		(0x10, Pairs, EVEN_UPPER),
		(0x14, type(GAP), GAP),
	]

def test_segments_odd_pairs():
	resolutions = {0x11: lower(0x12), 0x12: upper(0x11)}
	assert kinds(generate.segments(resolutions, 0x10, 0x1F)) == [
		(0x10, type(GAP), GAP),
		(0x11, Pairs, ODD_UPPER),
		(0x13, type(GAP), GAP),
	]

def test_segments_offsets():
	resolutions = {c: lower(c + 0x20) for c in range(0x41, 0x44)}
	resolutions.update({c: upper(c - 0x20) for c in range(0x61, 0x64)})
	assert kinds(generate.segments(resolutions, 0x40, 0x7F)) == [
		(0x40, type(GAP), GAP),
		(0x41, Offset, uppercase(0x20)),
		(0x44, type(GAP), GAP),
		(0x61, Offset, lowercase(-0x20)),
		(0x64, type(GAP), GAP),
	]

def test_segments_exact():
	resolutions = {0x80: upper(0x412), 0x81: lower(0xFF)}
	assert kinds(generate.segments(resolutions, 0x80, 0x8F)) == [
		(0x80, Exact, lowercase_to(0x412)),
		(0x81, Exact, uppercase_to(0xFF)),
		(0x82, type(GAP), GAP),
	]

def test_segments_stop_at_block_end():
	resolutions = {0xFF: lower(0x100), 0x100: upper(0xFF)}
	assert kinds(generate.segments(resolutions, 0x80, 0xFF)) == [
		(0x80, type(GAP), GAP),
		(0xFF, Exact, uppercase_to(0x100)),
	]

def test_format_rule():
	assert generate.format_rule(GAP) == "GAP"
	assert generate.format_rule(EVEN_UPPER) == "EVEN_UPPER"
	assert generate.format_rule(ODD_UPPER) == "ODD_UPPER"
	assert generate.format_rule(uppercase(0x20)) == "uppercase(0x20)"
	assert generate.format_rule(lowercase(-0x97D0)) == "lowercase(-0x97D0)"
	assert generate.format_rule(uppercase_to(0xFF)) == "uppercase_to(0x00FF)"
	assert generate.format_rule(lowercase_to(0x10428)) == "lowercase_to(0x10428)"

def test_gen_tables_matches_blocks(capsys):
	generate.gen_tables(unicode.data(UNICODEDATA))
	generated = [line for line in capsys.readouterr().out.splitlines() if line]

	source = (ROOT / "casemap" / "blocks.py").read_text(encoding="utf-8").splitlines()
	start = next(i for i, line in enumerate(source) if line.startswith("BASIC_LATIN = "))
	handwritten = [line for line in source[start:] if line and not line.lstrip().startswith("#")]
	assert generated == handwritten
