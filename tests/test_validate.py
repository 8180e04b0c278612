import sys
from pathlib import Path

import pytest

from casemap import resolver, unicode, validate
from casemap.rules import Resolution

UNICODEDATA = Path(__file__).resolve().parent / "data" / "UnicodeData-13.0.0-cased.txt"

@pytest.fixture(scope="module")
def resolutions():
	return unicode.case_resolutions(unicode.data(UNICODEDATA))


def test_codepoints_match(resolutions):
	assert validate.check_codepoints(resolutions) == []

def test_tables_match(resolutions):
	assert validate.check_tables(resolutions) == []

def test_unsupported_chunks(resolutions):
	assert validate.unsupported_chunks(resolutions) == [0x21]

def test_every_data_pair_in_implemented_chunks_resolves(resolutions):
	for c, expected in resolutions.items():
		if resolver.block_for(c) is not None:
			assert resolver.resolve(c) == expected, hex(c)

def test_mismatch_reported(resolutions):
	broken = dict(resolutions)
	broken[0x41] = Resolution.lowercase_sibling(0x62)
	del broken[0x0178]
	mismatches = validate.check_codepoints(broken)
	assert [m.codepoint for m in mismatches] == [0x41, 0x0178]
	assert str(mismatches[0]) == "U+0041: expected Resolution(TO_LOWERCASE, 0x0062), got Resolution(TO_LOWERCASE, 0x0061)"
	assert str(mismatches[1]) == "U+0178: expected None, got Resolution(TO_LOWERCASE, 0x00FF)"

def test_table_difference_reported(resolutions):
	broken = dict(resolutions)
	del broken[0x0178]
	assert [block.name for block in validate.check_tables(broken)] == ["Latin Extended-A, Latin Extended-B"]

def test_main(monkeypatch, capsys):
	monkeypatch.setattr(sys, "argv", ["casemap-validate", str(UNICODEDATA)])
	assert validate.main() == 0
	out, err = capsys.readouterr()
	assert "Success" in out
	assert "chunk 0x21 has case data but no block" in err

def test_main_mismatch(tmp_path, monkeypatch, capsys):
	path = tmp_path / "UnicodeData.txt"
	lines = UNICODEDATA.read_text(encoding="utf-8").splitlines(keepends=True)
	path.write_text("".join(line for line in lines if not line.startswith("0178;")), encoding="utf-8")
	monkeypatch.setattr(sys, "argv", ["casemap-validate", str(path)])
	assert validate.main() == 1
	out, _ = capsys.readouterr()
	assert "U+0178: expected None" in out
	assert "Error" in out
