import pytest
import requests

from casemap import unicode
from casemap.rules import Resolution

LINES = """\
0041;LATIN CAPITAL LETTER A;Lu;0;L;;;;;N;;;;0061;
0049;LATIN CAPITAL LETTER I;Lu;0;L;;;;;N;;;;0069;
0061;LATIN SMALL LETTER A;Ll;0;L;;;;;N;;;0041;;0041
0069;LATIN SMALL LETTER I;Ll;0;L;;;;;N;;;0049;;0049
00B5;MICRO SIGN;Ll;0;L;<compat> 03BC;;;;N;;;039C;;039C
0130;LATIN CAPITAL LETTER I WITH DOT ABOVE;Lu;0;L;0049 0307;;;;N;LATIN CAPITAL LETTER I DOT;;;0069;
01C4;LATIN CAPITAL LETTER DZ WITH CARON;Lu;0;L;<compat> 0044 017D;;;;N;LATIN CAPITAL LETTER D Z HACEK;;;01C6;01C5
01C5;LATIN CAPITAL LETTER D WITH SMALL LETTER Z WITH CARON;Lt;0;L;<compat> 0044 017E;;;;N;LATIN LETTER CAPITAL D SMALL Z HACEK;;01C4;01C6;
01C6;LATIN SMALL LETTER DZ WITH CARON;Ll;0;L;<compat> 0064 017E;;;;N;LATIN SMALL LETTER D Z HACEK;;01C4;;01C5
2160;ROMAN NUMERAL ONE;Nl;0;L;<compat> 0049;;;1;N;;;;2170;
2170;SMALL ROMAN NUMERAL ONE;Nl;0;L;<compat> 0069;;;1;N;;;2160;;2160
"""

@pytest.fixture
def ud(tmp_path):
	path = tmp_path / "UnicodeData.txt"
	path.write_text(LINES, encoding="utf-8")
	return unicode.data(path)


def test_data(ud):
	assert len(ud) == 11
	assert ud[0]["Value"] == "0041"
	assert ud[0]["Name"] == "LATIN CAPITAL LETTER A"
	assert ud[0]["Simple_Lowercase_Mapping"] == "0061"
	assert ud[2]["Simple_Uppercase_Mapping"] == "0041"
	assert ud[2]["Simple_Titlecase_Mapping"] == "0041"
	assert ud[5]["Decomposition"] == "0049 0307"

def test_unhex():
	assert unicode.unhex("00FF") == 0xFF
	assert unicode.unhex("1E943") == 0x1E943

def test_names(ud):
	assert unicode.names(ud)[0x00B5] == "MICRO SIGN"

def test_simple_mappings(ud):
	lower = unicode.simple_mappings(ud, "Simple_Lowercase_Mapping")
	assert lower[0x41] == 0x61
	assert lower[0x130] == 0x69
	assert 0x61 not in lower

def test_case_resolutions(ud):
	resolutions = unicode.case_resolutions(ud)
	assert resolutions[0x41] == Resolution.lowercase_sibling(0x61)
	assert resolutions[0x61] == Resolution.uppercase_sibling(0x41)
	assert resolutions[0x49] == Resolution.lowercase_sibling(0x69)
	assert resolutions[0x69] == Resolution.uppercase_sibling(0x49)
	assert resolutions[0x2160] == Resolution.lowercase_sibling(0x2170)

def test_one_way_uppercase_is_a_gap(ud):
	assert 0x130 not in unicode.case_resolutions(ud)

def test_one_way_lowercase_maps_up(ud):
	assert unicode.case_resolutions(ud)[0xB5] == Resolution.uppercase_sibling(0x39C)

def test_titlecase_is_a_gap(ud):
	resolutions = unicode.case_resolutions(ud)
	assert 0x1C5 not in resolutions
	assert resolutions[0x1C4] == Resolution.lowercase_sibling(0x1C6)
	assert resolutions[0x1C6] == Resolution.uppercase_sibling(0x1C4)


class FakeResponse:
	def __init__(self, content, status_code=200):
		self.content = content
		self.status_code = status_code

	def raise_for_status(self):
		if self.status_code >= 400:
			raise requests.HTTPError(f"{self.status_code} error")

def test_download(tmp_path, monkeypatch):
	urls = []
	def get(url, timeout):
		urls.append(url)
		return FakeResponse(LINES.encode("utf-8"))
	monkeypatch.setattr(unicode.requests, "get", get)

	path = unicode.download(tmp_path / "UnicodeData.txt", version="13.0.0")
	assert urls == [unicode.UNICODEDATA_URL.format(version="13.0.0")]
	assert len(unicode.data(path)) == 11

def test_download_error(tmp_path, monkeypatch):
	monkeypatch.setattr(unicode.requests, "get", lambda url, timeout: FakeResponse(b"", 404))
	with pytest.raises(requests.HTTPError):
		unicode.download(tmp_path / "UnicodeData.txt")
	assert not (tmp_path / "UnicodeData.txt").exists()
