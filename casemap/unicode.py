# Reads UnicodeData.txt, the source of the case tables.
#
# It can be obtained from unicode.org:
# - http://www.unicode.org/Public/<VERSION>/ucd/UnicodeData.txt
#
# `download()` fetches it; the version and URL can be overridden with the
# CASEMAP_UNICODE_VERSION and CASEMAP_UNICODEDATA_URL environment variables.
import csv
import os

import requests

from .blocks import UNICODE_VERSION as TABLES_VERSION
from .rules import Resolution

UNICODE_VERSION = os.getenv("CASEMAP_UNICODE_VERSION", TABLES_VERSION)
UNICODEDATA_URL = os.getenv("CASEMAP_UNICODEDATA_URL", "https://www.unicode.org/Public/{version}/ucd/UnicodeData.txt")

UNICODEDATA_FIELDS = (
	"Value",
	"Name",
	"General_Category",
	"Canonical_Combining_Class",
	"Bidi_Class",
	"Decomposition",
	"Decimal_Digit",
	"Digit",
	"Numeric",
	"Bidi_Mirrored",
	"Unicode_1_Name",
	"ISO_Comment",
	"Simple_Uppercase_Mapping",
	"Simple_Lowercase_Mapping",
	"Simple_Titlecase_Mapping",
)

def data(path="UnicodeData.txt"):
	with open(path, encoding='utf-8') as f:
		return list(csv.DictReader(f, fieldnames=UNICODEDATA_FIELDS, delimiter=';'))

def download(path="UnicodeData.txt", version=UNICODE_VERSION):
	url = UNICODEDATA_URL.format(version=version)
	response = requests.get(url, timeout=60)
	response.raise_for_status()
	with open(path, 'wb') as f:
		f.write(response.content)
	return path

def unhex(s):
	return int(s, 16)

def names(ud):
	return {unhex(u["Value"]): u["Name"] for u in ud}

def simple_mappings(ud, field):
	return {unhex(u["Value"]): unhex(u[field]) for u in ud if u[field]}

def case_resolutions(ud):
	"""Returns the expected `Resolution` of every codepoint that has one."""
	upper = simple_mappings(ud, "Simple_Uppercase_Mapping")
	lower = simple_mappings(ud, "Simple_Lowercase_Mapping")

	resolutions = {}
	for c, l in lower.items():
		# Titlecase letters map both ways.
		if c in upper:
			continue
		# Only map down if the lowercase letter maps back up to `c`.
		if upper.get(l) == c and l not in lower:
			resolutions[c] = Resolution.lowercase_sibling(l)
	for c, u in upper.items():
		if c not in lower:
			resolutions[c] = Resolution.uppercase_sibling(u)
	return resolutions
