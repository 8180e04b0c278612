from .resolver import resolve
from .rules import Tag

MAX_CODEPOINT = 0xFFFFFFFF


class NoCaseTarget(Exception):
	def __init__(self, codepoint, target):
		self.codepoint = codepoint
		self.target = target
		super().__init__(f"{format_codepoint(codepoint)} has no {target} sibling")


def format_codepoint(codepoint):
	return f"U+{codepoint:04X}"

def _resolve(codepoint):
	if not 0 <= codepoint <= MAX_CODEPOINT:
		raise ValueError(f"codepoint {codepoint} is not an unsigned 32-bit integer")
	return resolve(codepoint)

def to_lowercase(codepoint):
	"""Returns the lowercase sibling of an uppercase codepoint.

	Raises `NoCaseTarget` if the codepoint is caseless, lowercase already, or
	outside the implemented blocks.
	"""
	resolution = _resolve(codepoint)
	if resolution is None or resolution.tag is not Tag.TO_LOWERCASE:
		raise NoCaseTarget(codepoint, "lowercase")
	return resolution.codepoint

def to_uppercase(codepoint):
	"""Returns the uppercase sibling of a lowercase codepoint.

	Raises `NoCaseTarget` if the codepoint is caseless, uppercase already, or
	outside the implemented blocks.
	"""
	resolution = _resolve(codepoint)
	if resolution is None or resolution.tag is not Tag.TO_UPPERCASE:
		raise NoCaseTarget(codepoint, "uppercase")
	return resolution.codepoint
