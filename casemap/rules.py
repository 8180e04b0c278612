import bisect
import enum
from collections import namedtuple


class Tag(enum.Enum):
	TO_LOWERCASE = "to_lowercase"
	TO_UPPERCASE = "to_uppercase"


class Resolution(namedtuple("Resolution", "tag codepoint")):
	"""A sibling codepoint together with the operation allowed to return it.

	`TO_LOWERCASE` means the input is uppercase and `codepoint` is its
	lowercase sibling, `TO_UPPERCASE` the other way around.
	"""
	@classmethod
	def lowercase_sibling(cls, codepoint):
		return cls(Tag.TO_LOWERCASE, codepoint)

	@classmethod
	def uppercase_sibling(cls, codepoint):
		return cls(Tag.TO_UPPERCASE, codepoint)

	def __repr__(self):
		return f"Resolution({self.tag.name}, 0x{self.codepoint:04X})"


class Gap(namedtuple("Gap", "")):
	def resolve(self, codepoint): # pylint: disable=unused-argument
		return None

class Offset(namedtuple("Offset", "tag delta")):
	def resolve(self, codepoint):
		return Resolution(self.tag, codepoint + self.delta)

# Interleaved pairs, uppercase first. The parity test uses the absolute
# codepoint, not the offset from the start of the run.
class Pairs(namedtuple("Pairs", "upper_parity")):
	def resolve(self, codepoint):
		if codepoint % 2 == self.upper_parity:
			return Resolution.lowercase_sibling(codepoint + 1)
		return Resolution.uppercase_sibling(codepoint - 1)

class Exact(namedtuple("Exact", "tag sibling")):
	def resolve(self, codepoint): # pylint: disable=unused-argument
		return Resolution(self.tag, self.sibling)


GAP = Gap()
EVEN_UPPER = Pairs(0)
ODD_UPPER = Pairs(1)

def uppercase(delta):
	return Offset(Tag.TO_LOWERCASE, delta)

def lowercase(delta):
	return Offset(Tag.TO_UPPERCASE, delta)

def uppercase_to(sibling):
	return Exact(Tag.TO_LOWERCASE, sibling)

def lowercase_to(sibling):
	return Exact(Tag.TO_UPPERCASE, sibling)


class Block:
	"""A range of codepoints and the rules deciding their case siblings.

	`rules` is a sequence of `(start, rule)` breakpoints. A rule applies from
	its start up to the next breakpoint, the last one up to `last`.
	"""
	def __init__(self, name, first, last, rules):
		starts = tuple(start for start, _ in rules)
		if not starts or starts[0] != first:
			raise ValueError(f"{name}: first rule must start at 0x{first:04X}")
		if any(a >= b for a, b in zip(starts, starts[1:])):
			raise ValueError(f"{name}: rule starts must be strictly increasing")
		if starts[-1] > last:
			raise ValueError(f"{name}: rule at 0x{starts[-1]:04X} is outside the block")
		self.name = name
		self.first = first
		self.last = last
		self.rules = tuple(rules)
		self._starts = starts

	def __repr__(self):
		return f"Block({self.name!r}, 0x{self.first:04X}, 0x{self.last:04X})"

	def __contains__(self, codepoint):
		return self.first <= codepoint <= self.last

	def rule_for(self, codepoint):
		return self.rules[bisect.bisect_right(self._starts, codepoint) - 1][1]

	def resolve(self, codepoint):
		return self.rule_for(codepoint).resolve(codepoint)

	def segments(self):
		"""Yields `(first, last, rule)` for every rule of the block."""
		ends = self._starts[1:] + (self.last + 1,)
		for (start, rule), end in zip(self.rules, ends):
			yield start, end - 1, rule
