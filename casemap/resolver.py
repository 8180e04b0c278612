from types import MappingProxyType

from . import blocks

# Chunk (codepoint >> 8) -> block. Chunks missing here have no case data.
CHUNKS = MappingProxyType({
	0x00: blocks.LATIN_1_SUPPLEMENT,
	0x01: blocks.LATIN_EXTENDED_A,
	0x02: blocks.LATIN_EXTENDED_B,
	0x03: blocks.GREEK,
	0x04: blocks.CYRILLIC,
	0x05: blocks.ARMENIAN,
	0x10: blocks.GEORGIAN,
	0x13: blocks.CHEROKEE,
	0x1C: blocks.GEORGIAN_EXTENDED,
	0x1D: blocks.PHONETIC_EXTENSIONS,
	0x1E: blocks.LATIN_EXTENDED_ADDITIONAL,
	0x1F: blocks.GREEK_EXTENDED,
	0x24: blocks.ENCLOSED_ALPHANUMERICS,
	0x2C: blocks.GLAGOLITIC,
	0x2D: blocks.GEORGIAN_SUPPLEMENT,
	0xA6: blocks.CYRILLIC_EXTENDED_B,
	0xA7: blocks.LATIN_EXTENDED_D,
	0xAB: blocks.CHEROKEE_SUPPLEMENT,
	0xFF: blocks.HALFWIDTH_AND_FULLWIDTH_FORMS,
	0x104: blocks.DESERET,
	0x10C: blocks.OLD_HUNGARIAN,
	0x118: blocks.WARANG_CITI,
	0x16E: blocks.MEDEFAIDRIN,
	0x1E9: blocks.ADLAM,
})

BLOCKS = (blocks.BASIC_LATIN,) + tuple(CHUNKS.values())

def chunk(codepoint):
	return codepoint >> 8

def block_for(codepoint):
	if codepoint < 0x80:
		return blocks.BASIC_LATIN
	return CHUNKS.get(chunk(codepoint))

def resolve(codepoint):
	"""Returns the `Resolution` of `codepoint`, or None if it has no case sibling."""
	# ASCII skips the chunk lookup.
	if codepoint < 0x80:
		return blocks.BASIC_LATIN.resolve(codepoint)
	block = CHUNKS.get(chunk(codepoint))
	if block is None:
		return None
	return block.resolve(codepoint)
