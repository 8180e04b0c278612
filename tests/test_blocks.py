from casemap import blocks, resolver
from casemap.rules import Exact


def test_implemented_chunks():
	assert sorted(resolver.CHUNKS) == [
		0x00, 0x01, 0x02, 0x03, 0x04, 0x05, 0x10, 0x13, 0x1C, 0x1D, 0x1E, 0x1F,
		0x24, 0x2C, 0x2D, 0xA6, 0xA7, 0xAB, 0xFF, 0x104, 0x10C, 0x118, 0x16E, 0x1E9,
	]

def test_chunk_table_is_read_only():
	try:
		resolver.CHUNKS[0x06] = blocks.CYRILLIC
	except TypeError:
		pass
	assert 0x06 not in resolver.CHUNKS

def test_blocks_cover_their_chunk():
	assert (blocks.BASIC_LATIN.first, blocks.BASIC_LATIN.last) == (0x00, 0x7F)
	assert (blocks.LATIN_1_SUPPLEMENT.first, blocks.LATIN_1_SUPPLEMENT.last) == (0x80, 0xFF)
	for chunk, block in resolver.CHUNKS.items():
		if chunk == 0x00:
			continue
		assert block.first == chunk << 8, block
		assert block.last == (chunk << 8) + 0xFF, block

def test_block_for():
	assert resolver.block_for(0x41) is blocks.BASIC_LATIN
	assert resolver.block_for(0xFF) is blocks.LATIN_1_SUPPLEMENT
	assert resolver.block_for(0x1C80) is blocks.GEORGIAN_EXTENDED
	assert resolver.block_for(0x1E943) is blocks.ADLAM
	assert resolver.block_for(0x0600) is None
	assert resolver.block_for(0x2126) is None

def test_segments_are_total():
	for block in resolver.BLOCKS:
		covered = [c for first, last, _ in block.segments() for c in range(first, last + 1)]
		assert covered == list(range(block.first, block.last + 1)), block

def test_exact_rules_cover_one_codepoint():
	for block in resolver.BLOCKS:
		for first, last, rule in block.segments():
			if isinstance(rule, Exact):
				assert first == last, (block, hex(first))

def test_resolve_dispatches_to_block():
	for block in resolver.BLOCKS:
		for c in range(block.first, block.last + 1):
			assert resolver.resolve(c) == block.resolve(c)

def test_unicode_version():
	assert blocks.UNICODE_VERSION == "13.0.0"
