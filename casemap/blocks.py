# Case rules for every chunk of 256 codepoints that holds cased letters,
# transcribed from UnicodeData.txt of the Unicode version below.
#
# Each table lists `(first codepoint, rule)` breakpoints in increasing order.
# `python3 -m casemap.generate UnicodeData.txt` prints the same tables from
# the data file, `python3 -m casemap.validate UnicodeData.txt` checks them.
#
# Titlecase digraphs and uppercase letters whose lowercase sibling maps back
# to another letter (U+0130, U+03F4, U+1E9E) are gaps.
from .rules import (
	EVEN_UPPER,
	GAP,
	ODD_UPPER,
	Block,
	lowercase,
	lowercase_to,
	uppercase,
	uppercase_to,
)

UNICODE_VERSION = "13.0.0"

BASIC_LATIN = Block("Basic Latin", 0x0000, 0x007F, (
	(0x0000, GAP),
	(0x0041, uppercase(0x20)),
	(0x005B, GAP),
	(0x0061, lowercase(-0x20)),
	(0x007B, GAP),
))

LATIN_1_SUPPLEMENT = Block("Latin-1 Supplement", 0x0080, 0x00FF, (
	(0x0080, GAP),
	(0x00B5, lowercase_to(0x039C)), # MICRO SIGN
	(0x00B6, GAP),
	(0x00C0, uppercase(0x20)),
	(0x00D7, GAP),
	(0x00D8, uppercase(0x20)),
	(0x00DF, GAP),
	(0x00E0, lowercase(-0x20)),
	(0x00F7, GAP),
	(0x00F8, lowercase(-0x20)),
	(0x00FF, lowercase_to(0x0178)), # LATIN SMALL LETTER Y WITH DIAERESIS
))

LATIN_EXTENDED_A = Block("Latin Extended-A, Latin Extended-B", 0x0100, 0x01FF, (
	(0x0100, EVEN_UPPER),
	(0x0130, GAP),
	(0x0131, lowercase_to(0x0049)), # LATIN SMALL LETTER DOTLESS I
	(0x0132, EVEN_UPPER),
	(0x0138, GAP),
	(0x0139, ODD_UPPER),
	(0x0149, GAP),
	(0x014A, EVEN_UPPER),
	(0x0178, uppercase_to(0x00FF)), # LATIN CAPITAL LETTER Y WITH DIAERESIS
	(0x0179, ODD_UPPER),
	(0x017F, lowercase_to(0x0053)), # LATIN SMALL LETTER LONG S
	(0x0180, lowercase_to(0x0243)), # LATIN SMALL LETTER B WITH STROKE
	(0x0181, uppercase_to(0x0253)), # LATIN CAPITAL LETTER B WITH HOOK
	(0x0182, EVEN_UPPER),
	(0x0186, uppercase_to(0x0254)), # LATIN CAPITAL LETTER OPEN O
	(0x0187, ODD_UPPER),
	(0x0189, uppercase(0xCD)),
	(0x018B, ODD_UPPER),
	(0x018D, GAP),
	(0x018E, uppercase_to(0x01DD)), # LATIN CAPITAL LETTER REVERSED E
	(0x018F, uppercase_to(0x0259)), # LATIN CAPITAL LETTER SCHWA
	(0x0190, uppercase_to(0x025B)), # LATIN CAPITAL LETTER OPEN E
	(0x0191, ODD_UPPER),
	(0x0193, uppercase_to(0x0260)), # LATIN CAPITAL LETTER G WITH HOOK
	(0x0194, uppercase_to(0x0263)), # LATIN CAPITAL LETTER GAMMA
	(0x0195, lowercase_to(0x01F6)), # LATIN SMALL LETTER HV
	(0x0196, uppercase_to(0x0269)), # LATIN CAPITAL LETTER IOTA
	(0x0197, uppercase_to(0x0268)), # LATIN CAPITAL LETTER I WITH STROKE
	(0x0198, EVEN_UPPER),
	(0x019A, lowercase_to(0x023D)), # LATIN SMALL LETTER L WITH BAR
	(0x019B, GAP),
	(0x019C, uppercase_to(0x026F)), # LATIN CAPITAL LETTER TURNED M
	(0x019D, uppercase_to(0x0272)), # LATIN CAPITAL LETTER N WITH LEFT HOOK
	(0x019E, lowercase_to(0x0220)), # LATIN SMALL LETTER N WITH LONG RIGHT LEG
	(0x019F, uppercase_to(0x0275)), # LATIN CAPITAL LETTER O WITH MIDDLE TILDE
	(0x01A0, EVEN_UPPER),
	(0x01A6, uppercase_to(0x0280)), # LATIN LETTER YR
	(0x01A7, ODD_UPPER),
	(0x01A9, uppercase_to(0x0283)), # LATIN CAPITAL LETTER ESH
	(0x01AA, GAP),
	(0x01AC, EVEN_UPPER),
	(0x01AE, uppercase_to(0x0288)), # LATIN CAPITAL LETTER T WITH RETROFLEX HOOK
	(0x01AF, ODD_UPPER),
	(0x01B1, uppercase(0xD9)),
	(0x01B3, ODD_UPPER),
	(0x01B7, uppercase_to(0x0292)), # LATIN CAPITAL LETTER EZH
	(0x01B8, EVEN_UPPER),
	(0x01BA, GAP),
	(0x01BC, EVEN_UPPER),
	(0x01BE, GAP),
	(0x01BF, lowercase_to(0x01F7)), # LATIN LETTER WYNN
	(0x01C0, GAP),
	(0x01C4, uppercase_to(0x01C6)), # LATIN CAPITAL LETTER DZ WITH CARON
	(0x01C5, GAP),
	(0x01C6, lowercase_to(0x01C4)), # LATIN SMALL LETTER DZ WITH CARON
	(0x01C7, uppercase_to(0x01C9)), # LATIN CAPITAL LETTER LJ
	(0x01C8, GAP),
	(0x01C9, lowercase_to(0x01C7)), # LATIN SMALL LETTER LJ
	(0x01CA, uppercase_to(0x01CC)), # LATIN CAPITAL LETTER NJ
	(0x01CB, GAP),
	(0x01CC, lowercase_to(0x01CA)), # LATIN SMALL LETTER NJ
	(0x01CD, ODD_UPPER),
	(0x01DD, lowercase_to(0x018E)), # LATIN SMALL LETTER TURNED E
	(0x01DE, EVEN_UPPER),
	(0x01F0, GAP),
	(0x01F1, uppercase_to(0x01F3)), # LATIN CAPITAL LETTER DZ
	(0x01F2, GAP),
	(0x01F3, lowercase_to(0x01F1)), # LATIN SMALL LETTER DZ
	(0x01F4, EVEN_UPPER),
	(0x01F6, uppercase_to(0x0195)), # LATIN CAPITAL LETTER HWAIR
	(0x01F7, uppercase_to(0x01BF)), # LATIN CAPITAL LETTER WYNN
	(0x01F8, EVEN_UPPER),
))

LATIN_EXTENDED_B = Block("Latin Extended-B, IPA Extensions", 0x0200, 0x02FF, (
	(0x0200, EVEN_UPPER),
	(0x0220, uppercase_to(0x019E)), # LATIN CAPITAL LETTER N WITH LONG RIGHT LEG
	(0x0221, GAP),
	(0x0222, EVEN_UPPER),
	(0x0234, GAP),
	(0x023A, uppercase_to(0x2C65)), # LATIN CAPITAL LETTER A WITH STROKE
	(0x023B, ODD_UPPER),
	(0x023D, uppercase_to(0x019A)), # LATIN CAPITAL LETTER L WITH BAR
	(0x023E, uppercase_to(0x2C66)), # LATIN CAPITAL LETTER T WITH DIAGONAL STROKE
	(0x023F, lowercase(0x2A3F)),
	(0x0241, ODD_UPPER),
	(0x0243, uppercase_to(0x0180)), # LATIN CAPITAL LETTER B WITH STROKE
	(0x0244, uppercase_to(0x0289)), # LATIN CAPITAL LETTER U BAR
	(0x0245, uppercase_to(0x028C)), # LATIN CAPITAL LETTER TURNED V
	(0x0246, EVEN_UPPER),
	(0x0250, lowercase_to(0x2C6F)), # LATIN SMALL LETTER TURNED A
	(0x0251, lowercase_to(0x2C6D)), # LATIN SMALL LETTER ALPHA
	(0x0252, lowercase_to(0x2C70)), # LATIN SMALL LETTER TURNED ALPHA
	(0x0253, lowercase_to(0x0181)), # LATIN SMALL LETTER B WITH HOOK
	(0x0254, lowercase_to(0x0186)), # LATIN SMALL LETTER OPEN O
	(0x0255, GAP),
	(0x0256, lowercase(-0xCD)),
	(0x0258, GAP),
	(0x0259, lowercase_to(0x018F)), # LATIN SMALL LETTER SCHWA
	(0x025A, GAP),
	(0x025B, lowercase_to(0x0190)), # LATIN SMALL LETTER OPEN E
	(0x025C, lowercase_to(0xA7AB)), # LATIN SMALL LETTER REVERSED OPEN E
	(0x025D, GAP),
	(0x0260, lowercase_to(0x0193)), # LATIN SMALL LETTER G WITH HOOK
	(0x0261, lowercase_to(0xA7AC)), # LATIN SMALL LETTER SCRIPT G
	(0x0262, GAP),
	(0x0263, lowercase_to(0x0194)), # LATIN SMALL LETTER GAMMA
	(0x0264, GAP),
	(0x0265, lowercase_to(0xA78D)), # LATIN SMALL LETTER TURNED H
	(0x0266, lowercase_to(0xA7AA)), # LATIN SMALL LETTER H WITH HOOK
	(0x0267, GAP),
	(0x0268, lowercase_to(0x0197)), # LATIN SMALL LETTER I WITH STROKE
	(0x0269, lowercase_to(0x0196)), # LATIN SMALL LETTER IOTA
	(0x026A, lowercase_to(0xA7AE)), # LATIN LETTER SMALL CAPITAL I
	(0x026B, lowercase_to(0x2C62)), # LATIN SMALL LETTER L WITH MIDDLE TILDE
	(0x026C, lowercase_to(0xA7AD)), # LATIN SMALL LETTER L WITH BELT
	(0x026D, GAP),
	(0x026F, lowercase_to(0x019C)), # LATIN SMALL LETTER TURNED M
	(0x0270, GAP),
	(0x0271, lowercase_to(0x2C6E)), # LATIN SMALL LETTER M WITH HOOK
	(0x0272, lowercase_to(0x019D)), # LATIN SMALL LETTER N WITH LEFT HOOK
	(0x0273, GAP),
	(0x0275, lowercase_to(0x019F)), # LATIN SMALL LETTER BARRED O
	(0x0276, GAP),
	(0x027D, lowercase_to(0x2C64)), # LATIN SMALL LETTER R WITH TAIL
	(0x027E, GAP),
	(0x0280, lowercase_to(0x01A6)), # LATIN LETTER SMALL CAPITAL R
	(0x0281, GAP),
	(0x0282, lowercase_to(0xA7C5)), # LATIN SMALL LETTER S WITH HOOK
	(0x0283, lowercase_to(0x01A9)), # LATIN SMALL LETTER ESH
	(0x0284, GAP),
	(0x0287, lowercase_to(0xA7B1)), # LATIN SMALL LETTER TURNED T
	(0x0288, lowercase_to(0x01AE)), # LATIN SMALL LETTER T WITH RETROFLEX HOOK
	(0x0289, lowercase_to(0x0244)), # LATIN SMALL LETTER U BAR
	(0x028A, lowercase(-0xD9)),
	(0x028C, lowercase_to(0x0245)), # LATIN SMALL LETTER TURNED V
	(0x028D, GAP),
	(0x0292, lowercase_to(0x01B7)), # LATIN SMALL LETTER EZH
	(0x0293, GAP),
	(0x029D, lowercase_to(0xA7B2)), # LATIN SMALL LETTER J WITH CROSSED-TAIL
	(0x029E, lowercase_to(0xA7B0)), # LATIN SMALL LETTER TURNED K
	(0x029F, GAP),
))

GREEK = Block("Combining Diacritical Marks, Greek and Coptic", 0x0300, 0x03FF, (
	(0x0300, GAP),
	(0x0345, lowercase_to(0x0399)), # COMBINING GREEK YPOGEGRAMMENI
	(0x0346, GAP),
	(0x0370, EVEN_UPPER),
	(0x0374, GAP),
	(0x0376, EVEN_UPPER),
	(0x0378, GAP),
	(0x037B, lowercase(0x82)),
	(0x037E, GAP),
	(0x037F, uppercase_to(0x03F3)), # GREEK CAPITAL LETTER YOT
	(0x0380, GAP),
	(0x0386, uppercase_to(0x03AC)), # GREEK CAPITAL LETTER ALPHA WITH TONOS
	(0x0387, GAP),
	(0x0388, uppercase(0x25)),
	(0x038B, GAP),
	(0x038C, uppercase_to(0x03CC)), # GREEK CAPITAL LETTER OMICRON WITH TONOS
	(0x038D, GAP),
	(0x038E, uppercase(0x3F)),
	(0x0390, GAP),
	(0x0391, uppercase(0x20)),
	(0x03A2, GAP),
	(0x03A3, uppercase(0x20)),
	(0x03AC, lowercase_to(0x0386)), # GREEK SMALL LETTER ALPHA WITH TONOS
	(0x03AD, lowercase(-0x25)),
	(0x03B0, GAP),
	(0x03B1, lowercase(-0x20)),
	(0x03C2, lowercase_to(0x03A3)), # GREEK SMALL LETTER FINAL SIGMA
	(0x03C3, lowercase(-0x20)),
	(0x03CC, lowercase_to(0x038C)), # GREEK SMALL LETTER OMICRON WITH TONOS
	(0x03CD, lowercase(-0x3F)),
	(0x03CF, uppercase_to(0x03D7)), # GREEK CAPITAL KAI SYMBOL
	(0x03D0, lowercase_to(0x0392)), # GREEK BETA SYMBOL
	(0x03D1, lowercase_to(0x0398)), # GREEK THETA SYMBOL
	(0x03D2, GAP),
	(0x03D5, lowercase_to(0x03A6)), # GREEK PHI SYMBOL
	(0x03D6, lowercase_to(0x03A0)), # GREEK PI SYMBOL
	(0x03D7, lowercase_to(0x03CF)), # GREEK KAI SYMBOL
	(0x03D8, EVEN_UPPER),
	(0x03F0, lowercase_to(0x039A)), # GREEK KAPPA SYMBOL
	(0x03F1, lowercase_to(0x03A1)), # GREEK RHO SYMBOL
	(0x03F2, lowercase_to(0x03F9)), # GREEK LUNATE SIGMA SYMBOL
	(0x03F3, lowercase_to(0x037F)), # GREEK LETTER YOT
	(0x03F4, GAP),
	(0x03F5, lowercase_to(0x0395)), # GREEK LUNATE EPSILON SYMBOL
	(0x03F6, GAP),
	(0x03F7, ODD_UPPER),
	(0x03F9, uppercase_to(0x03F2)), # GREEK CAPITAL LUNATE SIGMA SYMBOL
	(0x03FA, EVEN_UPPER),
	(0x03FC, GAP),
	(0x03FD, uppercase(-0x82)),
))

CYRILLIC = Block("Cyrillic", 0x0400, 0x04FF, (
	(0x0400, uppercase(0x50)),
	(0x0410, uppercase(0x20)),
	(0x0430, lowercase(-0x20)),
	(0x0450, lowercase(-0x50)),
	(0x0460, EVEN_UPPER),
	(0x0482, GAP),
	(0x048A, EVEN_UPPER),
	(0x04C0, uppercase_to(0x04CF)), # CYRILLIC LETTER PALOCHKA
	(0x04C1, ODD_UPPER),
	(0x04CF, lowercase_to(0x04C0)), # CYRILLIC SMALL LETTER PALOCHKA
	(0x04D0, EVEN_UPPER),
))

ARMENIAN = Block("Cyrillic Supplement, Armenian, Hebrew", 0x0500, 0x05FF, (
	(0x0500, EVEN_UPPER),
	(0x0530, GAP),
	(0x0531, uppercase(0x30)),
	(0x0557, GAP),
	(0x0561, lowercase(-0x30)),
	(0x0587, GAP),
))

GEORGIAN = Block("Myanmar, Georgian", 0x1000, 0x10FF, (
	(0x1000, GAP),
	# Asomtavruli, lowercase in Georgian Supplement.
	(0x10A0, uppercase(0x1C60)),
	(0x10C6, GAP),
	(0x10C7, uppercase_to(0x2D27)), # GEORGIAN CAPITAL LETTER YN
	(0x10C8, GAP),
	(0x10CD, uppercase_to(0x2D2D)), # GEORGIAN CAPITAL LETTER AEN
	(0x10CE, GAP),
	# Mkhedruli, uppercase in Georgian Extended.
	(0x10D0, lowercase(0xBC0)),
	(0x10FB, GAP),
	(0x10FD, lowercase(0xBC0)),
))

CHEROKEE = Block("Ethiopic, Cherokee", 0x1300, 0x13FF, (
	(0x1300, GAP),
	# Lowercase in Cherokee Supplement.
	(0x13A0, uppercase(0x97D0)),
	(0x13F0, uppercase(0x8)),
	(0x13F6, GAP),
	(0x13F8, lowercase(-0x8)),
	(0x13FE, GAP),
))

GEORGIAN_EXTENDED = Block("Ol Chiki, Cyrillic Extended-C, Georgian Extended", 0x1C00, 0x1CFF, (
	(0x1C00, GAP),
	# Old Cyrillic letter variants only map up.
	(0x1C80, lowercase_to(0x0412)), # CYRILLIC SMALL LETTER ROUNDED VE
	(0x1C81, lowercase_to(0x0414)), # CYRILLIC SMALL LETTER LONG-LEGGED DE
	(0x1C82, lowercase_to(0x041E)), # CYRILLIC SMALL LETTER NARROW O
	(0x1C83, lowercase(-0x1862)),
	(0x1C85, lowercase_to(0x0422)), # CYRILLIC SMALL LETTER THREE-LEGGED TE
	(0x1C86, lowercase_to(0x042A)), # CYRILLIC SMALL LETTER TALL HARD SIGN
	(0x1C87, lowercase_to(0x0462)), # CYRILLIC SMALL LETTER TALL YAT
	(0x1C88, lowercase_to(0xA64A)), # CYRILLIC SMALL LETTER UNBLENDED UK
	(0x1C89, GAP),
	(0x1C90, uppercase(-0xBC0)),
	(0x1CBB, GAP),
	(0x1CBD, uppercase(-0xBC0)),
	(0x1CC0, GAP),
))

PHONETIC_EXTENSIONS = Block("Phonetic Extensions", 0x1D00, 0x1DFF, (
	(0x1D00, GAP),
	(0x1D79, lowercase_to(0xA77D)), # LATIN SMALL LETTER INSULAR G
	(0x1D7A, GAP),
	(0x1D7D, lowercase_to(0x2C63)), # LATIN SMALL LETTER P WITH STROKE
	(0x1D7E, GAP),
	(0x1D8E, lowercase_to(0xA7C6)), # LATIN SMALL LETTER Z WITH PALATAL HOOK
	(0x1D8F, GAP),
))

LATIN_EXTENDED_ADDITIONAL = Block("Latin Extended Additional", 0x1E00, 0x1EFF, (
	(0x1E00, EVEN_UPPER),
	(0x1E96, GAP),
	(0x1E9B, lowercase_to(0x1E60)), # LATIN SMALL LETTER LONG S WITH DOT ABOVE
	(0x1E9C, GAP),
	(0x1EA0, EVEN_UPPER),
))

GREEK_EXTENDED = Block("Greek Extended", 0x1F00, 0x1FFF, (
	(0x1F00, lowercase(0x8)),
	(0x1F08, uppercase(-0x8)),
	(0x1F10, lowercase(0x8)),
	(0x1F16, GAP),
	(0x1F18, uppercase(-0x8)),
	(0x1F1E, GAP),
	(0x1F20, lowercase(0x8)),
	(0x1F28, uppercase(-0x8)),
	(0x1F30, lowercase(0x8)),
	(0x1F38, uppercase(-0x8)),
	(0x1F40, lowercase(0x8)),
	(0x1F46, GAP),
	(0x1F48, uppercase(-0x8)),
	(0x1F4E, GAP),
	(0x1F51, lowercase_to(0x1F59)), # GREEK SMALL LETTER UPSILON WITH DASIA
	(0x1F52, GAP),
	(0x1F53, lowercase_to(0x1F5B)), # GREEK SMALL LETTER UPSILON WITH DASIA AND VARIA
	(0x1F54, GAP),
	(0x1F55, lowercase_to(0x1F5D)), # GREEK SMALL LETTER UPSILON WITH DASIA AND OXIA
	(0x1F56, GAP),
	(0x1F57, lowercase_to(0x1F5F)), # GREEK SMALL LETTER UPSILON WITH DASIA AND PERISPOMENI
	(0x1F58, GAP),
	(0x1F59, uppercase_to(0x1F51)), # GREEK CAPITAL LETTER UPSILON WITH DASIA
	(0x1F5A, GAP),
	(0x1F5B, uppercase_to(0x1F53)), # GREEK CAPITAL LETTER UPSILON WITH DASIA AND VARIA
	(0x1F5C, GAP),
	(0x1F5D, uppercase_to(0x1F55)), # GREEK CAPITAL LETTER UPSILON WITH DASIA AND OXIA
	(0x1F5E, GAP),
	(0x1F5F, uppercase_to(0x1F57)), # GREEK CAPITAL LETTER UPSILON WITH DASIA AND PERISPOMENI
	(0x1F60, lowercase(0x8)),
	(0x1F68, uppercase(-0x8)),
	# Oxia and varia accents.
	(0x1F70, lowercase(0x4A)),
	(0x1F72, lowercase(0x56)),
	(0x1F76, lowercase(0x64)),
	(0x1F78, lowercase(0x80)),
	(0x1F7A, lowercase(0x70)),
	(0x1F7C, lowercase(0x7E)),
	(0x1F7E, GAP),
	(0x1F80, lowercase(0x8)),
	(0x1F88, uppercase(-0x8)),
	(0x1F90, lowercase(0x8)),
	(0x1F98, uppercase(-0x8)),
	(0x1FA0, lowercase(0x8)),
	(0x1FA8, uppercase(-0x8)),
	(0x1FB0, lowercase(0x8)),
	(0x1FB2, GAP),
	(0x1FB3, lowercase_to(0x1FBC)), # GREEK SMALL LETTER ALPHA WITH YPOGEGRAMMENI
	(0x1FB4, GAP),
	(0x1FB8, uppercase(-0x8)),
	(0x1FBA, uppercase(-0x4A)),
	(0x1FBC, uppercase_to(0x1FB3)), # GREEK CAPITAL LETTER ALPHA WITH PROSGEGRAMMENI
	(0x1FBD, GAP),
	(0x1FBE, lowercase_to(0x0399)), # GREEK PROSGEGRAMMENI
	(0x1FBF, GAP),
	(0x1FC3, lowercase_to(0x1FCC)), # GREEK SMALL LETTER ETA WITH YPOGEGRAMMENI
	(0x1FC4, GAP),
	(0x1FC8, uppercase(-0x56)),
	(0x1FCC, uppercase_to(0x1FC3)), # GREEK CAPITAL LETTER ETA WITH PROSGEGRAMMENI
	(0x1FCD, GAP),
	(0x1FD0, lowercase(0x8)),
	(0x1FD2, GAP),
	(0x1FD8, uppercase(-0x8)),
	(0x1FDA, uppercase(-0x64)),
	(0x1FDC, GAP),
	(0x1FE0, lowercase(0x8)),
	(0x1FE2, GAP),
	(0x1FE5, lowercase_to(0x1FEC)), # GREEK SMALL LETTER RHO WITH DASIA
	(0x1FE6, GAP),
	(0x1FE8, uppercase(-0x8)),
	(0x1FEA, uppercase(-0x70)),
	(0x1FEC, uppercase_to(0x1FE5)), # GREEK CAPITAL LETTER RHO WITH DASIA
	(0x1FED, GAP),
	(0x1FF3, lowercase_to(0x1FFC)), # GREEK SMALL LETTER OMEGA WITH YPOGEGRAMMENI
	(0x1FF4, GAP),
	(0x1FF8, uppercase(-0x80)),
	(0x1FFA, uppercase(-0x7E)),
	(0x1FFC, uppercase_to(0x1FF3)), # GREEK CAPITAL LETTER OMEGA WITH PROSGEGRAMMENI
	(0x1FFD, GAP),
))

ENCLOSED_ALPHANUMERICS = Block("Enclosed Alphanumerics", 0x2400, 0x24FF, (
	(0x2400, GAP),
	(0x24B6, uppercase(0x1A)),
	(0x24D0, lowercase(-0x1A)),
	(0x24EA, GAP),
))

GLAGOLITIC = Block("Glagolitic, Latin Extended-C, Coptic", 0x2C00, 0x2CFF, (
	(0x2C00, uppercase(0x30)),
	(0x2C2F, GAP),
	(0x2C30, lowercase(-0x30)),
	(0x2C5F, GAP),
	(0x2C60, EVEN_UPPER),
	(0x2C62, uppercase_to(0x026B)), # LATIN CAPITAL LETTER L WITH MIDDLE TILDE
	(0x2C63, uppercase_to(0x1D7D)), # LATIN CAPITAL LETTER P WITH STROKE
	(0x2C64, uppercase_to(0x027D)), # LATIN CAPITAL LETTER R WITH TAIL
	(0x2C65, lowercase_to(0x023A)), # LATIN SMALL LETTER A WITH STROKE
	(0x2C66, lowercase_to(0x023E)), # LATIN SMALL LETTER T WITH DIAGONAL STROKE
	(0x2C67, ODD_UPPER),
	(0x2C6D, uppercase_to(0x0251)), # LATIN CAPITAL LETTER ALPHA
	(0x2C6E, uppercase_to(0x0271)), # LATIN CAPITAL LETTER M WITH HOOK
	(0x2C6F, uppercase_to(0x0250)), # LATIN CAPITAL LETTER TURNED A
	(0x2C70, uppercase_to(0x0252)), # LATIN CAPITAL LETTER TURNED ALPHA
	(0x2C71, GAP),
	(0x2C72, EVEN_UPPER),
	(0x2C74, GAP),
	(0x2C75, ODD_UPPER),
	(0x2C77, GAP),
	(0x2C7E, uppercase(-0x2A3F)),
	(0x2C80, EVEN_UPPER),
	(0x2CE4, GAP),
	(0x2CEB, ODD_UPPER),
	(0x2CEF, GAP),
	(0x2CF2, EVEN_UPPER),
	(0x2CF4, GAP),
))

GEORGIAN_SUPPLEMENT = Block("Georgian Supplement, Tifinagh", 0x2D00, 0x2DFF, (
	(0x2D00, lowercase(-0x1C60)),
	(0x2D26, GAP),
	(0x2D27, lowercase_to(0x10C7)), # GEORGIAN SMALL LETTER YN
	(0x2D28, GAP),
	(0x2D2D, lowercase_to(0x10CD)), # GEORGIAN SMALL LETTER AEN
	(0x2D2E, GAP),
))

CYRILLIC_EXTENDED_B = Block("Vai, Cyrillic Extended-B, Bamum", 0xA600, 0xA6FF, (
	(0xA600, GAP),
	(0xA640, EVEN_UPPER),
	(0xA66E, GAP),
	(0xA680, EVEN_UPPER),
	(0xA69C, GAP),
))

LATIN_EXTENDED_D = Block("Modifier Tone Letters, Latin Extended-D", 0xA700, 0xA7FF, (
	(0xA700, GAP),
	(0xA722, EVEN_UPPER),
	(0xA730, GAP),
	(0xA732, EVEN_UPPER),
	(0xA770, GAP),
	(0xA779, ODD_UPPER),
	(0xA77D, uppercase_to(0x1D79)), # LATIN CAPITAL LETTER INSULAR G
	(0xA77E, EVEN_UPPER),
	(0xA788, GAP),
	(0xA78B, ODD_UPPER),
	(0xA78D, uppercase_to(0x0265)), # LATIN CAPITAL LETTER TURNED H
	(0xA78E, GAP),
	(0xA790, EVEN_UPPER),
	(0xA794, lowercase_to(0xA7C4)), # LATIN SMALL LETTER C WITH PALATAL HOOK
	(0xA795, GAP),
	(0xA796, EVEN_UPPER),
	(0xA7AA, uppercase_to(0x0266)), # LATIN CAPITAL LETTER H WITH HOOK
	(0xA7AB, uppercase_to(0x025C)), # LATIN CAPITAL LETTER REVERSED OPEN E
	(0xA7AC, uppercase_to(0x0261)), # LATIN CAPITAL LETTER SCRIPT G
	(0xA7AD, uppercase_to(0x026C)), # LATIN CAPITAL LETTER L WITH BELT
	(0xA7AE, uppercase_to(0x026A)), # LATIN CAPITAL LETTER SMALL CAPITAL I
	(0xA7AF, GAP),
	(0xA7B0, uppercase_to(0x029E)), # LATIN CAPITAL LETTER TURNED K
	(0xA7B1, uppercase_to(0x0287)), # LATIN CAPITAL LETTER TURNED T
	(0xA7B2, uppercase_to(0x029D)), # LATIN CAPITAL LETTER J WITH CROSSED-TAIL
	(0xA7B3, uppercase_to(0xAB53)), # LATIN CAPITAL LETTER CHI
	(0xA7B4, EVEN_UPPER),
	(0xA7C0, GAP),
	(0xA7C2, EVEN_UPPER),
	(0xA7C4, uppercase_to(0xA794)), # LATIN CAPITAL LETTER C WITH PALATAL HOOK
	(0xA7C5, uppercase_to(0x0282)), # LATIN CAPITAL LETTER S WITH HOOK
	(0xA7C6, uppercase_to(0x1D8E)), # LATIN CAPITAL LETTER Z WITH PALATAL HOOK
	(0xA7C7, ODD_UPPER),
	(0xA7CB, GAP),
	(0xA7F5, ODD_UPPER),
	(0xA7F7, GAP),
))

CHEROKEE_SUPPLEMENT = Block("Latin Extended-E, Cherokee Supplement", 0xAB00, 0xABFF, (
	(0xAB00, GAP),
	(0xAB53, lowercase_to(0xA7B3)), # LATIN SMALL LETTER CHI
	(0xAB54, GAP),
	(0xAB70, lowercase(-0x97D0)),
	(0xABC0, GAP),
))

HALFWIDTH_AND_FULLWIDTH_FORMS = Block("Halfwidth and Fullwidth Forms", 0xFF00, 0xFFFF, (
	(0xFF00, GAP),
	(0xFF21, uppercase(0x20)),
	(0xFF3B, GAP),
	(0xFF41, lowercase(-0x20)),
	(0xFF5B, GAP),
))

DESERET = Block("Deseret, Shavian, Osmanya, Osage", 0x10400, 0x104FF, (
	(0x10400, uppercase(0x28)),
	(0x10428, lowercase(-0x28)),
	(0x10450, GAP),
	(0x104B0, uppercase(0x28)),
	(0x104D4, GAP),
	(0x104D8, lowercase(-0x28)),
	(0x104FC, GAP),
))

OLD_HUNGARIAN = Block("Old Turkic, Old Hungarian", 0x10C00, 0x10CFF, (
	(0x10C00, GAP),
	(0x10C80, uppercase(0x40)),
	(0x10CB3, GAP),
	(0x10CC0, lowercase(-0x40)),
	(0x10CF3, GAP),
))

WARANG_CITI = Block("Warang Citi", 0x11800, 0x118FF, (
	(0x11800, GAP),
	(0x118A0, uppercase(0x20)),
	(0x118C0, lowercase(-0x20)),
	(0x118E0, GAP),
))

MEDEFAIDRIN = Block("Medefaidrin", 0x16E00, 0x16EFF, (
	(0x16E00, GAP),
	(0x16E40, uppercase(0x20)),
	(0x16E60, lowercase(-0x20)),
	(0x16E80, GAP),
))

ADLAM = Block("Adlam", 0x1E900, 0x1E9FF, (
	(0x1E900, uppercase(0x22)),
	(0x1E922, lowercase(-0x22)),
	(0x1E944, GAP),
))
