from .blocks import UNICODE_VERSION
from .case import NoCaseTarget, format_codepoint, to_lowercase, to_uppercase
from .resolver import resolve
from .rules import Resolution, Tag

__all__ = [
	"UNICODE_VERSION",
	"NoCaseTarget",
	"Resolution",
	"Tag",
	"format_codepoint",
	"resolve",
	"to_lowercase",
	"to_uppercase",
]
