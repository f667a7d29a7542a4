# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
kconfparse: parser for the source-inclusion subset of Kconfig.

Turns text containing `source`/`rsource`/`osource`/`orsource` directives into
a typed AST. Locating, glob-expanding and recursively parsing the referenced
files is left to the caller.
"""

from .ast import KConfigFile, SourceDirective, SourceType, TopLevel
from .diagnostics import Diagnostic
from .errors import KConfigDecodeError, KConfigError, KConfigShapeError, KConfigSyntaxError
from .parser import START_RULES, build_ast, parse_kconfig, parse_tree
from .span import Span
from .strings import decode_literal_text, decode_string_literal

__all__ = [
	"KConfigFile",
	"SourceDirective",
	"SourceType",
	"TopLevel",
	"Diagnostic",
	"KConfigError",
	"KConfigSyntaxError",
	"KConfigShapeError",
	"KConfigDecodeError",
	"START_RULES",
	"build_ast",
	"parse_kconfig",
	"parse_tree",
	"Span",
	"decode_literal_text",
	"decode_string_literal",
]
