# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Decoding of double-quoted string literals.

Escapes understood inside a literal:
- `\\n`, `\\r`, `\\t`, `\\\\`, `\\0`, `\\'`, `\\"`
- `\\xHH`: exactly two hex digits, one character in the range 0-255
- `\\u{H...}`: one or more hex digits naming a Unicode scalar value

A literal without any backslash is returned as its interior text; only
literals with escapes are rebuilt character by character.
"""

from __future__ import annotations

from typing import List, Optional, Union

from lark import Token, Tree

from .errors import KConfigDecodeError, KConfigShapeError
from .span import Span

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

_SIMPLE_ESCAPES = {
	"n": "\n",
	"r": "\r",
	"t": "\t",
	"\\": "\\",
	"0": "\0",
	"'": "'",
	'"': '"',
}

_MAX_SCALAR = 0x10FFFF


def decode_string_literal(node: Union[Tree, Token], *, file: Optional[str] = None) -> str:
	"""
	Decode a `string` parse-tree node (or its bare `STRING` token).

	Raises KConfigShapeError if the node is not a string literal and
	KConfigDecodeError on a malformed escape.
	"""
	token = _string_token(node, file)
	return decode_literal_text(token.value, Span.from_token(token, file))


def decode_literal_text(literal: str, span: Span) -> str:
	"""Decode quoted literal text (including both quotes); errors are located at `span`."""
	if len(literal) < 2 or not (literal.startswith('"') and literal.endswith('"')):
		raise KConfigShapeError(f"not a string literal: {literal!r}", span=span, expected_rule="string")

	content = literal[1:-1]
	if "\\" not in content:
		return content

	out: List[str] = []
	chars = iter(content)
	for c in chars:
		if c != "\\":
			out.append(c)
			continue

		c = next(chars, None)
		if c is None:
			raise KConfigDecodeError("incomplete escape: \\", span=span, sequence="\\")
		simple = _SIMPLE_ESCAPES.get(c)
		if simple is not None:
			out.append(simple)
		elif c == "x":
			out.append(_decode_hex_escape(chars, span))
		elif c == "u":
			out.append(_decode_unicode_escape(chars, span))
		else:
			raise KConfigDecodeError(f"invalid escape: \\{c}", span=span, sequence=f"\\{c}")
	return "".join(out)


def _decode_hex_escape(chars, span: Span) -> str:
	digits = ""
	for _ in range(2):
		c = next(chars, None)
		if c is None:
			raise KConfigDecodeError(f"incomplete hex escape: \\x{digits}", span=span, sequence=f"\\x{digits}")
		digits += c
	if not all(d in _HEX_DIGITS for d in digits):
		raise KConfigDecodeError(f"invalid hex escape: \\x{digits}", span=span, sequence=f"\\x{digits}")
	return chr(int(digits, 16))


def _decode_unicode_escape(chars, span: Span) -> str:
	c = next(chars, None)
	if c != "{":
		seq = "\\u" + (c or "")
		raise KConfigDecodeError(f"invalid unicode escape: {seq}", span=span, sequence=seq)

	digits = ""
	while True:
		c = next(chars, None)
		if c is None:
			seq = f"\\u{{{digits}"
			raise KConfigDecodeError(f"incomplete unicode escape: {seq}", span=span, sequence=seq)
		if c == "}":
			break
		digits += c

	seq = f"\\u{{{digits}}}"
	if not digits or not all(d in _HEX_DIGITS for d in digits):
		raise KConfigDecodeError(f"invalid unicode escape: {seq}", span=span, sequence=seq)
	value = int(digits, 16)
	if value > _MAX_SCALAR or 0xD800 <= value <= 0xDFFF:
		raise KConfigDecodeError(f"invalid unicode codepoint: {seq}", span=span, sequence=seq)
	return chr(value)


def _string_token(node: Union[Tree, Token], file: Optional[str]) -> Token:
	if isinstance(node, Token) and node.type == "STRING":
		return node
	if isinstance(node, Tree) and node.data == "string":
		tokens = [child for child in node.children if isinstance(child, Token)]
		if len(tokens) == 1 and tokens[0].type == "STRING":
			return tokens[0]
	raise KConfigShapeError(f"not a string: {node}", span=Span.from_node(node, file), expected_rule="string")


__all__ = ["decode_string_literal", "decode_literal_text"]
