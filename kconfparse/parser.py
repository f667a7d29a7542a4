# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Kconfig source-inclusion parser: lark grammar -> parse tree -> typed AST.

`parse_tree` runs the grammar only; `build_ast` converts a parse tree rooted
at any grammar rule into the matching AST value; `parse_kconfig` does both for
a whole file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Optional, Union

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken

from .ast import KConfigFile, SourceDirective, SourceType, TopLevel
from .errors import KConfigShapeError, KConfigSyntaxError
from .span import Span
from .strings import decode_string_literal

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

START_RULES = ("file", "top_level", "source_directive", "source_token", "string")

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	start=list(START_RULES),
	propagate_positions=True,
	maybe_placeholders=False,
)

_SOURCE_TOKENS: Dict[str, SourceType] = {
	"K_SOURCE": SourceType.SOURCE,
	"K_RSOURCE": SourceType.RSOURCE,
	"K_OSOURCE": SourceType.OSOURCE,
	"K_ORSOURCE": SourceType.ORSOURCE,
}

# Human-readable names for grammar terminals, used in syntax errors.
_TERMINAL_NAMES: Dict[str, str] = {
	"K_SOURCE": "`source`",
	"K_RSOURCE": "`rsource`",
	"K_OSOURCE": "`osource`",
	"K_ORSOURCE": "`orsource`",
	"STRING": "string literal",
	"$END": "end of input",
}


def parse_tree(source: str, start: str = "file", *, filename: Optional[str] = None) -> Tree:
	"""Run the grammar from `start`; raises KConfigSyntaxError on mismatch."""
	if start not in START_RULES:
		raise ValueError(f"unknown start rule {start!r}; expected one of {', '.join(START_RULES)}")
	try:
		return _PARSER.parse(source, start=start)
	except UnexpectedInput as exc:
		raise _syntax_error(exc, source, filename) from exc


def parse_kconfig(source: str, *, filename: Optional[str] = None) -> KConfigFile:
	tree = parse_tree(source, "file", filename=filename)
	return _build_file(tree, filename)


def build_ast(tree: Tree, *, filename: Optional[str] = None) -> Union[KConfigFile, TopLevel, SourceType, str]:
	"""Convert a parse tree into the AST value for its root rule."""
	builder = _BUILDERS.get(_name(tree))
	if builder is None:
		raise KConfigShapeError(f"not an AST rule: {_name(tree)}", span=Span.from_node(tree, filename))
	return builder(tree, filename)


def _syntax_error(exc: UnexpectedInput, source: str, filename: Optional[str]) -> KConfigSyntaxError:
	if isinstance(exc, UnexpectedCharacters):
		expected = exc.allowed or ()
		found = f"character {exc.char!r}"
		pos = exc.pos_in_stream
	elif isinstance(exc, UnexpectedToken):
		expected = exc.expected or ()
		if exc.token.type == "$END":
			# $END borrows the position of the last real token.
			found = "end of input"
			pos = exc.token.end_pos
		else:
			found = f"{_terminal_name(exc.token.type)} {exc.token.value!r}"
			pos = exc.token.start_pos
	else:
		# UnexpectedEOF
		expected = getattr(exc, "expected", None) or ()
		found = "end of input"
		pos = len(source)

	if pos is None or pos < 0:
		pos = len(source)
	names = sorted({_terminal_name(term) for term in expected})
	message = f"unexpected {found}"
	if names:
		message += f"; expected {' or '.join(names)}"
	return KConfigSyntaxError(message, span=Span.from_offset(source, pos, filename), expected=names)


def _terminal_name(term: str) -> str:
	return _TERMINAL_NAMES.get(term, term)


def _build_file(tree: Tree, filename: Optional[str]) -> KConfigFile:
	_check_rule(tree, "file", filename)

	blocks = []
	for child in tree.children:
		blocks.append(_build_top_level(child, filename))
	return KConfigFile(blocks=tuple(blocks), loc=Span.from_tree(tree, filename))


def _build_top_level(tree: Tree, filename: Optional[str]) -> TopLevel:
	_check_rule(tree, "top_level", filename)

	child = _single_child(tree, filename)
	builder = _TOP_LEVEL_BUILDERS.get(_name(child))
	if builder is None:
		raise KConfigShapeError(
			f"not a top-level: {_name(child)}",
			span=Span.from_node(child, filename),
			expected_rule="top_level",
		)
	return builder(child, filename)


def _build_source_directive(tree: Tree, filename: Optional[str]) -> SourceDirective:
	_check_rule(tree, "source_directive", filename)

	if len(tree.children) != 2:
		raise KConfigShapeError(
			f"source_directive expects a source token and a string, got {len(tree.children)} children",
			span=Span.from_tree(tree, filename),
			expected_rule="source_directive",
		)
	token_node, string_node = tree.children
	source_type = _build_source_type(token_node, filename)
	filename_glob = decode_string_literal(string_node, file=filename)
	return SourceDirective(
		source_type=source_type,
		filename_glob=filename_glob,
		loc=Span.from_tree(tree, filename),
	)


def _build_source_type(node: Union[Tree, Token], filename: Optional[str]) -> SourceType:
	if isinstance(node, Token) and node.type in _SOURCE_TOKENS:
		return _SOURCE_TOKENS[node.type]
	if isinstance(node, Tree) and _name(node) == "source_token":
		return _build_source_type(_single_child(node, filename), filename)
	raise KConfigShapeError(
		f"not a source token: {_name(node)}",
		span=Span.from_node(node, filename),
		expected_rule="source_token",
	)


def _build_string(tree: Tree, filename: Optional[str]) -> str:
	return decode_string_literal(tree, file=filename)


def _check_rule(node: Union[Tree, Token], rule: str, filename: Optional[str]) -> None:
	if not isinstance(node, Tree) or _name(node) != rule:
		raise KConfigShapeError(
			f"not a {rule}: {_name(node)}",
			span=Span.from_node(node, filename),
			expected_rule=rule,
		)


def _single_child(tree: Tree, filename: Optional[str]) -> Union[Tree, Token]:
	if len(tree.children) != 1:
		raise KConfigShapeError(
			f"{_name(tree)} expects exactly one child, got {len(tree.children)}",
			span=Span.from_tree(tree, filename),
			expected_rule=_name(tree),
		)
	return tree.children[0]


def _name(node: Tree | Token) -> str:
	if isinstance(node, Tree):
		data = node.data
		if isinstance(data, Token):
			return data.value
		return data
	if isinstance(node, Token):
		return node.type
	return str(node)


_TOP_LEVEL_BUILDERS: Dict[str, Callable[[Tree, Optional[str]], TopLevel]] = {
	"source_directive": _build_source_directive,
}

_BUILDERS: Dict[str, Callable[[Tree, Optional[str]], object]] = {
	"file": _build_file,
	"top_level": _build_top_level,
	"source_directive": _build_source_directive,
	"source_token": _build_source_type,
	"string": _build_string,
}


__all__ = ["START_RULES", "parse_tree", "parse_kconfig", "build_ast"]
