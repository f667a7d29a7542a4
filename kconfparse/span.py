# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Source span representation shared by the parser, errors and diagnostics.

A Span records where a node or error sits in the original buffer: 1-based
line/column pairs for humans and 0-based character offsets for tools.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from lark import Token, Tree


@dataclass(frozen=True)
class Span:
	"""Represents a source span (file, line/column range and offsets)."""

	file: Optional[str] = None
	line: Optional[int] = None
	column: Optional[int] = None
	end_line: Optional[int] = None
	end_column: Optional[int] = None
	start_pos: Optional[int] = None
	end_pos: Optional[int] = None

	@classmethod
	def from_token(cls, token: Token, file: Optional[str] = None) -> "Span":
		return cls(
			file=file,
			line=token.line,
			column=token.column,
			end_line=token.end_line,
			end_column=token.end_column,
			start_pos=token.start_pos,
			end_pos=token.end_pos,
		)

	@classmethod
	def from_tree(cls, tree: Tree, file: Optional[str] = None) -> "Span":
		"""
		Construct a Span from a parse tree built with `propagate_positions`.

		Empty trees (e.g. a file with no directives) carry no position; they
		are reported at the very start of the buffer.
		"""
		meta = tree.meta
		if getattr(meta, "empty", True):
			return cls(file=file, line=1, column=1, end_line=1, end_column=1, start_pos=0, end_pos=0)
		return cls(
			file=file,
			line=meta.line,
			column=meta.column,
			end_line=meta.end_line,
			end_column=meta.end_column,
			start_pos=meta.start_pos,
			end_pos=meta.end_pos,
		)

	@classmethod
	def from_node(cls, node: Any, file: Optional[str] = None) -> "Span":
		if isinstance(node, Token):
			return cls.from_token(node, file)
		if isinstance(node, Tree):
			return cls.from_tree(node, file)
		return cls(file=file)

	@classmethod
	def from_offset(cls, text: str, pos: int, file: Optional[str] = None) -> "Span":
		"""Point span at character offset `pos` of `text` (clamped to the buffer)."""
		pos = max(0, min(pos, len(text)))
		line = text.count("\n", 0, pos) + 1
		column = pos - (text.rfind("\n", 0, pos) + 1) + 1
		return cls(
			file=file,
			line=line,
			column=column,
			end_line=line,
			end_column=column,
			start_pos=pos,
			end_pos=pos,
		)

	def describe(self) -> str:
		"""Render as `file:line:col` (unknown parts become `?`)."""
		line = "?" if self.line is None else self.line
		column = "?" if self.column is None else self.column
		loc = f"{line}:{column}"
		return f"{self.file}:{loc}" if self.file else loc


__all__ = ["Span"]
