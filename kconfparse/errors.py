# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Errors raised while turning Kconfig text into an AST.

Every error is a `ValueError` carrying the `Span` of the offending input, so
callers can treat any of them as a parse-time failure and still report a
precise location. The pipeline stops at the first error; no partial AST is
ever returned.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Optional

from .diagnostics import Diagnostic
from .span import Span


class KConfigError(ValueError):
	"""Base class for located parser errors."""

	code = "E-KCONF"
	phase = "parser"

	def __init__(self, message: str, *, span: Span) -> None:
		super().__init__(message)
		self.message = message
		self.span = span

	def __str__(self) -> str:
		return f"{self.span.describe()}: {self.message}"

	def to_diagnostic(self) -> Diagnostic:
		return Diagnostic(
			message=self.message,
			code=self.code,
			phase=self.phase,
			span=self.span,
		)


class KConfigSyntaxError(KConfigError):
	"""
	Input does not match the grammar.

	`expected` holds human-readable names of the constructs the grammar would
	have accepted at `span`. The underlying lark exception is chained as
	`__cause__`.
	"""

	code = "E-KCONF-SYNTAX"
	phase = "syntax"

	def __init__(self, message: str, *, span: Span, expected: Iterable[str] = ()) -> None:
		super().__init__(message, span=span)
		self.expected: FrozenSet[str] = frozenset(expected)

	def to_diagnostic(self) -> Diagnostic:
		diag = super().to_diagnostic()
		if self.expected:
			diag.notes.append("expected one of: " + ", ".join(sorted(self.expected)))
		return diag


class KConfigShapeError(KConfigError):
	"""A parse-tree node reached a builder expecting a different rule."""

	code = "E-KCONF-SHAPE"
	phase = "ast"

	def __init__(self, message: str, *, span: Span, expected_rule: Optional[str] = None) -> None:
		super().__init__(message, span=span)
		self.expected_rule = expected_rule


class KConfigDecodeError(KConfigError):
	"""
	Malformed escape sequence inside a string literal.

	The span covers the whole literal; `sequence` is the offending escape as
	written in the source (e.g. `\\q` or `\\xZZ`).
	"""

	code = "E-KCONF-ESCAPE"
	phase = "string"

	def __init__(self, message: str, *, span: Span, sequence: Optional[str] = None) -> None:
		super().__init__(message, span=span)
		self.sequence = sequence


__all__ = [
	"KConfigError",
	"KConfigSyntaxError",
	"KConfigShapeError",
	"KConfigDecodeError",
]
