"""
Common diagnostic structure for the parser front end.

Errors raised by the parser convert into a Diagnostic so the command-line
driver can print them uniformly or render them as JSON.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .span import Span


@dataclass
class Diagnostic:
	"""Represents a parser diagnostic (error/warning/etc.)."""

	message: str
	code: str | None = None
	# Pipeline phase that produced the diagnostic: "io", "syntax", "ast" or
	# "string".
	phase: str | None = None
	severity: str = "error"
	span: Span = field(default_factory=Span)  # Source location (Span() denotes unknown).
	notes: list[str] = field(default_factory=list)

	def __post_init__(self) -> None:
		if self.span is None:  # type: ignore[unreachable]
			self.span = Span()

	def render(self) -> str:
		"""Human-readable `file:line:col: severity: message` line."""
		return f"{self.span.describe()}: {self.severity}: {self.message}"

	def to_json(self) -> dict:
		"""Render to a structured JSON-friendly dict."""
		return {
			"phase": self.phase,
			"code": self.code,
			"message": self.message,
			"severity": self.severity,
			"file": self.span.file,
			"line": self.span.line,
			"column": self.span.column,
			"end_line": self.span.end_line,
			"end_column": self.span.end_column,
			"notes": list(self.notes),
		}


__all__ = ["Diagnostic"]
