# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Typed AST for the source-inclusion subset of Kconfig.

Nodes are immutable. `TopLevel` and `SourceType` are closed sets: a new
directive kind is a new member of the `TopLevel` union (and a new entry in the
builder's dispatch table), never a subclass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Tuple, Union

from .span import Span


class SourceType(Enum):
	"""The type of a source directive."""

	# `source`: read the specified file(s).
	SOURCE = "source"
	# `rsource`: read the specified file(s) relative to the current file.
	RSOURCE = "rsource"
	# `osource`: read the specified file(s) if they exist.
	OSOURCE = "osource"
	# `orsource`: read the specified file(s) relative to the current file if they exist.
	ORSOURCE = "orsource"

	@property
	def keyword(self) -> str:
		return self.value

	def is_optional(self) -> bool:
		"""Missing targets are not an error."""
		return self in (SourceType.OSOURCE, SourceType.ORSOURCE)

	def is_relative(self) -> bool:
		"""The glob is resolved against the directory of the current file."""
		return self in (SourceType.RSOURCE, SourceType.ORSOURCE)


@dataclass(frozen=True)
class SourceDirective:
	"""
	A source directive. One of:
	- `source "filename"`
	- `rsource "filename"`
	- `osource "filename"`
	- `orsource "filename"`

	`filename_glob` is the decoded literal: an unresolved glob pattern.
	"""

	source_type: SourceType
	filename_glob: str
	loc: Span = field(default_factory=Span, compare=False)


TopLevel = Union[SourceDirective]


@dataclass(frozen=True)
class KConfigFile:
	"""Root node: top-level blocks in source order."""

	blocks: Tuple[TopLevel, ...] = ()
	loc: Span = field(default_factory=Span, compare=False)

	def __len__(self) -> int:
		return len(self.blocks)

	def __iter__(self) -> Iterator[TopLevel]:
		return iter(self.blocks)

	def source_directives(self) -> Iterator[SourceDirective]:
		for block in self.blocks:
			if isinstance(block, SourceDirective):
				yield block


__all__ = ["SourceType", "SourceDirective", "TopLevel", "KConfigFile"]
