# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Command-line front end: parse Kconfig files and list their source directives.

Each file is parsed independently; a failure in one file is reported and the
remaining files are still parsed.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .ast import KConfigFile
from .diagnostics import Diagnostic
from .errors import KConfigError
from .parser import parse_kconfig
from .span import Span


def _parse_path(path: Path) -> Tuple[Optional[KConfigFile], Optional[Diagnostic]]:
	try:
		text = path.read_text(encoding="utf-8-sig")
	except (OSError, UnicodeDecodeError) as exc:
		return None, Diagnostic(message=f"cannot read file: {exc}", code="E-KCONF-IO", phase="io", span=Span(file=str(path)))
	try:
		return parse_kconfig(text, filename=str(path)), None
	except KConfigError as exc:
		return None, exc.to_diagnostic()


def _directives_to_json(kfile: KConfigFile) -> list:
	return [
		{
			"type": d.source_type.keyword,
			"filename_glob": d.filename_glob,
			"optional": d.source_type.is_optional(),
			"relative": d.source_type.is_relative(),
			"line": d.loc.line,
			"column": d.loc.column,
		}
		for d in kfile.source_directives()
	]


def main(argv: list[str] | None = None) -> int:
	"""
	Parse each file and print its directives.

	With --json, prints one JSON document with per-file directives, structured
	diagnostics and an exit_code; otherwise prints directives to stdout and
	human-readable errors to stderr.
	"""
	parser = argparse.ArgumentParser(prog="kconfparse", description="List Kconfig source directives")
	parser.add_argument("source", type=Path, nargs="+", help="Path(s) to Kconfig file(s)")
	parser.add_argument("--json", action="store_true", help="Emit results and diagnostics as JSON on stdout")
	args = parser.parse_args(argv)

	files: List[dict] = []
	diagnostics: List[Diagnostic] = []
	for path in args.source:
		kfile, diag = _parse_path(path)
		if diag is not None:
			diagnostics.append(diag)
			if not args.json:
				print(diag.render(), file=sys.stderr)
				for note in diag.notes:
					print(f"{diag.span.describe()}: note: {note}", file=sys.stderr)
			continue
		if args.json:
			files.append({"file": str(path), "directives": _directives_to_json(kfile)})
		else:
			for d in kfile.source_directives():
				print(f"{d.loc.describe()}: {d.source_type.keyword} {json.dumps(d.filename_glob)}")

	exit_code = 1 if diagnostics else 0
	if args.json:
		payload = {
			"exit_code": exit_code,
			"files": files,
			"diagnostics": [d.to_json() for d in diagnostics],
		}
		print(json.dumps(payload))
	return exit_code


__all__ = ["main"]
