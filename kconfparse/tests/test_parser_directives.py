# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
import dataclasses

import pytest

from kconfparse import KConfigFile, SourceDirective, SourceType, build_ast, parse_kconfig, parse_tree


def test_two_source_directives_with_mixed_whitespace() -> None:
	kfile = parse_kconfig('source "a"\n\nsource\t"b"\t\n')
	assert len(kfile.blocks) == 2
	for block in kfile.blocks:
		assert isinstance(block, SourceDirective)
		assert block.source_type is SourceType.SOURCE
	assert [b.filename_glob for b in kfile.blocks] == ["a", "b"]


@pytest.mark.parametrize(
	"keyword, expected",
	[
		("source", SourceType.SOURCE),
		("rsource", SourceType.RSOURCE),
		("osource", SourceType.OSOURCE),
		("orsource", SourceType.ORSOURCE),
	],
)
def test_each_keyword_maps_to_its_source_type(keyword: str, expected: SourceType) -> None:
	kfile = parse_kconfig(f'{keyword} "x"')
	assert kfile.blocks == (SourceDirective(source_type=expected, filename_glob="x"),)


@pytest.mark.parametrize("text", ["", "   ", "\n\n", "\t \r\n  \n"])
def test_empty_file_has_no_blocks(text: str) -> None:
	kfile = parse_kconfig(text)
	assert isinstance(kfile, KConfigFile)
	assert kfile.blocks == ()
	assert len(kfile) == 0


def test_whitespace_between_keyword_and_string_is_optional() -> None:
	kfile = parse_kconfig('rsource"drivers/*/Kconfig"')
	assert kfile.blocks == (SourceDirective(SourceType.RSOURCE, "drivers/*/Kconfig"),)


def test_directives_keep_source_order() -> None:
	text = 'orsource "c"\nsource "a"\nosource "b"\nrsource "d"\n'
	kfile = parse_kconfig(text)
	assert [(b.source_type, b.filename_glob) for b in kfile] == [
		(SourceType.ORSOURCE, "c"),
		(SourceType.SOURCE, "a"),
		(SourceType.OSOURCE, "b"),
		(SourceType.RSOURCE, "d"),
	]


def test_multiple_directives_on_one_line() -> None:
	kfile = parse_kconfig('source "a" source "b"')
	assert [b.filename_glob for b in kfile] == ["a", "b"]


def test_comments_are_ignored() -> None:
	text = '# top-level comment\nsource "a" # trailing\n\n#source "ignored"\n'
	kfile = parse_kconfig(text)
	assert [b.filename_glob for b in kfile] == ["a"]


def test_hash_inside_string_is_not_a_comment() -> None:
	kfile = parse_kconfig('source "a#b"')
	assert kfile.blocks[0].filename_glob == "a#b"


def test_empty_string_is_a_valid_glob() -> None:
	kfile = parse_kconfig('osource ""')
	assert kfile.blocks == (SourceDirective(SourceType.OSOURCE, ""),)


def test_non_ascii_glob_passes_through() -> None:
	kfile = parse_kconfig('source "dír/ünïcode/*.kconfig"')
	assert kfile.blocks[0].filename_glob == "dír/ünïcode/*.kconfig"


def test_directive_locations() -> None:
	kfile = parse_kconfig('source "a"\n\n  orsource "b"\n', filename="Kconfig")
	first, second = kfile.blocks
	assert (first.loc.line, first.loc.column) == (1, 1)
	assert (second.loc.line, second.loc.column) == (3, 3)
	assert first.loc.file == "Kconfig"
	assert second.loc.describe() == "Kconfig:3:3"
	assert first.loc.start_pos == 0
	assert first.loc.end_pos == len('source "a"')


def test_source_directives_iterator() -> None:
	kfile = parse_kconfig('source "a"\nrsource "b"')
	assert [d.filename_glob for d in kfile.source_directives()] == ["a", "b"]


def test_ast_nodes_are_immutable() -> None:
	kfile = parse_kconfig('source "a"')
	directive = kfile.blocks[0]
	with pytest.raises(dataclasses.FrozenInstanceError):
		directive.filename_glob = "b"  # type: ignore[misc]
	with pytest.raises(dataclasses.FrozenInstanceError):
		kfile.blocks = ()  # type: ignore[misc]


def test_parse_tree_shape() -> None:
	tree = parse_tree('source "a"')
	assert tree.data == "file"
	(top_level,) = tree.children
	assert top_level.data == "top_level"
	(directive,) = top_level.children
	assert directive.data == "source_directive"
	assert [child.data for child in directive.children] == ["source_token", "string"]


def test_build_ast_from_other_start_rules() -> None:
	assert build_ast(parse_tree('orsource "x"', start="source_directive")) == SourceDirective(SourceType.ORSOURCE, "x")
	assert build_ast(parse_tree('osource "x"', start="top_level")) == SourceDirective(SourceType.OSOURCE, "x")
	assert build_ast(parse_tree("rsource", start="source_token")) is SourceType.RSOURCE
	assert build_ast(parse_tree('"a\\tb"', start="string")) == "a\tb"
	assert build_ast(parse_tree('source "x"')) == KConfigFile(blocks=(SourceDirective(SourceType.SOURCE, "x"),))


def test_unknown_start_rule_is_rejected() -> None:
	with pytest.raises(ValueError):
		parse_tree('source "a"', start="menu")
