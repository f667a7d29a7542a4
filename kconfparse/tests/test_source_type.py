# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
import pytest

from kconfparse import SourceType


@pytest.mark.parametrize(
	"source_type, optional, relative",
	[
		(SourceType.SOURCE, False, False),
		(SourceType.RSOURCE, False, True),
		(SourceType.OSOURCE, True, False),
		(SourceType.ORSOURCE, True, True),
	],
)
def test_optional_and_relative_facets(source_type: SourceType, optional: bool, relative: bool) -> None:
	assert source_type.is_optional() is optional
	assert source_type.is_relative() is relative


def test_every_variant_is_covered() -> None:
	assert {t.keyword for t in SourceType} == {"source", "rsource", "osource", "orsource"}
