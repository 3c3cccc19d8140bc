import pytest

from zonescan.caa import parse_caa_tag
from zonescan.errors import ZoneSemanticError, ZoneSyntaxError


def test_issue_tag():
    assert parse_caa_tag("issue") == b"\x05issue"


@pytest.mark.parametrize("tag", ["issuewild", "iodef", "Issue", "X509", "a"])
def test_length_prefix_and_content(tag):
    result = parse_caa_tag(tag)
    assert result[0] == len(tag)
    assert result[1:] == tag.encode("ascii")


def test_empty_tag():
    assert parse_caa_tag("") == b"\x00"


def test_maximum_length():
    result = parse_caa_tag("a" * 255)
    assert result[0] == 255
    assert len(result) == 256


def test_too_long_is_syntax_error():
    with pytest.raises(ZoneSyntaxError):
        parse_caa_tag("a" * 256)


@pytest.mark.parametrize("tag", ["iss-ue", "issue!", "is sue", "issu\u00e9", "foo\\bar", "@"])
def test_bad_characters_are_semantic_errors(tag):
    with pytest.raises(ZoneSemanticError):
        parse_caa_tag(tag)