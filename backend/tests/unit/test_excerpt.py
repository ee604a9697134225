"""Unit tests for excerpt derivation."""

import pytest

from cms.domain.excerpt import derive_excerpt


@pytest.mark.parametrize("content", [None, ""])
def test_missing_content_has_no_excerpt(content):
    assert derive_excerpt(content) is None


def test_strips_markdown_markers_and_newlines():
    content = "## Title\n> quoted *bold* [link]\n- item"
    assert derive_excerpt(content) == "Title quoted bold link item"


def test_short_text_is_returned_unchanged():
    assert derive_excerpt("  Plain text  ") == "Plain text"


def test_exactly_150_characters_is_not_truncated():
    text = "a" * 150
    assert derive_excerpt(text) == text


def test_long_text_is_cut_with_ellipsis():
    excerpt = derive_excerpt("# Hello World\n" + "x" * 200)
    assert excerpt == ("Hello World" + "x" * 189)[:150] + "..."
    assert len(excerpt) == 153


@pytest.mark.parametrize(
    "content",
    ["x", "#" * 500, "word " * 100, "- [ ] todo\n" * 40, "y" * 10_000],
)
def test_excerpt_never_exceeds_153_characters(content):
    excerpt = derive_excerpt(content)
    assert excerpt is not None
    assert len(excerpt) <= 153


def test_markup_only_content_gives_empty_excerpt():
    assert derive_excerpt("### \n***") == ""
