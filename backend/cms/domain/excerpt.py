"""Plain-text teaser derivation from markdown-like article bodies."""

import re

EXCERPT_MAX_LENGTH = 150
ELLIPSIS = "..."

_MARKUP_PATTERN = re.compile(r"[#*\->\[\]\n]")


def derive_excerpt(content: str | None) -> str | None:
    """Return a teaser of at most 150 characters (plus ``...`` when cut).

    Markdown markers (``# * - > [ ]``) and newlines are removed before
    truncating. Empty or missing content yields ``None``.
    """
    if not content:
        return None

    cleaned = _MARKUP_PATTERN.sub("", content).strip()
    if len(cleaned) > EXCERPT_MAX_LENGTH:
        return cleaned[:EXCERPT_MAX_LENGTH] + ELLIPSIS
    return cleaned
