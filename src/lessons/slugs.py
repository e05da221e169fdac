"""URL-safe slug derivation for lesson topics."""

from __future__ import annotations

import re

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """
    Derive a lower-case, hyphen-delimited slug from free text.

    Every maximal run of characters outside ``[a-z0-9]`` becomes a single
    hyphen, then a leading and a trailing hyphen are stripped.

    Examples:
        >>> slugify("What is AI and How Does It Learn?")
        'what-is-ai-and-how-does-it-learn'
        >>> slugify("  --Already-Slugged--  ")
        'already-slugged'
    """
    slug = _NON_ALNUM_RUN.sub("-", text.lower())
    if slug.startswith("-"):
        slug = slug[1:]
    if slug.endswith("-"):
        slug = slug[:-1]
    return slug
