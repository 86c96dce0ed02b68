"""Canonicalize a raw passage reference."""

import re

WHITESPACE_PATTERN = re.compile(r"\s+")
DASH_PATTERN = re.compile("[\u2013\u2014]")


def normalize_reference(reference: str) -> str:
    """Trim, collapse whitespace, turn colons into dots and dashes into hyphens.

    >>> normalize_reference("John 3:16–18")
    'John 3.16-18'
    """
    collapsed = WHITESPACE_PATTERN.sub(" ", reference.strip())
    return DASH_PATTERN.sub("-", collapsed.replace(":", "."))
