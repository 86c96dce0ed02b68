"""Normalized reference with all whitespace removed."""

from .normalize_reference import WHITESPACE_PATTERN, normalize_reference


def _compact_reference(reference: str) -> str:
    return WHITESPACE_PATTERN.sub("", normalize_reference(reference))
