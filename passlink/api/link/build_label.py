"""Human-readable passage label."""

from .normalize_reference import WHITESPACE_PATTERN


def build_label(reference: str, translation: str | None) -> str:
    """Cleaned reference followed by the uppercased translation in parentheses.

    >>> build_label("  John   3:16 ", "esv")
    'John 3:16 (ESV)'
    """
    pretty = WHITESPACE_PATTERN.sub(" ", reference.strip())
    suffix = f"({translation.upper()})" if translation else ""
    return f"{pretty} {suffix}".strip()
