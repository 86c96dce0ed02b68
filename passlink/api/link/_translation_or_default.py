"""Fall back to the default translation code for empty values."""

from ._constants import DEFAULT_TRANSLATION


def _translation_or_default(translation: str | None) -> str:
    return translation or DEFAULT_TRANSLATION
