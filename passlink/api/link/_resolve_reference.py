"""Pick the reference text to format."""

from ._read_clipboard import _read_clipboard


def _resolve_reference(reference: str | None, use_clipboard: bool) -> str | None:
    """Return the given reference, else clipboard text when allowed, else None."""
    if reference and reference.strip():
        return reference.strip()
    if use_clipboard:
        return _read_clipboard()
    return None
