"""Public entry point for formatting a passage reference."""

from collections.abc import Mapping
from typing import Any

from .compose import compose
from .LinkConfig import LinkConfig


def format_reference_links(reference: str, translation: str | None, config: LinkConfig | Mapping[str, Any]) -> str:
    """Format ``reference`` into a single line of passage links.

    Args:
        reference: Free-text passage reference, e.g. "John 3:16-18".
        translation: Translation code; empty values fall back to ESV in the links.
        config: LinkConfig, or a mapping of its fields (missing fields take defaults).
    """
    if not isinstance(config, LinkConfig):
        config = LinkConfig(**config)
    return compose(reference, translation, config)
