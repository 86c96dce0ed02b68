"""Assemble the output line for a passage reference."""

from ._constants import APP_BRIDGE_TITLE, CATALOG_TITLE
from ._markdown_link import _markdown_link
from .build_app_bridge import build_app_bridge
from .build_catalog_link import build_catalog_link
from .build_label import build_label
from .build_short_link import build_short_link
from .LinkConfig import LinkConfig


def compose(reference: str, translation: str | None, config: LinkConfig) -> str:
    """Join the label and the enabled links with the configured separator.

    The label is itself the ref.ly link when short links are enabled,
    otherwise plain text. With every target disabled only the label remains.
    """
    label = build_label(reference, translation)

    if config.include_short_link:
        parts = [_markdown_link(label, build_short_link(reference, translation))]
    else:
        parts = [label]

    if config.include_app_bridge:
        parts.append(_markdown_link(APP_BRIDGE_TITLE, build_app_bridge(reference, translation)))

    if config.include_catalog:
        parts.append(_markdown_link(CATALOG_TITLE, build_catalog_link(reference, translation)))

    return config.separator.join(parts)
