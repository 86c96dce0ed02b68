"""Build the label and every target link for a reference."""

from .build_app_bridge import build_app_bridge
from .build_catalog_link import build_catalog_link
from .build_label import build_label
from .build_short_link import build_short_link
from .LinkTarget import LinkTarget


def build_links(reference: str, translation: str | None) -> dict[str, str]:
    """Return ``label`` plus one URL per LinkTarget value."""
    return {
        "label": build_label(reference, translation),
        LinkTarget.SHORT_LINK.value: build_short_link(reference, translation),
        LinkTarget.APP_BRIDGE.value: build_app_bridge(reference, translation),
        LinkTarget.CATALOG.value: build_catalog_link(reference, translation),
    }
