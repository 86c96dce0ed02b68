"""Link target enum."""

from enum import Enum


class LinkTarget(str, Enum):
    SHORT_LINK = "short_link"
    APP_BRIDGE = "app_bridge"
    CATALOG = "catalog"
