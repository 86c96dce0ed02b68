"""Wrap a URL in markdown link markup."""

from ...utils.render_template import render_template
from ._constants import MARKDOWN_LINK_TEMPLATE


def _markdown_link(title: str, url: str) -> str:
    return render_template(MARKDOWN_LINK_TEMPLATE, {"title": title, "url": url})
