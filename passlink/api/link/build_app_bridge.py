"""Logos app bridge link builder."""

from ...utils.render_template import render_template
from ._compact_reference import _compact_reference
from ._constants import APP_BRIDGE_TEMPLATE, BRIDGE_PATH, SHORT_LINK_HOST
from ._translation_or_default import _translation_or_default


def build_app_bridge(reference: str, translation: str | None) -> str:
    """Build the ref.ly ``logosres`` link that hands off to the Logos app.

    >>> build_app_bridge("James 1:1-27", "ESV")
    'https://ref.ly/logosres/esv?ref=BibleESV.James1.1-27'
    """
    code = _translation_or_default(translation)
    return render_template(
        APP_BRIDGE_TEMPLATE,
        {
            "host": SHORT_LINK_HOST,
            "path": BRIDGE_PATH,
            "translation_lower": code.lower(),
            "translation_upper": code.upper(),
            "ref": _compact_reference(reference),
        },
    )
