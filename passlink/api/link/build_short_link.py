"""ref.ly short link builder."""

from ...utils.render_template import render_template
from ._compact_reference import _compact_reference
from ._constants import SHORT_LINK_HOST, SHORT_LINK_TEMPLATE
from ._translation_or_default import _translation_or_default


def build_short_link(reference: str, translation: str | None) -> str:
    """Build ``https://ref.ly/<Ref>;<TRANSLATION>``.

    >>> build_short_link("John 3:16-18", "esv")
    'https://ref.ly/John3.16-18;ESV'
    """
    return render_template(
        SHORT_LINK_TEMPLATE,
        {
            "host": SHORT_LINK_HOST,
            "ref": _compact_reference(reference),
            "translation": _translation_or_default(translation).upper(),
        },
    )
