"""Biblia.com catalog link builder."""

import re
from urllib.parse import quote

from ...utils.get_logger import get_logger
from ...utils.render_template import render_template
from ._constants import CATALOG_HOST, CATALOG_TEMPLATE
from ._translation_or_default import _translation_or_default
from .normalize_reference import DASH_PATTERN, WHITESPACE_PATTERN

logger = get_logger("link.build_catalog_link")

# Numeral slot is the literal class [0-9I]{0,3}, not a Roman numeral parser.
# Letter classes stay ASCII so case folding never admits signs like U+212A.
REFERENCE_PATTERN = re.compile(
    r"((?a:[0-9I]{0,3})\s*(?a:[A-Za-z. ]+))\s+([0-9]+)(?::([0-9]+(?:-[0-9]+)?))?",
    re.IGNORECASE,
)

# Characters left alone by JavaScript's encodeURIComponent
_COMPONENT_SAFE = "-_.!~*'()"


def _book_slug(book: str) -> str:
    """'1 John' -> '1-john', 'Song of Songs' -> 'song-of-songs'."""
    return WHITESPACE_PATTERN.sub("-", book.replace(".", "").strip().lower())


def _encode_component(text: str) -> str:
    # Surrogate-escaped command-line bytes come out as their original octets;
    # any other lone surrogate is passed through as its UTF-8 form.
    try:
        return quote(text, safe=_COMPONENT_SAFE, errors="surrogateescape")
    except UnicodeEncodeError:
        return quote(text, safe=_COMPONENT_SAFE, errors="surrogatepass")


def build_catalog_link(reference: str, translation: str | None) -> str:
    """Build ``https://biblia.com/bible/<t>/<book>/<chapter>[/<verses>]``.

    References that do not look like ``Book chapter[:verse[-verse]]`` are
    percent-encoded whole after the trailing path segment instead.
    """
    code = _translation_or_default(translation).lower()
    raw = DASH_PATTERN.sub("-", reference).strip()

    match = REFERENCE_PATTERN.fullmatch(raw)
    if match:
        book, chapter, verses = match.groups()
        parts = [_book_slug(book), chapter]
        if verses:
            parts.append(verses)
        path = "/".join(parts)
    else:
        logger.debug("Reference %r is unstructured, encoding it whole", reference)
        dotted = WHITESPACE_PATTERN.sub(" ", reference.strip().replace(":", "."))
        path = _encode_component(dotted)

    return render_template(CATALOG_TEMPLATE, {"host": CATALOG_HOST, "translation": code, "path": path})
