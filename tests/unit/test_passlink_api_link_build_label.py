"""Unit tests for passlink.api.link.build_label."""

import pytest

from passlink.api.link.build_label import build_label

pytestmark = pytest.mark.link


def test_label_cleans_and_uppercases():
    assert build_label("  John   3:16 ", "esv") == "John 3:16 (ESV)"


@pytest.mark.parametrize("translation", ["", None])
def test_label_without_translation(translation):
    assert build_label(" John 3:16 ", translation) == "John 3:16"


def test_label_keeps_colons_and_dashes():
    assert build_label("John 3:16–18", "niv") == "John 3:16–18 (NIV)"
