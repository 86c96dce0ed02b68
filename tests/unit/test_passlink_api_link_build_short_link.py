"""Unit tests for passlink.api.link.build_short_link."""

import pytest

from passlink.api.link.build_short_link import build_short_link

pytestmark = pytest.mark.link


def test_short_link_basic():
    assert build_short_link("John 3:16-18", "esv") == "https://ref.ly/John3.16-18;ESV"


def test_short_link_strips_all_whitespace():
    assert build_short_link("  1  John 4:7 ", "niv") == "https://ref.ly/1John4.7;NIV"


@pytest.mark.parametrize("translation", ["", None])
def test_short_link_defaults_translation(translation):
    assert build_short_link("Hebrews 5:9", translation) == "https://ref.ly/Hebrews5.9;ESV"


@pytest.mark.parametrize("dash", ["–", "—"])
def test_short_link_dash_matches_hyphen(dash):
    assert build_short_link(f"John 3:16{dash}18", "ESV") == build_short_link("John 3:16-18", "ESV")


def test_short_link_accepts_anything():
    assert build_short_link("see Moses' law", "ESV") == "https://ref.ly/seeMoses'law;ESV"
    assert build_short_link("", "ESV") == "https://ref.ly/;ESV"
