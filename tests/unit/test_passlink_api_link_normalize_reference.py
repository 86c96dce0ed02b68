"""Unit tests for passlink.api.link.normalize_reference."""

import pytest

from passlink.api.link.normalize_reference import normalize_reference

pytestmark = pytest.mark.link


def test_colon_becomes_dot():
    assert normalize_reference("John 3:16-18") == "John 3.16-18"


def test_trims_and_collapses_whitespace():
    assert normalize_reference("  1   John\t4:7 \n") == "1 John 4.7"


@pytest.mark.parametrize("dash", ["–", "—", "-"])
def test_dash_variants_become_hyphen(dash):
    assert normalize_reference(f"John 3:16{dash}18") == "John 3.16-18"


def test_empty_string():
    assert normalize_reference("") == ""
    assert normalize_reference("   ") == ""


def test_every_colon_replaced():
    assert normalize_reference("Gen 1:1:2") == "Gen 1.1.2"


@pytest.mark.parametrize(
    "raw",
    [
        "John 3:16-18",
        "  Song  of   Songs 2 ",
        "Rev 22:1–5",
        "see Moses' law",
        "",
        "\t\n",
        "1 Cor. 13:4—7",
    ],
)
def test_idempotent(raw):
    once = normalize_reference(raw)
    assert normalize_reference(once) == once
