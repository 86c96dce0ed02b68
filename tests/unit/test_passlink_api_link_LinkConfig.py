"""Unit tests for passlink.api.link.LinkConfig."""

import pytest
from pydantic import ValidationError

from passlink.api.link.LinkConfig import LinkConfig

pytestmark = pytest.mark.link


def test_defaults():
    config = LinkConfig()
    assert config.translation == "ESV"
    assert config.include_short_link is True
    assert config.include_app_bridge is True
    assert config.include_catalog is True
    assert config.separator == " • "
    assert config.use_clipboard_fallback is True


def test_translation_trimmed_and_defaulted():
    assert LinkConfig(translation="  NIV ").translation == "NIV"
    assert LinkConfig(translation="   ").translation == "ESV"


def test_translation_defaulted_on_assignment():
    config = LinkConfig()
    config.translation = ""
    assert config.translation == "ESV"


def test_extra_fields_forbidden():
    with pytest.raises(ValidationError):
        LinkConfig(include_everything=True)
