"""Unit tests for link cmd_show."""

import pytest

from passlink.api.link.cmd_show import cmd_show
from tests.conftest import run_cmd

pytestmark = pytest.mark.link


class TestCmdShow:
    def test_show_all_links(self):
        result = run_cmd(cmd_show, "1 John 4:7", "esv")
        assert result.success is True
        assert result.output["label"] == "1 John 4:7 (ESV)"
        assert result.output["translation"] == "esv"
        assert result.output["links"] == {
            "short_link": "https://ref.ly/1John4.7;ESV",
            "app_bridge": "https://ref.ly/logosres/esv?ref=BibleESV.1John4.7",
            "catalog": "https://biblia.com/bible/esv/1-john/4/7",
        }
        assert result.result == "Built 3 links for 1 John 4:7 (ESV)"

    def test_show_uses_configured_translation(self, write_config):
        write_config({"link": {"translation": "NKJV"}})
        result = run_cmd(cmd_show, "Song of Songs 2")
        assert result.output["translation"] == "NKJV"
        assert result.output["links"]["catalog"] == "https://biblia.com/bible/nkjv/song-of-songs/2"

    def test_show_with_broken_config_warns(self, write_config):
        write_config("[1, 2")
        result = run_cmd(cmd_show, "Hebrews 5:9")
        assert result.success is True
        assert result.output["translation"] == "ESV"
        assert result.output["warnings"]
        assert result.output["links"]["catalog"] == "https://biblia.com/bible/esv/hebrews/5/9"
