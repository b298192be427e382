"""Tests for configuration models and YAML loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from icon_normalizer.config import EngineConfig, NamingConfig, RewriteConfig, load_engine_config


def test_defaults():
    config = EngineConfig()
    assert config.naming.multicolor_prefixes == ["flag-"]
    assert config.naming.hybrid_words == ["filled"]
    assert config.rewrite.default_view_box == "0 0 24 24"
    assert config.rewrite.strip_stroke_width is True
    assert config.rewrite.color_tokens is False


def test_default_lists_are_not_shared():
    first, second = NamingConfig(), NamingConfig()
    first.multicolor_prefixes.append("brand-")
    assert second.multicolor_prefixes == ["flag-"]


class TestLoadEngineConfig:
    def test_none_path(self):
        assert load_engine_config(None) == EngineConfig()

    def test_missing_file(self, tmp_path):
        assert load_engine_config(tmp_path / "missing.yaml") == EngineConfig()

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_engine_config(path) == EngineConfig()

    def test_partial_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "naming:\n"
            "  multicolor_prefixes: [flag-, brand-]\n"
            "rewrite:\n"
            "  color_tokens: true\n"
        )
        config = load_engine_config(path)
        assert config.naming.multicolor_prefixes == ["flag-", "brand-"]
        assert config.naming.hybrid_words == ["filled"]
        assert config.rewrite == RewriteConfig(color_tokens=True)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("rewrite:\n  strip_stroke_width: maybe\n")
        with pytest.raises(ValidationError):
            load_engine_config(path)
