"""Tests for slug, component name and naming signal helpers."""

from __future__ import annotations

import pytest

from icon_normalizer.config import NamingConfig
from icon_normalizer.naming import is_hybrid_name, is_multicolor_name, slugify, to_component_name


class TestSlugify:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Côte d'Ivoire", "cote-d-ivoire"),
            ("  Flag_France!! ", "flag-france"),
            ("arrow--up", "arrow-up"),
            ("Ñandú 2", "nandu-2"),
            ("---", ""),
        ],
    )
    def test_slugify(self, name, expected):
        assert slugify(name) == expected

    def test_slugify_is_idempotent(self):
        assert slugify(slugify("Chevron Right (Bold)")) == "chevron-right-bold"


def test_to_component_name():
    assert to_component_name("flag-cote-d-ivoire") == "FlagCoteDIvoire"
    assert to_component_name("arrow-up-2") == "ArrowUp2"


class TestSignals:
    def test_flag_prefix(self):
        naming = NamingConfig()
        assert is_multicolor_name("Flag France", naming)
        assert not is_multicolor_name("flagpole", naming)

    def test_filled_word(self):
        naming = NamingConfig()
        assert is_hybrid_name("heart-filled", naming)
        assert is_hybrid_name("Filled Heart", naming)
        assert not is_hybrid_name("unfilled-heart", naming)

    def test_multicolor_words(self):
        naming = NamingConfig(multicolor_words=["counter"])
        assert is_multicolor_name("badge-counter-3", naming)
        assert not is_multicolor_name("counters", naming)

    def test_hybrid_prefixes(self):
        naming = NamingConfig(hybrid_prefixes=["duo-"])
        assert is_hybrid_name("duo-bell", naming)
