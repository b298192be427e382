"""Configuration models and loaders for icon normalization."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


class NamingConfig(BaseModel):
    """Naming conventions that override content-based classification."""

    multicolor_prefixes: list[str] = Field(
        default_factory=lambda: ["flag-"],
        description="Slug prefixes marking icons whose colors are preserved verbatim",
    )
    multicolor_words: list[str] = Field(
        default_factory=list,
        description="Hyphen-delimited slug words marking multi-color icons",
    )
    hybrid_prefixes: list[str] = Field(
        default_factory=list,
        description="Slug prefixes marking intentional fill+stroke icons",
    )
    hybrid_words: list[str] = Field(
        default_factory=lambda: ["filled"],
        description="Hyphen-delimited slug words marking fill+stroke icons",
    )


class RewriteConfig(BaseModel):
    """Options for shape color rewriting."""

    default_view_box: str = Field("0 0 24 24", description="viewBox used when the root has none")
    strip_stroke_width: bool = Field(
        True, description="Drop stroke-width from shapes outside multi-color mode"
    )
    color_tokens: bool = Field(
        False, description="Replace multi-color values with render-time placeholder tokens"
    )


class EngineConfig(BaseModel):
    """Top-level configuration for the normalization engine."""

    naming: NamingConfig = Field(default_factory=NamingConfig)
    rewrite: RewriteConfig = Field(default_factory=RewriteConfig)


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_engine_config(path: Path | None) -> EngineConfig:
    """Load engine configuration from YAML file.

    A missing path or file yields the defaults. Unknown keys are ignored,
    invalid values raise ``pydantic.ValidationError``.
    """
    if path is None or not path.exists():
        return EngineConfig()

    data = load_yaml(path)
    return EngineConfig(
        naming=NamingConfig(**(data.get("naming") or {})),
        rewrite=RewriteConfig(**(data.get("rewrite") or {})),
    )
