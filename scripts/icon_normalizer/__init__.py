"""
SVG color normalization for component icon libraries.

Classifies each raw SVG icon's color usage and rewrites its shapes so a
generic wrapper can apply caller color, size and stroke width.

Usage:
    from icon_normalizer import load_raw_icons, normalize_icons
    result = normalize_icons(load_raw_icons(Path("icons")))
"""

from .config import (
    NamingConfig,
    RewriteConfig,
    EngineConfig,
    load_yaml,
    load_engine_config,
)
from .models import ColorMode, RawIcon, NormalizedIcon, BatchResult
from .naming import slugify, to_component_name, is_multicolor_name, is_hybrid_name
from .pipeline import load_raw_icons, normalize_icon, normalize_icons
from .svg import classify, rewrite, extract_view_box, render_svg, substitute_tokens

__all__ = [
    # Config
    "NamingConfig",
    "RewriteConfig",
    "EngineConfig",
    "load_yaml",
    "load_engine_config",
    # Models
    "ColorMode",
    "RawIcon",
    "NormalizedIcon",
    "BatchResult",
    # Naming
    "slugify",
    "to_component_name",
    "is_multicolor_name",
    "is_hybrid_name",
    # Pipeline
    "load_raw_icons",
    "normalize_icon",
    "normalize_icons",
    # SVG
    "classify",
    "rewrite",
    "extract_view_box",
    "render_svg",
    "substitute_tokens",
]
