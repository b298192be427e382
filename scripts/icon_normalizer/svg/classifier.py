"""Color mode classification for raw SVG icons."""

import re

from ..config import NamingConfig
from ..models import ColorMode
from ..naming import is_hybrid_name, is_multicolor_name
from .utils import NONE, OTHER, color_class, parse_style, remove_defs

PAINT_PATTERN = re.compile(
    r"""(?<![\w-])(fill|stroke|style)\s*=\s*(?:"([^"]*)"|'([^']*)')""", re.IGNORECASE
)
PAINT_ATTRIBUTES = ("fill", "stroke")


def scan_paint_values(svg_content: str) -> list[tuple[str, str]]:
    """Collect every fill/stroke value outside <defs>.

    Both presentation attributes and fill/stroke declarations inside inline
    style attributes are collected. CSS in <style> elements is not.

    Args:
        svg_content: Raw SVG markup

    Returns:
        List of (property, value) pairs in document order
    """
    visible = remove_defs(svg_content)
    pairs = []
    for match in PAINT_PATTERN.finditer(visible):
        attr, double, single = match.groups()
        attr = attr.lower()
        value = double if double is not None else single
        if attr == "style":
            pairs.extend(
                (name, declared.replace("!important", "").strip())
                for name, declared in parse_style(value)
                if name in PAINT_ATTRIBUTES
            )
        else:
            pairs.append((attr, value))
    return pairs


def classify_content(svg_content: str) -> ColorMode:
    """Classify an icon from its fill/stroke values alone.

    Any paint outside black and white makes the icon colored. Black, white,
    none, currentColor or no paint at all is monochrome.
    """
    classes = {color_class(value) for _, value in scan_paint_values(svg_content)}
    if OTHER in classes:
        return ColorMode.COLORED
    return ColorMode.MONOCHROME


def classify(svg_content: str, name_hint: str, naming: NamingConfig | None = None) -> ColorMode:
    """Decide the color mode of an icon.

    Naming signals win over content: a multi-color name beats a hybrid name,
    and both beat the colored/monochrome inspection.

    Args:
        svg_content: Original (pre-optimization) SVG markup
        name_hint: File name or slug of the icon
        naming: Naming conventions (defaults to NamingConfig())

    Returns:
        Exactly one ColorMode
    """
    naming = naming or NamingConfig()
    if is_multicolor_name(name_hint, naming):
        return ColorMode.MULTICOLOR
    if is_hybrid_name(name_hint, naming):
        return ColorMode.HYBRID
    return classify_content(svg_content)


def detect_fillable(svg_content: str, mode: ColorMode) -> bool:
    """Whether the wrapper should paint its fill with the caller color.

    Multi-color and hybrid icons are always fillable. Other icons are
    fillable when any visible fill (attribute or inline style) is not none.
    """
    if mode in (ColorMode.MULTICOLOR, ColorMode.HYBRID):
        return True
    return any(
        attr == "fill" and color_class(value) != NONE
        for attr, value in scan_paint_values(svg_content)
    )
