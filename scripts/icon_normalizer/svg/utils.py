"""Color value and SVG envelope utility functions."""

import re
from typing import NamedTuple

import webcolors

DEFAULT_VIEW_BOX = "0 0 24 24"

# Paint the SVG renderer assumes when neither shape nor root declares one
DEFAULT_FILL = "black"
DEFAULT_STROKE = "none"

# Color classes returned by color_class()
NONE = "none"
CURRENT = "current"
BLACK = "black"
WHITE = "white"
OTHER = "other"

_BLACK_HEX = "#000000"
_WHITE_HEX = "#ffffff"

ATTR_PATTERN = re.compile(r"""([^\s=/>"']+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'))?""")
ROOT_TAG_PATTERN = re.compile(r"<svg\b([^>]*)>", re.IGNORECASE)
ENVELOPE_PATTERN = re.compile(r"<svg\b[^>]*>(.*)</svg>", re.DOTALL | re.IGNORECASE)
DEFS_PATTERN = re.compile(r"<defs\b[^>]*/>|<defs\b.*?</defs>", re.DOTALL | re.IGNORECASE)


class InheritedPaint(NamedTuple):
    """Fill and stroke passed down by the root <svg> or an open <g> (None if undeclared)."""

    fill: str | None = None
    stroke: str | None = None


def parse_attributes(text: str) -> dict[str, str | None]:
    """Parse the attribute section of a start tag into an ordered dict.

    Args:
        text: Everything between the tag name and the closing '>' or '/>'

    Returns:
        Attribute name -> value mapping (None for valueless attributes)
    """
    attributes: dict[str, str | None] = {}
    for match in ATTR_PATTERN.finditer(text):
        name, double, single = match.groups()
        if double is not None:
            attributes[name] = double
        elif single is not None:
            attributes[name] = single
        else:
            attributes[name] = None
    return attributes


def normalize_color(value: str) -> str:
    """Normalize a paint value for comparison.

    Hex values are expanded to six lowercase digits and CSS color names are
    mapped to their hex value. Anything else (rgb(), var(), url()) is only
    trimmed and lowercased.
    """
    value = value.strip().lower()
    try:
        if value.startswith("#"):
            return webcolors.normalize_hex(value)
        return webcolors.name_to_hex(value)
    except ValueError:
        return value


def color_class(value: str) -> str:
    """Classify a fill/stroke value as none, current, black, white or other."""
    normalized = normalize_color(value)
    if normalized == "none":
        return NONE
    if normalized == "currentcolor":
        return CURRENT
    if normalized == _BLACK_HEX:
        return BLACK
    if normalized == _WHITE_HEX:
        return WHITE
    return OTHER


def extract_root_attributes(svg_content: str) -> dict[str, str | None]:
    """Return the attributes of the root <svg> tag, or {} if there is none."""
    match = ROOT_TAG_PATTERN.search(svg_content)
    if not match:
        return {}
    return parse_attributes(match.group(1).rstrip("/"))


def extract_view_box(svg_content: str, default: str = DEFAULT_VIEW_BOX) -> str:
    """Extract the viewBox of the root <svg> tag.

    Args:
        svg_content: Full SVG markup
        default: Value returned when the root declares no viewBox

    Returns:
        viewBox string, e.g. "0 0 32 32"
    """
    view_box = extract_root_attributes(svg_content).get("viewBox")
    return view_box.strip() if view_box else default


def extract_inherited_paint(svg_content: str) -> InheritedPaint:
    """Capture the fill/stroke the root <svg> passes down to its shapes."""
    root = extract_root_attributes(svg_content)
    return InheritedPaint(fill=root.get("fill"), stroke=root.get("stroke"))


def strip_svg_wrapper(svg_content: str) -> str | None:
    """Return the markup inside the <svg>...</svg> envelope.

    Returns:
        Trimmed inner markup, or None when the content has no envelope
    """
    match = ENVELOPE_PATTERN.search(svg_content)
    if not match:
        return None
    return match.group(1).strip()


def remove_defs(svg_content: str) -> str:
    """Remove <defs> blocks (clip paths, masks, gradients) from markup."""
    return DEFS_PATTERN.sub("", svg_content)


def escape_xml(text: str) -> str:
    """Escape XML special characters."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )


def parse_style(text: str) -> list[tuple[str, str]]:
    """Split an inline style attribute into (property, value) declarations.

    Property names are lowercased; empty declarations are skipped.
    """
    declarations = []
    for part in text.split(";"):
        name, sep, value = part.partition(":")
        if sep and name.strip():
            declarations.append((name.strip().lower(), value.strip()))
    return declarations
