"""Render-time wrapper for normalized icons."""

from ..models import NormalizedIcon
from .rewriter import PRIMARY_TOKEN, SECONDARY_TOKEN, TERTIARY_TOKEN
from .utils import escape_xml

# Wrapper element template
# Absent shape paint inherits fill/stroke from here
WRAPPER_TEMPLATE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" '
    'viewBox="{view_box}" fill="{fill}" stroke="{stroke}" stroke-width="{stroke_width}" '
    'stroke-linecap="round" stroke-linejoin="round"{aria}>'
    "{content}"
    "</svg>"
)


def substitute_tokens(
    svg_content: str,
    color: str | None = None,
    secondary_color: str | None = None,
    tertiary_color: str | None = None,
) -> str:
    """Replace placeholder tokens with caller colors.

    Args:
        svg_content: Inner markup that may contain placeholder tokens
        color: Primary color (default: currentColor)
        secondary_color: Secondary color (default: white)
        tertiary_color: Tertiary color (default: currentColor)

    Returns:
        Markup with every token replaced by its XML-escaped color
    """
    if not any(token in svg_content for token in (PRIMARY_TOKEN, SECONDARY_TOKEN, TERTIARY_TOKEN)):
        return svg_content
    return (
        svg_content.replace(PRIMARY_TOKEN, escape_xml(color or "currentColor"))
        .replace(SECONDARY_TOKEN, escape_xml(secondary_color or "white"))
        .replace(TERTIARY_TOKEN, escape_xml(tertiary_color or "currentColor"))
    )


def wrapper_paint(fillable: bool, color: str | None = None, fill: str | None = None) -> tuple[str, str]:
    """Return the (fill, stroke) of the wrapper element.

    Fillable icons fill with the caller color, stroke icons fill with none.
    Stroke is always the caller color so hybrid shapes get both roles.
    """
    final_color = color or "currentColor"
    if fill is not None:
        final_fill = fill
    elif fillable:
        final_fill = final_color
    else:
        final_fill = "none"
    return final_fill, final_color


def render_svg(
    icon: NormalizedIcon,
    size: int | str = 24,
    color: str | None = None,
    secondary_color: str | None = None,
    tertiary_color: str | None = None,
    stroke_width: float | str = 1,
    fill: str | None = None,
    aria_label: str | None = None,
) -> str:
    """Render a normalized icon as a standalone SVG element.

    Args:
        icon: Normalized icon
        size: Width and height; numbers are rendered in px
        color: Caller color for inherited fill/stroke and the primary token
        secondary_color, tertiary_color: Colors for the matching tokens
        stroke_width: Wrapper stroke-width
        fill: Explicit wrapper fill, overriding the fillable default
        aria_label: Accessible label; the icon is aria-hidden without one

    Returns:
        SVG markup string
    """
    final_size = f"{size}px" if isinstance(size, (int, float)) else size
    final_fill, final_stroke = wrapper_paint(icon.fillable, color, fill)
    aria = f' aria-label="{escape_xml(aria_label)}"' if aria_label else ' aria-hidden="true"'

    return WRAPPER_TEMPLATE.format(
        size=escape_xml(final_size),
        view_box=icon.view_box,
        fill=escape_xml(final_fill),
        stroke=escape_xml(final_stroke),
        stroke_width=escape_xml(str(stroke_width)),
        aria=aria,
        content=substitute_tokens(icon.inner_markup, color, secondary_color, tertiary_color),
    )
