"""Shape color rewriting driven by the icon's color mode."""

import logging
import re
from typing import Callable, NamedTuple

from ..config import RewriteConfig
from ..models import ColorMode
from .shapes import SHAPE_PATTERN, ShapeElement
from .utils import (
    BLACK,
    DEFAULT_FILL,
    DEFAULT_STROKE,
    NONE,
    OTHER,
    WHITE,
    InheritedPaint,
    color_class,
    extract_inherited_paint,
    extract_view_box,
    normalize_color,
    strip_svg_wrapper,
)

logger = logging.getLogger(__name__)

PRIMARY_TOKEN = "{{PRIMARY_COLOR}}"
SECONDARY_TOKEN = "{{SECONDARY_COLOR}}"
TERTIARY_TOKEN = "{{TERTIARY_COLOR}}"

# Where a resolved paint value came from
OWN = "own"
ANCESTOR = "ancestor"
IMPLICIT = "implicit"

PAINT_DEFAULTS = (("fill", DEFAULT_FILL), ("stroke", DEFAULT_STROKE))


class RewriteResult(NamedTuple):
    inner_markup: str
    view_box: str


def palette_literal(value: str, keep_black: bool) -> str | None:
    """Map a paint value to the literal it keeps, or None to drop it."""
    kind = color_class(value)
    if kind == NONE:
        return "none"
    if kind == WHITE:
        return "white"
    if kind == BLACK and keep_black:
        return "black"
    return None


class ShapeRewriter:
    """Rewrites the paint attributes of shapes and groups for one icon.

    Used as a regex substitution callback over the inner markup. Keeps a
    stack of the paint declared by the stripped <svg> root and each open
    <g>, so every shape resolves its effective fill and stroke against its
    nearest ancestor.

    Attributes:
        mode: Color mode chosen by the classifier
        stack: Inherited paint, root first, innermost open group last
        strip_stroke_width: Drop stroke-width outside multi-color mode
        color_tokens: Replace multi-color values with placeholder tokens
    """

    def __init__(
        self,
        mode: ColorMode,
        inherited: InheritedPaint,
        strip_stroke_width: bool = True,
        color_tokens: bool = False,
    ):
        self.mode = mode
        self.stack = [inherited]
        self.strip_stroke_width = strip_stroke_width
        self.color_tokens = color_tokens

    @classmethod
    def from_markup(cls, svg_content: str, mode: ColorMode, config: RewriteConfig) -> "ShapeRewriter":
        """Create a ShapeRewriter for the given source SVG and mode."""
        return cls(
            mode=mode,
            inherited=extract_inherited_paint(svg_content),
            strip_stroke_width=config.strip_stroke_width,
            color_tokens=config.color_tokens,
        )

    @property
    def inherited(self) -> InheritedPaint:
        return self.stack[-1]

    def resolve(self, shape: ShapeElement, attr: str, implicit: str) -> tuple[str, str]:
        """Return the effective value of a paint attribute and its source."""
        own = shape.attributes.get(attr)
        if own is not None:
            return own, OWN
        inherited = getattr(self.inherited, attr)
        if inherited is not None:
            return inherited, ANCESTOR
        return implicit, IMPLICIT

    def enter_group(self, group: ShapeElement) -> None:
        """Push the paint a group passes down to its children."""
        parent = self.inherited
        fill = group.attributes.get("fill")
        stroke = group.attributes.get("stroke")
        self.stack.append(
            InheritedPaint(
                fill=fill if fill is not None else parent.fill,
                stroke=stroke if stroke is not None else parent.stroke,
            )
        )

    def _rewrite_palette(self, shape: ShapeElement, keep_black: bool) -> None:
        for attr, implicit in PAINT_DEFAULTS:
            value, source = self.resolve(shape, attr, implicit)
            literal = palette_literal(value, keep_black)
            if literal is None:
                shape.remove(attr)
            # An undeclared stroke already renders as nothing
            elif literal != "none" or source != IMPLICIT:
                shape.set(attr, literal)

    def _rewrite_group_palette(self, group: ShapeElement, keep_black: bool) -> None:
        for attr, _ in PAINT_DEFAULTS:
            value = group.attributes.get(attr)
            if value is None:
                continue
            literal = palette_literal(value, keep_black)
            if literal is None:
                group.remove(attr)
            else:
                group.set(attr, literal)

    def rewrite_monochrome(self, shape: ShapeElement) -> None:
        """Black becomes the caller color, white stays literal."""
        self._rewrite_palette(shape, keep_black=False)

    def rewrite_colored(self, shape: ShapeElement) -> None:
        """Non black/white colors become the caller color, black and white stay literal."""
        self._rewrite_palette(shape, keep_black=True)

    def rewrite_hybrid(self, shape: ShapeElement) -> None:
        """Keep each shape's fill-vs-stroke role, drop the color values."""
        fill, _ = self.resolve(shape, "fill", DEFAULT_FILL)
        stroke, stroke_source = self.resolve(shape, "stroke", DEFAULT_STROKE)
        real_fill = color_class(fill) != NONE
        real_stroke = color_class(stroke) != NONE

        if real_fill:
            shape.remove("fill")
        else:
            shape.set("fill", "none")

        if real_stroke:
            shape.remove("stroke")
        elif real_fill or stroke_source != IMPLICIT:
            shape.set("stroke", "none")

    def rewrite_multicolor(self, shape: ShapeElement) -> None:
        """Preserve authored colors, block stroke inheritance from the wrapper."""
        for attr, _ in PAINT_DEFAULTS:
            inherited = getattr(self.inherited, attr)
            if not shape.has(attr) and inherited is not None:
                shape.set(attr, inherited)
        if not shape.has("stroke"):
            shape.set("stroke", "none")

        if self.color_tokens:
            for attr, _ in PAINT_DEFAULTS:
                value = shape.attributes.get(attr)
                if value is None:
                    continue
                kind = color_class(value)
                if kind == WHITE:
                    shape.set(attr, SECONDARY_TOKEN)
                elif kind == OTHER and normalize_color(value).startswith("#"):
                    shape.set(attr, PRIMARY_TOKEN)

    def rewrite_group_monochrome(self, group: ShapeElement) -> None:
        self._rewrite_group_palette(group, keep_black=False)

    def rewrite_group_colored(self, group: ShapeElement) -> None:
        self._rewrite_group_palette(group, keep_black=True)

    def rewrite_group_hybrid(self, group: ShapeElement) -> None:
        """Drop real group colors; children already carry their roles."""
        for attr, _ in PAINT_DEFAULTS:
            value = group.attributes.get(attr)
            if value is None:
                continue
            if color_class(value) == NONE:
                group.set(attr, "none")
            else:
                group.remove(attr)

    def rewrite_group_multicolor(self, group: ShapeElement) -> None:
        """Groups keep their authored colors."""

    RULES: dict[ColorMode, Callable[["ShapeRewriter", ShapeElement], None]] = {
        ColorMode.MONOCHROME: rewrite_monochrome,
        ColorMode.COLORED: rewrite_colored,
        ColorMode.HYBRID: rewrite_hybrid,
        ColorMode.MULTICOLOR: rewrite_multicolor,
    }

    GROUP_RULES: dict[ColorMode, Callable[["ShapeRewriter", ShapeElement], None]] = {
        ColorMode.MONOCHROME: rewrite_group_monochrome,
        ColorMode.COLORED: rewrite_group_colored,
        ColorMode.HYBRID: rewrite_group_hybrid,
        ColorMode.MULTICOLOR: rewrite_group_multicolor,
    }

    def rewrite_shape(self, match: re.Match) -> str:
        """Regex substitution callback for shape and group tags.

        Args:
            match: SHAPE_PATTERN match (a shape or group tag, a </g> or a <defs> block)

        Returns:
            The rewritten tag, or the original text when nothing changed
        """
        if match.group("defs"):
            return match.group(0)
        if match.group("end"):
            if len(self.stack) > 1:
                self.stack.pop()
            return match.group(0)

        element = ShapeElement.from_match(match)
        original = list(element.attributes.items())
        if self.mode != ColorMode.MULTICOLOR:
            element.hoist_style_paint()

        if element.is_group:
            if not element.self_closing:
                self.enter_group(element)
            self.GROUP_RULES[self.mode](self, element)
        else:
            self.RULES[self.mode](self, element)

        if self.strip_stroke_width and self.mode != ColorMode.MULTICOLOR:
            element.remove("stroke-width")

        if list(element.attributes.items()) == original:
            return match.group(0)
        return element.to_markup()


def rewrite(svg_content: str, mode: ColorMode, config: RewriteConfig | None = None) -> RewriteResult:
    """Strip the <svg> wrapper and rewrite shape colors for the given mode.

    Markup without an <svg>...</svg> envelope is treated as already-inner
    content and returned unchanged.

    Shapes resolve paint against their nearest <g> ancestor, then the root,
    then the renderer default. Group paint and inline style paint are
    rewritten under the same mode rules as shape attributes. CSS rules in
    <style> elements are not applied or rewritten.

    Args:
        svg_content: SVG markup (usually optimized)
        mode: Color mode from classify()
        config: Rewrite options (defaults to RewriteConfig())

    Returns:
        RewriteResult with the inner markup and the viewBox
    """
    config = config or RewriteConfig()
    view_box = extract_view_box(svg_content, config.default_view_box)

    inner = strip_svg_wrapper(svg_content)
    if inner is None:
        logger.debug("No <svg> envelope found, passing markup through")
        return RewriteResult(svg_content, view_box)

    rewriter = ShapeRewriter.from_markup(svg_content, mode, config)
    return RewriteResult(SHAPE_PATTERN.sub(rewriter.rewrite_shape, inner), view_box)
