"""SVG color classification and rewriting."""

from .utils import normalize_color, color_class, extract_view_box, strip_svg_wrapper
from .shapes import ShapeElement
from .classifier import classify, detect_fillable
from .rewriter import RewriteResult, ShapeRewriter, rewrite
from .optimizer import optimize_svg, optimize_or_original
from .render import render_svg, substitute_tokens, wrapper_paint

__all__ = [
    # Utils
    "normalize_color",
    "color_class",
    "extract_view_box",
    "strip_svg_wrapper",
    # Shapes
    "ShapeElement",
    # Classifier
    "classify",
    "detect_fillable",
    # Rewriter
    "RewriteResult",
    "ShapeRewriter",
    "rewrite",
    # Optimizer
    "optimize_svg",
    "optimize_or_original",
    # Render
    "render_svg",
    "substitute_tokens",
    "wrapper_paint",
]
