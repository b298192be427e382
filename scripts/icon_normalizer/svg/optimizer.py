"""Best-effort SVG markup optimization.

Only removes markup that can never carry paint: the XML declaration,
doctype, comments, <metadata>/<title>/<desc> blocks and whitespace between
tags. Fill and stroke values are never touched, so classification results
are the same before and after.
"""

import logging
import re
from typing import Callable

logger = logging.getLogger(__name__)

Optimizer = Callable[[str], str]

XML_DECL_PATTERN = re.compile(r"<\?xml[^>]*\?>", re.IGNORECASE)
DOCTYPE_PATTERN = re.compile(r"<!DOCTYPE[^>]*>", re.IGNORECASE)
COMMENT_PATTERN = re.compile(r"<!--.*?-->", re.DOTALL)
METADATA_PATTERN = re.compile(
    r"<(metadata|title|desc)\b[^>]*/>|<(metadata|title|desc)\b.*?</\2\s*>",
    re.DOTALL | re.IGNORECASE,
)
BETWEEN_TAGS_PATTERN = re.compile(r">\s+<")


def optimize_svg(svg_content: str) -> str:
    """Strip non-rendering markup from an SVG.

    Raises:
        ValueError: If the content contains no <svg> element
    """
    if "<svg" not in svg_content.lower():
        raise ValueError("content has no <svg> element")

    text = svg_content.replace("\r\n", "\n").replace("\r", "\n")
    text = XML_DECL_PATTERN.sub("", text)
    text = DOCTYPE_PATTERN.sub("", text)
    text = COMMENT_PATTERN.sub("", text)
    text = METADATA_PATTERN.sub("", text)
    text = BETWEEN_TAGS_PATTERN.sub("><", text)
    return text.strip()


def optimize_or_original(
    svg_content: str, name: str, optimizer: Optimizer = optimize_svg
) -> tuple[str, bool]:
    """Run the optimizer, falling back to the original markup on failure.

    Args:
        svg_content: Raw SVG markup
        name: Icon name, used in the warning
        optimizer: Callable returning optimized markup

    Returns:
        (markup, optimized) where optimized is False if the fallback was used
    """
    try:
        return optimizer(svg_content), True
    except Exception as e:
        logger.warning("Optimization failed for %s, using original: %s", name, e)
        return svg_content, False
