"""Per-icon and batch normalization of raw SVG icons."""

import logging
from collections import Counter
from pathlib import Path
from typing import Iterable

from .config import EngineConfig
from .models import BatchResult, NormalizedIcon, RawIcon
from .naming import slugify, to_component_name
from .svg.classifier import classify, detect_fillable
from .svg.optimizer import Optimizer, optimize_or_original, optimize_svg
from .svg.rewriter import rewrite

logger = logging.getLogger(__name__)


def load_raw_icons(directory: Path) -> list[RawIcon]:
    """Read every .svg file in a directory, sorted by file name.

    Args:
        directory: Directory containing the source SVG files

    Returns:
        List of RawIcon named after the file stem
    """
    return [
        RawIcon(name=path.stem, source_markup=path.read_text(encoding="utf-8"))
        for path in sorted(directory.glob("*.svg"))
        if path.is_file()
    ]


def normalize_icon(
    raw: RawIcon,
    config: EngineConfig | None = None,
    optimizer: Optimizer = optimize_svg,
) -> NormalizedIcon:
    """Classify and rewrite a single icon.

    Classification and fillable detection read the original markup; the
    viewBox and inner content come from the optimized markup, or from the
    original when optimization fails.

    Args:
        raw: Icon to normalize
        config: Engine configuration (defaults to EngineConfig())
        optimizer: Markup optimizer, run best-effort

    Returns:
        NormalizedIcon ready for code generation
    """
    config = config or EngineConfig()
    slug = slugify(raw.name)

    markup, optimized = optimize_or_original(raw.source_markup, raw.name, optimizer)
    mode = classify(raw.source_markup, raw.name, config.naming)
    result = rewrite(markup, mode, config.rewrite)
    logger.debug("%s classified as %s", raw.name, mode.value)

    return NormalizedIcon(
        name=raw.name,
        slug=slug,
        component_name=to_component_name(slug),
        inner_markup=result.inner_markup,
        view_box=result.view_box,
        color_mode=mode,
        fillable=detect_fillable(raw.source_markup, mode),
        optimized=optimized,
    )


def normalize_icons(
    raws: Iterable[RawIcon],
    config: EngineConfig | None = None,
    optimizer: Optimizer = optimize_svg,
) -> BatchResult:
    """Normalize a batch of icons independently.

    A failure in one icon is logged and recorded in ``skipped``; it never
    stops the remaining icons.
    """
    config = config or EngineConfig()
    result = BatchResult()

    for raw in raws:
        try:
            result.icons.append(normalize_icon(raw, config, optimizer))
        except Exception as e:
            result.skipped[raw.name] = str(e)
            logger.warning("Skipping %s: %s", raw.name, e)

    modes = Counter(icon.color_mode.value for icon in result.icons)
    logger.info(
        "Normalized %d icons (%d skipped): %s",
        len(result.icons),
        len(result.skipped),
        ", ".join(f"{mode}={count}" for mode, count in sorted(modes.items())) or "none",
    )
    return result
