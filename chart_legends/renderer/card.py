"""
High-level legend card entry point.
Combines input validation, registry lookup, SVG rendering and the render cache.
"""

from __future__ import annotations

import logging

from chart_legends.cache.manager import CACHE_MISS, render_cache
from chart_legends.config import settings
from chart_legends.legends.registry import KindKey, get_legend_or_empty, normalize_kind
from chart_legends.renderer.svg_builder import legend_height, render_legend_svg
from chart_legends.validation.input import validate_format, validate_template

logger = logging.getLogger(__name__)


def render_legend_card(
    kind: KindKey,
    template: str | None = None,
    format: str = "svg",
) -> str | bytes:
    """
    Render the canonical legend for a chart kind.
    Unknown kinds render an empty card rather than failing.
    Returns an SVG string or PNG bytes depending on format.
    """
    key = normalize_kind(kind)
    template = validate_template(template or settings.legend_template)
    fmt = validate_format(format)

    cached = render_cache.get(key, template, fmt)
    if cached is not CACHE_MISS:
        logger.debug("CACHE HIT for %s/%s/%s", key, template, fmt)
        return cached
    logger.debug("CACHE MISS for %s/%s/%s", key, template, fmt)

    legend = get_legend_or_empty(key)
    svg_string = render_legend_svg(
        legend,
        template=template,
        columns=settings.legend_columns,
        width=settings.legend_width,
    )
    logger.info("Rendered %s legend (%d entries, template=%s, format=%s)", key, len(legend.entries), template, fmt)

    if fmt == "png":
        height = legend_height(legend, settings.legend_columns)
        card_data: str | bytes = _svg_to_png(svg_string, settings.legend_width, height)
    else:
        card_data = svg_string

    render_cache.set(key, template, fmt, card_data)
    return card_data


def _svg_to_png(svg_string: str, width: int, height: int) -> bytes:
    """Convert SVG string to PNG bytes using cairosvg."""
    try:
        import cairosvg
    except ImportError:
        raise RuntimeError(
            "cairosvg is required for PNG output. Install it with: pip install cairosvg"
        )

    return cairosvg.svg2png(
        bytestring=svg_string.encode("utf-8"),
        output_width=width,
        output_height=height,
    )
