"""
Pure-function SVG legend card builder.
Entries fill a grid left-to-right, top-to-bottom in legend order.
Color entries draw as small circles, icon entries as SVG paths.
"""

from __future__ import annotations

from chart_legends.models.legend import ColorIndicator, LegendEntry, LegendSet
from chart_legends.renderer.templates import DEFAULT_ICON, ICON_PATHS, TEMPLATES, TemplateColors

PADDING_X = 12
PADDING_Y = 8
TITLE_HEIGHT = 20
ROW_HEIGHT = 20
DOT_RADIUS = 4
ICON_SIZE = 10
LABEL_GAP = 6
CORNER_RADIUS = 8


def _escape_xml(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def resolve_color(indicator: ColorIndicator, template: TemplateColors) -> str:
    if indicator.name.startswith("#"):
        return indicator.name
    return template.tokens.get(indicator.name, template.text_secondary)


def _render_indicator(x: int, y: int, entry: LegendEntry, colors: TemplateColors) -> str:
    if entry.color is not None:
        fill = resolve_color(entry.color, colors)
        opacity = f' fill-opacity="{entry.color.opacity:g}"' if entry.color.opacity < 1 else ""
        return f'<circle cx="{x + DOT_RADIUS}" cy="{y}" r="{DOT_RADIUS}" fill="{fill}"{opacity}/>'

    icon_path = ICON_PATHS.get(entry.icon.name, ICON_PATHS[DEFAULT_ICON])
    colored_path = icon_path.replace("{color}", colors.text_secondary)
    scale = ICON_SIZE / 24
    top = y - ICON_SIZE / 2
    return f'<g transform="translate({x},{top:g}) scale({scale:.4f})">{colored_path}</g>'


def legend_height(legend: LegendSet, columns: int = 2) -> int:
    rows = -(-len(legend.entries) // columns) if legend.entries else 0
    title = TITLE_HEIGHT if legend.title else 0
    return PADDING_Y * 2 + title + rows * ROW_HEIGHT


def render_legend_svg(
    legend: LegendSet,
    template: str = "classic",
    columns: int = 2,
    width: int = 360,
) -> str:
    if columns < 1:
        raise ValueError("columns must be at least 1")

    colors = TEMPLATES.get(template, TEMPLATES["classic"])
    height = legend_height(legend, columns)
    column_width = (width - PADDING_X * 2) // columns

    parts: list[str] = []

    parts.append(f"""<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width} {height}" width="{width}" height="{height}">
<defs>
  <style>
    .legend-title {{ font-family: Arial, Helvetica, sans-serif; font-size: 12px; font-weight: 500; fill: {colors.title}; }}
    .legend-label {{ font-family: Arial, Helvetica, sans-serif; font-size: 11px; fill: {colors.text_secondary}; }}
  </style>
</defs>
<rect width="{width}" height="{height}" rx="{CORNER_RADIUS}" fill="{colors.background}" stroke="{colors.border}" stroke-width="1"/>
""")

    y = PADDING_Y
    if legend.title:
        parts.append(f'<text x="{PADDING_X}" y="{y + 14}" class="legend-title">{_escape_xml(legend.title)}</text>\n')
        y += TITLE_HEIGHT

    for index, entry in enumerate(legend.entries):
        row, col = divmod(index, columns)
        x = PADDING_X + col * column_width
        center_y = y + row * ROW_HEIGHT + ROW_HEIGHT // 2
        parts.append(_render_indicator(x, center_y, entry, colors))
        label_x = x + ICON_SIZE + LABEL_GAP
        parts.append(
            f'<text x="{label_x}" y="{center_y + 4}" class="legend-label">{_escape_xml(entry.label)}</text>\n'
        )

    parts.append("</svg>")

    return "\n".join(parts)
