from html import escape

from codechef_card.models import HeatmapLayout
from codechef_card.models import ProfileCard
from codechef_card.services.heatmap_service import CELL_GAP
from codechef_card.services.heatmap_service import CELL_SIZE
from codechef_card.services.heatmap_service import COLOR_TIERS
from codechef_card.services.heatmap_service import GRID_MARGIN


CARD_MIN_WIDTH = 780
CARD_PADDING = 20
CARD_HEIGHT = 160
HEATMAP_TOP = 210
LEGEND_GAP = 12
FONT_FAMILY = "Inter, 'Segoe UI', Ubuntu, sans-serif"


def render_heatmap(layout: HeatmapLayout) -> str:
    rects = [
        f'<rect x="{cell.x}" y="{cell.y}" width="{cell.width}" '
        f'height="{cell.height}" rx="3" fill="{cell.color}">'
        f"<title>{cell.day.isoformat()}: {cell.count}</title></rect>"
        for cell in layout.cells
    ]
    return "<g>" + "".join(rects) + "</g>"


def render_legend(x: int, y: int) -> str:
    """Render "Less", one swatch per color tier, then "More"."""

    label_style = f'fill="#94a3b8" font-size="11" font-family="{FONT_FAMILY}"'
    text_y = y + CELL_SIZE - 2
    parts = [f'<text x="{x}" y="{text_y}" {label_style}>Less</text>']

    swatch_x = x + 34
    for tier in COLOR_TIERS:
        parts.append(
            f'<rect x="{swatch_x}" y="{y}" width="{CELL_SIZE}" '
            f'height="{CELL_SIZE}" rx="3" fill="{tier.color}"/>'
        )
        swatch_x += CELL_SIZE + CELL_GAP

    parts.append(f'<text x="{swatch_x + 4}" y="{text_y}" {label_style}>More</text>')
    return "<g>" + "".join(parts) + "</g>"


def render_card(card: ProfileCard) -> str:
    """Serialize a profile card and its heatmap as one SVG document."""

    layout = card.layout
    width = max(CARD_MIN_WIDTH, layout.width + 2 * CARD_PADDING)
    legend_y = HEATMAP_TOP + layout.height + LEGEND_GAP
    height = legend_y + CELL_SIZE + CARD_PADDING

    user = escape(card.username)
    initial = escape(card.username[:1].upper())
    profile = card.profile
    rating = escape(profile.rating)
    highest = escape(profile.highest_rating)
    global_rank = escape(profile.global_rank)
    country_rank = escape(profile.country_rank)

    inner_width = width - 2 * CARD_PADDING
    return f"""<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" viewBox="0 0 {width} {height}">
  <title>CodeChef profile of {user}</title>
  <defs>
    <linearGradient id="grad" x1="0" y1="0" x2="1" y2="1">
      <stop offset="0%" stop-color="#7c3aed"/>
      <stop offset="50%" stop-color="#06b6d4"/>
      <stop offset="100%" stop-color="#0891b2"/>
    </linearGradient>
  </defs>
  <rect x="{CARD_PADDING}" y="{CARD_PADDING}" width="{inner_width}" height="{CARD_HEIGHT}" rx="20" fill="url(#grad)"/>
  <rect x="36" y="36" width="{inner_width - 32}" height="{CARD_HEIGHT - 32}" rx="14" fill="#0a0f1f" opacity="0.7"/>
  <circle cx="85" cy="100" r="40" fill="#111827" stroke="#334155" stroke-width="2"/>
  <text x="85" y="109" fill="white" font-size="26" text-anchor="middle" font-family="{FONT_FAMILY}" font-weight="600">{initial}</text>
  <text x="150" y="80" fill="#e2e8f0" font-size="22" font-family="{FONT_FAMILY}" font-weight="700">CodeChef · {user}</text>
  <text x="150" y="110" fill="#a5b4fc" font-size="16" font-family="{FONT_FAMILY}">Rating: <tspan fill="#7ef1b8" font-weight="700">{rating}</tspan>   ★ Highest: <tspan fill="#facc15" font-weight="700">{highest}</tspan></text>
  <text x="150" y="140" fill="#cbd5e1" font-size="14" font-family="{FONT_FAMILY}">Global Rank: <tspan fill="#bae6fd">{global_rank}</tspan>     Country Rank: <tspan fill="#bae6fd">{country_rank}</tspan></text>
  <g transform="translate({CARD_PADDING}, {HEATMAP_TOP})">{render_heatmap(layout)}</g>
  {render_legend(CARD_PADDING + GRID_MARGIN, legend_y)}
</svg>
"""
