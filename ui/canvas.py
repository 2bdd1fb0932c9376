"""
canvas.py — SVG Bar Renderer
==============================
Pure rendering function: Snapshot → SVG string.

The renderer consumes:
  • snapshot   – values + visual states of one frame
  • config     – visual config (canvas size, colours, spacing, …)

And produces an SVG string ready to inject into the DOM.

Design decisions:
  - Stateless: the frame and the config come in, a string goes out,
    and neither argument is touched.
  - State-based colouring is a simple dict lookup: Visual → hex colour.
  - Bar height is proportional to value / max(value), so the tallest bar
    always fills the plot area.
"""

from typing import Dict, Optional

from elements import Visual
from algorithms import Snapshot


# ---------------------------------------------------------------------------
# Visual Config — colour palette, dimensions
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:   int = 900
    height:  int = 420
    padding: int = 8
    bg:      str = "#0d1117"

    # bar colours (state → fill)
    bar_colors: Dict[str, str] = {
        Visual.DEFAULT.value:   "#60a5fa",   # blue
        Visual.COMPARING.value: "#facc15",   # yellow
        Visual.SWAPPING.value:  "#f87171",   # red
        Visual.SORTED.value:    "#4ade80",   # green
        Visual.PIVOT.value:     "#c084fc",   # purple
    }

    # bars
    bar_gap:        float = 1.0
    bar_min_width:  float = 1.0
    bar_max_width:  float = 20.0
    bar_radius:     float = 1.5

    # labels (only drawn when bars are wide enough to hold them)
    label_min_width: float = 16.0
    label_color:     str   = "#e6edf3"
    label_size:      int   = 10


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(
    snapshot: Optional[Snapshot],
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string.

    Args:
        snapshot : Frame to draw (None or empty → blank canvas).
        config   : Visual config.
    """
    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    if snapshot is not None and len(snapshot):
        svg_parts.append(_render_bars(snapshot, config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


def bar_color(state: Visual, config: CanvasConfig = CONFIG) -> str:
    return config.bar_colors.get(state.value, config.bar_colors[Visual.DEFAULT.value])


# ---------------------------------------------------------------------------
# Bars
# ---------------------------------------------------------------------------
def _render_bars(snapshot: Snapshot, config: CanvasConfig) -> str:
    n = len(snapshot)
    plot_w = config.width - 2 * config.padding
    plot_h = config.height - 2 * config.padding

    slot = plot_w / n
    bar_w = max(config.bar_min_width, min(slot - config.bar_gap, config.bar_max_width))
    # each bar sits centred in its slot, which also centres capped bars as a group
    offset = config.padding + (slot - bar_w) / 2

    max_value = max(snapshot.values)
    if max_value <= 0:
        max_value = 1

    parts = ['<g class="bars">']
    for idx, (value, state, uid) in enumerate(zip(snapshot.values, snapshot.states, snapshot.uids)):
        h = max(1.0, plot_h * value / max_value)
        x = offset + idx * slot
        y = config.padding + plot_h - h
        parts.append(
            f'  <rect class="bar {state.value}" data-index="{idx}" data-uid="{uid}" '
            f'x="{x:.2f}" y="{y:.2f}" width="{bar_w:.2f}" height="{h:.2f}" '
            f'rx="{config.bar_radius}" fill="{bar_color(state, config)}">'
            f'<title>Value: {value}, State: {state.value}</title></rect>'
        )
        if bar_w >= config.label_min_width:
            parts.append(
                f'  <text x="{x + bar_w / 2:.2f}" y="{y - 3:.2f}" text-anchor="middle" '
                f'font-size="{config.label_size}" font-family="\'JetBrains Mono\', monospace" '
                f'fill="{config.label_color}">{value}</text>'
            )
    parts.append('</g>')
    return "\n".join(parts)
