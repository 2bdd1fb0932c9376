"""
ui/
---
Presentation layer.

    from ui import render_canvas
    from ui import playback_controls, algorithm_selector, …
"""

from ui.canvas import render_canvas, bar_color, CanvasConfig

from ui.controls import (
    playback_controls,
    algorithm_selector,
    settings_panel,
    stats_panel,
    algorithm_info_panel,
    legend_panel,
    comparison_panel,
    pseudocode_viewer,
)

__all__ = [
    "render_canvas",
    "bar_color",
    "CanvasConfig",
    "playback_controls",
    "algorithm_selector",
    "settings_panel",
    "stats_panel",
    "algorithm_info_panel",
    "legend_panel",
    "comparison_panel",
    "pseudocode_viewer",
]
