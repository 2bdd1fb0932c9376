"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls       – start/stop + reset, with run state badge
  • algorithm_selector      – one button per registered algorithm
  • settings_panel          – array size + speed sliders
  • stats_panel             – comparisons, swaps, elapsed time
  • algorithm_info_panel    – complexity + stability card
  • legend_panel            – colour legend for the bar states
  • comparison_panel        – side-by-side metrics of two recorded runs
  • pseudocode_viewer       – with live line highlighting

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from html import escape
from typing import Optional, List

from elements import Visual
from algorithms import AlgoInfo
from engine import (
    ComparisonResult,
    DriverState,
    RunStatistics,
    SPEED_MIN,
    SPEED_MAX,
    MIN_ARRAY_SIZE,
    MAX_ARRAY_SIZE,
)
from ui.canvas import CanvasConfig, CONFIG


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(state: DriverState = DriverState.IDLE) -> str:
    running = state == DriverState.RUNNING
    play_icon = "⏸" if running else "▶"
    play_label = "Stop" if running else "Start"
    play_class = "btn-danger" if running else "btn-primary"

    return f"""
    <div class="panel playback-controls">
      <h3>⏯ Playback</h3>
      <div class="button-row">
        <button id="btn-toggle" class="{play_class}" title="{play_label}">{play_icon} {play_label}</button>
        <button id="btn-reset" class="btn-secondary" title="New random array" {'disabled' if running else ''}>⟲ Reset</button>
      </div>
      <div class="step-info">
        Status: <span id="run-state" class="state-{state.value}">{state.value.upper()}</span>
        {' <span class="finished-badge">SORTED</span>' if state == DriverState.FINISHED else ''}
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(
    algorithms: List[AlgoInfo],
    selected_key: str = "bubble",
    disabled: bool = False,
) -> str:
    buttons = []
    for algo in algorithms:
        active = 'active' if algo.key == selected_key else ''
        buttons.append(
            f'<button class="algo-btn {active}" data-algo="{algo.key}" '
            f'{"disabled" if disabled else ""}>{algo.label}</button>'
        )

    return f"""
    <div class="panel algorithm-selector">
      <h3>🧠 Algorithm</h3>
      <div class="algo-grid">
        {''.join(buttons)}
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Settings (size + speed)
# ---------------------------------------------------------------------------
def settings_panel(array_size: int, speed: int, disabled: bool = False) -> str:
    return f"""
    <div class="panel settings-panel">
      <h3>⚙ Settings</h3>
      <label>Array Size: <span id="size-val">{array_size}</span>
        <input type="range" id="size-slider" min="{MIN_ARRAY_SIZE}" max="{MAX_ARRAY_SIZE}"
               value="{array_size}" {'disabled' if disabled else ''}>
      </label>
      <label>Speed: <span id="speed-val">{speed}%</span>
        <input type="range" id="speed-slider" min="{SPEED_MIN}" max="{SPEED_MAX}" value="{speed}">
      </label>
      <p class="hint">Each comparison / swap pauses {SPEED_MAX + 1 - speed} ms.</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Statistics Panel
# ---------------------------------------------------------------------------
def stats_panel(stats: Optional[RunStatistics] = None) -> str:
    comparisons = stats.comparisons if stats else 0
    swaps       = stats.swaps if stats else 0
    elapsed     = round(stats.time_elapsed_ms) if stats else 0

    return f"""
    <div class="panel stats-panel">
      <h3>📊 Statistics</h3>
      <table>
        <tr><td>Comparisons:</td><td><strong id="stat-comparisons">{comparisons}</strong></td></tr>
        <tr><td>Swaps:</td><td><strong id="stat-swaps">{swaps}</strong></td></tr>
        <tr><td>Time:</td><td><strong id="stat-time">{elapsed} ms</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Info
# ---------------------------------------------------------------------------
def algorithm_info_panel(info: Optional[AlgoInfo]) -> str:
    if info is None:
        return """
        <div class="panel info-panel">
          <h3>⚡ Algorithm Info</h3>
          <p class="placeholder">Select an algorithm.</p>
        </div>
        """

    stable = '<span class="yes">✓ Yes</span>' if info.stable else '<span class="no">✗ No</span>'
    return f"""
    <div class="panel info-panel">
      <h3>⚡ {info.label}</h3>
      <table>
        <tr><td>Time Complexity:</td><td><strong>{info.complexity_time}</strong></td></tr>
        <tr><td>Space Complexity:</td><td><strong>{info.complexity_space}</strong></td></tr>
        <tr><td>Stable:</td><td><strong>{stable}</strong></td></tr>
      </table>
      <p class="hint">{escape(info.description)}</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Colour Legend
# ---------------------------------------------------------------------------
def legend_panel(config: CanvasConfig = CONFIG) -> str:
    items = []
    for state in Visual:
        color = config.bar_colors[state.value]
        items.append(
            f'<div class="legend-item"><span class="swatch" style="background: {color};"></span>'
            f'{state.value.capitalize()}</div>'
        )
    return f"""
    <div class="panel legend-panel">
      <h3>🎨 Colour Legend</h3>
      <div class="legend">{''.join(items)}</div>
    </div>
    """


# ---------------------------------------------------------------------------
# Comparison Panel (side-by-side)
# ---------------------------------------------------------------------------
def comparison_panel(
    comp: Optional[ComparisonResult] = None,
    algorithms: Optional[List[AlgoInfo]] = None,
) -> str:
    algorithms = algorithms or []
    left_opts  = ''.join(
        f'<option value="{a.key}" {"selected" if i == 0 else ""}>{a.label}</option>'
        for i, a in enumerate(algorithms)
    )
    right_opts = ''.join(
        f'<option value="{a.key}" {"selected" if i == 1 else ""}>{a.label}</option>'
        for i, a in enumerate(algorithms)
    )
    picker = f"""
      <div class="compare-picker">
        <select id="compare-left">{left_opts}</select>
        <select id="compare-right">{right_opts}</select>
        <button id="btn-compare" class="btn-secondary">Compare on this array</button>
      </div>
    """

    if not comp:
        return f"""
        <div class="panel comparison-panel">
          <h3>⚖️ Comparison Mode</h3>
          <p class="placeholder">Run two algorithms on the same array to compare.</p>
          {picker}
        </div>
        """

    left = comp.left
    right = comp.right

    def winner_badge(winner_label):
        if winner_label == "tie":
            return "🟰 Tie"
        return f"👑 {winner_label}"

    return f"""
    <div class="panel comparison-panel">
      <h3>⚖️ Comparison: {left.algo_label} vs {right.algo_label}</h3>
      <table class="comparison-table">
        <thead>
          <tr>
            <th>Metric</th>
            <th>{left.algo_label}</th>
            <th>{right.algo_label}</th>
            <th>Winner</th>
          </tr>
        </thead>
        <tbody>
          <tr>
            <td>Comparisons</td>
            <td>{left.comparisons}</td>
            <td>{right.comparisons}</td>
            <td>{winner_badge(comp.winner_comparisons)}</td>
          </tr>
          <tr>
            <td>Swaps</td>
            <td>{left.swaps}</td>
            <td>{right.swaps}</td>
            <td>{winner_badge(comp.winner_swaps)}</td>
          </tr>
          <tr>
            <td>Frames</td>
            <td>{left.total_frames}</td>
            <td>{right.total_frames}</td>
            <td>{winner_badge(comp.winner_frames)}</td>
          </tr>
          <tr>
            <td>Wall Time</td>
            <td>{left.wall_time_ms:.2f} ms</td>
            <td>{right.wall_time_ms:.2f} ms</td>
            <td>—</td>
          </tr>
        </tbody>
      </table>
      {picker}
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(
    pseudocode_lines: List[str],
    current_line: int = -1,
    algo_label: str = "",
) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div style="color: #7d8590; padding: 20px; text-align: center;">
            Select an algorithm to view pseudocode
          </div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    return f"""
    <div class="code-block" data-algo="{escape(algo_label)}">
      {''.join(lines_html)}
    </div>
    """
