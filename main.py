"""
main.py — Sorting Algorithm Visualizer Flask App
==================================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/state              – current frame + stats (polled while running)
  POST /api/start              – start the selected algorithm
  POST /api/stop               – stop the running algorithm
  POST /api/reset              – stop + fresh random array (optional size)
  POST /api/config/algo        – select algorithm
  POST /api/config/speed       – set speed (1..100 or preset name)
  POST /api/config/size        – set array size (regenerates)
  POST /api/compare            – record two algorithms on the current array

State management:
  A single SortDriver lives in app.extensions (one visualization per
  process).  It owns the array, the statistics and the cancellation
  token; runs animate on the driver's worker thread and the browser
  polls /api/state for the latest frame.

Configuration (defaults below, overridable as SORTVIZ_<NAME> env vars):
  ALGORITHM, ARRAY_SIZE, SPEED, SEED, STOP_TIMEOUT
"""

import logging
from typing import Any, Dict

from flask import Flask, render_template_string, request, jsonify

from algorithms import get_algorithm, list_algorithms
from engine import SortDriver, SPEED_PRESETS, compare_algorithms
from ui import (
    render_canvas,
    playback_controls,
    algorithm_selector,
    settings_panel,
    stats_panel,
    algorithm_info_panel,
    legend_panel,
    comparison_panel,
    pseudocode_viewer,
)


logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config.from_mapping(
    ALGORITHM="bubble",
    ARRAY_SIZE=50,
    SPEED=50,
    SEED=None,
    STOP_TIMEOUT=1.0,   # seconds; a stop waits at most one pacing delay
)
app.config.from_prefixed_env("SORTVIZ")


# ---------------------------------------------------------------------------
# Driver Helpers
# ---------------------------------------------------------------------------
def init_driver(**overrides) -> SortDriver:
    """(Re)build the process-wide driver from app.config + overrides."""
    old = app.extensions.get("sort_driver")
    if old is not None:
        old.stop()
        old.wait()

    kwargs: Dict[str, Any] = {
        "algo_key":   app.config["ALGORITHM"],
        "array_size": app.config["ARRAY_SIZE"],
        "speed":      app.config["SPEED"],
        "seed":       app.config["SEED"],
    }
    kwargs.update(overrides)
    driver = SortDriver(**kwargs)
    app.extensions["sort_driver"] = driver
    return driver


def get_driver() -> SortDriver:
    driver = app.extensions.get("sort_driver")
    if driver is None:
        driver = init_driver()
    return driver


def error(message: str, status: int = 400):
    return jsonify({"error": message}), status


def state_payload(driver: SortDriver) -> Dict[str, Any]:
    """Everything the page re-renders on a poll tick."""
    snap = driver.current
    info = driver.algorithm
    payload = driver.to_dict()
    payload.update({
        "svg":        render_canvas(snap),
        "stats_html": stats_panel(driver.stats),
        "playback":   playback_controls(driver.state),
        "pseudocode": pseudocode_viewer(info.pseudocode, snap.pseudocode_line, info.label),
        "is_running": driver.is_running,
    })
    return payload


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    driver = get_driver()
    info = driver.algorithm
    running = driver.is_running

    html = render_template_string(INDEX_TEMPLATE,
        svg=render_canvas(driver.current),
        playback=playback_controls(driver.state),
        algo_selector=algorithm_selector(list_algorithms(), driver.algo_key, disabled=running),
        settings=settings_panel(driver.array_size, driver.speed, disabled=running),
        stats=stats_panel(driver.stats),
        info=algorithm_info_panel(info),
        legend=legend_panel(),
        comparison=comparison_panel(None, list_algorithms()),
        pseudocode=pseudocode_viewer(info.pseudocode, driver.current.pseudocode_line, info.label),
        running="true" if running else "false",
    )
    return html


@app.route("/api/state")
def api_state():
    return jsonify(state_payload(get_driver()))


# ---------------------------------------------------------------------------
# API: Run Control
# ---------------------------------------------------------------------------
@app.route("/api/start", methods=["POST"])
def api_start():
    driver = get_driver()
    try:
        driver.start()
    except RuntimeError as e:
        return error(str(e), 409)
    return jsonify(state_payload(driver))


@app.route("/api/stop", methods=["POST"])
def api_stop():
    driver = get_driver()
    stopped = driver.stop()
    if stopped and not driver.wait(app.config["STOP_TIMEOUT"]):
        logger.warning("Run did not stop within %.1fs", app.config["STOP_TIMEOUT"])
    payload = state_payload(driver)
    payload["stopped"] = stopped
    return jsonify(payload)


@app.route("/api/reset", methods=["POST"])
def api_reset():
    driver = get_driver()
    data = request.get_json(silent=True) or {}
    size = data.get("size")
    try:
        driver.reset(int(size) if size is not None else None)
    except (TypeError, ValueError) as e:
        return error(str(e))
    return jsonify(state_payload(driver))


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    driver = get_driver()
    algo_key = (request.get_json(silent=True) or {}).get("algo_key", "bubble")
    try:
        info = driver.select_algorithm(algo_key)
    except ValueError as e:
        return error(str(e))
    except RuntimeError as e:
        return error(str(e), 409)

    return jsonify({
        "algo_key":      info.key,
        "algo_selector": algorithm_selector(list_algorithms(), info.key),
        "info":          algorithm_info_panel(info),
        "pseudocode":    pseudocode_viewer(info.pseudocode, -1, info.label),
    })


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    driver = get_driver()
    speed = (request.get_json(silent=True) or {}).get("speed", "medium")
    try:
        if isinstance(speed, str) and speed in SPEED_PRESETS:
            driver.set_speed_preset(speed)
        else:
            driver.set_speed(int(speed))
    except (TypeError, ValueError) as e:
        return error(str(e))
    return jsonify({"speed": driver.speed, "delay_ms": round(driver.delay * 1000)})


@app.route("/api/config/size", methods=["POST"])
def api_config_size():
    driver = get_driver()
    size = (request.get_json(silent=True) or {}).get("size")
    try:
        driver.resize(int(size))
    except (TypeError, ValueError) as e:
        return error(str(e))
    except RuntimeError as e:
        return error(str(e), 409)
    return jsonify(state_payload(driver))


# ---------------------------------------------------------------------------
# API: Comparison Mode
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    driver = get_driver()
    data = request.get_json(silent=True) or {}
    left  = data.get("left", "bubble")
    right = data.get("right", "quick")
    for key in (left, right):
        if get_algorithm(key) is None:
            return error(f"Unknown algorithm: {key}")

    result = compare_algorithms(left, right, driver.current.elements())
    return jsonify({
        "comparison": comparison_panel(result, list_algorithms()),
        "left":       result.left.__dict__,
        "right":      result.right.__dict__,
        "winner_comparisons": result.winner_comparisons,
        "winner_swaps":       result.winner_swaps,
        "winner_frames":      result.winner_frames,
    })


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting Algorithm Visualizer</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --text-muted: #484f58;
      --accent-cyan: #0ea5e9;
      --accent-teal: #06b6d4;
      --accent-emerald: #10b981;
      --accent-rose: #f43f5e;
      --glow-cyan: rgba(14, 165, 233, 0.4);
    }

    body.light {
      --bg-dark: #f6f8fa;
      --bg-darker: #ffffff;
      --bg-panel: #f0f3f6;
      --border: #d0d7de;
      --text-primary: #1f2328;
      --text-secondary: #59636e;
      --text-muted: #818b98;
    }

    #settings.hidden { display: none; }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    /* Sidebar */
    #sidebar {
      width: 340px;
      background: linear-gradient(180deg, var(--bg-dark) 0%, var(--bg-darker) 100%);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    /* Main area */
    #main { flex: 1; display: flex; flex-direction: column; }

    #canvas-container {
      flex: 1;
      display: flex;
      align-items: center;
      justify-content: center;
      border-bottom: 1px solid var(--border);
    }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr 1fr;
      gap: 20px;
      padding: 20px;
      background: var(--bg-dark);
      max-height: 360px;
      overflow: auto;
    }

    .code-block {
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 12px;
      font-family: 'JetBrains Mono', 'Courier New', monospace;
      font-size: 12px;
      line-height: 1.6;
      white-space: pre;
    }

    .code-line { padding: 2px 10px; border-radius: 6px; }
    .code-line.highlight {
      background: linear-gradient(90deg, rgba(6, 182, 212, 0.15) 0%, transparent 100%);
      border-left: 3px solid var(--accent-cyan);
    }

    /* Panels */
    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }

    .panel h3 {
      font-size: 13px;
      font-weight: 700;
      margin-bottom: 14px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
    }

    /* Buttons */
    .button-row, .algo-grid, .compare-picker { display: flex; flex-wrap: wrap; gap: 8px; margin-bottom: 12px; }

    button {
      background: linear-gradient(135deg, var(--accent-cyan), var(--accent-teal));
      color: #fff;
      border: none;
      padding: 10px 16px;
      border-radius: 8px;
      cursor: pointer;
      font-size: 13px;
      font-weight: 600;
      font-family: 'DM Sans', sans-serif;
    }
    button:disabled { opacity: 0.5; cursor: not-allowed; }

    .btn-primary   { background: linear-gradient(135deg, var(--accent-emerald), #059669); }
    .btn-danger    { background: linear-gradient(135deg, var(--accent-rose), #be123c); }
    .btn-secondary { background: var(--bg-dark); border: 1px solid var(--border); }
    .algo-btn      { background: var(--bg-dark); border: 1px solid var(--border); }
    .algo-btn.active { background: linear-gradient(135deg, var(--accent-cyan), var(--accent-teal)); }

    /* Inputs */
    select, input[type="range"] {
      width: 100%;
      margin: 6px 0;
      background: var(--bg-darker);
      color: var(--text-primary);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 6px;
    }

    label {
      display: block;
      margin: 10px 0 4px;
      font-size: 12px;
      color: var(--text-secondary);
      text-transform: uppercase;
    }

    .step-info {
      font-size: 13px;
      color: var(--text-secondary);
      font-family: 'JetBrains Mono', monospace;
      padding: 8px 12px;
      background: var(--bg-darker);
      border-radius: 6px;
      border-left: 3px solid var(--accent-cyan);
    }

    .finished-badge {
      background: linear-gradient(135deg, var(--accent-emerald), #059669);
      color: #fff;
      padding: 2px 8px;
      border-radius: 6px;
      font-size: 11px;
      font-weight: 700;
    }

    table { width: 100%; font-size: 13px; }
    table td { padding: 6px 4px; }
    table td:first-child { color: var(--text-secondary); }
    table td:last-child { text-align: right; color: var(--accent-cyan); font-family: 'JetBrains Mono', monospace; }

    .legend { display: grid; grid-template-columns: 1fr 1fr; gap: 6px; font-size: 13px; }
    .swatch { display: inline-block; width: 12px; height: 12px; border-radius: 3px; margin-right: 8px; }
    .yes { color: var(--accent-emerald); }
    .no  { color: var(--accent-rose); }

    .hint, .placeholder {
      font-size: 11px;
      color: var(--text-muted);
      margin-top: 8px;
      font-style: italic;
    }
  </style>
</head>
<body>
  <div id="sidebar">
    <div class="button-row">
      <button id="btn-theme" class="btn-secondary" title="Toggle dark / light theme">☀ Light</button>
      <button id="btn-settings" class="btn-secondary" aria-expanded="false">⚙ Settings</button>
    </div>
    <div id="algo-selector">{{ algo_selector|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
    <div id="settings" class="hidden">{{ settings|safe }}</div>
    <div id="stats">{{ stats|safe }}</div>
    <div id="legend">{{ legend|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
    </div>

    <div id="bottom-panel">
      <div id="info">{{ info|safe }}</div>
      <div id="pseudocode">{{ pseudocode|safe }}</div>
      <div id="comparison">{{ comparison|safe }}</div>
    </div>
  </div>

  <script>
    let running = {{ running }};
    let pollTimer = null;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function applyState(data) {
      if (data.error) { console.warn(data.error); return; }
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      if (data.stats_html) document.getElementById('stats').innerHTML = data.stats_html;
      if (data.playback) document.getElementById('playback').innerHTML = data.playback;
      if (data.pseudocode) document.getElementById('pseudocode').innerHTML = data.pseudocode;
      running = data.is_running;
      document.querySelectorAll('.algo-btn').forEach(b => b.disabled = running);
      const size = document.getElementById('size-slider');
      if (size) size.disabled = running;
      if (running && !pollTimer) {
        pollTimer = setInterval(poll, 50);
      } else if (!running && pollTimer) {
        clearInterval(pollTimer);
        pollTimer = null;
      }
    }

    async function poll() {
      const res = await fetch('/api/state');
      applyState(await res.json());
    }

    // Theme (remembered per browser) + settings visibility
    function applyTheme(theme) {
      document.body.classList.toggle('light', theme === 'light');
      document.getElementById('btn-theme').textContent = theme === 'light' ? '☾ Dark' : '☀ Light';
    }
    applyTheme(localStorage.getItem('sortviz-theme') || 'dark');

    document.getElementById('btn-theme').addEventListener('click', () => {
      const theme = document.body.classList.contains('light') ? 'dark' : 'light';
      localStorage.setItem('sortviz-theme', theme);
      applyTheme(theme);
    });

    document.getElementById('btn-settings').addEventListener('click', (e) => {
      const hidden = document.getElementById('settings').classList.toggle('hidden');
      e.currentTarget.setAttribute('aria-expanded', hidden ? 'false' : 'true');
    });

    // Playback controls (panel is re-rendered, so delegate)
    document.addEventListener('click', async (e) => {
      const target = e.target.closest('button');
      if (!target) return;

      if (target.id === 'btn-toggle') {
        applyState(await post(running ? '/api/stop' : '/api/start'));
      } else if (target.id === 'btn-reset') {
        applyState(await post('/api/reset', {size: +document.getElementById('size-slider').value}));
      } else if (target.classList.contains('algo-btn')) {
        const data = await post('/api/config/algo', {algo_key: target.dataset.algo});
        if (data.error) return;
        document.getElementById('algo-selector').innerHTML = data.algo_selector;
        document.getElementById('info').innerHTML = data.info;
        document.getElementById('pseudocode').innerHTML = data.pseudocode;
      } else if (target.id === 'btn-compare') {
        const data = await post('/api/compare', {
          left: document.getElementById('compare-left').value,
          right: document.getElementById('compare-right').value,
        });
        if (data.comparison) document.getElementById('comparison').innerHTML = data.comparison;
      }
    });

    // Sliders update labels, then the server
    document.addEventListener('input', (e) => {
      if (e.target.id === 'speed-slider') {
        document.getElementById('speed-val').textContent = e.target.value + '%';
      } else if (e.target.id === 'size-slider') {
        document.getElementById('size-val').textContent = e.target.value;
      }
    });

    document.addEventListener('change', async (e) => {
      if (e.target.id === 'speed-slider') {
        await post('/api/config/speed', {speed: +e.target.value});
      } else if (e.target.id === 'size-slider') {
        applyState(await post('/api/config/size', {size: +e.target.value}));
      }
    });

    if (running) pollTimer = setInterval(poll, 50);
  </script>
</body>
</html>
"""


def _configure_logging() -> None:
    """Configure application logging once at start-up."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    _configure_logging()
    print("=" * 60)
    print("  Sorting Algorithm Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(threaded=True)
