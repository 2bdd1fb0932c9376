import main
from elements import elements_from_values


def test_index_renders(client):
    res = client.get("/")
    assert res.status_code == 200
    body = res.get_data(as_text=True)
    assert "Sorting Algorithm Visualizer" in body
    assert 'id="canvas-svg"' in body
    assert 'data-algo="insertion"' in body


def test_state(client):
    data = client.get("/api/state").get_json()
    assert data["state"] == "idle"
    assert data["algo_key"] == "bubble"
    assert data["frame_number"] == 0
    assert data["svg"].startswith("<svg")
    assert data["is_running"] is False


def test_start_runs_to_completion(client):
    res = client.post("/api/start")
    assert res.status_code == 200
    assert main.get_driver().wait(5)

    data = client.get("/api/state").get_json()
    assert data["state"] == "finished"
    assert data["stats"]["comparisons"] > 0
    assert 'class="bar sorted"' in data["svg"]


def test_busy_driver_rejects_changes(gate):
    release, blocking_sleep = gate
    driver = main.init_driver(
        elements=elements_from_values([5, 4, 3, 2, 1, 6, 7, 8, 9, 10]),
        sleep=blocking_sleep,
    )
    client = main.app.test_client()
    try:
        assert client.post("/api/start").status_code == 200
        res = client.post("/api/start")
        assert res.status_code == 409
        assert "error" in res.get_json()
        assert client.post("/api/config/algo", json={"algo_key": "quick"}).status_code == 409
        assert client.post("/api/config/size", json={"size": 20}).status_code == 409
        # speed may change mid-run
        assert client.post("/api/config/speed", json={"speed": 80}).status_code == 200
    finally:
        driver.stop()
        release.set()
        driver.wait(5)
    assert driver.state.value == "stopped"


def test_stop_when_idle(client):
    data = client.post("/api/stop").get_json()
    assert data["stopped"] is False
    assert data["state"] == "idle"


def test_select_algorithm(client):
    data = client.post("/api/config/algo", json={"algo_key": "quick"}).get_json()
    assert data["algo_key"] == "quick"
    assert "Quick Sort" in data["info"]
    assert main.get_driver().algo_key == "quick"

    res = client.post("/api/config/algo", json={"algo_key": "bogo"})
    assert res.status_code == 400
    assert "bogo" in res.get_json()["error"]


def test_speed(client):
    assert client.post("/api/config/speed", json={"speed": "fast"}).get_json()["speed"] == 90
    data = client.post("/api/config/speed", json={"speed": 100}).get_json()
    assert data == {"speed": 100, "delay_ms": 1}
    assert client.post("/api/config/speed", json={"speed": 250}).status_code == 400
    assert client.post("/api/config/speed", json={"speed": "warp"}).status_code == 400


def test_size(client):
    data = client.post("/api/config/size", json={"size": 20}).get_json()
    assert data["array_size"] == 20
    assert client.post("/api/config/size", json={"size": 5}).status_code == 400
    assert client.post("/api/config/size", json={}).status_code == 400


def test_reset(client):
    client.post("/api/start")
    main.get_driver().wait(5)
    data = client.post("/api/reset", json={"size": 12}).get_json()
    assert data["state"] == "idle"
    assert data["array_size"] == 12
    assert data["stats"]["comparisons"] == 0
    assert client.post("/api/reset", json={"size": 500}).status_code == 400


def test_compare(client):
    data = client.post("/api/compare", json={"left": "bubble", "right": "merge"}).get_json()
    assert data["left"]["algo_key"] == "bubble"
    assert data["right"]["sorted_ok"] is True
    assert "Bubble Sort vs Merge Sort" in data["comparison"]

    assert client.post("/api/compare", json={"left": "bogo", "right": "merge"}).status_code == 400


def test_index_has_theme_and_settings_toggles(client):
    body = client.get("/").get_data(as_text=True)
    assert 'id="btn-theme"' in body
    assert "body.light" in body
    assert 'id="btn-settings"' in body
    # settings panel starts collapsed but is still rendered
    assert '<div id="settings" class="hidden">' in body
    assert 'id="size-slider"' in body
