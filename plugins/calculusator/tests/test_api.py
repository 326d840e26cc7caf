from app import create_app


def _client(**kwargs):
    app = create_app("TestingConfig", **kwargs)
    return app.test_client()


def test_evaluate_endpoint():
    client = _client()
    resp = client.post("/api/calculusator/evaluate", json={"expression": "2+3*4"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["success"] is True
    assert data["data"]["result"] == "14"
    assert data["data"]["type"] == "basic"
    assert data["data"]["input"] == "2+3*4"


def test_calculation_failure_is_still_a_successful_response():
    client = _client()
    resp = client.post("/api/calculusator/evaluate", json={"expression": "2+"})
    assert resp.status_code == 200
    payload = resp.get_json()["data"]
    assert payload["type"] == "error"
    assert payload["result"].startswith("Error: ")


def test_invalid_request_returns_error():
    client = _client()
    resp = client.post("/api/calculusator/evaluate", json={})
    assert resp.status_code == 400
    data = resp.get_json()
    assert data["success"] is False
    assert data["error"]["code"] == "calculusator.invalid_request"


def test_unknown_fields_are_rejected():
    client = _client()
    resp = client.post(
        "/api/calculusator/evaluate",
        json={"expression": "1+1", "precision": 3},
    )
    assert resp.status_code == 400


def test_derivative_endpoint():
    client = _client()
    resp = client.post("/api/calculusator/derivative", json={"expression": "x^2"})
    assert resp.status_code == 200
    payload = resp.get_json()["data"]
    assert payload["input"] == "d/dx[x^2]"
    assert payload["result"] == "2*x"
    assert payload["type"] == "derivative"


def test_integral_endpoint_with_variable():
    client = _client()
    resp = client.post(
        "/api/calculusator/integral",
        json={"expression": "sin(t)", "variable": "t"},
    )
    assert resp.status_code == 200
    payload = resp.get_json()["data"]
    assert payload["input"] == "∫sin(t) dt"
    assert payload["result"] == "-cos(t) + C"
    assert payload["type"] == "integral"


def test_calculate_endpoint_modes():
    client = _client()
    resp = client.post(
        "/api/calculusator/calculate",
        json={"expression": "3*x", "mode": "integral"},
    )
    assert resp.get_json()["data"]["result"] == "x²/2*3 + C"

    resp = client.post(
        "/api/calculusator/calculate",
        json={"expression": "x", "mode": "limit"},
    )
    assert resp.status_code == 400


def test_template_endpoints():
    client = _client()
    resp = client.get("/api/calculusator/templates/arcsin")
    assert resp.get_json()["data"] == {"name": "arcsin", "template": "asin("}

    resp = client.get("/api/calculusator/templates/unknown")
    assert resp.get_json()["data"]["template"] == "unknown"

    resp = client.get("/api/calculusator/templates")
    templates = resp.get_json()["data"]["templates"]
    assert templates["nCr"] == "combinations("


def test_history_round_trip():
    client = _client()
    client.post("/api/calculusator/evaluate", json={"expression": "1+1"})
    client.post("/api/calculusator/integral", json={"expression": "x"})

    entries = client.get("/api/calculusator/history").get_json()["data"]["entries"]
    assert [entry["type"] for entry in entries] == ["integral", "basic"]

    resp = client.delete("/api/calculusator/history")
    assert resp.get_json()["data"] == {"cleared": True}
    entries = client.get("/api/calculusator/history").get_json()["data"]["entries"]
    assert entries == []


def test_each_app_owns_its_history():
    first = _client()
    second = _client()
    first.post("/api/calculusator/evaluate", json={"expression": "1+1"})
    assert second.get("/api/calculusator/history").get_json()["data"]["entries"] == []


def test_history_limit_from_config(tmp_path):
    config_path = tmp_path / "config.yml"
    config_path.write_text("plugins:\n  calculusator:\n    history_limit: 2\n", encoding="utf-8")
    client = _client(config_path=config_path)
    for expression in ("1", "2", "3"):
        client.post("/api/calculusator/evaluate", json={"expression": expression})
    entries = client.get("/api/calculusator/history").get_json()["data"]["entries"]
    assert [entry["input"] for entry in entries] == ["3", "2"]
