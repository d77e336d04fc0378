from __future__ import annotations

from math import isclose

from flask.testing import FlaskClient


def investment_payload() -> dict:
    return {
        "initialAmount": 5000,
        "annualContribution": 500,
        "expectedReturn": 0.08,
        "duration": 10,
    }


def test_ping_returns_pong(client: FlaskClient):
    response = client.get("/api/ping")

    assert response.status_code == 200
    assert response.json == {"message": "pong"}


def test_projection_endpoint_returns_yearly_rows(client: FlaskClient):
    resp = client.post("/api/calc/investment", json=investment_payload())

    assert resp.status_code == 200
    rows = resp.get_json()["results"]
    assert len(rows) == 10
    first = rows[0]
    assert first["year"] == 1
    assert first["label"] == "Year: 1"
    assert isclose(first["totalAmount"], 5900.0)
    assert isclose(first["totalContributions"], 500.0)
    assert isclose(first["totalInterestEarned"], 400.0, abs_tol=1e-9)
    assert rows[-1]["year"] == 10


def test_calculator_failure_returns_400(client: FlaskClient):
    payload = investment_payload()
    payload["initialAmount"] = -1

    resp = client.post("/api/calc/investment", json=payload)

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Initial investment amount must be at least zero."}


def test_missing_field_returns_422(client: FlaskClient):
    resp = client.post("/api/calc/investment", json={"initialAmount": 5000})

    assert resp.status_code == 422
    body = resp.get_json()
    missing = {tuple(error["loc"]) for error in body["detail"] if error["type"] == "missing"}
    assert ("duration",) in missing


def test_non_numeric_value_returns_422(client: FlaskClient):
    payload = investment_payload()
    payload["expectedReturn"] = "eight percent"

    resp = client.post("/api/calc/investment", json=payload)

    assert resp.status_code == 422
    assert "detail" in resp.get_json()


def test_unknown_field_returns_422(client: FlaskClient):
    payload = investment_payload()
    payload["compounding"] = "monthly"

    resp = client.post("/api/calc/investment", json=payload)

    assert resp.status_code == 422


def test_cors_header_for_frontend_origin(client: FlaskClient):
    resp = client.get("/api/ping", headers={"Origin": "http://localhost:5173"})

    assert resp.headers.get("Access-Control-Allow-Origin") == "http://localhost:5173"
