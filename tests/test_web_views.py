from fastapi.testclient import TestClient

from bondcalc.main import app

PARAMS = {
    "nominalValue": "1000",
    "currentValue": "900",
    "expirationYear": "2030",
    "yearlyInterestRate": "2.5",
}


def test_index_without_input_shows_placeholder():
    with TestClient(app) as client:
        response = client.get("/")

    assert response.status_code == 200
    assert "Bond Yield Calculator" in response.text
    assert "Enter bond information to see calculations" in response.text
    assert "Calculation Formula" not in response.text


def test_index_renders_result_and_keeps_raw_input(frozen_year):
    with TestClient(app) as client:
        response = client.get("/", params=PARAMS)

    assert response.status_code == 200
    assert "4.56%" in response.text
    assert "€1125.00" in response.text
    assert "Compound Rate: (€1125.00 ÷ €900)^(1/5) = 1.0456" in response.text
    assert 'name="nominalValue" placeholder="e.g., 1000" value="1000"' in response.text


def test_partial_recomputes_for_partial_input(frozen_year):
    with TestClient(app) as client:
        response = client.get("/partials/result", params={**PARAMS, "currentValue": "-"})

    assert response.status_code == 200
    assert "Enter bond information to see calculations" in response.text
    assert "<html" not in response.text


def test_partial_renders_breakdown(frozen_year):
    with TestClient(app) as client:
        response = client.get("/partials/result", params=PARAMS)

    assert response.status_code == 200
    assert "5 years" in response.text
    assert "Total Interest: €25.00 × 5 years = €125.00" in response.text


def test_expired_bond_shows_placeholder(frozen_year):
    with TestClient(app) as client:
        response = client.get("/partials/result", params={**PARAMS, "expirationYear": "2025"})

    assert "Enter bond information to see calculations" in response.text


def test_partial_with_oversized_year_shows_placeholder(frozen_year):
    with TestClient(app) as client:
        response = client.get("/partials/result", params={**PARAMS, "expirationYear": "9" * 5000})

    assert response.status_code == 200
    assert "Enter bond information to see calculations" in response.text
