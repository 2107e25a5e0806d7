from fastapi.testclient import TestClient

from bondcalc.main import app
from bondcalc.services.metrics import Metrics


def test_health_ok(frozen_year):
    with TestClient(app) as client:
        response = client.get("/health")

        assert response.status_code == 200
        payload = response.json()
        assert payload.get("status") == "ok"
        assert payload.get("current_year") == 2025


def test_metrics_endpoint_counts_calculations():
    with TestClient(app) as client:
        before = client.get("/metrics").text
        client.get("/api/calculate")
        after = client.get("/metrics").text

    def _value(text, name):
        for line in text.splitlines():
            key, _, value = line.partition(" ")
            if key == name:
                return int(value)
        raise AssertionError(name)

    assert _value(after, "calculations_total") == _value(before, "calculations_total") + 1
    assert _value(after, "absent_results_total") == _value(before, "absent_results_total") + 1


def test_metrics_record_non_finite():
    from bondcalc.domain.models import CalculationResult

    metrics = Metrics()
    metrics.record_calculation(None)
    metrics.record_calculation(
        CalculationResult(
            compound_rate=float("inf"),
            total_interest_payments=125.0,
            total_return=1125.0,
            years_remaining=5,
        )
    )

    rendered = metrics.render().splitlines()
    assert "calculations_total 2" in rendered
    assert "results_total 1" in rendered
    assert "absent_results_total 1" in rendered
    assert "non_finite_results_total 1" in rendered
