from __future__ import annotations

import math
from datetime import datetime, timezone

from ..domain.models import CalculationResult


class Metrics:
    def __init__(self) -> None:
        self.calculations_total = 0
        self.results_total = 0
        self.absent_results_total = 0
        self.non_finite_results_total = 0
        self.last_calculation_ts: datetime | None = None

    def record_calculation(self, result: CalculationResult | None, *, ts: datetime | None = None) -> None:
        self.calculations_total += 1
        self.last_calculation_ts = ts or datetime.now(timezone.utc)
        if result is None:
            self.absent_results_total += 1
            return
        self.results_total += 1
        if not math.isfinite(result.compound_rate):
            self.non_finite_results_total += 1

    def render(self) -> str:
        lines = [
            f"calculations_total {self.calculations_total}",
            f"results_total {self.results_total}",
            f"absent_results_total {self.absent_results_total}",
            f"non_finite_results_total {self.non_finite_results_total}",
        ]
        return "\n".join(lines) + "\n"


_METRICS = Metrics()


def get_metrics() -> Metrics:
    return _METRICS
