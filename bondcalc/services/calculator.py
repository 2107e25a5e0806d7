from __future__ import annotations

import math
from dataclasses import asdict, dataclass

from ..domain.compound import calculate
from ..domain.models import BondInput, CalculationResult
from ..settings import Settings
from .display import YieldDisplay, build_display
from .metrics import get_metrics


@dataclass(frozen=True)
class Calculation:
    bond: BondInput
    result: CalculationResult | None
    display: YieldDisplay | None

    def to_payload(self) -> dict:
        result = None
        if self.result is not None:
            # strict JSON has no inf/nan
            result = {
                key: value if not isinstance(value, float) or math.isfinite(value) else None
                for key, value in self.result.model_dump().items()
            }
        return {
            "input": self.bond.model_dump(by_alias=True),
            "result": result,
            "display": asdict(self.display) if self.display is not None else None,
        }


class CalculatorService:
    def __init__(self, settings: Settings):
        self.settings = settings

    def evaluate(self, bond: BondInput, *, year: int | None = None) -> Calculation:
        result = calculate(bond, year=year)
        get_metrics().record_calculation(result)
        display = build_display(bond, result, currency=self.settings.currency_symbol)
        return Calculation(bond=bond, result=result, display=display)
