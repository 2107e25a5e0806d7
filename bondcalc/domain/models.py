from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class BondInput(BaseModel):
    """Raw form state. Values are kept exactly as typed and parsed only on calculation."""

    model_config = ConfigDict(populate_by_name=True)

    nominal_value: str = Field("", alias="nominalValue")
    current_value: str = Field("", alias="currentValue")
    expiration_year: str = Field("", alias="expirationYear")
    yearly_interest_rate: str = Field("", alias="yearlyInterestRate")


class CalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    compound_rate: float
    total_interest_payments: float
    total_return: float
    years_remaining: int

    @property
    def annual_yield(self) -> float:
        return self.compound_rate - 1
