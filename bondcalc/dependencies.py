from fastapi import Query

from .domain.models import BondInput
from .services.calculator import CalculatorService
from .settings import get_settings


def get_bond_input(
    nominal_value: str = Query("", alias="nominalValue"),
    current_value: str = Query("", alias="currentValue"),
    expiration_year: str = Query("", alias="expirationYear"),
    yearly_interest_rate: str = Query("", alias="yearlyInterestRate"),
) -> BondInput:
    return BondInput(
        nominal_value=nominal_value,
        current_value=current_value,
        expiration_year=expiration_year,
        yearly_interest_rate=yearly_interest_rate,
    )


def get_calculator() -> CalculatorService:
    return CalculatorService(get_settings())
