from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, localcontext

from ..domain.compound import parse_decimal
from ..domain.models import BondInput, CalculationResult

PLACEHOLDER = "Enter bond information to see calculations"


def _non_finite(value: float) -> str | None:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return None


def fmt_fixed(value: float, digits: int = 2) -> str:
    """Fixed-point text with ties rounded away from zero."""

    special = _non_finite(value)
    if special is not None:
        return special
    # past 1e21 the original switches to exponent text, same as fmt_number
    if abs(value) >= 1e21:
        return fmt_number(value)
    if value == 0:
        value = 0.0
    with localcontext() as ctx:
        # wide enough for any finite double at the requested scale
        ctx.prec = 330 + digits
        quantum = Decimal(1).scaleb(-digits)
        return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def fmt_number(value: float) -> str:
    """Shortest text for a float; integral values drop the ".0"."""

    special = _non_finite(value)
    if special is not None:
        return special
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    power = int(exponent)
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


@dataclass(frozen=True)
class YieldDisplay:
    yield_percent: str
    years_remaining: str
    total_interest_payments: str
    total_return: str
    profit: str
    formula: list[str] = field(default_factory=list)


def annual_interest(result: CalculationResult) -> float:
    return result.total_interest_payments / result.years_remaining


def profit(bond: BondInput, result: CalculationResult) -> float:
    current = parse_decimal(bond.current_value)
    if current is None:
        return math.nan
    return result.total_return - current


def formula_lines(bond: BondInput, result: CalculationResult, currency: str = "€") -> list[str]:
    per_year = annual_interest(result)
    years = result.years_remaining
    return [
        (
            f"Annual Interest: {currency}{bond.nominal_value} × {bond.yearly_interest_rate}% "
            f"= {currency}{fmt_number(per_year)}"
        ),
        (
            f"Total Interest: {currency}{fmt_fixed(per_year)} × {years} years "
            f"= {currency}{fmt_fixed(result.total_interest_payments)}"
        ),
        (
            f"Total Return: {currency}{fmt_fixed(result.total_interest_payments)} "
            f"+ {currency}{bond.nominal_value} = {currency}{fmt_fixed(result.total_return)}"
        ),
        (
            f"Compound Rate: ({currency}{fmt_fixed(result.total_return)} ÷ {currency}{bond.current_value})"
            f"^(1/{years}) = {fmt_fixed(result.compound_rate, 4)}"
        ),
    ]


def build_display(
    bond: BondInput, result: CalculationResult | None, currency: str = "€"
) -> YieldDisplay | None:
    if result is None:
        return None
    return YieldDisplay(
        yield_percent=f"{fmt_fixed(result.annual_yield * 100)}%",
        years_remaining=f"{result.years_remaining} years",
        total_interest_payments=f"{currency}{fmt_fixed(result.total_interest_payments)}",
        total_return=f"{currency}{fmt_fixed(result.total_return)}",
        profit=f"{currency}{fmt_fixed(profit(bond, result))}",
        formula=formula_lines(bond, result, currency),
    )
