from __future__ import annotations

import logging
import math
import re
from datetime import datetime

from .models import BondInput, CalculationResult

logger = logging.getLogger(__name__)

_DECIMAL_PREFIX = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INTEGER_PREFIX = re.compile(r"[+-]?[0-9]+")
_MAX_INTEGER_DIGITS = 309


def current_year() -> int:
    return datetime.now().year


def parse_decimal(text: str) -> float | None:
    """Parse the leading decimal number of ``text``.

    Trailing garbage is ignored ("12abc" -> 12.0). Returns None when there is
    no numeric prefix or the value is not finite.
    """

    match = _DECIMAL_PREFIX.match(text.lstrip())
    if match is None:
        return None
    value = float(match.group())
    if not math.isfinite(value):
        return None
    return value


def parse_integer(text: str) -> int | None:
    """Parse the leading integer of ``text`` ("2030.7" -> 2030)."""

    match = _INTEGER_PREFIX.match(text.lstrip())
    if match is None:
        return None
    # a double tops out at 309 integer digits
    if len(match.group().lstrip("+-").lstrip("0")) > _MAX_INTEGER_DIGITS:
        return None
    value = int(match.group())
    try:
        float(value)
    except OverflowError:
        return None
    return value


def _divide(numerator: float, denominator: float) -> float:
    # IEEE-754 division: x/0 is a signed infinity, 0/0 is nan.
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _power(base: float, exponent: float) -> float:
    # Negative base with a fractional exponent has no real root.
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan


def calculate(bond: BondInput, *, year: int | None = None) -> CalculationResult | None:
    """Equivalent compound annual rate of holding the bond to maturity.

    Coupons accumulate without reinvestment; the total (coupons plus nominal)
    is then annualised against the current price. Any unparseable field or an
    expiration year not after ``year`` yields None.
    """

    nominal = parse_decimal(bond.nominal_value)
    current = parse_decimal(bond.current_value)
    exp_year = parse_integer(bond.expiration_year)
    rate_pct = parse_decimal(bond.yearly_interest_rate)

    if nominal is None or current is None or exp_year is None or rate_pct is None:
        logger.debug("No result: unparseable input %s", bond.model_dump())
        return None
    interest_rate = rate_pct / 100

    if year is None:
        year = current_year()
    years_remaining = exp_year - year

    if years_remaining <= 0:
        logger.debug("No result: expiration_year=%s is not after %s", exp_year, year)
        return None

    annual_interest = nominal * interest_rate
    total_interest_payments = annual_interest * years_remaining
    total_return = total_interest_payments + nominal
    compound_rate = _power(_divide(total_return, current), 1 / years_remaining)

    if not math.isfinite(compound_rate):
        logger.debug(
            "Non-finite compound rate %s (total_return=%s current=%s)",
            compound_rate,
            total_return,
            current,
        )

    return CalculationResult(
        compound_rate=compound_rate,
        total_interest_payments=total_interest_payments,
        total_return=total_return,
        years_remaining=years_remaining,
    )
