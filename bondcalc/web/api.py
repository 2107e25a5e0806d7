from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from ..dependencies import get_bond_input, get_calculator
from ..domain.compound import parse_integer
from ..domain.models import BondInput
from ..services.calculator import CalculatorService

api_router = APIRouter()
logger = logging.getLogger(__name__)


@api_router.get("/calculate")
async def calculate(
    year: str = "",
    bond: BondInput = Depends(get_bond_input),
    calculator: CalculatorService = Depends(get_calculator),
):
    # an unreadable year override falls back to the clock
    calculation = calculator.evaluate(bond, year=parse_integer(year))
    logger.debug("calculate input=%s has_result=%s", bond.model_dump(), calculation.result is not None)
    return calculation.to_payload()
