from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ..dependencies import get_bond_input, get_calculator
from ..domain.models import BondInput
from ..services.calculator import CalculatorService
from ..services.display import PLACEHOLDER

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
view_router = APIRouter()


@view_router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    bond: BondInput = Depends(get_bond_input),
    calculator: CalculatorService = Depends(get_calculator),
):
    calculation = calculator.evaluate(bond)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "bond": bond,
            "display": calculation.display,
            "currency": calculator.settings.currency_symbol,
            "placeholder": PLACEHOLDER,
        },
    )


@view_router.get("/partials/result", response_class=HTMLResponse)
async def result_partial(
    request: Request,
    bond: BondInput = Depends(get_bond_input),
    calculator: CalculatorService = Depends(get_calculator),
):
    calculation = calculator.evaluate(bond)
    return templates.TemplateResponse(
        request,
        "_result.html",
        {"display": calculation.display, "placeholder": PLACEHOLDER},
    )
