from __future__ import annotations

import importlib
from typing import Callable, Optional, TypeVar

import typer

app = typer.Typer(help="Bond yield calculator")

T = TypeVar("T")


def _load_dependencies(command_name: str, loader: Callable[[], T]) -> T:
    try:
        return loader()
    except Exception as exc:
        typer.secho(
            f"Failed to import dependencies for '{command_name}'. Original error: {exc}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1) from exc


@app.command()
def run(
    host: Optional[str] = typer.Option(None, help="Bind address (defaults to HTTP_HOST)."),
    port: Optional[int] = typer.Option(None, help="Bind port (defaults to HTTP_PORT)."),
):
    """Start the web calculator."""
    uvicorn, get_settings = _load_dependencies(
        "run",
        lambda: (
            importlib.import_module("uvicorn"),
            importlib.import_module("bondcalc.settings").get_settings,
        ),
    )
    settings = get_settings()
    uvicorn.run(
        "bondcalc.main:app",
        host=host or settings.http_host,
        port=port or settings.http_port,
        reload=False,
    )


@app.command()
def calculate(
    nominal: str = typer.Option("", "--nominal", help="Nominal (face) value."),
    current: str = typer.Option("", "--current", help="Current market price."),
    expiration_year: str = typer.Option("", "--expiration-year", help="Calendar year of maturity."),
    rate: str = typer.Option("", "--rate", help="Yearly interest rate in percent, e.g. 2.5."),
    year: Optional[int] = typer.Option(None, "--year", help="Override the current calendar year."),
):
    """Print the equivalent compound rate and its formula breakdown."""
    from ..domain.models import BondInput
    from ..services.calculator import CalculatorService
    from ..services.display import PLACEHOLDER
    from ..settings import get_settings

    service = CalculatorService(get_settings())
    bond = BondInput(
        nominal_value=nominal,
        current_value=current,
        expiration_year=expiration_year,
        yearly_interest_rate=rate,
    )
    display = service.evaluate(bond, year=year).display
    if display is None:
        typer.echo(PLACEHOLDER)
        raise typer.Exit(code=1)

    typer.echo(f"Equivalent Compound Rate: {display.yield_percent}")
    typer.echo(f"Years Remaining: {display.years_remaining}")
    typer.echo(f"Total Interest Payments: {display.total_interest_payments}")
    typer.echo(f"Total Return: {display.total_return}")
    typer.echo(f"Profit: {display.profit}")
    typer.echo("")
    typer.echo("Calculation Formula:")
    for line in display.formula:
        typer.echo(f"  {line}")


def main():
    app()


if __name__ == "__main__":
    main()
