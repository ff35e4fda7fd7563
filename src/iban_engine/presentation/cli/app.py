"""IBAN CLI application using Typer.

This module provides command-line utilities for validating, inspecting
and generating IBANs against the bundled (or configured) registry.
"""

import random
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from iban_config import get_settings
from iban_engine.domain.iban import Iban, IbanParseError, generate_iban
from iban_engine.domain.registry import CountryNotFoundError
from iban_engine.infrastructure.registry import get_default_registry

app = typer.Typer(
    name="iban",
    help="IBAN validation and BBAN decomposition CLI",
    no_args_is_help=True,
)
console = Console()


def _fail(message: str) -> NoReturn:
    console.print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(code=1)


@app.command("validate")
def validate(
    values: Annotated[list[str], typer.Argument(help="IBANs to validate")],
) -> None:
    """Validate one or more IBANs.

    Exits with status 1 when any of them is invalid.
    """
    registry = get_default_registry()
    failures = 0

    for value in values:
        try:
            iban = Iban(value, registry)
        except IbanParseError as e:
            failures += 1
            console.print(
                f"[red]✗[/red] {escape(repr(value))}: {escape(e.message)} "
                f"[dim]({e.code.value})[/dim]"
            )
            continue
        console.print(f"[green]✓[/green] {iban.spaced}")

    if failures:
        raise typer.Exit(code=1)


@app.command("show")
def show(
    value: Annotated[str, typer.Argument(help="IBAN to decompose")],
) -> None:
    """Show an IBAN's structure and BBAN fields."""
    try:
        iban = Iban(value, get_default_registry())
    except IbanParseError as e:
        _fail(f"{e.message} ({e.code.value})")

    bban = iban.bban_view
    info = iban.country_info

    table = Table(title=iban.spaced, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("Country", f"{info.country_code} {info.country_name}".strip())
    table.add_row("Check digits", iban.check_digits)
    table.add_row("BBAN", bban.value)
    table.add_row("BBAN format", info.bban_format)
    table.add_row("Bank identifier", bban.bank_identifier or "-")
    table.add_row("Branch identifier", bban.branch_identifier or "-")
    table.add_row("National checksum", bban.checksum or "-")

    console.print(table)


@app.command("generate")
def generate(
    country_code: Annotated[str, typer.Argument(help="Two-letter country code")],
    count: Annotated[
        int, typer.Option("--count", "-n", min=1, help="Number of IBANs")
    ] = 1,
    seed: Annotated[
        Optional[int],
        typer.Option("--seed", help="Random seed (defaults to GENERATOR_SEED)"),
    ] = None,
    spaced: Annotated[
        bool, typer.Option("--spaced", help="Print in groups of four")
    ] = False,
) -> None:
    """Generate random, syntactically valid IBANs for test data."""
    if seed is None:
        seed = get_settings().generator_seed
    rng = random.Random(seed)
    registry = get_default_registry()

    for _ in range(count):
        try:
            iban = generate_iban(country_code, registry=registry, rng=rng)
        except CountryNotFoundError as e:
            _fail(e.message)
        # Plain print keeps output pipeable
        typer.echo(iban.spaced if spaced else iban.electronic)


@app.command("countries")
def countries() -> None:
    """List the countries known to the registry."""
    registry = get_default_registry()

    table = Table(title=f"IBAN registry ({len(registry)} countries)")
    table.add_column("Code", style="cyan")
    table.add_column("Name")
    table.add_column("Length", justify="right")
    table.add_column("IBAN format")

    for code in registry.country_codes:
        info = registry[code]
        table.add_row(code, info.country_name, str(info.iban_length), info.iban_format)

    console.print(table)


@app.command("serve")
def serve(
    reload: Annotated[
        bool, typer.Option("--reload", help="Reload on code changes")
    ] = False,
) -> None:
    """Run the HTTP API on API_HOST:API_PORT."""
    import uvicorn

    settings = get_settings()
    console.print(
        f"[bold green]Serving IBAN API[/bold green] on "
        f"http://{settings.api_host}:{settings.api_port}"
    )
    uvicorn.run(
        "iban_engine.presentation.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
