"""
spent - command line front end for the currency settings.

Usage:
    spent currencies             # List supported currencies
    spent show                   # Show the active currency
    spent use EUR                # Activate a currency from the catalog
    spent choose                 # Pick a currency interactively
    spent format -- -1999        # Render an amount in minor units
"""

from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from spent import __version__
from spent.core.catalog import (
    CURRENCY_OPTIONS,
    CatalogError,
    CurrencyOption,
    find_currency_option,
    validate_catalog,
)
from spent.core.currency import CurrencySettings, format_currency
from spent.core.logging import setup_logging
from spent.core.store import CurrencySettingsStore, create_currency_store

# Initialize CLI and console
app = typer.Typer(help="spent - Currency settings", no_args_is_help=True)
console = Console()

SAMPLE_AMOUNT = 123456


@app.callback()
def startup() -> None:
    """Configure logging and check catalog integrity."""
    setup_logging()
    try:
        validate_catalog()
    except CatalogError as e:
        console.print(f"[red]ERROR: {e}[/red]")
        raise typer.Exit(1)


def open_store() -> CurrencySettingsStore:
    """Create the store for the configured environment."""
    store = create_currency_store()
    if not store.storage.available:
        console.print("[yellow]Persistence unavailable, changes will not be saved[/yellow]")
    return store


def resolve_option(code: str) -> CurrencyOption:
    """
    Look up a catalog entry or exit with an error.

    Args:
        code: Currency code

    Returns:
        Catalog entry
    """
    option = find_currency_option(code)
    if option is None:
        console.print(f"[red]Unknown currency: {code}[/red]")
        console.print("Run [cyan]spent currencies[/cyan] for the supported codes.")
        raise typer.Exit(1)
    return option


def print_settings(title: str, current: CurrencySettings) -> None:
    """Show settings in a panel."""
    console.print(Panel.fit(
        f"[bold cyan]{title}[/bold cyan]\n\n"
        f"Code: [green]{current.code}[/green]\n"
        f"Symbol: [green]{current.symbol}[/green] ({current.position.value})\n"
        f"Locale: [green]{current.locale}[/green]\n"
        f"Example: [green]{format_currency(SAMPLE_AMOUNT, current)}[/green]",
        border_style="cyan"
    ))


@app.command()
def currencies() -> None:
    """Lists all supported currencies."""
    active = open_store().get()

    table = Table(title="Supported currencies")
    table.add_column("Code", style="cyan")
    table.add_column("Name")
    table.add_column("Symbol")
    table.add_column("Position")
    table.add_column("Locale")
    table.add_column("Example", style="green", justify="right")

    for option in CURRENCY_OPTIONS:
        marker = " *" if option.code == active.code else ""
        table.add_row(
            f"{option.code}{marker}",
            option.name,
            option.symbol,
            option.position.value,
            option.locale,
            format_currency(-SAMPLE_AMOUNT, option),
        )

    console.print()
    console.print(table)
    console.print("[dim]* active currency[/dim]")


@app.command()
def show() -> None:
    """Shows the active currency settings."""
    print_settings("Active currency", open_store().get())


@app.command()
def use(code: str = typer.Argument(..., help="Currency code, e.g. EUR")) -> None:
    """Activates a currency from the catalog."""
    option = resolve_option(code)
    store = open_store()
    store.set(option.to_settings())

    print_settings(f"{option.name} activated", store.get())


@app.command()
def choose() -> None:
    """Picks the active currency interactively."""
    store = open_store()
    current = store.get()

    for option in CURRENCY_OPTIONS:
        console.print(f"  [cyan]{option.code}[/cyan]  {option.name}")
    console.print()

    try:
        code = Prompt.ask(
            "Currency",
            choices=[option.code for option in CURRENCY_OPTIONS],
            default=current.code,
        )
    except KeyboardInterrupt:
        console.print()
        console.print("[yellow]Cancelled[/yellow]")
        raise typer.Exit(0)

    option = resolve_option(code)
    store.set(option.to_settings())
    print_settings(f"{option.name} activated", store.get())


@app.command("format")
def format_amount(
    amount: int = typer.Argument(..., help="Amount in minor units (e.g. cents)"),
    currency: Optional[str] = typer.Option(
        None,
        "--currency",
        "-c",
        help="Format with a catalog currency instead of the active one"
    ),
) -> None:
    """Formats an amount given in minor units."""
    if currency:
        current: CurrencySettings = resolve_option(currency)
    else:
        current = open_store().get()

    console.print(format_currency(amount, current))


@app.command()
def version() -> None:
    """Shows the version."""
    console.print(f"spent {__version__}")


if __name__ == "__main__":
    app()
