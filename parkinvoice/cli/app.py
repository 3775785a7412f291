"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Optional, Annotated

import pendulum
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..adapters.seed_repository import SeedDataRepository
from ..config import AppConfig, get_default_config_path
from ..domain.exceptions import InvoicingError
from ..domain.models import Session
from ..services.customer_policy import build_customer_policy
from ..services.invoice_service import InvoiceService

app = typer.Typer(
    name="parkinvoice",
    help="Compute parking invoices from hourly weekday/weekend tariffs",
    add_completion=False
)

console = Console()
error_console = Console(stderr=True)


def _load_config(config_file: Optional[Path]) -> AppConfig:
    """
    Load the explicit config file, else ./config.yaml if present, else defaults.
    """
    if config_file is not None:
        return AppConfig.load_from_yaml(config_file)

    default_path = get_default_config_path()
    if default_path.exists():
        return AppConfig.load_from_yaml(default_path)

    return AppConfig()


def _configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
        force=True,
    )


def _build_service(config: AppConfig, data_file: Optional[Path]):
    """Wire the seed data repository, the configured policy and the service."""
    repository = SeedDataRepository.from_file(data_file or config.data_file)
    policy = build_customer_policy(config.customer_policy, repository)

    service = InvoiceService(
        session_source=repository,
        rate_profile_source=repository,
        customer_source=repository,
        customer_policy=policy,
    )
    return service, repository


def _fail(exc: Exception) -> None:
    console.print(f"[bold red]Error:[/bold red] {exc}")
    raise typer.Exit(1)


@app.command()
def invoices(
    facility_id: Annotated[str, typer.Argument(help="Parking facility id, e.g. pf001")],
    customer: Annotated[Optional[str], typer.Option("--customer", help="Only compute this customer's invoice")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    data_file: Annotated[Optional[Path], typer.Option("--data", help="Path to a JSON seed data file")] = None,
):
    """
    Compute invoices for a parking facility.

    Examples:

        parkinvoice invoices pf001
        parkinvoice invoices pf001 --customer c001
        parkinvoice invoices pf001 --data ./my_data.json
    """
    try:
        config = _load_config(config_file)
        _configure_logging(config)
        service, _ = _build_service(config, data_file)

        if customer:
            results = [service.get_invoice(facility_id, customer)]
        else:
            results = service.get_invoices(facility_id)

    except (FileNotFoundError, ValueError, InvoicingError) as e:
        _fail(e)

    if not results:
        console.print(f"[yellow]No invoices for parking facility '{facility_id}'.[/yellow]")
        return

    table = Table(
        title=f"Invoices for {facility_id}",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Customer", style="bold yellow")
    table.add_column(f"Amount ({config.currency})", justify="right")

    for invoice in results:
        table.add_row(invoice.customer_id, f"{invoice.amount:.2f}")

    console.print(table)


@app.command()
def quote(
    facility_id: Annotated[str, typer.Argument(help="Parking facility id")],
    start: Annotated[str, typer.Argument(help="Session start, ISO 8601 (UTC if no offset)")],
    end: Annotated[str, typer.Argument(help="Session end, ISO 8601 (UTC if no offset)")],
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
    data_file: Annotated[Optional[Path], typer.Option("--data", help="Path to a JSON seed data file")] = None,
):
    """
    Price a single session and show its hourly segments.
    """
    try:
        config = _load_config(config_file)
        _configure_logging(config)
        service, _ = _build_service(config, data_file)

        session = Session(
            customer_id="quote",
            facility_id=facility_id,
            start=pendulum.parse(start, tz="UTC"),
            end=pendulum.parse(end, tz="UTC"),
        )
        cost = service.quote(facility_id, session)

    except (FileNotFoundError, ValueError, InvoicingError) as e:
        _fail(e)

    for warning in cost.warnings:
        console.print(f"[yellow]Warning: {warning}[/yellow]")

    table = Table(title=f"Quote for {facility_id}", show_header=True, header_style="bold cyan")
    table.add_column("Segment start (UTC)")
    table.add_column("Tariff")
    table.add_column(f"Price ({config.currency})", justify="right")

    for segment in cost.segments:
        table.add_row(
            segment.start.format("YYYY-MM-DD HH:mm"),
            segment.day_class.value,
            f"{segment.price:.2f}",
        )

    console.print(table)
    console.print(f"[bold]Total:[/bold] {cost.amount:.2f} {config.currency}")


@app.command()
def facilities(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Path to config file"
    ),
    data_file: Optional[Path] = typer.Option(
        None,
        "--data",
        help="Path to a JSON seed data file"
    )
):
    """
    List facilities and their tariff tables.
    """
    try:
        config = _load_config(config_file)
        _configure_logging(config)
        repository = SeedDataRepository.from_file(data_file or config.data_file)
    except (FileNotFoundError, ValueError, InvoicingError) as e:
        _fail(e)

    profiles = repository.facilities.list_rate_profiles()
    if not profiles:
        console.print("[yellow]No facilities defined in the seed data.[/yellow]")
        return

    for profile in profiles:
        table = Table(title=f"Facility {profile.facility_id}", show_header=True, header_style="bold cyan")
        table.add_column("Days", style="bold yellow")
        table.add_column("Hours")
        table.add_column(f"Price/hour ({config.currency})", justify="right")

        for label, entries in (("weekday", profile.weekday_prices), ("weekend", profile.weekend_prices)):
            for entry in entries:
                table.add_row(
                    label,
                    f"{entry.start_hour:02d}:00 - {entry.end_hour:02d}:00",
                    f"{entry.price_per_hour:.2f}",
                )

        console.print()
        console.print(table)

        for problem in profile.coverage_problems():
            console.print(f"[red]  ✗ {problem}[/red]")

    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]parkinvoice[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
