"""CLI interface for checkout pricing."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from .catalog import load_catalog
from .checkout import Checkout
from .config import reload_config
from .exceptions import CatalogError

app = typer.Typer(
    name="posprice",
    help="""
    [bold]Checkout Pricing CLI[/bold]

    Price a sequence of scans and removals against a product catalog.

    [cyan]Examples:[/cyan]
      posprice checkout --catalog catalog.json scan:tea scan:ham:110
      posprice checkout -c catalog.json scan:cereal scan:cereal remove:cereal
      posprice checkout -c catalog.json scan:ham --strict
    """,
    no_args_is_help=False,
)

console = Console()
logger = logging.getLogger(__name__)

_OPERATIONS = ("scan", "remove")


@dataclass(frozen=True)
class CheckoutAction:
    """One scan or removal requested on the command line."""

    operation: str
    name: str
    weight: Optional[int] = None


def parse_action(token: str) -> CheckoutAction:
    """Parse ``scan:NAME[:WEIGHT]`` or ``remove:NAME[:WEIGHT]``."""
    operation, sep, rest = token.partition(":")
    if not sep or operation not in _OPERATIONS or not rest:
        raise ValueError(
            f"Invalid action '{token}'. Expected scan:NAME[:WEIGHT] or remove:NAME[:WEIGHT]"
        )

    name, sep, weight_raw = rest.rpartition(":")
    if not sep:
        return CheckoutAction(operation=operation, name=rest)

    if not weight_raw.isdigit():
        raise ValueError(f"Invalid weight '{weight_raw}' in action '{token}'")
    if not name:
        raise ValueError(f"Missing item name in action '{token}'")

    return CheckoutAction(operation=operation, name=name, weight=int(weight_raw))


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Checkout pricing tool."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command()
def checkout(
    actions: Optional[List[str]] = typer.Argument(
        None,
        help="Actions to apply in order: scan:NAME[:WEIGHT] or remove:NAME[:WEIGHT]",
    ),
    catalog_file: Optional[Path] = typer.Option(
        None,
        "--catalog",
        "-c",
        help="Catalog JSON file (default: CATALOG_PATH setting)",
        resolve_path=True,
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with code 1 if any action is rejected",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed pricing information",
    ),
):
    """Apply scans and removals to a fresh checkout and print the summary."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = reload_config()
        config.validate_config(check_catalog=catalog_file is None)
        parsed = [parse_action(token) for token in actions or []]

        path = catalog_file or config.catalog_path
        if path is None:
            raise ValueError("No catalog given: pass --catalog or set CATALOG_PATH")
        catalog = load_catalog(path)
    except CatalogError as e:
        console.print(f"\n[bold red]✗ Error ({e.code}):[/bold red] {e.message}")
        raise typer.Exit(code=1)
    except ValueError as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {str(e)}")
        raise typer.Exit(code=1)

    if verbose:
        console.print("[bold]Configuration:[/bold]")
        console.print(f"  Catalog: {path} ({len(catalog)} items)")
        console.print(f"  Currency: {config.currency}")
        console.print()

    register = Checkout()
    register.assign_inventory(catalog)

    rejected = []
    for action in parsed:
        apply = register.scan_item if action.operation == "scan" else register.remove_item
        if not apply(action.name, action.weight):
            rejected.append(action)
            console.print(
                f"[yellow]⚠️  Rejected {action.operation} of '{action.name}'[/yellow]"
            )

    summary = register.summary()
    summary.currency = config.currency
    summary.formatted_total = config.format_minor(summary.total)
    print(json.dumps(summary.model_dump(mode="json"), indent=2))

    if rejected and strict:
        console.print(f"\n[bold red]✗ {len(rejected)} action(s) rejected[/bold red]")
        raise typer.Exit(code=1)


@app.command()
def version():
    """Show version information."""
    console.print("posprice version 0.1.0")


if __name__ == "__main__":
    app()
