"""t1 CLI - command line access to the T1Comercios API."""

import asyncio
import json
import logging
from typing import Any, Awaitable, Callable

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from .api import T1Client
from .config import load_settings
from .errors import T1Error

app = typer.Typer(
    name="t1",
    help="T1Comercios API client",
    no_args_is_help=True,
)
console = Console()

auth_app = typer.Typer(help="Authentication commands")
products_app = typer.Typer(help="Product management")
orders_app = typer.Typer(help="Order queries")
catalogs_app = typer.Typer(help="Brands and categories")

app.add_typer(auth_app, name="auth")
app.add_typer(products_app, name="products")
app.add_typer(orders_app, name="orders")
app.add_typer(catalogs_app, name="catalogs")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Configure logging for every command."""
    level = "DEBUG" if verbose else load_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _output_result(result: Any) -> None:
    """Output result as JSON."""
    if isinstance(result, (bytes, bytearray)):
        console.print(f"[dim]<{len(result)} bytes>[/dim]")
        return
    console.print_json(json.dumps(result, default=str))


def _run(action: Callable[[T1Client], Awaitable[Any]]) -> Any:
    """Run ``action`` against a fresh client, turning T1Error into exit code 1."""

    async def _runner():
        async with T1Client.from_settings() as t1:
            return await action(t1)

    try:
        return asyncio.run(_runner())
    except T1Error as e:
        console.print("[red]Request failed[/red]")
        console.print_json(json.dumps(e.to_dict()))
        raise typer.Exit(1)


def _mask(token: str) -> str:
    if len(token) <= 12:
        return "***"
    return f"{token[:6]}...{token[-4:]}"


@app.command("hello")
def hello(name: str = typer.Argument("world")):
    """Show the active configuration without secrets."""
    t1 = T1Client.from_settings()
    console.print(Panel(t1.hello(name), title="t1comercios"))
    asyncio.run(t1.close())


# ============================================================================
# Auth Commands
# ============================================================================

@auth_app.command("token")
def auth_token(
    show: bool = typer.Option(False, "--show", help="Print the full token"),
):
    """Obtain a valid access token (login or refresh)."""
    token = _run(lambda t1: t1.get_token())
    console.print(token if show else _mask(token))


@auth_app.command("status")
def auth_status():
    """Log in and show credential status (never prints tokens)."""

    async def _status(t1: T1Client) -> dict[str, Any]:
        await t1.get_token()
        return t1.broker.get_status()

    _output_result(_run(_status))


# ============================================================================
# Resource Commands
# ============================================================================

@products_app.command("list")
def products_list(
    commerce_id: str = typer.Argument(..., help="Commerce ID"),
    page: int = typer.Option(1, "--page", "-p"),
    size: int = typer.Option(20, "--size", "-s"),
):
    """List products of a commerce."""
    _output_result(_run(lambda t1: t1.products.list(commerce_id, page=page, size=size)))


@products_app.command("get")
def products_get(
    commerce_id: str = typer.Argument(..., help="Commerce ID"),
    product_id: str = typer.Argument(..., help="Product ID"),
):
    """Get a single product."""
    _output_result(_run(lambda t1: t1.products.get(commerce_id, product_id)))


@orders_app.command("list")
def orders_list(
    seller_id: str = typer.Argument(..., help="Seller ID"),
    marketplace: str = typer.Option(None, "--marketplace", "-m"),
    page: int = typer.Option(1, "--page", "-p"),
    size: int = typer.Option(20, "--size", "-s"),
):
    """List orders of a seller."""
    query: dict[str, Any] = {"page": page, "size": size}
    if marketplace:
        query["marketplace"] = marketplace
    _output_result(_run(lambda t1: t1.orders.list(seller_id, **query)))


@catalogs_app.command("brands")
def catalogs_brands():
    """List official brands."""
    _output_result(_run(lambda t1: t1.catalogs.list_brands()))


@catalogs_app.command("tree")
def catalogs_tree(channel_id: str = typer.Argument(..., help="Sales channel ID")):
    """Show the category tree of a sales channel."""
    _output_result(_run(lambda t1: t1.catalogs.category_tree(channel_id)))


if __name__ == "__main__":
    app()
