"""Terminal rendering of the board using rich tables."""

from __future__ import annotations

from datetime import datetime, timezone

from rich.console import Console
from rich.table import Table
from rich.text import Text

from product_board.schemas.product import Product, format_number
from product_board.services import board_state as reducers
from product_board.services.board_state import BoardState

EMPTY_MESSAGE = "No products available."


def format_created_at(value: datetime) -> str:
    """UTC timestamp as YYYY-MM-DD HH:MM:SS."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%d %H:%M:%S")


def page_label(state: BoardState) -> str:
    return f"Page {state.current_page} of {reducers.page_count(state)}"


def render_board(state: BoardState) -> Table:
    """Build the product grid for the current page."""
    table = Table(show_header=True, header_style="bold blue", caption=page_label(state))
    table.add_column("Created At", style="cyan", justify="center")
    table.add_column("Name", style="green", justify="center")
    table.add_column("Weight", justify="center")
    table.add_column("Price", justify="center")

    products = reducers.visible_products(state)
    if not products:
        table.add_row(EMPTY_MESSAGE, "", "", "")
        return table

    for product in products:
        table.add_row(
            format_created_at(product.created_at),
            product.name,
            format_number(product.weight),
            format_number(product.price),
        )
    return table


def render_errors(state: BoardState) -> Text | None:
    """Error banner plus per-field messages, or None when everything is fine."""
    lines = []
    if state.last_error:
        lines.append(f"Error: {state.last_error}")
    lines.extend(f"{field}: {message}" for field, message in state.errors.items())
    if not lines:
        return None
    return Text("\n".join(lines), style="red")


def render_product_details(product: Product) -> str:
    return (
        "Product Details:\n"
        f"Name: {product.name}\n"
        f"Weight: {format_number(product.weight)}\n"
        f"Price: {format_number(product.price)}"
    )


def print_board(state: BoardState, console: Console | None = None) -> None:
    console = console or Console()
    banner = render_errors(state)
    if banner is not None:
        console.print(banner)
    console.print(render_board(state))
