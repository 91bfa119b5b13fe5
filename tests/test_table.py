"""Tests for terminal rendering of the board."""

from datetime import datetime, timedelta, timezone

from rich.console import Console

from product_board.services import board_state as reducers
from product_board.services.board_state import BoardState
from product_board.ui.table import (
    EMPTY_MESSAGE,
    format_created_at,
    page_label,
    print_board,
    render_board,
    render_errors,
    render_product_details,
)


def render_text(state: BoardState) -> str:
    console = Console(record=True, width=120)
    print_board(state, console)
    return console.export_text()


def test_format_created_at_converts_to_utc():
    value = datetime(2024, 5, 1, 12, 20, 30, 123000, tzinfo=timezone(timedelta(hours=2)))
    assert format_created_at(value) == "2024-05-01 10:20:30"


def test_empty_board_shows_placeholder_row():
    table = render_board(BoardState())
    assert table.row_count == 1
    assert EMPTY_MESSAGE in render_text(BoardState())
    assert page_label(BoardState()) == "Page 1 of 1"


def test_board_lists_current_page(make_product):
    products = [make_product(f"Item {chr(65 + i)}", weight=i + 1, price=2.5) for i in range(7)]
    state = reducers.next_page(reducers.products_loaded(BoardState(items_per_page=5), products))

    table = render_board(state)
    text = render_text(state)

    assert table.row_count == 2
    assert [c.header for c in table.columns] == ["Created At", "Name", "Weight", "Price"]
    assert "Item F" in text and "Item G" in text
    assert "Item A" not in text
    assert "Page 2 of 2" in text


def test_errors_banner():
    assert render_errors(BoardState()) is None
    state = reducers.validation_failed(
        reducers.sync_failed(BoardState(), "list: HTTP 500"), {"name": "Name is required."}
    )
    banner = render_errors(state).plain
    assert "Error: list: HTTP 500" in banner
    assert "name: Name is required." in banner


def test_product_details(make_product):
    text = render_product_details(make_product("Widget", 2, 9.99))
    assert text == "Product Details:\nName: Widget\nWeight: 2\nPrice: 9.99"
