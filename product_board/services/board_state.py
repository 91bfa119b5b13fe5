"""Immutable board snapshot and the reducers that produce the next one.

Each reducer takes the current BoardState plus an event and returns a new
BoardState; nothing mutates in place. ProductBoard is the only caller that
swaps the current snapshot.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from product_board.schemas.product import Draft, Product
from product_board.utils.draft_validator import ValidationResult
from product_board.utils.pagination import (
    Page,
    clamp_page,
    filter_products,
    paginate,
    total_pages,
)

DRAFT_FIELDS = ("name", "weight", "price")


class BoardState(BaseModel):
    products: tuple[Product, ...] = ()
    draft: Draft = Field(default_factory=Draft)
    editing_id: str | None = None
    errors: dict[str, str] = Field(default_factory=dict)
    search_term: str = ""
    current_page: int = Field(default=1, ge=1)
    items_per_page: int = Field(default=5, ge=1)
    reset_page_on_search: bool = False
    last_error: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def find(self, product_id: str) -> Product | None:
        return next((p for p in self.products if p.id == product_id), None)


# View derivation


def filtered_products(state: BoardState) -> list[Product]:
    return filter_products(state.products, state.search_term)


def current_view(state: BoardState) -> Page[Product]:
    return paginate(filtered_products(state), state.current_page, state.items_per_page)


def visible_products(state: BoardState) -> list[Product]:
    return current_view(state).items


def page_count(state: BoardState) -> int:
    return total_pages(len(filtered_products(state)), state.items_per_page)


# View reducers


def set_search_term(state: BoardState, term: str) -> BoardState:
    """Store the term; the page is left alone unless reset_page_on_search is on."""
    update: dict = {"search_term": term}
    if state.reset_page_on_search and term != state.search_term:
        update["current_page"] = 1
    return state.model_copy(update=update)


def clear_search(state: BoardState) -> BoardState:
    return set_search_term(state, "")


def next_page(state: BoardState) -> BoardState:
    if state.current_page >= page_count(state):
        return state
    return state.model_copy(update={"current_page": state.current_page + 1})


def previous_page(state: BoardState) -> BoardState:
    if state.current_page <= 1:
        return state
    return state.model_copy(update={"current_page": state.current_page - 1})


def go_to_page(state: BoardState, page: int) -> BoardState:
    page = clamp_page(page, len(filtered_products(state)), state.items_per_page)
    return state.model_copy(update={"current_page": page})


# Draft reducers


def update_draft(state: BoardState, field: str, value: str) -> BoardState:
    if field not in DRAFT_FIELDS:
        raise KeyError(f"Unknown draft field '{field}'")
    draft = state.draft.model_copy(update={field: value})
    return state.model_copy(update={"draft": draft})


def begin_edit(state: BoardState, product_id: str) -> BoardState:
    """Load the product into the draft; unknown ids leave the state untouched."""
    product = state.find(product_id)
    if product is None:
        return state
    return state.model_copy(
        update={
            "draft": Draft.from_product(product),
            "editing_id": product.id,
            "errors": {},
        }
    )


def cancel_edit(state: BoardState) -> BoardState:
    return state.model_copy(update={"draft": Draft(), "editing_id": None, "errors": {}})


def validation_failed(state: BoardState, errors: ValidationResult) -> BoardState:
    return state.model_copy(update={"errors": dict(errors)})


# Sync reducers


def products_loaded(state: BoardState, products: list[Product]) -> BoardState:
    return state.model_copy(update={"products": tuple(products), "last_error": None})


def product_created(
    state: BoardState, product: Product, *, reset_form: bool = True
) -> BoardState:
    """Append the server copy.

    With reset_form the draft is cleared and the board returns to create
    mode; otherwise the form, including any edit binding, is left alone.
    """
    update: dict = {"products": (*state.products, product), "last_error": None}
    if reset_form:
        update.update({"draft": Draft(), "editing_id": None, "errors": {}})
    return state.model_copy(update=update)


def product_updated(
    state: BoardState, product_id: str, product: Product, *, reset_form: bool = True
) -> BoardState:
    products = tuple(product if p.id == product_id else p for p in state.products)
    update: dict = {"products": products, "last_error": None}
    if reset_form and state.editing_id == product_id:
        update.update({"draft": Draft(), "editing_id": None, "errors": {}})
    return state.model_copy(update=update)


def product_removed(state: BoardState, product_id: str) -> BoardState:
    update: dict = {
        "products": tuple(p for p in state.products if p.id != product_id),
        "last_error": None,
    }
    if state.editing_id == product_id:
        update.update({"draft": Draft(), "editing_id": None, "errors": {}})
    return state.model_copy(update=update)


def sync_failed(state: BoardState, message: str, *, clear_products: bool = False) -> BoardState:
    update: dict = {"last_error": message}
    if clear_products:
        update["products"] = ()
    return state.model_copy(update=update)


def dismiss_error(state: BoardState) -> BoardState:
    return state.model_copy(update={"last_error": None})
