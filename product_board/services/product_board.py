"""ProductBoard: owns client state and reconciles it with the products API."""

from __future__ import annotations

import logging
from typing import Any

from product_board.clients.products_client import ProductsClient
from product_board.core.config import Settings, get_settings
from product_board.core.errors import OperationInFlightError, SyncError, ValidationError
from product_board.schemas.product import Draft, Product
from product_board.services import board_state as reducers
from product_board.services.board_state import BoardState
from product_board.utils.draft_validator import ValidationResult, to_payload, validate
from product_board.utils.pagination import Page
from product_board.utils.single_flight import CREATE_KEY, SingleFlight, product_key

logger = logging.getLogger(__name__)


class ProductBoard:
    """Single-page inventory board.

    Remote failures are logged and recorded in ``state.last_error``; they are
    never raised to the caller. Mutations are single-flight per target, so a
    second create (or a second update/remove of the same product) issued
    while the first is pending is rejected without a request.
    """

    def __init__(
        self,
        client: ProductsClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or (client.settings if client else get_settings())
        self._owns_client = client is None
        self.client = client or ProductsClient(self.settings)
        self.state = BoardState(
            items_per_page=self.settings.items_per_page,
            reset_page_on_search=self.settings.reset_page_on_search,
        )
        self._in_flight = SingleFlight()

    async def __aenter__(self) -> "ProductBoard":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    # Read-only views

    @property
    def products(self) -> tuple[Product, ...]:
        return self.state.products

    @property
    def draft(self) -> Draft:
        return self.state.draft

    @property
    def errors(self) -> dict[str, str]:
        return self.state.errors

    @property
    def view(self) -> Page[Product]:
        return reducers.current_view(self.state)

    @property
    def visible_products(self) -> list[Product]:
        return reducers.visible_products(self.state)

    @property
    def total_pages(self) -> int:
        return reducers.page_count(self.state)

    def show(self, product_id: str) -> Product | None:
        return self.state.find(product_id)

    def is_pending(self, product_id: str | None = None) -> bool:
        """True while a create (or the given product's mutation) awaits a response."""
        key = CREATE_KEY if product_id is None else product_key(product_id)
        return self._in_flight.is_pending(key)

    # UI events

    def set_search_term(self, term: str) -> None:
        self.state = reducers.set_search_term(self.state, term)

    def clear_search(self) -> None:
        self.state = reducers.clear_search(self.state)

    def next_page(self) -> None:
        self.state = reducers.next_page(self.state)

    def previous_page(self) -> None:
        self.state = reducers.previous_page(self.state)

    def go_to_page(self, page: int) -> None:
        self.state = reducers.go_to_page(self.state, page)

    def update_draft(self, field: str, value: str) -> None:
        self.state = reducers.update_draft(self.state, field, value)

    def begin_edit(self, product_id: str) -> bool:
        """Bind the draft to a product; returns False when the id is unknown."""
        self.state = reducers.begin_edit(self.state, product_id)
        return self.state.editing_id == product_id

    def cancel_edit(self) -> None:
        self.state = reducers.cancel_edit(self.state)

    def dismiss_error(self) -> None:
        self.state = reducers.dismiss_error(self.state)

    def _is_current(self, draft: Draft | None) -> bool:
        return draft is None or draft == self.state.draft

    def validate(self, draft: Draft | None = None) -> ValidationResult:
        """Validate a draft (the current one by default).

        Per-field errors are stored in state only for the current draft, so
        the form never shows messages for input the user did not type.
        """
        errors = validate(draft if draft is not None else self.state.draft)
        if self._is_current(draft):
            self.state = reducers.validation_failed(self.state, errors)
        return errors

    def require_valid(self, draft: Draft | None = None) -> None:
        errors = self.validate(draft)
        if errors:
            raise ValidationError(errors)

    # Remote sync

    def _record_failure(self, error: SyncError, *, clear_products: bool = False) -> None:
        if isinstance(error, OperationInFlightError):
            logger.warning(f"Rejected concurrent request: {error}")
        else:
            logger.error(f"Products API error: {error}", exc_info=True)
        self.state = reducers.sync_failed(
            self.state, str(error), clear_products=clear_products
        )

    async def list(self) -> list[Product]:
        """Replace local products with the server's; empty on failure."""
        try:
            products = await self.client.list_products()
        except SyncError as e:
            self._record_failure(e, clear_products=True)
            return []
        self.state = reducers.products_loaded(self.state, products)
        logger.info(f"Loaded {len(products)} products")
        return products

    async def create(self, draft: Draft | None = None) -> Product | None:
        """Send the draft (the current one by default); append the server copy.

        Only submitting the current draft resets the form and leaves edit mode.
        """
        from_form = self._is_current(draft)
        draft = draft if draft is not None else self.state.draft
        if self.validate(draft):
            return None
        try:
            async with self._in_flight.acquire(CREATE_KEY, operation="create"):
                product = await self.client.create_product(to_payload(draft))
        except SyncError as e:
            self._record_failure(e)
            return None
        self.state = reducers.product_created(self.state, product, reset_form=from_form)
        logger.info(f"Created product {product.id}")
        return product

    async def update(self, product_id: str, draft: Draft | None = None) -> Product | None:
        """Send the draft keyed by id; replace the matching local product."""
        from_form = self._is_current(draft)
        draft = draft if draft is not None else self.state.draft
        if self.validate(draft):
            return None
        try:
            async with self._in_flight.acquire(product_key(product_id), operation="update"):
                product = await self.client.update_product(product_id, to_payload(draft))
        except SyncError as e:
            self._record_failure(e)
            return None
        self.state = reducers.product_updated(
            self.state, product_id, product, reset_form=from_form
        )
        logger.info(f"Updated product {product_id}")
        return product

    async def remove(self, product_id: str) -> bool:
        try:
            async with self._in_flight.acquire(product_key(product_id), operation="remove"):
                await self.client.delete_product(product_id)
        except SyncError as e:
            self._record_failure(e)
            return False
        self.state = reducers.product_removed(self.state, product_id)
        logger.info(f"Deleted product {product_id}")
        return True

    async def submit(self) -> Product | None:
        """Create in Idle mode, update the bound product in Editing mode."""
        if self.state.editing_id is not None:
            return await self.update(self.state.editing_id)
        return await self.create()
