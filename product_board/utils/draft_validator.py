"""Validate draft form fields before they are sent to the products API."""

from __future__ import annotations

import math
import re

from product_board.core.errors import ValidationError
from product_board.schemas.product import Draft, ProductPayload

ValidationResult = dict[str, str]

NAME_PATTERN = re.compile(r"^[a-zA-Z ]+$")
# Plain decimal with optional exponent; no underscores, hex or non-ASCII digits.
NUMBER_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$", re.ASCII)


def _parse_positive(raw: str) -> float | None:
    """Return the parsed value, or None when it is not a finite number > 0."""
    raw = raw.strip()
    if not NUMBER_PATTERN.match(raw):
        return None
    value = float(raw)
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def validate(draft: Draft) -> ValidationResult:
    """Check every field and return a field -> message mapping (empty when valid)."""
    errors: ValidationResult = {}

    name = draft.name.strip()
    if not name:
        errors["name"] = "Name is required."
    elif not NAME_PATTERN.match(name):
        errors["name"] = "Name must contain only letters."

    if not draft.weight.strip():
        errors["weight"] = "Weight is required."
    elif _parse_positive(draft.weight) is None:
        errors["weight"] = "Weight must be a positive number."

    if not draft.price.strip():
        errors["price"] = "Price is required."
    elif _parse_positive(draft.price) is None:
        errors["price"] = "Price must be a positive number."

    return errors


def to_payload(draft: Draft) -> ProductPayload:
    """Convert a draft into the request body, raising ValidationError if invalid."""
    errors = validate(draft)
    if errors:
        raise ValidationError(errors)
    return ProductPayload(
        name=draft.name,
        weight=float(draft.weight.strip()),
        price=float(draft.price.strip()),
    )
