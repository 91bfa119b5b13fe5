"""Plain helpers shared by test modules."""


def product_json(id: str = "abc", name: str = "Widget", weight=2, price=9.99) -> dict:
    """A product as the remote API serializes it (Mongo-style keys)."""
    return {
        "_id": id,
        "name": name,
        "weight": weight,
        "price": price,
        "createdAt": "2024-05-01T10:20:30.000Z",
    }
