"""Entity: Product."""

from typing import Any

from pydantic import Field

from src.product_api.entities.core._base import Entity


class Product(Entity):
    """Product entity representing an item in the catalogue.

    Used both as the domain model handed between repository and service and
    as the request/response body of the product endpoints.
    """

    name: str = Field(description="Product name")
    price: float = Field(description="Unit price")
    quantity: int = Field(description="Units in stock")

    def __eq__(self, other: Any) -> bool:
        """Compare products by identifier and business attributes."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.price == other.price
            and self.quantity == other.quantity
        )

    def __hash__(self) -> int:
        return hash((
            self.id,
            self.name,
            self.price,
            self.quantity,
        ))
