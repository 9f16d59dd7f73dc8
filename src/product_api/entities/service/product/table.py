"""Product database table model."""

from src.product_api.entities.core._base import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    It's separate from the domain entity to keep persistence concerns out of
    the HTTP payload.
    """

    __tablename__ = "product"

    name: str
    price: float
    quantity: int
