"""Product repository for data access operations."""

from sqlmodel import Session, select

from .entity import Product
from .table import ProductTable


class ProductRepository:
    """Data-access layer for products.

    Exposes exactly save / find_all / find_by_id / delete_by_id. The repository
    flushes but never commits; the caller owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, product: Product) -> Product:
        """Insert ``product`` when it has no id, otherwise write over the row with that id."""
        row = ProductTable(**product.model_dump())
        if row.id is None:
            self._session.add(row)
        else:
            # merge() inserts with the given id when no such row exists yet
            row = self._session.merge(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)

    def find_all(self) -> list[Product]:
        rows = self._session.exec(select(ProductTable)).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def find_by_id(self, product_id: int) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def delete_by_id(self, product_id: int) -> None:
        """Delete the row with ``product_id``; absent rows are ignored."""
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return
        self._session.delete(row)
        self._session.flush()
