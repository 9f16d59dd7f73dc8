from collections.abc import Callable
from typing import TypeVar

from loguru import logger
from sqlmodel import Session

from src.product_api.core.exceptions import PersistenceError
from src.product_api.entities.service.product import Product, ProductRepository

T = TypeVar("T")


class ProductService:
    """Orchestrates product persistence for the HTTP layer.

    Each operation runs in its own transaction: it commits when the repository
    call succeeds and rolls back otherwise. Storage failures surface as
    ``PersistenceError``; a missing product is reported as ``None``.
    """

    def __init__(self, db_session: Session):
        self._db_session = db_session
        self._product_repo = ProductRepository(db_session)

    def _run(self, failure_message: str, operation: Callable[[], T]) -> T:
        try:
            result = operation()
            self._db_session.commit()
            return result
        except Exception as e:
            self._db_session.rollback()
            logger.error("{}: {}", failure_message, e)
            raise PersistenceError(f"{failure_message}: {e}") from e

    def save_product(self, product: Product) -> Product:
        return self._run(
            "Failed to save product", lambda: self._product_repo.save(product)
        )

    def fetch_all_products(self) -> list[Product]:
        return self._run("Failed to fetch all products", self._product_repo.find_all)

    def fetch_product_by_id(self, product_id: int) -> Product | None:
        return self._run(
            "Failed to fetch product by ID",
            lambda: self._product_repo.find_by_id(product_id),
        )

    def update_product(self, product_id: int, patch: Product) -> Product | None:
        """Replace name, price and quantity of an existing product.

        Returns ``None`` without touching storage when no product has
        ``product_id``. The id carried by ``patch`` is ignored.
        """

        def _update() -> Product | None:
            existing = self._product_repo.find_by_id(product_id)
            if existing is None:
                return None

            existing.name = patch.name
            existing.price = patch.price
            existing.quantity = patch.quantity
            return self._product_repo.save(existing)

        return self._run("Failed to update product", _update)

    def delete_product(self, product_id: int) -> bool:
        """Delete a product; deleting an unknown id also counts as success."""

        def _delete() -> bool:
            self._product_repo.delete_by_id(product_id)
            return True

        return self._run("Failed to delete product", _delete)
