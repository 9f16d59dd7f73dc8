"""Product API router with CRUD operations."""

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse

from src.product_api.api.http.deps import get_product_service
from src.product_api.core.exceptions import PersistenceError
from src.product_api.core.services import ProductService
from src.product_api.entities.service.product import Product

router = APIRouter()


@router.post("/product", response_model=Product)
def create_product(
    product: Product,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Create a new product; the database assigns the id when none is given."""
    return service.save_product(product)


@router.get("/products", response_model=list[Product])
def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[Product]:
    """List all products."""
    return service.fetch_all_products()


@router.get(
    "/product/{id}",
    response_model=Product,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Product not found"}},
)
def get_product(
    id: int,
    service: ProductService = Depends(get_product_service),
) -> Product | Response:
    """Get a product by ID."""
    product = service.fetch_product_by_id(id)
    if product is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return product


@router.put(
    "/product/{id}",
    response_model=Product,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Product not found"}},
)
def update_product(
    id: int,
    product: Product,
    service: ProductService = Depends(get_product_service),
) -> Product | Response:
    """Replace the name, price and quantity of an existing product."""
    updated = service.update_product(id, product)
    if updated is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return updated


@router.delete("/product/{id}", response_class=PlainTextResponse)
def delete_product(
    id: int,
    service: ProductService = Depends(get_product_service),
) -> PlainTextResponse:
    """Delete a product. Deleting an unknown id succeeds."""
    try:
        deleted = service.delete_product(id)
    except PersistenceError:
        deleted = False

    if not deleted:
        return PlainTextResponse(
            f"Failed to delete product with ID {id}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return PlainTextResponse(f"Product with ID {id} has been deleted successfully")
