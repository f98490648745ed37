"""
Product API Routes
Public catalogue endpoints: CRUD plus lookup by genre.
"""

from typing import List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from storefront.dependencies import get_product_service
from storefront.schemas import ApiResponse, ProductResponse, envelope
from storefront.services.product_service import ProductService

router = APIRouter()


# ============================================================================
# Request Models
# ============================================================================
# Fields are deliberately loose: ProductService owns validation and coercion,
# so "12" and 12 must both reach it unchanged.


class ProductCreateRequest(BaseModel):
    name: Optional[str] = None
    artist: Optional[str] = None
    genre_id: Optional[Union[int, str]] = None
    price: Optional[Union[float, str]] = None
    publication_date: Optional[str] = None
    description: Optional[str] = None


class ProductUpdateRequest(ProductCreateRequest):
    pass


def _not_found():
    return HTTPException(status_code=404, detail="Product not found")


# ============================================================================
# Endpoints
# ============================================================================


@router.get("/products", response_model=ApiResponse[List[ProductResponse]])
def list_products(service: ProductService = Depends(get_product_service)):
    """List all live products"""
    products = service.list_products()
    return envelope([ProductResponse.model_validate(p) for p in products])


@router.get("/products/genre/{genre_id}", response_model=ApiResponse[List[ProductResponse]])
def get_products_by_genre(genre_id: int, service: ProductService = Depends(get_product_service)):
    products = service.get_products_by_genre(genre_id)
    return envelope([ProductResponse.model_validate(p) for p in products])


@router.get("/products/{product_id}", response_model=ApiResponse[ProductResponse])
def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    product = service.get_product_by_id(product_id)
    if not product:
        raise _not_found()
    return envelope(ProductResponse.model_validate(product))


@router.post("/products", response_model=ApiResponse[ProductResponse], status_code=201)
def create_product(request: ProductCreateRequest, service: ProductService = Depends(get_product_service)):
    product = service.create_product(request.model_dump(exclude_unset=True))
    return envelope(ProductResponse.model_validate(product), "Product created successfully")


@router.put("/products/{product_id}", response_model=ApiResponse[ProductResponse])
def update_product(
    product_id: int, request: ProductUpdateRequest, service: ProductService = Depends(get_product_service)
):
    """Merge-patch: only fields present in the body are changed"""
    product = service.update_product(product_id, request.model_dump(exclude_unset=True))
    if not product:
        raise _not_found()
    return envelope(ProductResponse.model_validate(product), "Product updated successfully")


@router.delete("/products/{product_id}/hard", response_model=ApiResponse[ProductResponse])
def hard_delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    product = service.hard_delete_product(product_id)
    if not product:
        raise _not_found()
    return envelope(ProductResponse.model_validate(product), "Product permanently deleted")


@router.delete("/products/{product_id}", response_model=ApiResponse[ProductResponse])
def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    product = service.delete_product(product_id)
    if not product:
        raise _not_found()
    return envelope(ProductResponse.model_validate(product), "Product deleted successfully (soft delete)")
