"""
Product Service

Validation and orchestration for the record catalogue:
- name must be unique among live products
- genre_id is a numeric reference (no existence check)
- price must be strictly positive
- publication_date defaults to today
"""

import logging
from typing import Any, Dict, List, Optional

from storefront.models.product import Product
from storefront.repositories.products import ProductRepository
from storefront.services.errors import ConflictError, StoreError, service_operation
from storefront.services.validation import require_fields, require_id, to_date, to_int, to_positive_amount, today

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "artist", "genre_id", "price", "publication_date", "description")


class ProductService:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    @service_operation("Error fetching products")
    def list_products(self) -> List[Product]:
        return self.repository.find_all()

    @service_operation("Error fetching product")
    def get_product_by_id(self, product_id: Any) -> Optional[Product]:
        require_id(product_id, "Product ID is required")
        return self.repository.find_by_id(product_id) or None

    @service_operation("Error fetching products by genre")
    def get_products_by_genre(self, genre_id: Any) -> List[Product]:
        require_id(genre_id, "Genre ID is required")
        return self.repository.find_by_genre(to_int(genre_id, "Genre ID"))

    @service_operation("Error creating product")
    def create_product(self, fields: Dict[str, Any]) -> Product:
        require_fields(
            fields,
            ("name", "artist", "genre_id", "price"),
            "Name, artist, genre_id, and price are required fields",
        )
        genre_id = to_int(fields["genre_id"], "Genre ID")
        price = to_positive_amount(fields["price"], "Price")

        if self.repository.find_by_name(fields["name"]):
            raise ConflictError("Product name already exists")

        publication_date = fields.get("publication_date")
        product_data = {
            "name": fields["name"],
            "artist": fields["artist"],
            "genre_id": genre_id,
            "price": price,
            "publication_date": to_date(publication_date, "Publication date") if publication_date else today(),
            "description": fields.get("description"),
        }
        product = self.repository.create(product_data)
        logger.info(f"Created product {product.id_product} '{product.name}'")
        return product

    @service_operation("Error updating product")
    def update_product(self, product_id: Any, fields: Dict[str, Any]) -> Optional[Product]:
        require_id(product_id, "Product ID is required for update")

        existing = self.repository.find_by_id(product_id)
        if not existing:
            return None

        update_data: Dict[str, Any] = {}
        if "price" in fields:
            update_data["price"] = to_positive_amount(fields["price"], "Price")
        if "genre_id" in fields:
            update_data["genre_id"] = to_int(fields["genre_id"], "Genre ID")
        if "name" in fields:
            name = fields["name"]
            require_fields(fields, ("name",), "Name cannot be empty")
            if name != existing.name and self.repository.find_by_name(name):
                raise ConflictError("Product name already exists")
            update_data["name"] = name
        if "artist" in fields:
            require_fields(fields, ("artist",), "Artist cannot be empty")
            update_data["artist"] = fields["artist"]
        if "publication_date" in fields:
            update_data["publication_date"] = to_date(fields["publication_date"], "Publication date")
        if "description" in fields:
            update_data["description"] = fields["description"]

        if not update_data:
            return existing

        if not self.repository.update(product_id, update_data):
            raise StoreError("Failed to update product")
        return self.repository.find_by_id(product_id)

    @service_operation("Error deleting product")
    def delete_product(self, product_id: Any) -> Optional[Product]:
        """Soft delete. Returns the product as it was before deletion."""
        require_id(product_id, "Product ID is required for delete")

        existing = self.repository.find_by_id(product_id)
        if not existing:
            return None

        if not self.repository.soft_delete(product_id):
            raise StoreError("Failed to delete product")
        logger.info(f"Soft-deleted product {product_id}")
        return existing

    @service_operation("Error permanently deleting product")
    def hard_delete_product(self, product_id: Any) -> Optional[Product]:
        require_id(product_id, "Product ID is required for hard delete")

        existing = self.repository.find_by_id(product_id)
        if not existing:
            return None

        if not self.repository.hard_delete(product_id):
            raise StoreError("Failed to permanently delete product")
        return existing
