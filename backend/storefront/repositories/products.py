from typing import List, Optional

from storefront.models.product import Product
from storefront.repositories.base import SoftDeleteRepository


class ProductRepository(SoftDeleteRepository[Product]):
    """Persistence gateway for the product table."""

    model = Product
    pk_name = "id_product"

    def find_by_name(self, name: str) -> Optional[Product]:
        return self.session.exec(self._live().where(Product.name == name)).first()

    def find_by_genre(self, genre_id: int) -> List[Product]:
        stmt = self._live().where(Product.genre_id == genre_id).order_by(Product.id_product)
        return list(self.session.exec(stmt).all())
