"""ProductService against the SQLite gateway and a recording double."""

from datetime import date
from types import SimpleNamespace

import pytest
from sqlmodel import Session

from storefront.repositories.products import ProductRepository
from storefront.services.errors import ConflictError, StoreError, ValidationError
from storefront.services.product_service import ProductService
from tests.fakes import RecordingRepository

ALBUM = {"name": "Nevermind", "artist": "Nirvana", "genre_id": 1, "price": 27.99, "publication_date": "1991-09-24"}


@pytest.fixture
def service(session: Session) -> ProductService:
    return ProductService(ProductRepository(session))


class TestCreate:
    def test_round_trip(self, service: ProductService):
        created = service.create_product(dict(ALBUM))
        fetched = service.get_product_by_id(created.id_product)

        assert fetched is not None
        assert fetched.name == "Nevermind"
        assert fetched.artist == "Nirvana"
        assert fetched.genre_id == 1
        assert fetched.price == 27.99
        assert fetched.publication_date == date(1991, 9, 24)
        assert fetched.deleted_at is None

    def test_publication_date_defaults_to_today(self, service: ProductService):
        fields = dict(ALBUM)
        del fields["publication_date"]
        assert service.create_product(fields).publication_date == date.today()

    def test_string_numerics_are_coerced(self, service: ProductService):
        created = service.create_product({**ALBUM, "genre_id": "3", "price": "19.5"})
        assert created.genre_id == 3
        assert created.price == 19.5

    @pytest.mark.parametrize("missing", ["name", "artist", "genre_id", "price"])
    def test_required_fields(self, service: ProductService, missing):
        fields = {k: v for k, v in ALBUM.items() if k != missing}
        with pytest.raises(
            ValidationError,
            match="^Error creating product: Name, artist, genre_id, and price are required fields$",
        ):
            service.create_product(fields)

    def test_price_zero_rejected(self, service: ProductService):
        with pytest.raises(ValidationError, match="greater than 0"):
            service.create_product({**ALBUM, "price": 0})

    def test_price_smallest_unit_accepted(self, service: ProductService):
        assert service.create_product({**ALBUM, "price": 0.01}).price == 0.01

    def test_non_numeric_genre_rejected(self, service: ProductService):
        with pytest.raises(ValidationError, match="^Error creating product: Genre ID must be a valid number$"):
            service.create_product({**ALBUM, "genre_id": "rock"})

    def test_duplicate_name_conflicts(self, service: ProductService):
        service.create_product(dict(ALBUM))
        with pytest.raises(ConflictError, match="^Error creating product: Product name already exists$"):
            service.create_product({**ALBUM, "artist": "Someone Else"})

    def test_soft_deleted_name_can_be_reused(self, service: ProductService):
        first = service.create_product(dict(ALBUM))
        service.delete_product(first.id_product)

        second = service.create_product(dict(ALBUM))
        assert second.id_product != first.id_product


class TestLookups:
    def test_missing_id_fails_before_store_access(self):
        repo = RecordingRepository()
        with pytest.raises(ValidationError, match="^Error fetching product: Product ID is required$"):
            ProductService(repo).get_product_by_id(None)
        assert repo.calls == []

    def test_unknown_id_returns_none(self, service: ProductService):
        assert service.get_product_by_id(999) is None

    def test_list_excludes_soft_deleted(self, service: ProductService):
        kept = service.create_product(dict(ALBUM))
        gone = service.create_product({**ALBUM, "name": "In Utero"})
        service.delete_product(gone.id_product)

        assert [p.id_product for p in service.list_products()] == [kept.id_product]

    def test_by_genre(self, service: ProductService):
        service.create_product(dict(ALBUM))
        service.create_product({**ALBUM, "name": "21", "artist": "Adele", "genre_id": 2})

        assert [p.name for p in service.get_products_by_genre("2")] == ["21"]

    def test_by_genre_requires_id(self, service: ProductService):
        with pytest.raises(ValidationError, match="^Error fetching products by genre: Genre ID is required$"):
            service.get_products_by_genre(None)

    def test_store_failure_is_wrapped(self):
        repo = RecordingRepository()
        repo.fail_with = RuntimeError("DB error")
        with pytest.raises(StoreError, match="^Error fetching products: DB error$"):
            ProductService(repo).list_products()


class TestUpdate:
    def test_merge_patch_sends_only_supplied_keys(self):
        repo = RecordingRepository(rows={1: SimpleNamespace(name="Nevermind", price=27.99)})
        ProductService(repo).update_product(1, {"price": "30"})

        assert repo.called("update") == [(1, {"price": 30.0})]
        assert repo.called("find_by_name") == []

    def test_unknown_id_returns_none_without_update(self):
        repo = RecordingRepository()
        assert ProductService(repo).update_product(42, {"price": 10}) is None
        assert repo.called("update") == []

    def test_requires_id(self):
        with pytest.raises(ValidationError, match="^Error updating product: Product ID is required for update$"):
            ProductService(RecordingRepository()).update_product("", {"price": 10})

    def test_rename_to_taken_name_conflicts(self, service: ProductService):
        service.create_product(dict(ALBUM))
        other = service.create_product({**ALBUM, "name": "Bleach"})
        with pytest.raises(ConflictError, match="^Error updating product: Product name already exists$"):
            service.update_product(other.id_product, {"name": "Nevermind"})

    def test_same_name_is_not_rechecked(self):
        repo = RecordingRepository(rows={1: SimpleNamespace(name="Nevermind", price=27.99)})
        ProductService(repo).update_product(1, {"name": "Nevermind"})
        assert repo.called("find_by_name") == []

    def test_invalid_price_rejected(self, service: ProductService):
        created = service.create_product(dict(ALBUM))
        with pytest.raises(ValidationError, match="^Error updating product: Price must be greater than 0$"):
            service.update_product(created.id_product, {"price": -5})

    def test_update_persists(self, service: ProductService):
        created = service.create_product(dict(ALBUM))
        updated = service.update_product(created.id_product, {"artist": "Nirvana (Remaster)", "genre_id": "4"})

        assert updated.artist == "Nirvana (Remaster)"
        assert updated.genre_id == 4
        assert updated.price == 27.99

    def test_store_reporting_no_rows_is_a_store_error(self):
        repo = RecordingRepository(rows={1: SimpleNamespace(name="Nevermind")}, update_result=False)
        with pytest.raises(StoreError, match="^Error updating product: Failed to update product$"):
            ProductService(repo).update_product(1, {"artist": "X"})


class TestDelete:
    def test_soft_delete_twice(self, service: ProductService):
        created = service.create_product(dict(ALBUM))

        first = service.delete_product(created.id_product)
        assert first is not None
        assert first.id_product == created.id_product
        assert service.delete_product(created.id_product) is None
        assert service.get_product_by_id(created.id_product) is None

    def test_hard_delete_returns_snapshot(self, service: ProductService):
        created = service.create_product(dict(ALBUM))

        removed = service.hard_delete_product(created.id_product)
        assert removed.name == "Nevermind"
        assert service.hard_delete_product(created.id_product) is None

    def test_hard_delete_of_soft_deleted_returns_none(self, service: ProductService):
        created = service.create_product(dict(ALBUM))
        service.delete_product(created.id_product)
        assert service.hard_delete_product(created.id_product) is None

    def test_delete_requires_id(self):
        with pytest.raises(ValidationError, match="^Error deleting product: Product ID is required for delete$"):
            ProductService(RecordingRepository()).delete_product(0)

    def test_hard_delete_requires_id(self):
        with pytest.raises(
            ValidationError,
            match="^Error permanently deleting product: Product ID is required for hard delete$",
        ):
            ProductService(RecordingRepository()).hard_delete_product(None)
