"""
Shared persistence gateway behaviour for soft-deletable tables.

Gateways are deliberately dumb: they run filtered queries and report success
as booleans. Every read and every write except hard_delete ignores rows whose
deleted_at marker is set.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, update
from sqlmodel import Session, SQLModel, select

from storefront.models.timestamps import utcnow

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)


class SoftDeleteRepository(Generic[ModelT]):
    model: Type[ModelT]
    pk_name: str

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    @property
    def _pk(self):
        return getattr(self.model, self.pk_name)

    def _live(self):
        return select(self.model).where(self.model.deleted_at.is_(None))

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def find_all(self) -> List[ModelT]:
        return list(self.session.exec(self._live().order_by(self._pk)).all())

    def find_by_id(self, entity_id: Any) -> Optional[ModelT]:
        return self.session.exec(self._live().where(self._pk == entity_id)).first()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, fields: Dict[str, Any]) -> Optional[ModelT]:
        """Insert a row and return it re-read by id."""
        row = self.model(**fields)
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        return self.find_by_id(getattr(row, self.pk_name))

    def update(self, entity_id: Any, fields: Dict[str, Any]) -> bool:
        stmt = (
            update(self.model)
            .where(self._pk == entity_id, self.model.deleted_at.is_(None))
            .values(**fields)
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)
        self.session.commit()
        # Bulk UPDATE bypasses the identity map; force the next read to hit the row
        self.session.expire_all()
        return result.rowcount > 0

    def soft_delete(self, entity_id: Any) -> bool:
        stmt = (
            update(self.model)
            .where(self._pk == entity_id, self.model.deleted_at.is_(None))
            .values(deleted_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)
        self.session.commit()
        return result.rowcount > 0

    def hard_delete(self, entity_id: Any) -> bool:
        stmt = delete(self.model).where(self._pk == entity_id).execution_options(synchronize_session=False)
        result = self.session.execute(stmt)
        self.session.commit()
        logger.info(f"Hard delete on {self.model.__tablename__} id={entity_id}: {result.rowcount} row(s)")
        return result.rowcount > 0
