from datetime import date, datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from storefront.models.timestamps import utcnow


class Product(SQLModel, table=True):
    __tablename__ = "product"

    id_product: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    artist: str
    genre_id: int = Field(index=True)
    price: float
    publication_date: Optional[date] = None
    description: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow, sa_column_kwargs={"onupdate": utcnow})
    deleted_at: Optional[datetime] = Field(default=None, index=True)
