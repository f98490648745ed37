from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from storefront.models.timestamps import utcnow


class User(SQLModel, table=True):
    __tablename__ = "user"

    id_user: Optional[int] = Field(default=None, primary_key=True)
    name: str
    last_name: str
    phone: Optional[str] = None
    # Uniqueness is enforced among live rows by UserService, so a soft-deleted
    # row must not block re-registration of the same address.
    email: str = Field(index=True)
    password: str  # bcrypt hash
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow, sa_column_kwargs={"onupdate": utcnow})
    deleted_at: Optional[datetime] = Field(default=None, index=True)
