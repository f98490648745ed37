from pathlib import Path
from typing import Generator

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from storefront.config import DATABASE_URL, SQL_ECHO

_is_sqlite = DATABASE_URL.startswith("sqlite")
_connect_args = {"check_same_thread": False} if _is_sqlite else {}

if _is_sqlite and ":memory:" not in DATABASE_URL:
    db_path = DATABASE_URL.replace("sqlite:///", "", 1)
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

engine: Engine = create_engine(
    DATABASE_URL,
    echo=SQL_ECHO,
    connect_args=_connect_args,
)


def get_session() -> Generator[Session, None, None]:
    """Get database session

    expire_on_commit is off so rows read before a delete stay readable
    after the commit (services return pre-delete snapshots).
    """
    with Session(engine, expire_on_commit=False) as session:
        yield session


def init_db() -> None:
    """Initialize database - create all tables"""
    # Import all models to ensure they're registered with SQLModel metadata
    from storefront.models.order_header import OrderHeader  # noqa: F401
    from storefront.models.payment import Payment  # noqa: F401
    from storefront.models.product import Product  # noqa: F401
    from storefront.models.user import User  # noqa: F401

    SQLModel.metadata.create_all(engine)
