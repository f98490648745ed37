"""Seed the catalogue with the launch albums

Revision ID: 002_seed_products
Revises: 001_initial
Create Date: 2025-10-06 00:00:00.000000

"""

from datetime import date, datetime, timezone

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "002_seed_products"
down_revision = "001_initial"
branch_labels = None
depends_on = None

INITIAL_PRODUCTS = [
    ("Nevermind", "Nirvana", 27.99, 1, date(1991, 9, 24), "Grunge revolution that defined the 90s"),
    ("21", "Adele", 25.50, 2, date(2011, 1, 24), "Emotional pop ballads with record-breaking sales"),
    ("Illmatic", "Nas", 29.99, 3, date(1994, 4, 19), "Hip-hop classic with poetic storytelling"),
    ("Blue Train", "John Coltrane", 24.75, 4, date(1957, 9, 15), "Essential hard bop jazz album"),
    ("The Wall", "Pink Floyd", 33.99, 1, date(1979, 11, 30), "Progressive rock opera with iconic tracks"),
    ("Born to Die", "Lana Del Rey", 28.25, 2, date(2012, 1, 27), "Melancholic pop with cinematic production"),
]

product_table = sa.table(
    "product",
    sa.column("name", sa.String),
    sa.column("artist", sa.String),
    sa.column("price", sa.Float),
    sa.column("genre_id", sa.Integer),
    sa.column("publication_date", sa.Date),
    sa.column("description", sa.String),
    sa.column("created_at", sa.DateTime),
    sa.column("updated_at", sa.DateTime),
)


def upgrade() -> None:
    now = datetime.now(timezone.utc)
    op.bulk_insert(
        product_table,
        [
            {
                "name": name,
                "artist": artist,
                "price": price,
                "genre_id": genre_id,
                "publication_date": published,
                "description": description,
                "created_at": now,
                "updated_at": now,
            }
            for name, artist, price, genre_id, published, description in INITIAL_PRODUCTS
        ],
    )


def downgrade() -> None:
    names = [p[0] for p in INITIAL_PRODUCTS]
    op.execute(product_table.delete().where(product_table.c.name.in_(names)))
