"""ORM Models — SQLAlchemy declarative models.

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all / alembic
"""

from catalog.models.product import Product  # noqa: F401
