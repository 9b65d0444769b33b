"""SQLAlchemy Declarative Base — shared base class for all ORM models.

Design Decisions:
    - Separate file for Base: avoids circular imports between models (ADR: SQLAlchemy best practice)
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all catalog ORM models."""
    pass
