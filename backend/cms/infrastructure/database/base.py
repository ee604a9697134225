"""SQLAlchemy declarative base shared by the articles and settings tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models; ``Base.metadata`` drives create_all."""
