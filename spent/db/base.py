"""
Database base configuration and model base class.

Uses SQLAlchemy 2.0 declarative base.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all database models."""

    # Type annotation for mypy
    __tablename__: str
