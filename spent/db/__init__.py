"""Database models and base configuration."""

from spent.db.base import Base
from spent.db.models import AppState

__all__ = ["Base", "AppState"]
