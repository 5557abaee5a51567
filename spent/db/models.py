"""
Database models for durable application state.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from spent.db.base import Base


class AppState(Base):
    """
    Key-value store for application state (active currency, etc.).

    Values are stored as serialized text exactly as written by the caller.
    """

    __tablename__ = "app_state"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False, comment="Serialized value")
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
