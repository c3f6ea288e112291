"""SQLAlchemy models for autosaved architecture models."""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String, JSON
from sqlalchemy.orm import Mapped, mapped_column

from c4studio.db import Base


class AutosaveRecord(Base):
    __tablename__ = "autosaves"

    key: Mapped[str] = mapped_column(String(200), primary_key=True)
    model_json: Mapped[dict] = mapped_column(JSON)
    saved_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
