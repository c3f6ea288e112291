"""Database engine and sessions backing the SQL autosave store (``autosaves`` table)."""
from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from c4studio.utils.config import settings


class Base(DeclarativeBase):
    pass


# SQLite connections are shared with the server's worker threads.
_connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

engine = create_engine(settings.database_url, pool_pre_ping=True, connect_args=_connect_args)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
