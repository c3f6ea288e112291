"""SQL-backed autosave storage."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session as DbSession

from c4studio.db import SessionLocal
from c4studio.db_models import AutosaveRecord
from c4studio.models.architecture_model import ArchitectureModel
from c4studio.tools.model_io import parse_model_payload
from c4studio.utils.config import settings

logger = logging.getLogger(__name__)


class SqlModelStore:
    """Keeps one model per key as a row of the ``autosaves`` table."""

    def __init__(
        self,
        session_factory: Callable[[], DbSession] = SessionLocal,
        key: Optional[str] = None,
    ) -> None:
        self.session_factory = session_factory
        self.key = key or settings.autosave_key

    def save(self, model: ArchitectureModel) -> None:
        db = self.session_factory()
        try:
            record = db.get(AutosaveRecord, self.key)
            if record is None:
                record = AutosaveRecord(key=self.key)
                db.add(record)
            record.model_json = model.to_dict()
            record.saved_at = datetime.utcnow()
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Failed to autosave model under key %s", self.key)
        finally:
            db.close()

    def load(self) -> Optional[ArchitectureModel]:
        db = self.session_factory()
        try:
            record = db.get(AutosaveRecord, self.key)
            if record is None:
                return None
            return parse_model_payload(record.model_json)
        except SQLAlchemyError:
            logger.exception("Failed to load autosaved model under key %s", self.key)
            return None
        except ValueError as exc:
            logger.error("Autosaved model under key %s is unreadable: %s", self.key, exc)
            return None
        finally:
            db.close()

    def clear(self) -> None:
        db = self.session_factory()
        try:
            record = db.get(AutosaveRecord, self.key)
            if record is not None:
                db.delete(record)
                db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Failed to clear autosave under key %s", self.key)
        finally:
            db.close()

    def timestamp(self) -> Optional[str]:
        db = self.session_factory()
        try:
            record = db.get(AutosaveRecord, self.key)
            return record.saved_at.isoformat() if record is not None else None
        except SQLAlchemyError:
            logger.exception("Failed to read autosave timestamp under key %s", self.key)
            return None
        finally:
            db.close()
