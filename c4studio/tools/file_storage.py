"""File-backed autosave storage."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from c4studio.models.architecture_model import ArchitectureModel
from c4studio.tools.model_io import export_model, import_model
from c4studio.utils.config import settings
from c4studio.utils.file_utils import ensure_dir, read_text_file

logger = logging.getLogger(__name__)


class FileModelStore:
    """Keeps one model per key as ``<dir>/<key>.json`` plus ``<dir>/<key>-timestamp``.

    Failures never propagate: reads return ``None`` and writes are logged.
    """

    def __init__(self, directory: Optional[str] = None, key: Optional[str] = None) -> None:
        self.directory = directory or settings.autosave_dir
        self.key = key or settings.autosave_key

    @property
    def model_path(self) -> Path:
        return Path(self.directory) / f"{self.key}.json"

    @property
    def timestamp_path(self) -> Path:
        return Path(self.directory) / f"{self.key}-timestamp"

    def save(self, model: ArchitectureModel) -> None:
        try:
            ensure_dir(self.directory)
            self.model_path.write_text(export_model(model), encoding="utf-8")
            self.timestamp_path.write_text(datetime.now(timezone.utc).isoformat(), encoding="utf-8")
        except OSError:
            logger.exception("Failed to autosave model to %s", self.model_path)

    def load(self) -> Optional[ArchitectureModel]:
        if not self.model_path.exists():
            return None
        try:
            return import_model(read_text_file(str(self.model_path)))
        except (OSError, ValueError) as exc:
            # ModelImportError is a ValueError
            logger.error("Failed to load autosaved model from %s: %s", self.model_path, exc)
            return None

    def clear(self) -> None:
        for path in (self.model_path, self.timestamp_path):
            try:
                path.unlink(missing_ok=True)
            except OSError:
                logger.exception("Failed to remove %s", path)

    def timestamp(self) -> Optional[str]:
        try:
            return self.timestamp_path.read_text(encoding="utf-8").strip() or None
        except OSError:
            return None
