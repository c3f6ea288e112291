"""Autosave recovery and wiring."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Protocol, Tuple

from c4studio.models.architecture_model import ArchitectureModel, create_empty_model
from c4studio.services.model_store import ModelState, ModelStore
from c4studio.utils.config import settings
from c4studio.validation import Diagnostic, repair_model, validate_model

logger = logging.getLogger(__name__)


class ModelStorage(Protocol):
    def load(self) -> Optional[ArchitectureModel]: ...

    def save(self, model: ArchitectureModel) -> None: ...

    def clear(self) -> None: ...

    def timestamp(self) -> Optional[str]: ...


def get_storage() -> ModelStorage:
    """Storage backend selected by ``settings.storage_backend``."""
    if settings.storage_backend == "sql":
        from c4studio.tools.sql_storage import SqlModelStore

        return SqlModelStore()
    from c4studio.tools.file_storage import FileModelStore

    return FileModelStore()


def recover_model(storage: ModelStorage) -> Tuple[ArchitectureModel, List[Diagnostic]]:
    """Load the autosaved model (or a fresh one), then repair what can be repaired."""
    model = storage.load()
    if model is None:
        logger.info("No autosaved model found; starting from an empty model")
        model = create_empty_model()
    else:
        logger.info("Recovered autosaved model '%s' (saved %s)", model.metadata.title, storage.timestamp())

    diagnostics = validate_model(model)
    result = repair_model(model, diagnostics)
    if result.applied:
        for change in result.changes_made:
            logger.info("Autosave repair: %s", change)
    return result.model, result.remaining


def attach_autosave(model_store: ModelStore, storage: ModelStorage) -> Callable[[], None]:
    """Save every dirty state to ``storage``; returns the unsubscribe callback."""

    def _on_change(state: ModelState) -> None:
        if state.is_dirty and state.model is not None:
            storage.save(state.model)

    return model_store.subscribe(_on_change)
