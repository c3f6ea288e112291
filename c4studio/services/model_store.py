"""Single-writer application state container."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional

from c4studio.models.architecture_model import ArchitectureModel
from c4studio.validation import Diagnostic, validate_model

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelState:
    model: Optional[ArchitectureModel] = None
    diagnostics: List[Diagnostic] = field(default_factory=list)
    is_dirty: bool = False


Listener = Callable[[ModelState], None]


class ModelStore:
    """Holds the current model and its diagnostics.

    Every ``load_model``/``update_model`` re-validates and notifies listeners
    with a snapshot of the new state.
    """

    def __init__(self) -> None:
        self._state = ModelState()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> ModelState:
        return self._state

    @property
    def model(self) -> Optional[ArchitectureModel]:
        return self._state.model

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def load_model(self, model: ArchitectureModel) -> ModelState:
        self._state = ModelState(model=model, diagnostics=validate_model(model), is_dirty=False)
        self._notify()
        return self._state

    def update_model(self, model: ArchitectureModel) -> ModelState:
        self._state = ModelState(model=model, diagnostics=validate_model(model), is_dirty=True)
        self._notify()
        return self._state

    def clear_dirty(self) -> None:
        self._state = replace(self._state, is_dirty=False)
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._state)
