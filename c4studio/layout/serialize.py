"""Layout serialization utilities."""
from __future__ import annotations

from c4studio.models.architecture_model import LayoutState


def serialize_layout_state(layout: LayoutState) -> str:
    return layout.model_dump_json(by_alias=True, exclude_none=True, indent=2)


def deserialize_layout_state(text: str) -> LayoutState:
    return LayoutState.model_validate_json(text)


def clone_layout_state(layout: LayoutState) -> LayoutState:
    return layout.model_copy(deep=True)
