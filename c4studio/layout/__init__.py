"""Deterministic layout and semantic zoom."""
from c4studio.layout.compute_layout import LayoutOptions, compute_layout
from c4studio.layout.semantic_zoom import ZOOM_THRESHOLDS, compute_semantic_zoom_level, get_zoom_range
from c4studio.layout.serialize import clone_layout_state, deserialize_layout_state, serialize_layout_state

__all__ = [
    "LayoutOptions",
    "compute_layout",
    "ZOOM_THRESHOLDS",
    "compute_semantic_zoom_level",
    "get_zoom_range",
    "serialize_layout_state",
    "deserialize_layout_state",
    "clone_layout_state",
]
