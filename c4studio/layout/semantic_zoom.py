"""Semantic zoom: continuous zoom factor to hierarchy level."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from c4studio.models.architecture_model import ElementKind


@dataclass(frozen=True)
class ZoomBehavior:
    level: ElementKind
    min_zoom: float
    max_zoom: float


# Closed, contiguous intervals; the first match wins so a shared boundary
# belongs to the coarser level.
ZOOM_THRESHOLDS: Tuple[ZoomBehavior, ...] = (
    ZoomBehavior(ElementKind.LANDSCAPE, 0.0, 0.2),
    ZoomBehavior(ElementKind.SYSTEM, 0.2, 0.4),
    ZoomBehavior(ElementKind.CONTAINER, 0.4, 0.6),
    ZoomBehavior(ElementKind.COMPONENT, 0.6, 0.8),
    ZoomBehavior(ElementKind.CODE, 0.8, 1.0),
)


def compute_semantic_zoom_level(zoom_value: float) -> ElementKind:
    if math.isnan(zoom_value):
        return ElementKind.LANDSCAPE

    normalized = max(0.0, min(1.0, zoom_value))
    for threshold in ZOOM_THRESHOLDS:
        if threshold.min_zoom <= normalized <= threshold.max_zoom:
            return threshold.level

    return ElementKind.LANDSCAPE


def get_zoom_range(level: ElementKind) -> Tuple[float, float]:
    for threshold in ZOOM_THRESHOLDS:
        if threshold.level == level:
            return threshold.min_zoom, threshold.max_zoom
    return ZOOM_THRESHOLDS[0].min_zoom, ZOOM_THRESHOLDS[0].max_zoom
