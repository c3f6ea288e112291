"""Deterministic layout computation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from c4studio.models.architecture_model import (
    DEFAULT_LAYOUT_ALGORITHM,
    ArchitectureModel,
    LayoutEdge,
    LayoutNode,
    LayoutState,
    View,
)

DEFAULT_SPACING = 150
DEFAULT_PADDING = 50
GRID_COLUMNS = 3
NODE_WIDTH = 120
NODE_HEIGHT = 80


@dataclass(frozen=True)
class LayoutOptions:
    algorithm: str = DEFAULT_LAYOUT_ALGORITHM
    spacing: Optional[float] = None
    padding: Optional[float] = None


def compute_layout(model: ArchitectureModel, view: View, options: LayoutOptions) -> LayoutState:
    """Arrange every element of ``model`` on a fixed 3-column grid.

    The caller filters ``model.elements`` down to what belongs in the view;
    ``view`` itself does not influence placement. ``options.algorithm`` is
    echoed back unchanged.

    Edges are derived: a relationship gets an edge only when both of its
    endpoints are among the laid-out elements.
    """
    spacing = options.spacing if options.spacing is not None else DEFAULT_SPACING
    padding = options.padding if options.padding is not None else DEFAULT_PADDING

    nodes = []
    for index, element in enumerate(model.elements):
        col = index % GRID_COLUMNS
        row = index // GRID_COLUMNS
        nodes.append(
            LayoutNode(
                element_id=element.id,
                x=padding + col * spacing,
                y=padding + row * spacing,
                w=NODE_WIDTH,
                h=NODE_HEIGHT,
            )
        )

    element_ids = {e.id for e in model.elements}
    edges = [
        LayoutEdge(relationship_id=rel.id)
        for rel in model.relationships
        if rel.source_id in element_ids and rel.target_id in element_ids
    ]

    return LayoutState(algorithm=options.algorithm, nodes=nodes, edges=edges)
