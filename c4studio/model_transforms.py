"""Deterministic model mutation engine for canvas edits.

Every helper returns a new ArchitectureModel; the input is never touched.
"""
from __future__ import annotations

import logging
import math
import uuid
from typing import Iterable, List, Optional, Set, Tuple

from c4studio.layout.compute_layout import LayoutOptions, compute_layout
from c4studio.models.architecture_model import (
    DEFAULT_LAYOUT_ALGORITHM,
    ArchitectureModel,
    Element,
    ElementKind,
    LayoutEdge,
    LayoutNode,
    LayoutState,
    Relationship,
)

logger = logging.getLogger(__name__)

DEFAULT_RELATIONSHIP_TYPE = "relates_to"
IMPLICIT_LANDSCAPE_NAME = "Architecture Landscape"
IMPLICIT_LANDSCAPE_DESCRIPTION = "Top-level architecture landscape"
NEW_NODE_WIDTH = 120
NEW_NODE_HEIGHT = 80


class ModelTransformError(ValueError):
    pass


def _existing_ids(model: ArchitectureModel) -> Set[str]:
    return {e.id for e in model.elements} | {r.id for r in model.relationships}


def _new_id(model: ArchitectureModel, prefix: str) -> str:
    existing = _existing_ids(model)
    while True:
        candidate = f"{prefix}-{uuid.uuid4().hex[:8]}"
        if candidate not in existing:
            return candidate


def new_element_id(model: ArchitectureModel, prefix: str = "elem") -> str:
    return _new_id(model, prefix)


def new_relationship_id(model: ArchitectureModel) -> str:
    return _new_id(model, "rel")


def add_relationship_to_model(
    model: ArchitectureModel,
    *,
    view_id: str,
    source_id: str,
    target_id: str,
    type: str = DEFAULT_RELATIONSHIP_TYPE,
    id: Optional[str] = None,
) -> ArchitectureModel:
    """Append a relationship and draw its edge in ``view_id`` only.

    Endpoints are not checked here; dangling ids surface as
    INVALID_REFERENCE on the next validation pass.
    """
    updated = model.model_copy(deep=True)
    rel_id = id or new_relationship_id(updated)
    updated.relationships.append(
        Relationship(id=rel_id, source_id=source_id, target_id=target_id, type=type)
    )

    view = updated.find_view(view_id)
    if view is None:
        logger.warning("View '%s' not found; relationship '%s' added without an edge", view_id, rel_id)
    elif view.layout is None:
        logger.warning("View '%s' has no layout; relationship '%s' added without an edge", view_id, rel_id)
    else:
        view.layout.edges.append(LayoutEdge(relationship_id=rel_id))

    return updated


def remove_relationship_from_model(model: ArchitectureModel, relationship_id: str) -> ArchitectureModel:
    updated = model.model_copy(deep=True)
    updated.relationships = [r for r in updated.relationships if r.id != relationship_id]
    for view in updated.views:
        if view.layout is None:
            continue
        view.layout.edges = [e for e in view.layout.edges if e.relationship_id != relationship_id]
    return updated


def update_relationship_in_model(model: ArchitectureModel, relationship: Relationship) -> ArchitectureModel:
    updated = model.model_copy(deep=True)
    for index, existing in enumerate(updated.relationships):
        if existing.id == relationship.id:
            updated.relationships[index] = relationship.model_copy(deep=True)
            return updated
    raise ModelTransformError(f"relationship_id '{relationship.id}' not found")


def top_level_landscape(model: ArchitectureModel) -> Optional[Element]:
    return next(
        (e for e in model.elements if e.kind == ElementKind.LANDSCAPE and not e.parent_id),
        None,
    )


def add_element_to_model(
    model: ArchitectureModel,
    kind: ElementKind,
    name: Optional[str] = None,
    parent_id: Optional[str] = None,
    view_id: Optional[str] = None,
    id: Optional[str] = None,
) -> Tuple[ArchitectureModel, Element]:
    """Append a new element and place it in a view.

    A system added without a parent is attached to the top-level landscape,
    which is created first when the model has none. The node lands in
    ``view_id`` or, by default, the first view, staggered by element count.
    """
    kind = ElementKind(kind)
    updated = model.model_copy(deep=True)

    if parent_id is None and kind == ElementKind.SYSTEM:
        landscape = top_level_landscape(updated)
        if landscape is None:
            landscape = Element(
                id=new_element_id(updated, prefix="landscape"),
                kind=ElementKind.LANDSCAPE,
                name=IMPLICIT_LANDSCAPE_NAME,
                description=IMPLICIT_LANDSCAPE_DESCRIPTION,
            )
            updated.elements.append(landscape)
            logger.info("Created implicit landscape '%s'", landscape.id)
        parent_id = landscape.id

    element_id = id or new_element_id(updated, prefix=kind.value)
    if element_id in _existing_ids(updated):
        raise ModelTransformError(f"id '{element_id}' already exists")

    element = Element(
        id=element_id,
        kind=kind,
        name=name or f"New {kind.value.capitalize()}",
        parent_id=parent_id,
    )
    updated.elements.append(element)

    view = updated.find_view(view_id) if view_id else (updated.views[0] if updated.views else None)
    if view_id and view is None:
        raise ModelTransformError(f"view_id '{view_id}' not found")
    if view is not None:
        if view.layout is None:
            view.layout = LayoutState(algorithm=DEFAULT_LAYOUT_ALGORITHM)
        n = len(updated.elements)
        view.layout.nodes.append(
            LayoutNode(
                element_id=element_id,
                x=100 + n * 30,
                y=100 + n * 20,
                w=NEW_NODE_WIDTH,
                h=NEW_NODE_HEIGHT,
            )
        )

    return updated, element.model_copy(deep=True)


def update_element_in_model(model: ArchitectureModel, element: Element) -> ArchitectureModel:
    updated = model.model_copy(deep=True)
    for index, existing in enumerate(updated.elements):
        if existing.id == element.id:
            updated.elements[index] = element.model_copy(deep=True)
            return updated
    raise ModelTransformError(f"element_id '{element.id}' not found")


def _with_descendants(elements: Iterable[Element], root_id: str) -> Set[str]:
    elements = list(elements)
    removed = {root_id}
    changed = True
    while changed:
        changed = False
        for element in elements:
            if element.parent_id in removed and element.id not in removed:
                removed.add(element.id)
                changed = True
    return removed


def remove_element_from_model(model: ArchitectureModel, element_id: str) -> ArchitectureModel:
    """Remove an element together with its subtree and everything pointing at it."""
    if model.find_element(element_id) is None:
        raise ModelTransformError(f"element_id '{element_id}' not found")

    updated = model.model_copy(deep=True)
    removed = _with_descendants(updated.elements, element_id)
    dropped_rels = {
        r.id for r in updated.relationships if r.source_id in removed or r.target_id in removed
    }

    updated.elements = [e for e in updated.elements if e.id not in removed]
    updated.relationships = [r for r in updated.relationships if r.id not in dropped_rels]
    for view in updated.views:
        if view.layout is None:
            continue
        view.layout.nodes = [n for n in view.layout.nodes if n.element_id not in removed]
        view.layout.edges = [e for e in view.layout.edges if e.relationship_id not in dropped_rels]

    if len(removed) > 1 or dropped_rels:
        logger.info(
            "Removed element '%s' with %d descendant(s) and %d relationship(s)",
            element_id,
            len(removed) - 1,
            len(dropped_rels),
        )
    return updated


def move_element(model: ArchitectureModel, view_id: str, element_id: str, x: float, y: float) -> ArchitectureModel:
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ModelTransformError(f"position ({x}, {y}) for element_id '{element_id}' must be finite")
    updated = model.model_copy(deep=True)
    view = updated.find_view(view_id)
    if view is None:
        raise ModelTransformError(f"view_id '{view_id}' not found")
    node = view.find_node(element_id)
    if node is None:
        raise ModelTransformError(f"element_id '{element_id}' has no node in view '{view_id}'")
    node.x = x
    node.y = y
    return updated


def relayout_view(
    model: ArchitectureModel,
    view_id: str,
    options: LayoutOptions,
    elements: Optional[List[Element]] = None,
) -> ArchitectureModel:
    """Replace one view's layout with a fresh grid over ``elements``.

    ``elements`` defaults to every element of the model.
    """
    updated = model.model_copy(deep=True)
    view = updated.find_view(view_id)
    if view is None:
        raise ModelTransformError(f"view_id '{view_id}' not found")

    scoped = updated if elements is None else updated.model_copy(
        update={"elements": [e.model_copy(deep=True) for e in elements]}
    )
    view.layout = compute_layout(scoped, view, options)
    return updated
