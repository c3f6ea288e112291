"""Diagram level navigation for semantic zoom."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from c4studio.models.architecture_model import (
    HIERARCHY_ORDER,
    ArchitectureModel,
    Element,
    ElementKind,
    LayoutState,
    View,
)

DIAGRAM_TITLES: Dict[ElementKind, str] = {
    ElementKind.LANDSCAPE: "System Landscape",
    ElementKind.SYSTEM: "System Context",
    ElementKind.CONTAINER: "Container Diagram",
    ElementKind.COMPONENT: "Component Diagram",
    ElementKind.CODE: "Code Diagram",
}

# Kind of element a user adds while looking at each level.
KIND_FOR_LEVEL: Dict[ElementKind, ElementKind] = {
    ElementKind.LANDSCAPE: ElementKind.SYSTEM,
    ElementKind.SYSTEM: ElementKind.CONTAINER,
    ElementKind.CONTAINER: ElementKind.COMPONENT,
    ElementKind.COMPONENT: ElementKind.CODE,
    ElementKind.CODE: ElementKind.CODE,
}


@dataclass(frozen=True)
class DiagramContext:
    level: ElementKind
    focused_element_id: Optional[str] = None


def get_diagram_title(level: ElementKind, element_name: Optional[str] = None) -> str:
    base = DIAGRAM_TITLES[ElementKind(level)]
    return f"{base}: {element_name}" if element_name else base


def get_element_kind_for_level(level: ElementKind) -> ElementKind:
    return KIND_FOR_LEVEL[ElementKind(level)]


def can_drill_down(level: ElementKind) -> bool:
    return ElementKind(level) != ElementKind.CODE


def can_drill_up(level: ElementKind) -> bool:
    return ElementKind(level) != ElementKind.LANDSCAPE


def get_parent_level(level: ElementKind) -> Optional[ElementKind]:
    index = HIERARCHY_ORDER.index(ElementKind(level))
    return HIERARCHY_ORDER[index - 1] if index > 0 else None


def get_child_level(level: ElementKind) -> Optional[ElementKind]:
    index = HIERARCHY_ORDER.index(ElementKind(level))
    return HIERARCHY_ORDER[index + 1] if index < len(HIERARCHY_ORDER) - 1 else None


def drill_down(context: DiagramContext, element: Element) -> DiagramContext:
    if not can_drill_down(context.level):
        return context
    return DiagramContext(level=get_child_level(context.level), focused_element_id=element.id)


def drill_up(model: ArchitectureModel, context: DiagramContext) -> DiagramContext:
    """Step one level up, refocusing on the parent of the current focus."""
    if not can_drill_up(context.level):
        return context
    focused = model.find_element(context.focused_element_id) if context.focused_element_id else None
    return DiagramContext(
        level=get_parent_level(context.level),
        focused_element_id=focused.parent_id if focused is not None else None,
    )


def visible_elements(model: ArchitectureModel, context: DiagramContext) -> List[Element]:
    """Elements shown on the canvas for ``context``, in model order.

    A focused element shows its direct children. Without a focus the landscape
    shows every system and deeper levels show their top-level elements.
    """
    if context.focused_element_id:
        return [e for e in model.elements if e.parent_id == context.focused_element_id]
    if context.level == ElementKind.LANDSCAPE:
        return [e for e in model.elements if e.kind == ElementKind.SYSTEM]
    kind = get_element_kind_for_level(context.level)
    return [e for e in model.elements if e.kind == kind and not e.parent_id]


def filtered_view(model: ArchitectureModel, view: View, context: DiagramContext) -> View:
    """Copy of ``view`` whose layout only keeps the visible elements and their edges."""
    visible_ids = {e.id for e in visible_elements(model, context)}
    focused = model.find_element(context.focused_element_id) if context.focused_element_id else None
    title = get_diagram_title(context.level, focused.name if focused is not None else None)

    layout = None
    if view.layout is not None:
        rel_ids = {
            r.id
            for r in model.relationships
            if r.source_id in visible_ids and r.target_id in visible_ids
        }
        layout = LayoutState(
            algorithm=view.layout.algorithm,
            nodes=[n.model_copy() for n in view.layout.nodes if n.element_id in visible_ids],
            edges=[e.model_copy(deep=True) for e in view.layout.edges if e.relationship_id in rel_ids],
            viewport=view.layout.viewport,
        )
    return View(id=view.id, level=context.level, title=title, filter=view.filter, layout=layout)
