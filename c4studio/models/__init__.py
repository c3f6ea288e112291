"""Architecture model types."""
from c4studio.models.architecture_model import (
    HIERARCHY_ORDER,
    PARENT_KIND,
    SCHEMA_VERSION,
    ArchitectureModel,
    CodeRef,
    CodeRefKind,
    Constraint,
    Element,
    ElementKind,
    LayoutEdge,
    LayoutNode,
    LayoutState,
    Metadata,
    Relationship,
    View,
    create_empty_model,
)

__all__ = [
    "HIERARCHY_ORDER",
    "PARENT_KIND",
    "SCHEMA_VERSION",
    "ArchitectureModel",
    "CodeRef",
    "CodeRefKind",
    "Constraint",
    "Element",
    "ElementKind",
    "LayoutEdge",
    "LayoutNode",
    "LayoutState",
    "Metadata",
    "Relationship",
    "View",
    "create_empty_model",
]
