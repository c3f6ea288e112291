"""Core ArchitectureModel (framework-agnostic).

The JSON wire format uses camelCase keys; attributes are snake_case and the
models accept either spelling on input.
"""
from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

SCHEMA_VERSION = "0.1.0"
DEFAULT_LAYOUT_ALGORITHM = "deterministic-v1"


class ElementKind(str, Enum):
    """Hierarchy levels, ordered from root to leaf."""
    LANDSCAPE = "landscape"
    SYSTEM = "system"
    CONTAINER = "container"
    COMPONENT = "component"
    CODE = "code"


# Declaration order of ElementKind is the hierarchy order.
HIERARCHY_ORDER: tuple[ElementKind, ...] = tuple(ElementKind)

# Each kind has exactly one legal parent kind.
PARENT_KIND: Dict[ElementKind, Optional[ElementKind]] = {
    ElementKind.LANDSCAPE: None,
    ElementKind.SYSTEM: ElementKind.LANDSCAPE,
    ElementKind.CONTAINER: ElementKind.SYSTEM,
    ElementKind.COMPONENT: ElementKind.CONTAINER,
    ElementKind.CODE: ElementKind.COMPONENT,
}


class CodeRefKind(str, Enum):
    MODULE = "module"
    FILE = "file"
    SYMBOL = "symbol"


class _WireModel(BaseModel):
    model_config = {
        "populate_by_name": True,
    }

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class CodeRef(_WireModel):
    kind: CodeRefKind
    ref: str
    repo_hint: Optional[str] = Field(default=None, alias="repoHint")


class Element(_WireModel):
    id: str
    kind: ElementKind
    name: str
    description: Optional[str] = None
    parent_id: Optional[str] = Field(default=None, alias="parentId")
    tags: Optional[List[str]] = None
    attributes: Optional[Dict[str, Any]] = None
    code_ref: Optional[CodeRef] = Field(default=None, alias="codeRef")
    technology: Optional[str] = None  # containers, e.g. "Spring Boot"
    component_type: Optional[str] = Field(default=None, alias="componentType")  # components, e.g. "Repository"


class Relationship(_WireModel):
    id: str
    source_id: str = Field(..., alias="sourceId")
    target_id: str = Field(..., alias="targetId")
    type: str
    label: Optional[str] = None  # deprecated, superseded by action
    action: Optional[str] = None
    integration_mode: Optional[str] = Field(default=None, alias="integrationMode")
    description: Optional[str] = None
    tags: Optional[List[str]] = None


class Constraint(_WireModel):
    id: str
    type: str
    scope: Dict[str, Any] = Field(default_factory=dict)
    parameters: Optional[Dict[str, Any]] = None
    severity: Literal["error", "warning"] = "error"


class LayoutNode(_WireModel):
    element_id: str = Field(..., alias="elementId")
    x: float = Field(..., allow_inf_nan=False)
    y: float = Field(..., allow_inf_nan=False)
    w: Optional[float] = Field(default=None, allow_inf_nan=False)
    h: Optional[float] = Field(default=None, allow_inf_nan=False)
    collapsed: Optional[bool] = None


class LayoutEdge(_WireModel):
    relationship_id: str = Field(..., alias="relationshipId")
    path: Optional[Dict[str, Any]] = None


class LayoutState(_WireModel):
    algorithm: str
    nodes: List[LayoutNode] = Field(default_factory=list)
    edges: List[LayoutEdge] = Field(default_factory=list)
    viewport: Optional[Dict[str, Any]] = None


class View(_WireModel):
    id: str
    level: ElementKind
    title: str
    filter: Optional[Dict[str, Any]] = None
    layout: Optional[LayoutState] = None

    def find_node(self, element_id: str) -> Optional[LayoutNode]:
        if self.layout is None:
            return None
        return next((n for n in self.layout.nodes if n.element_id == element_id), None)


class Metadata(_WireModel):
    title: str = ""
    description: Optional[str] = None
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")


class ArchitectureModel(_WireModel):
    schema_version: str = Field(default=SCHEMA_VERSION, alias="schemaVersion")
    metadata: Metadata = Field(default_factory=Metadata)
    elements: List[Element] = Field(default_factory=list)
    relationships: List[Relationship] = Field(default_factory=list)
    constraints: List[Constraint] = Field(default_factory=list)
    views: List[View] = Field(default_factory=list)

    model_config = {
        "populate_by_name": True,
        "extra": "forbid",
    }

    def find_element(self, element_id: str) -> Optional[Element]:
        return next((e for e in self.elements if e.id == element_id), None)

    def find_relationship(self, relationship_id: str) -> Optional[Relationship]:
        return next((r for r in self.relationships if r.id == relationship_id), None)

    def find_view(self, view_id: str) -> Optional[View]:
        return next((v for v in self.views if v.id == view_id), None)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "ArchitectureModel":
        return cls.model_validate(payload)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def create_empty_model(title: str = "New Architecture") -> ArchitectureModel:
    """Fresh skeleton: no elements, one empty system-context view."""
    now = _now_iso()
    return ArchitectureModel(
        schema_version=SCHEMA_VERSION,
        metadata=Metadata(
            title=title,
            description="Created with c4studio",
            created_at=now,
            updated_at=now,
        ),
        views=[
            View(
                id="view-1",
                level=ElementKind.SYSTEM,
                title="System Context",
                layout=LayoutState(algorithm=DEFAULT_LAYOUT_ALGORITHM),
            )
        ],
    )
