"""Typed canvas commands.

Each gesture on the canvas is expressed as one of these payloads and handed
to ``c4studio.controller.apply_command``.
"""
from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from c4studio.models.architecture_model import Element, ElementKind, Relationship


class _Command(BaseModel):
    model_config = {
        "populate_by_name": True,
    }


class ElementMoved(_Command):
    type: Literal["element_moved"] = "element_moved"
    view_id: str = Field(..., alias="viewId")
    element_id: str = Field(..., alias="elementId")
    x: float = Field(..., allow_inf_nan=False)
    y: float = Field(..., allow_inf_nan=False)


class RelationshipRequested(_Command):
    type: Literal["relationship_requested"] = "relationship_requested"
    view_id: str = Field(..., alias="viewId")
    source_id: str = Field(..., alias="sourceId")
    target_id: str = Field(..., alias="targetId")
    relationship_type: str = Field(default="relates_to", alias="relationshipType")
    relationship_id: Optional[str] = Field(default=None, alias="relationshipId")


class RelationshipUpdated(_Command):
    type: Literal["relationship_updated"] = "relationship_updated"
    relationship: Relationship


class RelationshipDeleted(_Command):
    type: Literal["relationship_deleted"] = "relationship_deleted"
    relationship_id: str = Field(..., alias="relationshipId")


class ElementAdded(_Command):
    type: Literal["element_added"] = "element_added"
    kind: ElementKind
    name: Optional[str] = None
    parent_id: Optional[str] = Field(default=None, alias="parentId")
    view_id: Optional[str] = Field(default=None, alias="viewId")
    element_id: Optional[str] = Field(default=None, alias="elementId")


class ElementUpdated(_Command):
    type: Literal["element_updated"] = "element_updated"
    element: Element


class ElementDeleted(_Command):
    type: Literal["element_deleted"] = "element_deleted"
    element_id: str = Field(..., alias="elementId")


class LayoutRequested(_Command):
    type: Literal["layout_requested"] = "layout_requested"
    view_id: str = Field(..., alias="viewId")
    algorithm: Optional[str] = None
    spacing: Optional[float] = Field(default=None, allow_inf_nan=False)
    padding: Optional[float] = Field(default=None, allow_inf_nan=False)
    element_ids: Optional[List[str]] = Field(default=None, alias="elementIds")


Command = Annotated[
    Union[
        ElementMoved,
        RelationshipRequested,
        RelationshipUpdated,
        RelationshipDeleted,
        ElementAdded,
        ElementUpdated,
        ElementDeleted,
        LayoutRequested,
    ],
    Field(discriminator="type"),
]
