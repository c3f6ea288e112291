"""Pydantic schemas for API."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from c4studio.commands import Command
from c4studio.models.architecture_model import ElementKind


class DiagnosticResponse(BaseModel):
    code: str
    message: str
    path: str
    severity: str


class ValidationResponse(BaseModel):
    valid: bool
    summary: str
    diagnostics: List[DiagnosticResponse]


class LayoutRequest(BaseModel):
    model: Dict[str, Any]
    view_id: str = Field(..., alias="viewId")
    algorithm: Optional[str] = None
    spacing: Optional[float] = None
    padding: Optional[float] = None

    model_config = {
        "populate_by_name": True,
    }


class ZoomResponse(BaseModel):
    value: float
    level: ElementKind
    min_zoom: float
    max_zoom: float


class NewModelRequest(BaseModel):
    title: str = "New Architecture"


class CommandBatch(BaseModel):
    commands: List[Command]


class ModelStateResponse(BaseModel):
    model: Optional[Dict[str, Any]]
    diagnostics: List[DiagnosticResponse]
    is_dirty: bool
