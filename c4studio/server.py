"""REST API server."""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import Depends, FastAPI, Query
from fastapi.responses import JSONResponse, Response

from c4studio.controller import CommandError, apply_commands
from c4studio.db import Base, engine
from c4studio.layout import LayoutOptions, compute_layout, compute_semantic_zoom_level, get_zoom_range
from c4studio.models.architecture_model import create_empty_model
from c4studio.schemas import (
    CommandBatch,
    DiagnosticResponse,
    LayoutRequest,
    ModelStateResponse,
    NewModelRequest,
    ValidationResponse,
    ZoomResponse,
)
from c4studio.services.autosave_service import attach_autosave, get_storage, recover_model
from c4studio.services.model_store import ModelState, ModelStore
from c4studio.tools.model_io import ModelImportError, export_filename, export_model, parse_model_payload
from c4studio.utils.config import settings
from c4studio.validation import Diagnostic, get_validation_summary, repair_model, validate_model
from c4studio.validation.diagnostics import errors_only

logger = logging.getLogger(__name__)

app = FastAPI(title="c4studio API")

_model_store = ModelStore()


def get_model_store() -> ModelStore:
    if _model_store.model is None:
        _model_store.load_model(create_empty_model())
    return _model_store


@app.on_event("startup")
def on_startup() -> None:
    if settings.storage_backend == "sql":
        Base.metadata.create_all(bind=engine)
    storage = get_storage()
    model, diagnostics = recover_model(storage)
    _model_store.load_model(model)
    attach_autosave(_model_store, storage)
    logger.info("Loaded model '%s' with %d diagnostic(s)", model.metadata.title, len(diagnostics))


@app.get("/health")
async def health():
    return {"status": "ok"}


def _diagnostics(diagnostics: List[Diagnostic]) -> List[DiagnosticResponse]:
    return [DiagnosticResponse(**d.to_dict()) for d in diagnostics]


def _state_response(state: ModelState) -> ModelStateResponse:
    return ModelStateResponse(
        model=state.model.to_dict() if state.model is not None else None,
        diagnostics=_diagnostics(state.diagnostics),
        is_dirty=state.is_dirty,
    )


@app.post("/api/validate", response_model=ValidationResponse)
def validate_api(payload: Dict[str, Any]):
    try:
        model = parse_model_payload(payload)
    except ModelImportError as exc:
        return JSONResponse(status_code=400, content={"error": str(exc)})
    diagnostics = validate_model(model)
    return ValidationResponse(
        valid=not errors_only(diagnostics),
        summary=get_validation_summary(diagnostics),
        diagnostics=_diagnostics(diagnostics),
    )


@app.post("/api/layout")
def layout_api(payload: LayoutRequest):
    try:
        model = parse_model_payload(payload.model)
    except ModelImportError as exc:
        return JSONResponse(status_code=400, content={"error": str(exc)})
    view = model.find_view(payload.view_id)
    if view is None:
        return JSONResponse(status_code=404, content={"error": f"View '{payload.view_id}' not found"})
    options = LayoutOptions(
        algorithm=payload.algorithm or settings.layout_algorithm,
        spacing=payload.spacing if payload.spacing is not None else settings.layout_spacing,
        padding=payload.padding if payload.padding is not None else settings.layout_padding,
    )
    layout = compute_layout(model, view, options)
    return JSONResponse(content={"viewId": view.id, "layout": layout.to_dict()})


@app.get("/api/zoom", response_model=ZoomResponse)
def zoom_api(value: float = Query(...)):
    level = compute_semantic_zoom_level(value)
    min_zoom, max_zoom = get_zoom_range(level)
    return ZoomResponse(value=value, level=level, min_zoom=min_zoom, max_zoom=max_zoom)


@app.post("/api/repair")
def repair_api(payload: Dict[str, Any]):
    try:
        model = parse_model_payload(payload)
    except ModelImportError as exc:
        return JSONResponse(status_code=400, content={"error": str(exc)})
    result = repair_model(model)
    return JSONResponse(content=result.to_dict())


@app.get("/api/model", response_model=ModelStateResponse)
def get_model_api(store: ModelStore = Depends(get_model_store)):
    return _state_response(store.state)


@app.put("/api/model", response_model=ModelStateResponse)
def put_model_api(payload: Dict[str, Any], store: ModelStore = Depends(get_model_store)):
    try:
        model = parse_model_payload(payload)
    except ModelImportError as exc:
        return JSONResponse(status_code=400, content={"error": str(exc)})
    return _state_response(store.load_model(model))


@app.post("/api/model/new", response_model=ModelStateResponse)
def new_model_api(payload: NewModelRequest, store: ModelStore = Depends(get_model_store)):
    return _state_response(store.load_model(create_empty_model(payload.title)))


@app.post("/api/model/commands", response_model=ModelStateResponse)
def commands_api(payload: CommandBatch, store: ModelStore = Depends(get_model_store)):
    try:
        model = apply_commands(store.model, payload.commands)
    except CommandError as exc:
        return JSONResponse(status_code=400, content={"error": str(exc)})
    return _state_response(store.update_model(model))


@app.get("/api/model/export")
def export_model_api(store: ModelStore = Depends(get_model_store)):
    model = store.model
    store.clear_dirty()
    return Response(
        content=export_model(model),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{export_filename(model)}"'},
    )
