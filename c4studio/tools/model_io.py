"""Strict model import and export."""
from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Iterable, Union

from jsonschema import Draft202012Validator, ValidationError
from pydantic import ValidationError as PydanticValidationError

from c4studio.models.architecture_model import ArchitectureModel, CodeRefKind, ElementKind
from c4studio.utils.file_utils import read_text_file, write_text_file

logger = logging.getLogger(__name__)

KNOWN_SCHEMA_VERSIONS = ("0.1.0",)
TOP_LEVEL_FIELDS = ("schemaVersion", "metadata", "elements", "relationships", "constraints", "views")

_KINDS = [k.value for k in ElementKind]
_OPAQUE = {"type": "object"}

MODEL_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["schemaVersion"],
    "properties": {
        "schemaVersion": {"type": "string"},
        "metadata": {
            "type": "object",
            "properties": {
                "title": {"type": "string"},
                "description": {"type": "string"},
                "createdAt": {"type": "string"},
                "updatedAt": {"type": "string"},
            },
        },
        "elements": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "kind", "name"],
                "properties": {
                    "id": {"type": "string", "minLength": 1},
                    "kind": {"enum": _KINDS},
                    "name": {"type": "string"},
                    "description": {"type": "string"},
                    "parentId": {"type": "string"},
                    "tags": {"type": "array", "items": {"type": "string"}},
                    "attributes": _OPAQUE,
                    "technology": {"type": "string"},
                    "componentType": {"type": "string"},
                    "codeRef": {
                        "type": "object",
                        "required": ["kind", "ref"],
                        "properties": {
                            "kind": {"enum": [k.value for k in CodeRefKind]},
                            "ref": {"type": "string"},
                            "repoHint": {"type": "string"},
                        },
                    },
                },
            },
        },
        "relationships": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "sourceId", "targetId", "type"],
                "properties": {
                    "id": {"type": "string", "minLength": 1},
                    "sourceId": {"type": "string"},
                    "targetId": {"type": "string"},
                    "type": {"type": "string"},
                    "label": {"type": "string"},
                    "action": {"type": "string"},
                    "integrationMode": {"type": "string"},
                    "description": {"type": "string"},
                    "tags": {"type": "array", "items": {"type": "string"}},
                },
            },
        },
        "constraints": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "type"],
                "properties": {
                    "id": {"type": "string"},
                    "type": {"type": "string"},
                    "scope": _OPAQUE,
                    "parameters": _OPAQUE,
                    "severity": {"enum": ["error", "warning"]},
                },
            },
        },
        "views": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "level", "title"],
                "properties": {
                    "id": {"type": "string"},
                    "level": {"enum": _KINDS},
                    "title": {"type": "string"},
                    "filter": _OPAQUE,
                    # Optional here: a missing layout is reported by the validator.
                    "layout": {
                        "type": "object",
                        "required": ["algorithm", "nodes", "edges"],
                        "properties": {
                            "algorithm": {"type": "string"},
                            "nodes": {
                                "type": "array",
                                "items": {
                                    "type": "object",
                                    "required": ["elementId", "x", "y"],
                                    "properties": {
                                        "elementId": {"type": "string"},
                                        "x": {"type": "number"},
                                        "y": {"type": "number"},
                                        "w": {"type": "number", "minimum": 0},
                                        "h": {"type": "number", "minimum": 0},
                                        "collapsed": {"type": "boolean"},
                                    },
                                },
                            },
                            "edges": {
                                "type": "array",
                                "items": {
                                    "type": "object",
                                    "required": ["relationshipId"],
                                    "properties": {
                                        "relationshipId": {"type": "string"},
                                        "path": _OPAQUE,
                                    },
                                },
                            },
                            "viewport": _OPAQUE,
                        },
                    },
                },
            },
        },
    },
}

_VALIDATOR = Draft202012Validator(MODEL_SCHEMA)


class ModelImportError(ValueError):
    pass


def _format_path(parts: Iterable[Union[str, int]]) -> str:
    out = ""
    for part in parts:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out += f".{part}" if out else str(part)
    return out or "<root>"


def parse_model_payload(payload: Any) -> ArchitectureModel:
    """Apply the strict import policy to an already-decoded JSON value."""
    if not isinstance(payload, dict):
        raise ModelImportError("Model must be a JSON object")

    version = payload.get("schemaVersion")
    if not version:
        raise ModelImportError("Missing schemaVersion field")
    if version not in KNOWN_SCHEMA_VERSIONS:
        raise ModelImportError(f"Unknown schemaVersion: {version}")

    unknown = [key for key in payload if key not in TOP_LEVEL_FIELDS]
    if unknown:
        raise ModelImportError(f"Unknown fields in model: {', '.join(unknown)}")

    try:
        _VALIDATOR.validate(payload)
    except ValidationError as exc:
        raise ModelImportError(
            f"Model validation failed at {_format_path(exc.absolute_path)}: {exc.message}"
        ) from exc

    try:
        return ArchitectureModel.from_dict(payload)
    except PydanticValidationError as exc:
        raise ModelImportError(f"Model validation failed: {exc.errors()[0]['msg']}") from exc


def import_model(text: str) -> ArchitectureModel:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ModelImportError(f"Failed to parse JSON: {exc}") from exc
    return parse_model_payload(payload)


def import_model_file(path: str) -> ArchitectureModel:
    try:
        text = read_text_file(path)
    except (OSError, ValueError) as exc:
        raise ModelImportError(f"Failed to read file: {exc}") from exc
    model = import_model(text)
    logger.debug("Imported model '%s' from %s", model.metadata.title, path)
    return model


def export_model(model: ArchitectureModel) -> str:
    return model.to_json()


def export_filename(model: ArchitectureModel) -> str:
    slug = re.sub(r"\s+", "-", model.metadata.title.strip().lower())
    return f"{slug or 'architecture'}.arch.json"


def write_model_file(model: ArchitectureModel, path: str) -> str:
    return write_text_file(path, export_model(model))
