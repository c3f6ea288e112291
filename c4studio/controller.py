"""Command controller for model mutation."""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from pydantic import TypeAdapter, ValidationError

from c4studio.commands import (
    Command,
    ElementAdded,
    ElementDeleted,
    ElementMoved,
    ElementUpdated,
    LayoutRequested,
    RelationshipDeleted,
    RelationshipRequested,
    RelationshipUpdated,
)
from c4studio.layout import LayoutOptions
from c4studio.model_transforms import (
    ModelTransformError,
    add_element_to_model,
    add_relationship_to_model,
    move_element,
    relayout_view,
    remove_element_from_model,
    remove_relationship_from_model,
    update_element_in_model,
    update_relationship_in_model,
)
from c4studio.models.architecture_model import DEFAULT_LAYOUT_ALGORITHM, ArchitectureModel

logger = logging.getLogger(__name__)

_COMMAND_ADAPTER: TypeAdapter[Command] = TypeAdapter(Command)


class CommandError(ValueError):
    pass


def parse_command(payload: Dict[str, Any]) -> Command:
    try:
        return _COMMAND_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise CommandError(f"Invalid command: {exc.errors()[0]['msg']}") from exc


def apply_command(model: ArchitectureModel, command: Command) -> ArchitectureModel:
    """Translate one command into the matching mutation helper."""
    try:
        return _dispatch(model, command)
    except ModelTransformError as exc:
        raise CommandError(str(exc)) from exc


def _dispatch(model: ArchitectureModel, command: Command) -> ArchitectureModel:
    if isinstance(command, ElementMoved):
        return move_element(model, command.view_id, command.element_id, command.x, command.y)
    if isinstance(command, RelationshipRequested):
        return add_relationship_to_model(
            model,
            view_id=command.view_id,
            source_id=command.source_id,
            target_id=command.target_id,
            type=command.relationship_type,
            id=command.relationship_id,
        )
    if isinstance(command, RelationshipUpdated):
        return update_relationship_in_model(model, command.relationship)
    if isinstance(command, RelationshipDeleted):
        if model.find_relationship(command.relationship_id) is None:
            raise CommandError(f"relationship_id '{command.relationship_id}' not found")
        return remove_relationship_from_model(model, command.relationship_id)
    if isinstance(command, ElementAdded):
        updated, element = add_element_to_model(
            model,
            command.kind,
            name=command.name,
            parent_id=command.parent_id,
            view_id=command.view_id,
            id=command.element_id,
        )
        logger.debug("Added %s element '%s'", element.kind.value, element.id)
        return updated
    if isinstance(command, ElementUpdated):
        return update_element_in_model(model, command.element)
    if isinstance(command, ElementDeleted):
        return remove_element_from_model(model, command.element_id)
    if isinstance(command, LayoutRequested):
        options = LayoutOptions(
            algorithm=command.algorithm or DEFAULT_LAYOUT_ALGORITHM,
            spacing=command.spacing,
            padding=command.padding,
        )
        elements = None
        if command.element_ids is not None:
            wanted = set(command.element_ids)
            elements = [e for e in model.elements if e.id in wanted]
        return relayout_view(model, command.view_id, options, elements)
    raise CommandError(f"Unsupported command '{getattr(command, 'type', command)}'")


def apply_commands(model: ArchitectureModel, commands: List[Command]) -> ArchitectureModel:
    for command in commands:
        model = apply_command(model, command)
    return model
