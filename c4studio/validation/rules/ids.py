"""ID uniqueness across the shared element/relationship namespace."""
from __future__ import annotations

from typing import List, Set

from c4studio.models.architecture_model import ArchitectureModel
from c4studio.validation.diagnostics import Diagnostic, ErrorCode, create_diagnostic


def validate_ids(model: ArchitectureModel) -> List[Diagnostic]:
    """First occurrence of an id wins; every later occurrence is reported."""
    diagnostics: List[Diagnostic] = []
    seen_ids: Set[str] = set()

    for i, element in enumerate(model.elements):
        if element.id in seen_ids:
            diagnostics.append(
                create_diagnostic(
                    ErrorCode.DUPLICATE_ID,
                    f'Element ID "{element.id}" is not unique',
                    f"elements[{i}].id",
                )
            )
        else:
            seen_ids.add(element.id)

    for i, relationship in enumerate(model.relationships):
        if relationship.id in seen_ids:
            diagnostics.append(
                create_diagnostic(
                    ErrorCode.DUPLICATE_ID,
                    f'Relationship ID "{relationship.id}" is not unique',
                    f"relationships[{i}].id",
                )
            )
        else:
            seen_ids.add(relationship.id)

    return diagnostics
