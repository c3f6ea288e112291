"""Reference integrity: relationship endpoints, parents and layout entries."""
from __future__ import annotations

from typing import List

from c4studio.models.architecture_model import ArchitectureModel
from c4studio.validation.diagnostics import Diagnostic, ErrorCode, create_diagnostic


def validate_references(model: ArchitectureModel) -> List[Diagnostic]:
    diagnostics: List[Diagnostic] = []
    element_ids = {e.id for e in model.elements}
    relationship_ids = {r.id for r in model.relationships}

    for i, rel in enumerate(model.relationships):
        if rel.source_id not in element_ids:
            diagnostics.append(
                create_diagnostic(
                    ErrorCode.INVALID_REFERENCE,
                    f'Relationship source "{rel.source_id}" does not exist',
                    f"relationships[{i}].sourceId",
                )
            )
        if rel.target_id not in element_ids:
            diagnostics.append(
                create_diagnostic(
                    ErrorCode.INVALID_REFERENCE,
                    f'Relationship target "{rel.target_id}" does not exist',
                    f"relationships[{i}].targetId",
                )
            )

    for i, element in enumerate(model.elements):
        if element.parent_id and element.parent_id not in element_ids:
            diagnostics.append(
                create_diagnostic(
                    ErrorCode.INVALID_REFERENCE,
                    f'Parent "{element.parent_id}" does not exist',
                    f"elements[{i}].parentId",
                )
            )

    for i, view in enumerate(model.views):
        # Missing layouts are reported by the views/layout rule.
        if view.layout is None:
            continue

        for j, node in enumerate(view.layout.nodes):
            if node.element_id not in element_ids:
                diagnostics.append(
                    create_diagnostic(
                        ErrorCode.INVALID_REFERENCE,
                        f'Layout node references missing element "{node.element_id}"',
                        f"views[{i}].layout.nodes[{j}].elementId",
                    )
                )

        for j, edge in enumerate(view.layout.edges):
            if edge.relationship_id not in relationship_ids:
                diagnostics.append(
                    create_diagnostic(
                        ErrorCode.INVALID_REFERENCE,
                        f'Layout edge references missing relationship "{edge.relationship_id}"',
                        f"views[{i}].layout.edges[{j}].relationshipId",
                    )
                )

    return diagnostics
