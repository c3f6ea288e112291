"""Hierarchy-kind and codeRef rules."""
from __future__ import annotations

from typing import Dict, List

from c4studio.models.architecture_model import (
    PARENT_KIND,
    ArchitectureModel,
    Element,
    ElementKind,
)
from c4studio.validation.diagnostics import Diagnostic, ErrorCode, create_diagnostic


def validate_hierarchy(model: ArchitectureModel) -> List[Diagnostic]:
    """Check each element against the single legal parent kind for its kind.

    Parent existence is not checked here: a dangling ``parentId`` is reported
    by the reference rule only.
    """
    diagnostics: List[Diagnostic] = []
    element_map: Dict[str, Element] = {e.id: e for e in model.elements}

    for i, element in enumerate(model.elements):
        kind = element.kind.value

        if element.kind == ElementKind.CODE and element.code_ref is None:
            diagnostics.append(
                create_diagnostic(
                    ErrorCode.MISSING_CODE_REF,
                    f'Code element "{element.id}" must have a codeRef. '
                    "Add a codeRef with kind (module, file or symbol) and ref.",
                    f"elements[{i}].codeRef",
                )
            )
        if element.kind != ElementKind.CODE and element.code_ref is not None:
            diagnostics.append(
                create_diagnostic(
                    ErrorCode.INVALID_CODE_REF,
                    f'{kind} element "{element.id}" should not have a codeRef. '
                    "Only code elements may reference source artifacts.",
                    f"elements[{i}].codeRef",
                )
            )

        expected_parent_kind = PARENT_KIND[element.kind]

        if expected_parent_kind is None:
            if element.parent_id:
                diagnostics.append(
                    create_diagnostic(
                        ErrorCode.INVALID_HIERARCHY,
                        f'{kind} element "{element.id}" should not have a parent',
                        f"elements[{i}].parentId",
                    )
                )
            continue

        if not element.parent_id:
            diagnostics.append(
                create_diagnostic(
                    ErrorCode.INVALID_HIERARCHY,
                    f'{kind} element "{element.id}" must have a parent of kind "{expected_parent_kind.value}"',
                    f"elements[{i}].parentId",
                )
            )
            continue

        parent = element_map.get(element.parent_id)
        if parent is not None and parent.kind != expected_parent_kind:
            diagnostics.append(
                create_diagnostic(
                    ErrorCode.INVALID_HIERARCHY,
                    f'{kind} element "{element.id}" parent must be {expected_parent_kind.value}, '
                    f"but got {parent.kind.value}",
                    f"elements[{i}].parentId",
                )
            )

    return diagnostics
