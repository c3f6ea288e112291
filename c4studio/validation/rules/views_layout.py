"""Every view must carry a layout."""
from __future__ import annotations

from typing import List

from c4studio.models.architecture_model import ArchitectureModel
from c4studio.validation.diagnostics import Diagnostic, ErrorCode, create_diagnostic


def validate_views_layout(model: ArchitectureModel) -> List[Diagnostic]:
    diagnostics: List[Diagnostic] = []

    for i, view in enumerate(model.views):
        if view.layout is None:
            diagnostics.append(
                create_diagnostic(
                    ErrorCode.MISSING_LAYOUT,
                    f'View "{view.id}" is missing required layout. '
                    "Add a layout object with algorithm, nodes, and edges.",
                    f"views[{i}].layout",
                )
            )

    return diagnostics
