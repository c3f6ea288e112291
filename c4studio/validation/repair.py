"""Best-effort repair for models recovered from storage.

Only one problem is handled: systems without a landscape parent are
re-parented under a top-level landscape. Every other diagnostic is left alone.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from c4studio.models.architecture_model import ArchitectureModel, Element, ElementKind
from c4studio.model_transforms import (
    IMPLICIT_LANDSCAPE_DESCRIPTION,
    IMPLICIT_LANDSCAPE_NAME,
    new_element_id,
    top_level_landscape,
)
from c4studio.validation.diagnostics import Diagnostic, ErrorCode, errors_only
from c4studio.validation.validate import validate_model

logger = logging.getLogger(__name__)


@dataclass
class RepairResult:
    model: ArchitectureModel
    applied: bool
    changes_made: List[str] = field(default_factory=list)
    remaining: List[Diagnostic] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not errors_only(self.remaining)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "applied": self.applied,
            "success": self.success,
            "changes_made": self.changes_made,
            "remaining": [d.to_dict() for d in self.remaining],
            "model": self.model.to_dict(),
        }


def _mentions_orphaned_system(diagnostic: Diagnostic) -> bool:
    return (
        diagnostic.code == ErrorCode.INVALID_HIERARCHY
        and "system" in diagnostic.message
        and "landscape" in diagnostic.message
    )


def repair_model(
    model: ArchitectureModel,
    diagnostics: Optional[List[Diagnostic]] = None,
) -> RepairResult:
    """Attach parentless systems to a landscape, then re-validate.

    Never raises on unresolved problems; they are logged and returned in
    ``RepairResult.remaining``.
    """
    if diagnostics is None:
        diagnostics = validate_model(model)

    if not any(_mentions_orphaned_system(d) for d in diagnostics):
        return RepairResult(model=model, applied=False, remaining=list(diagnostics))

    repaired = model.model_copy(deep=True)
    changes: List[str] = []
    orphans = [e for e in repaired.elements if e.kind == ElementKind.SYSTEM and not e.parent_id]

    if orphans:
        landscape = top_level_landscape(repaired)
        if landscape is None:
            landscape = Element(
                id=new_element_id(repaired, prefix="landscape"),
                kind=ElementKind.LANDSCAPE,
                name=IMPLICIT_LANDSCAPE_NAME,
                description=IMPLICIT_LANDSCAPE_DESCRIPTION,
            )
            repaired.elements.append(landscape)
            changes.append(f"Created landscape '{landscape.id}'")

        for system in orphans:
            system.parent_id = landscape.id
            changes.append(f"Re-parented system '{system.id}' under landscape '{landscape.id}'")

    remaining = validate_model(repaired)
    unresolved = errors_only(remaining)
    if unresolved:
        logger.warning("Model repair left %d unresolved error(s)", len(unresolved))
        for diagnostic in unresolved:
            logger.warning("  %s", diagnostic.format())
    else:
        logger.info("Model repair complete: %s", "; ".join(changes) or "no changes")

    return RepairResult(
        model=repaired,
        applied=bool(changes),
        changes_made=changes,
        remaining=remaining,
    )
