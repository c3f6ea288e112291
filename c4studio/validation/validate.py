"""Main validation entrypoint."""
from __future__ import annotations

from typing import Callable, List, Tuple

from c4studio.models.architecture_model import ArchitectureModel
from c4studio.validation.diagnostics import Diagnostic, Severity
from c4studio.validation.rules import (
    validate_hierarchy,
    validate_ids,
    validate_references,
    validate_views_layout,
)

Rule = Callable[[ArchitectureModel], List[Diagnostic]]

# Order is part of the contract: diagnostics are reported in rule order.
RULES: Tuple[Rule, ...] = (
    validate_ids,
    validate_references,
    validate_hierarchy,
    validate_views_layout,
)


def validate_model(model: ArchitectureModel) -> List[Diagnostic]:
    """Run every rule and concatenate the findings.

    Reports only: nothing is deduplicated, short-circuited or repaired.
    """
    diagnostics: List[Diagnostic] = []
    for rule in RULES:
        diagnostics.extend(rule(model))
    return diagnostics


def is_valid(model: ArchitectureModel) -> bool:
    return not any(d.severity == Severity.ERROR for d in validate_model(model))


def get_validation_summary(diagnostics: List[Diagnostic]) -> str:
    error_count = sum(1 for d in diagnostics if d.severity == Severity.ERROR)
    warning_count = len(diagnostics) - error_count
    status = "valid" if error_count == 0 else "invalid"
    return f"Model is {status} | Errors: {error_count}, Warnings: {warning_count}"
