"""Diagnostic taxonomy shared by every validation rule."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List


class ErrorCode(str, Enum):
    DUPLICATE_ID = "DUPLICATE_ID"
    INVALID_REFERENCE = "INVALID_REFERENCE"
    INVALID_HIERARCHY = "INVALID_HIERARCHY"
    MISSING_LAYOUT = "MISSING_LAYOUT"
    MISSING_CODE_REF = "MISSING_CODE_REF"
    INVALID_CODE_REF = "INVALID_CODE_REF"
    DEPRECATED_FIELD = "DEPRECATED_FIELD"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding.

    ``path`` locates the offending field, e.g. ``elements[3].parentId`` or
    ``views[0].layout.edges[2].relationshipId``.
    """
    code: ErrorCode
    message: str
    path: str
    severity: Severity = Severity.ERROR

    def to_dict(self) -> Dict[str, str]:
        return {
            "code": self.code.value,
            "message": self.message,
            "path": self.path,
            "severity": self.severity.value,
        }

    def format(self) -> str:
        return f"[{self.severity.value}] {self.code.value} at {self.path}: {self.message}"


def create_diagnostic(
    code: ErrorCode,
    message: str,
    path: str,
    severity: Severity = Severity.ERROR,
) -> Diagnostic:
    return Diagnostic(code=code, message=message, path=path, severity=severity)


def errors_only(diagnostics: Iterable[Diagnostic]) -> List[Diagnostic]:
    return [d for d in diagnostics if d.severity == Severity.ERROR]
