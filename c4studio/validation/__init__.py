"""Model validation and best-effort repair."""
from c4studio.validation.diagnostics import Diagnostic, ErrorCode, Severity, create_diagnostic
from c4studio.validation.validate import get_validation_summary, is_valid, validate_model
from c4studio.validation.repair import RepairResult, repair_model

__all__ = [
    "Diagnostic",
    "ErrorCode",
    "Severity",
    "create_diagnostic",
    "validate_model",
    "is_valid",
    "get_validation_summary",
    "RepairResult",
    "repair_model",
]
