from c4studio.models.architecture_model import ArchitectureModel
from c4studio.validation import ErrorCode, get_validation_summary, is_valid, validate_model
from c4studio.validation.diagnostics import Diagnostic, Severity, create_diagnostic, errors_only


def test_valid_model_has_no_diagnostics(model):
    assert validate_model(model) == []
    assert is_valid(model)


def test_rules_run_in_fixed_order():
    model = ArchitectureModel.from_dict(
        {
            "elements": [
                {"id": "s", "kind": "system", "name": "S"},
                {"id": "s", "kind": "system", "name": "S again", "parentId": "ghost"},
            ],
            "views": [{"id": "v", "level": "system", "title": "V"}],
        }
    )
    codes = [d.code for d in validate_model(model)]
    assert codes == [
        ErrorCode.DUPLICATE_ID,
        ErrorCode.INVALID_REFERENCE,
        ErrorCode.INVALID_HIERARCHY,
        ErrorCode.MISSING_LAYOUT,
    ]


def test_validation_is_deterministic_and_pure(model):
    model.elements[1].parent_id = None
    model.views[0].layout = None
    snapshot = model.model_dump()
    first = validate_model(model)
    second = validate_model(model)
    assert first == second
    assert model.model_dump() == snapshot


def test_summary_counts_errors_and_warnings():
    diagnostics = [
        create_diagnostic(ErrorCode.MISSING_LAYOUT, "m", "views[0].layout"),
        create_diagnostic(ErrorCode.DEPRECATED_FIELD, "label is deprecated", "relationships[0].label", Severity.WARNING),
    ]
    assert get_validation_summary(diagnostics) == "Model is invalid | Errors: 1, Warnings: 1"
    assert errors_only(diagnostics) == diagnostics[:1]


def test_diagnostic_serialization():
    diagnostic = Diagnostic(ErrorCode.DUPLICATE_ID, 'Element ID "a" is not unique', "elements[1].id")
    assert diagnostic.to_dict() == {
        "code": "DUPLICATE_ID",
        "message": 'Element ID "a" is not unique',
        "path": "elements[1].id",
        "severity": "error",
    }
    assert diagnostic.format() == '[error] DUPLICATE_ID at elements[1].id: Element ID "a" is not unique'
