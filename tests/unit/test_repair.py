import logging

from c4studio.models.architecture_model import ArchitectureModel, ElementKind
from c4studio.validation import ErrorCode, repair_model, validate_model


def _orphan_systems():
    return ArchitectureModel.from_dict(
        {
            "elements": [
                {"id": "sys-1", "kind": "system", "name": "A"},
                {"id": "sys-2", "kind": "system", "name": "B"},
            ],
            "views": [
                {"id": "v", "level": "system", "title": "S", "layout": {"algorithm": "a", "nodes": [], "edges": []}}
            ],
        }
    )


def test_synthesizes_landscape_for_orphan_systems():
    model = _orphan_systems()
    result = repair_model(model)
    assert result.applied
    assert result.success
    landscape = result.model.elements[-1]
    assert landscape.kind == ElementKind.LANDSCAPE
    assert landscape.name == "Architecture Landscape"
    assert landscape.parent_id is None
    assert [e.parent_id for e in result.model.elements[:2]] == [landscape.id, landscape.id]
    assert validate_model(result.model) == []
    assert model.elements[0].parent_id is None


def test_reuses_existing_top_level_landscape(model):
    model.elements[2].parent_id = None
    result = repair_model(model)
    assert result.model.elements[2].parent_id == "land-1"
    assert len(result.model.elements) == len(model.elements)


def test_ignores_other_diagnostics(model):
    model.views[0].layout = None
    diagnostics = validate_model(model)
    result = repair_model(model, diagnostics)
    assert not result.applied
    assert result.model is model
    assert [d.code for d in result.remaining] == [ErrorCode.MISSING_LAYOUT]


def test_logs_instead_of_raising_when_errors_remain(caplog):
    model = _orphan_systems()
    model.views[0].layout = None
    with caplog.at_level(logging.WARNING, logger="c4studio.validation.repair"):
        result = repair_model(model)
    assert result.applied
    assert not result.success
    assert "unresolved" in caplog.text
    assert "MISSING_LAYOUT" in caplog.text


def test_to_dict_shape():
    data = repair_model(_orphan_systems()).to_dict()
    assert data["applied"] is True
    assert data["success"] is True
    assert len(data["changes_made"]) == 3
    assert data["model"]["elements"][0]["parentId"].startswith("landscape-")
