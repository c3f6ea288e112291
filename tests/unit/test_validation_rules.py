from c4studio.models.architecture_model import ArchitectureModel, CodeRef, Element, LayoutEdge, LayoutNode
from c4studio.validation.diagnostics import ErrorCode, Severity
from c4studio.validation.rules import (
    validate_hierarchy,
    validate_ids,
    validate_references,
    validate_views_layout,
)


def _codes(diagnostics):
    return [d.code for d in diagnostics]


def test_valid_model_passes_every_rule(model):
    assert validate_ids(model) == []
    assert validate_references(model) == []
    assert validate_hierarchy(model) == []
    assert validate_views_layout(model) == []


def test_duplicate_element_ids():
    model = ArchitectureModel.from_dict(
        {
            "elements": [
                {"id": "duplicate", "kind": "system", "name": "A", "parentId": "landscape-1"},
                {"id": "duplicate", "kind": "container", "name": "B", "parentId": "system-1"},
            ]
        }
    )
    diagnostics = validate_ids(model)
    assert len(diagnostics) == 1
    assert diagnostics[0].code == ErrorCode.DUPLICATE_ID
    assert "duplicate" in diagnostics[0].message
    assert diagnostics[0].path == "elements[1].id"


def test_every_later_occurrence_is_reported():
    model = ArchitectureModel.from_dict(
        {
            "elements": [
                {"id": "x", "kind": "landscape", "name": "A"},
                {"id": "x", "kind": "landscape", "name": "B"},
                {"id": "x", "kind": "landscape", "name": "C"},
            ]
        }
    )
    assert [d.path for d in validate_ids(model)] == ["elements[1].id", "elements[2].id"]


def test_relationship_id_colliding_with_element_id():
    model = ArchitectureModel.from_dict(
        {
            "elements": [{"id": "shared", "kind": "landscape", "name": "L"}],
            "relationships": [{"id": "shared", "sourceId": "shared", "targetId": "shared", "type": "self"}],
        }
    )
    diagnostics = validate_ids(model)
    assert len(diagnostics) == 1
    assert diagnostics[0].path == "relationships[0].id"
    assert diagnostics[0].message == 'Relationship ID "shared" is not unique'


def test_dangling_source_and_target_are_independent():
    model = ArchitectureModel.from_dict(
        {"relationships": [{"id": "r1", "sourceId": "ghost-a", "targetId": "ghost-b", "type": "uses"}]}
    )
    diagnostics = validate_references(model)
    assert [d.path for d in diagnostics] == ["relationships[0].sourceId", "relationships[0].targetId"]
    assert all(d.code == ErrorCode.INVALID_REFERENCE for d in diagnostics)
    assert "ghost-a" in diagnostics[0].message


def test_self_loop_is_allowed(model):
    model.relationships.append(
        model.relationships[0].model_copy(update={"id": "loop", "source_id": "sys-1", "target_id": "sys-1"})
    )
    assert validate_references(model) == []


def test_dangling_parent_is_reported_only_as_reference(model):
    model.elements[3].parent_id = "nope"
    references = validate_references(model)
    assert _codes(references) == [ErrorCode.INVALID_REFERENCE]
    assert references[0].path == "elements[3].parentId"
    assert validate_hierarchy(model) == []


def test_layout_nodes_and_edges_must_resolve(model):
    model.views[0].layout.nodes.append(LayoutNode(element_id="missing-el", x=0, y=0))
    model.views[1].layout.edges.append(LayoutEdge(relationship_id="missing-rel"))
    diagnostics = validate_references(model)
    assert [d.path for d in diagnostics] == [
        "views[0].layout.nodes[2].elementId",
        "views[1].layout.edges[1].relationshipId",
    ]


def test_views_without_layout_are_skipped_by_references(model):
    model.views[0].layout = None
    assert validate_references(model) == []


def test_system_without_parent():
    model = ArchitectureModel.from_dict({"elements": [{"id": "s", "kind": "system", "name": "S"}]})
    diagnostics = validate_hierarchy(model)
    assert len(diagnostics) == 1
    assert diagnostics[0].code == ErrorCode.INVALID_HIERARCHY
    assert "system" in diagnostics[0].message
    assert "landscape" in diagnostics[0].message


def test_landscape_with_parent():
    model = ArchitectureModel.from_dict(
        {
            "elements": [
                {"id": "l1", "kind": "landscape", "name": "A"},
                {"id": "l2", "kind": "landscape", "name": "B", "parentId": "l1"},
            ]
        }
    )
    diagnostics = validate_hierarchy(model)
    assert len(diagnostics) == 1
    assert diagnostics[0].path == "elements[1].parentId"
    assert "should not have a parent" in diagnostics[0].message


def test_wrong_parent_kind_names_expected_and_actual(model):
    model.elements[4].parent_id = "sys-1"  # component under a system
    diagnostics = validate_hierarchy(model)
    assert len(diagnostics) == 1
    assert "container" in diagnostics[0].message
    assert "but got system" in diagnostics[0].message


def test_code_element_requires_code_ref(model):
    model.elements[5].code_ref = None
    diagnostics = validate_hierarchy(model)
    assert _codes(diagnostics) == [ErrorCode.MISSING_CODE_REF]
    assert diagnostics[0].path == "elements[5].codeRef"


def test_only_code_elements_may_carry_code_ref(model):
    model.elements[3].code_ref = CodeRef(kind="module", ref="payments.api")
    diagnostics = validate_hierarchy(model)
    assert _codes(diagnostics) == [ErrorCode.INVALID_CODE_REF]
    assert diagnostics[0].message.startswith('container element "cont-1"')


def test_missing_parent_stops_further_hierarchy_checks():
    model = ArchitectureModel.from_dict(
        {"elements": [Element(id="c", kind="container", name="C").to_dict()]}
    )
    diagnostics = validate_hierarchy(model)
    assert len(diagnostics) == 1
    assert 'must have a parent of kind "system"' in diagnostics[0].message


def test_missing_layout_message(model):
    model.views[1].layout = None
    diagnostics = validate_views_layout(model)
    assert len(diagnostics) == 1
    assert diagnostics[0].code == ErrorCode.MISSING_LAYOUT
    assert diagnostics[0].path == "views[1].layout"
    assert "algorithm, nodes, and edges" in diagnostics[0].message
    assert diagnostics[0].severity == Severity.ERROR


def test_landscape_with_code_ref_is_flagged():
    model = ArchitectureModel.from_dict(
        {
            "elements": [
                {"id": "l1", "kind": "landscape", "name": "L", "codeRef": {"kind": "module", "ref": "pkg"}},
            ]
        }
    )
    diagnostics = validate_hierarchy(model)
    assert _codes(diagnostics) == [ErrorCode.INVALID_CODE_REF]
    assert diagnostics[0].message.startswith('landscape element "l1"')
