from c4studio.diagram_context import (
    DiagramContext,
    can_drill_down,
    can_drill_up,
    drill_down,
    drill_up,
    filtered_view,
    get_child_level,
    get_diagram_title,
    get_element_kind_for_level,
    get_parent_level,
    visible_elements,
)
from c4studio.models.architecture_model import ElementKind


def test_titles():
    assert get_diagram_title(ElementKind.LANDSCAPE) == "System Landscape"
    assert get_diagram_title(ElementKind.CONTAINER, "Payments") == "Container Diagram: Payments"


def test_level_navigation_bounds():
    assert get_parent_level(ElementKind.LANDSCAPE) is None
    assert get_child_level(ElementKind.CODE) is None
    assert get_child_level(ElementKind.SYSTEM) == ElementKind.CONTAINER
    assert not can_drill_down(ElementKind.CODE)
    assert not can_drill_up(ElementKind.LANDSCAPE)
    assert get_element_kind_for_level(ElementKind.CODE) == ElementKind.CODE
    assert get_element_kind_for_level(ElementKind.LANDSCAPE) == ElementKind.SYSTEM


def test_landscape_shows_every_system(model):
    context = DiagramContext(level=ElementKind.LANDSCAPE)
    assert [e.id for e in visible_elements(model, context)] == ["sys-1", "sys-2"]


def test_drill_down_and_up(model):
    context = DiagramContext(level=ElementKind.LANDSCAPE)
    system = model.find_element("sys-1")
    down = drill_down(context, system)
    assert down == DiagramContext(level=ElementKind.SYSTEM, focused_element_id="sys-1")
    assert [e.id for e in visible_elements(model, down)] == ["cont-1"]

    up = drill_up(model, down)
    assert up == DiagramContext(level=ElementKind.LANDSCAPE, focused_element_id="land-1")


def test_filtered_view_keeps_visible_nodes_and_internal_edges(model):
    context = DiagramContext(level=ElementKind.LANDSCAPE)
    view = filtered_view(model, model.views[0], context)
    assert view.title == "System Landscape"
    assert [n.element_id for n in view.layout.nodes] == ["sys-1", "sys-2"]
    assert [e.relationship_id for e in view.layout.edges] == ["rel-a"]

    focused = filtered_view(model, model.views[1], DiagramContext(ElementKind.SYSTEM, "sys-1"))
    assert focused.title == "System Context: Payments"
    assert [n.element_id for n in focused.layout.nodes] == ["cont-1"]
    assert focused.layout.edges == []
