import math

import pytest

from c4studio.layout import (
    LayoutOptions,
    clone_layout_state,
    compute_layout,
    compute_semantic_zoom_level,
    deserialize_layout_state,
    get_zoom_range,
    serialize_layout_state,
)
from c4studio.models.architecture_model import ElementKind


def test_grid_positions_use_defaults(model):
    layout = compute_layout(model, model.views[0], LayoutOptions())
    positions = [(n.element_id, n.x, n.y, n.w, n.h) for n in layout.nodes]
    assert positions == [
        ("land-1", 50, 50, 120, 80),
        ("sys-1", 200, 50, 120, 80),
        ("sys-2", 350, 50, 120, 80),
        ("cont-1", 50, 200, 120, 80),
        ("comp-1", 200, 200, 120, 80),
        ("code-1", 350, 200, 120, 80),
    ]


def test_custom_spacing_padding_and_algorithm_echo(model):
    layout = compute_layout(model, model.views[0], LayoutOptions(algorithm="my-tag", spacing=10, padding=0))
    assert layout.algorithm == "my-tag"
    assert (layout.nodes[4].x, layout.nodes[4].y) == (10, 10)


def test_edges_only_for_relationships_inside_the_element_set(model):
    scoped = model.model_copy(update={"elements": model.elements[1:2]})
    layout = compute_layout(scoped, model.views[0], LayoutOptions())
    assert [n.element_id for n in layout.nodes] == ["sys-1"]
    assert layout.edges == []

    full = compute_layout(model, model.views[0], LayoutOptions())
    assert [e.relationship_id for e in full.edges] == ["rel-a"]


def test_layout_is_deterministic(model):
    options = LayoutOptions(spacing=120)
    assert compute_layout(model, model.views[0], options) == compute_layout(model, model.views[0], options)


def test_empty_model_gives_empty_layout(model):
    empty = model.model_copy(update={"elements": [], "relationships": []})
    layout = compute_layout(empty, model.views[0], LayoutOptions())
    assert layout.nodes == []
    assert layout.edges == []


@pytest.mark.parametrize(
    "zoom,level",
    [
        (-3.0, ElementKind.LANDSCAPE),
        (0.0, ElementKind.LANDSCAPE),
        (0.2, ElementKind.LANDSCAPE),
        (0.21, ElementKind.SYSTEM),
        (0.4, ElementKind.SYSTEM),
        (0.5, ElementKind.CONTAINER),
        (0.7, ElementKind.COMPONENT),
        (0.81, ElementKind.CODE),
        (1.0, ElementKind.CODE),
        (42.0, ElementKind.CODE),
    ],
)
def test_semantic_zoom_levels(zoom, level):
    assert compute_semantic_zoom_level(zoom) == level


def test_semantic_zoom_nan_falls_back_to_landscape():
    assert compute_semantic_zoom_level(math.nan) == ElementKind.LANDSCAPE


def test_semantic_zoom_is_monotone():
    order = list(ElementKind)
    levels = [order.index(compute_semantic_zoom_level(i / 100)) for i in range(0, 101)]
    assert levels == sorted(levels)


def test_zoom_range():
    assert get_zoom_range(ElementKind.CONTAINER) == (0.4, 0.6)


def test_layout_state_serialization(model):
    layout = model.views[0].layout
    text = serialize_layout_state(layout)
    assert '"elementId": "sys-1"' in text
    assert deserialize_layout_state(text) == layout

    clone = clone_layout_state(layout)
    clone.nodes[0].x = 999
    assert layout.nodes[0].x == 50
