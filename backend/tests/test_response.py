"""Unit tests for the layout response builder."""

from config import settings
from models.layout import Axis, Cell, Layout, Query
from services.response import build_layout_response, build_layouts_response


def _layout(cells: list[Cell]) -> Layout:
    return Layout(id="abc", application="app1", measurement="m1", cells=cells)


def test_self_link():
    res = build_layout_response(_layout([Cell(w=1, h=1)]))
    assert res.link.href == f"{settings.layouts_path}/abc"
    assert res.link.rel == "self"


def test_custom_base_path():
    res = build_layout_response(_layout([Cell(w=1, h=1)]), "/api/layouts")
    assert res.link.href == "/api/layouts/abc"


def test_missing_axes_are_filled():
    res = build_layout_response(_layout([Cell(w=1, h=1)]))
    axes = res.cells[0].axes
    assert set(axes) == {"x", "y", "y2"}
    assert all(axis.bounds == [] for axis in axes.values())


def test_existing_axes_are_kept():
    cell = Cell(w=1, h=1, axes={"y": Axis(bounds=["0", "100"], label="cpu")})
    res = build_layout_response(_layout([cell]))
    axes = res.cells[0].axes
    assert set(axes) == {"x", "y", "y2"}
    assert axes["y"].bounds == ["0", "100"]
    assert axes["y"].label == "cpu"
    assert axes["x"].bounds == []


def test_axis_repair_is_idempotent():
    layout = _layout([Cell(w=1, h=1, axes={"x": Axis(bounds=["1", "2"])}), Cell(w=2, h=2)])
    once = build_layout_response(layout)
    twice = build_layout_response(Layout.model_validate(once.model_dump()))
    assert [c.axes for c in once.cells] == [c.axes for c in twice.cells]


def test_stored_layout_is_not_modified():
    layout = _layout([Cell(w=1, h=1)])
    build_layout_response(layout)
    assert layout.cells[0].axes is None


def test_layout_fields_are_preserved():
    cell = Cell(x=2, y=3, w=4, h=5, i="c1", name="CPU", queries=[Query(command="SELECT 1")])
    res = build_layout_response(_layout([cell]))
    assert res.id == "abc"
    assert res.application == "app1"
    assert res.cells[0].name == "CPU"
    assert res.cells[0].queries[0].command == "SELECT 1"


def test_wire_names():
    res = build_layout_response(_layout([Cell(w=1, h=1, queries=[Query(command="q")])]))
    data = res.model_dump(by_alias=True, exclude_none=True)
    assert data["app"] == "app1"
    assert data["cells"][0]["queries"][0] == {"query": "q"}
    assert data["link"] == {"href": f"{settings.layouts_path}/abc", "rel": "self"}


def test_list_envelope():
    assert build_layouts_response([]).layouts == []
    res = build_layouts_response([_layout([]), _layout([Cell(w=1, h=1)])])
    assert len(res.layouts) == 2
