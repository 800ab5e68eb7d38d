"""Shapes stored layouts into the documents returned to clients."""

from pydantic import BaseModel, Field

from config import settings
from models.layout import Axis, AxisName, Cell, Layout


class Link(BaseModel):
    """Hypermedia link to a resource."""
    href: str
    rel: str


class LayoutResponse(Layout):
    """A layout decorated with its self link."""
    link: Link


class LayoutsResponse(BaseModel):
    """Envelope for a list of layouts."""
    layouts: list[LayoutResponse] = Field(default_factory=list)


def _with_default_axes(cell: Cell) -> Cell:
    """Return a copy of the cell carrying every well-known axis."""
    axes = dict(cell.axes or {})
    for name in AxisName:
        if name.value not in axes:
            axes[name.value] = Axis(bounds=[])
    return cell.model_copy(update={"axes": axes})


def build_layout_response(
    layout: Layout, base_path: str | None = None
) -> LayoutResponse:
    """Decorate a layout with default axes and a self link."""
    base_path = base_path or settings.layouts_path
    cells = [_with_default_axes(cell) for cell in layout.cells]
    return LayoutResponse(
        **layout.model_dump(exclude={"cells"}),
        cells=cells,
        link=Link(href=f"{base_path}/{layout.id}", rel="self"),
    )


def build_layouts_response(layouts: list[Layout]) -> LayoutsResponse:
    """Wrap decorated layouts in a list envelope."""
    return LayoutsResponse(
        layouts=[build_layout_response(layout) for layout in layouts]
    )
