"""Pydantic data models for dashboard layouts, cells, queries and axes."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, model_validator


class AxisName(str, Enum):
    """Axes every cell carries once it is shaped for a client."""
    X = "x"
    Y = "y"
    Y2 = "y2"


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _null_as_default(cls, data: Any) -> Any:
        """Treat an explicit JSON null like an absent field."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Axis(_WireModel):
    """Bounds and labelling for one axis of a cell."""
    bounds: list[str] = Field(default_factory=list)
    label: Optional[str] = None
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    base: Optional[str] = None
    scale: Optional[str] = None


class QueryRange(_WireModel):
    """Upper and lower bounds of a query's y range."""
    upper: StrictInt = 0
    lower: StrictInt = 0


class Query(_WireModel):
    """A single query rendered by a cell."""
    command: str = Field(default="", alias="query")
    db: Optional[str] = None
    rp: Optional[str] = None
    label: Optional[str] = None
    group_bys: Optional[list[str]] = Field(default=None, alias="groupbys")
    wheres: Optional[list[str]] = None
    range: Optional[QueryRange] = None


class Cell(_WireModel):
    """One visual panel within a layout."""
    x: StrictInt = 0
    y: StrictInt = 0
    w: StrictInt = 0
    h: StrictInt = 0
    i: str = ""
    name: str = ""
    type: str = ""
    queries: list[Query] = Field(default_factory=list)
    axes: Optional[dict[str, Axis]] = None


class Layout(_WireModel):
    """A dashboard definition composed of cells."""
    id: str = ""
    application: str = Field(default="", alias="app")
    measurement: str = ""
    autoflow: StrictBool = False
    organization: str = ""
    cells: list[Cell] = Field(default_factory=list)
