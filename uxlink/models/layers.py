from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, model_serializer
from pydantic.alias_generators import to_camel

from uxlink.models.network import FontName, VectorNetwork

Variant = Literal[
    "line", "rectangle", "ellipse", "polygon", "star", "vector",
    "group", "frame", "text", "boolean", "unknown",
]

BooleanOperation = Literal["UNION", "SUBTRACT", "INTERSECT", "EXCLUDE"]


class Record(BaseModel):
    # camelCase on the wire, snake_case in python
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Point(Record):
    x: float = 0
    y: float = 0


class Size(Record):
    width: float = 0
    height: float = 0


class PathPoint(Record):
    x: float
    y: float
    left_handle: Optional[Point] = None
    right_handle: Optional[Point] = None
    is_corner: bool = True


class PathData(Record):
    points: List[PathPoint] = Field(default_factory=list)
    closed: bool = True
    winding_rule: str = "NONZERO"


class CharacterStyle(Record):
    font_size: Optional[float] = None
    font_name: Optional[FontName] = None
    fills: List[Dict[str, Any]] = Field(default_factory=list)
    text_decoration: Optional[str] = None
    text_case: Optional[str] = None
    letter_spacing: Optional[Dict[str, Any]] = None
    line_height: Optional[Dict[str, Any]] = None


class StyledRange(Record):
    start: int
    end: int  # exclusive
    style: CharacterStyle


# ---------- shapeSpecific payloads ----------

class EmptyData(Record):
    """group, frame, ellipse and unknown carry nothing extra."""


class RectangleData(Record):
    corner_radius: float = 0


class LineData(Record):
    stroke_cap: Optional[str] = None


class PolygonData(Record):
    point_count: int


class StarData(Record):
    point_count: int
    inner_radius: float


class VectorData(Record):
    paths: List[PathData] = Field(default_factory=list)
    vector_network: VectorNetwork = Field(default_factory=VectorNetwork)


class BooleanData(Record):
    operation: BooleanOperation
    result_vector: Optional[VectorData] = None

    @model_serializer(mode="wrap")
    def _drop_missing_result(self, handler):
        data = handler(self)
        # no resultVector key at all when flattening failed
        for key in ("result_vector", "resultVector"):
            if data.get(key, ...) is None:
                del data[key]
        return data


class TextData(Record):
    characters: str = ""
    font_size: Optional[float] = None
    font_name: Optional[FontName] = None
    font_weight: Optional[float] = None
    text_align_horizontal: Optional[str] = None
    text_align_vertical: Optional[str] = None
    line_height: Optional[Dict[str, Any]] = None
    letter_spacing: Optional[Dict[str, Any]] = None
    paragraph_spacing: Optional[float] = None
    text_case: Optional[str] = None
    text_decoration: Optional[str] = None
    text_auto_resize: Optional[str] = None
    has_mixed_styling: bool = False
    styled_ranges: List[StyledRange] = Field(default_factory=list)


ShapeSpecific = Union[
    RectangleData, LineData, PolygonData, StarData,
    VectorData, BooleanData, TextData, EmptyData,
]


class NodeRecord(Record):
    id: str
    name: str = ""
    variant: Variant = Field("unknown", alias="type")
    position: Point = Field(default_factory=Point)
    size: Size = Field(default_factory=Size)
    rotation: float = 0
    opacity: float = 1
    fill: str = "none"
    stroke: str = "none"
    stroke_weight: float = 0
    shape_specific: ShapeSpecific = Field(default_factory=EmptyData)
    children: List["NodeRecord"] = Field(default_factory=list)

    # only set when per-node failure isolation is enabled and this node failed
    error: Optional[str] = None

    @model_serializer(mode="wrap")
    def _drop_clean_error(self, handler):
        data = handler(self)
        if data.get("error", ...) is None:
            del data["error"]
        return data


NodeRecord.model_rebuild()
