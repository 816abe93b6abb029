"""Value types handed to us by the host document.

These mirror what the scene-graph exposes for vector geometry and fonts.
They are read-only inputs; the records we emit live in ``layers.py``.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Mixed:
    """The host's marker for a text property that varies across the range."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MIXED"

    def __bool__(self) -> bool:
        return False


MIXED = _Mixed()


def is_mixed(value: Any) -> bool:
    return value is MIXED


class HostModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class Vector2(HostModel):
    x: float
    y: float


class FontName(HostModel):
    family: str
    style: str = "Regular"


class VectorVertex(HostModel):
    x: float
    y: float
    stroke_cap: Optional[str] = None
    stroke_join: Optional[str] = None
    corner_radius: Optional[float] = None
    handle_mirroring: Optional[str] = None


class VectorSegment(HostModel):
    start: int
    end: int
    tangent_start: Optional[Vector2] = None
    tangent_end: Optional[Vector2] = None


class VectorRegion(HostModel):
    winding_rule: str = "NONZERO"
    loops: List[List[int]] = Field(default_factory=list)


class VectorNetwork(HostModel):
    vertices: List[VectorVertex] = Field(default_factory=list)
    segments: List[VectorSegment] = Field(default_factory=list)
    regions: List[VectorRegion] = Field(default_factory=list)


class VectorPath(HostModel):
    winding_rule: str = "NONZERO"  # NONZERO | EVENODD | NONE
    data: str = ""
