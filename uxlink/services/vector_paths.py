import logging
from typing import Any, List, Optional, Set

from uxlink.models.layers import PathData, PathPoint, Point, VectorData
from uxlink.models.network import Vector2, VectorNetwork, VectorPath, VectorVertex

log = logging.getLogger(__name__)

NO_FILL_WINDING = "NONE"


def _handle(tangent: Optional[Vector2]) -> Optional[Point]:
    if tangent is None:
        return None
    return Point(x=tangent.x, y=tangent.y)


def _vertex(vertices: List[VectorVertex], index: int) -> VectorVertex:
    # negative indices must not wrap around to the end of the list
    if not 0 <= index < len(vertices):
        raise IndexError(f"segment references vertex {index}, network has {len(vertices)}")
    return vertices[index]


def build_points(network: VectorNetwork) -> List[PathPoint]:
    """
    Walk segments in order and emit each vertex once, the first time a
    segment references it. A start vertex takes the segment's start tangent
    as its left handle, an end vertex takes the end tangent as its right
    handle. Points are not re-ordered into a traced contour.
    """
    vertices = network.vertices
    seen: Set[int] = set()
    points: List[PathPoint] = []

    for seg in network.segments:
        if seg.start not in seen:
            v = _vertex(vertices, seg.start)
            points.append(PathPoint(
                x=v.x,
                y=v.y,
                left_handle=_handle(seg.tangent_start),
                right_handle=None,
                is_corner=v.stroke_cap != "ROUND",
            ))
            seen.add(seg.start)

        if seg.end not in seen:
            v = _vertex(vertices, seg.end)
            points.append(PathPoint(
                x=v.x,
                y=v.y,
                left_handle=None,
                right_handle=_handle(seg.tangent_end),
                is_corner=v.stroke_cap != "ROUND",
            ))
            seen.add(seg.end)

    return points


def reconstruct_paths(network: VectorNetwork, vector_paths: List[VectorPath]) -> List[PathData]:
    # every path shares the one network, so the point list is the same for each
    points = build_points(network)
    return [
        PathData(
            points=[p.model_copy(deep=True) for p in points],
            closed=vp.winding_rule != NO_FILL_WINDING,
            winding_rule=vp.winding_rule,
        )
        for vp in vector_paths
    ]


def vector_payload(node: Any) -> VectorData:
    """paths + raw network for a vector node (own or flattened).

    A network that cannot be decoded yields no paths; the raw network is kept.
    """
    network = getattr(node, "vector_network", None) or VectorNetwork()
    vector_paths = list(getattr(node, "vector_paths", None) or [])
    try:
        paths = reconstruct_paths(network, vector_paths)
    except IndexError as e:
        log.warning("could not decode vector paths of node %s: %s", getattr(node, "id", "?"), e)
        paths = []
    return VectorData(
        paths=paths,
        vector_network=network.model_copy(deep=True),
    )
