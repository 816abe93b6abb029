import logging
import time
from typing import Any, List, Optional

from uxlink.core.errors import NodeExtractionError
from uxlink.models.layers import (
    EmptyData,
    LineData,
    NodeRecord,
    Point,
    PolygonData,
    RectangleData,
    ShapeSpecific,
    Size,
    StarData,
)
from uxlink.models.network import is_mixed
from uxlink.services.boolean_ops import resolve_boolean
from uxlink.services.host import DesignHost, classify
from uxlink.services.selection import order_selection
from uxlink.services.styles import resolve_fill, resolve_stroke
from uxlink.services.text import text_payload
from uxlink.services.vector_paths import vector_payload

log = logging.getLogger(__name__)

# (attribute, default) read only when the node exposes the attribute
_NUMERIC_DEFAULTS = (
    ("rotation", 0),
    ("opacity", 1),
    ("stroke_weight", 0),
)


def _corner_radius(node: Any) -> float:
    # a rectangle with per-corner radii reports the mixed marker here
    value = getattr(node, "corner_radius", 0)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value


class LayerSerializer:
    """
    Turns host nodes into NodeRecord trees.

    Traversal is depth-first and pre-order: a node's own record, including
    its shapeSpecific payload, is finished before its children are visited,
    and each child's whole subtree is awaited before the next sibling starts.

    isolate_failures: when True, an unexpected error in one node becomes an
      error-marked record and the rest of the tree is still built. Otherwise
      the error aborts the extraction.
    """

    def __init__(self, host: DesignHost, isolate_failures: bool = False):
        self.host = host
        self.isolate_failures = isolate_failures
        self.visited = 0

    async def build(self, selection: Optional[List[Any]] = None) -> List[NodeRecord]:
        t0 = time.perf_counter()
        roots = order_selection(self.host.selection if selection is None else selection)
        log.info("Extracting %s root layer(s)", len(roots))

        layers: List[NodeRecord] = []
        for node in roots:
            layers.append(await self.serialize(node))

        log.info(
            "Done: roots=%s nodes=%s elapsed=%.3fs",
            len(layers),
            self.visited,
            time.perf_counter() - t0,
        )
        return layers

    async def serialize(self, node: Any) -> NodeRecord:
        self.visited += 1
        try:
            record = await self._record(node)
        except Exception as e:
            if not self.isolate_failures:
                raise
            err = NodeExtractionError(getattr(node, "id", "?"), e)
            log.error("%s", err)
            return NodeRecord(
                id=str(getattr(node, "id", "")),
                name=str(getattr(node, "name", "")),
                variant=classify(node),
                error=str(err),
            )

        for child in list(getattr(node, "children", None) or []):
            record.children.append(await self.serialize(child))
        return record

    # ---------- per-node ----------

    async def _record(self, node: Any) -> NodeRecord:
        variant = classify(node)
        css = await self.host.get_css(node) or {}

        numeric = {
            attr: (getattr(node, attr) if hasattr(node, attr) else default)
            for attr, default in _NUMERIC_DEFAULTS
        }

        return NodeRecord(
            id=node.id,
            name=node.name,
            variant=variant,
            position=Point(x=node.x, y=node.y),
            size=Size(width=node.width, height=node.height),
            fill=resolve_fill(css),
            stroke=resolve_stroke(css),
            shape_specific=await self._shape_specific(variant, node),
            **numeric,
        )

    async def _shape_specific(self, variant: str, node: Any) -> ShapeSpecific:
        if variant == "text":
            return await text_payload(self.host, node)
        if variant == "boolean":
            return await resolve_boolean(self.host, node)
        if variant == "vector":
            return vector_payload(node)
        if variant == "star":
            return StarData(point_count=node.point_count, inner_radius=node.inner_radius)
        if variant == "rectangle":
            return RectangleData(corner_radius=_corner_radius(node))
        if variant == "line":
            cap = getattr(node, "stroke_cap", None)
            return LineData(stroke_cap=None if is_mixed(cap) else cap)
        if variant == "polygon":
            return PolygonData(point_count=node.point_count)
        return EmptyData()


async def extract_layers(
    host: DesignHost,
    selection: Optional[List[Any]] = None,
    isolate_failures: bool = False,
) -> List[NodeRecord]:
    """Ordered root records for the current (or given) selection."""
    return await LayerSerializer(host, isolate_failures=isolate_failures).build(selection)
