"""
The document host the extraction runs against.

Everything that touches the live scene-graph goes through this object: the
selection, computed styles, font loading, shape flattening and user notices.
It is passed into the traversal explicitly so tests can hand in a fake.
"""
from typing import Any, Dict, Protocol, Sequence


class DesignHost(Protocol):
    @property
    def selection(self) -> Sequence[Any]: ...

    async def get_css(self, node: Any) -> Dict[str, str]:
        """Resolved CSS-like style mapping for *node*."""
        ...

    async def load_font(self, font_name: Any) -> None:
        """Make *font_name* available for style queries. May raise."""
        ...

    async def flatten(self, node: Any) -> Any:
        """
        Produce a transient single-vector equivalent of *node*.
        The caller owns the result and must hand it back to ``remove``.
        """
        ...

    def remove(self, node: Any) -> None: ...

    def notify(self, message: str) -> None: ...


# host node kind -> record variant; anything else is "unknown"
NODE_TYPE_TO_VARIANT: Dict[str, str] = {
    "LINE": "line",
    "RECTANGLE": "rectangle",
    "ELLIPSE": "ellipse",
    "POLYGON": "polygon",
    "STAR": "star",
    "VECTOR": "vector",
    "GROUP": "group",
    "FRAME": "frame",
    "TEXT": "text",
    "BOOLEAN_OPERATION": "boolean",
}


def classify(node: Any) -> str:
    return NODE_TYPE_TO_VARIANT.get(getattr(node, "type", None), "unknown")
