"""
An in-memory document host built from a JSON snapshot.

Snapshot shape::

    {"children": [<node>, ...], "selection": ["<id>", ...], "fonts": [{"family": ..., "style": ...}]}

Nodes use the host's camelCase keys. Optional keys that are absent in the
snapshot are absent on the node too, so presence checks behave like they do
against a live document.
"""
import json
import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

from pydantic.alias_generators import to_camel

from uxlink.models.network import MIXED, FontName, VectorNetwork, VectorPath, is_mixed
from uxlink.utils.ids import node_id, transient_id

log = logging.getLogger(__name__)

POSSIBLE_WRAPPER_KEYS = ("document", "page", "data")

_OPTIONAL_ATTRS = (
    "rotation",
    "opacity",
    "stroke_weight",
    "corner_radius",
    "stroke_cap",
    "point_count",
    "inner_radius",
    "boolean_operation",
    "text_align_horizontal",
    "text_align_vertical",
    "paragraph_spacing",
    "text_auto_resize",
)

# text attributes that can vary per character
_TEXT_STYLE_DEFAULTS: Dict[str, Any] = {
    "fontSize": 12,
    "fontName": {"family": "Inter", "style": "Regular"},
    "fontWeight": 400,
    "fills": [],
    "textDecoration": "NONE",
    "textCase": "ORIGINAL",
    "letterSpacing": {"value": 0, "unit": "PIXELS"},
    "lineHeight": {"unit": "AUTO"},
}


def _uniform(values: Iterable[Any]) -> Any:
    values = list(values)
    if not values:
        return None
    first = values[0]
    return first if all(v == first for v in values[1:]) else MIXED


class SnapshotNode:
    def __init__(self, raw: Dict[str, Any], parent: Optional["SnapshotNode"] = None):
        self.raw = raw
        self.id = node_id(raw)
        self.name = raw.get("name", "")
        self.type = raw.get("type", "")
        self.x = float(raw.get("x", 0))
        self.y = float(raw.get("y", 0))
        self.width = float(raw.get("width", 0))
        self.height = float(raw.get("height", 0))
        self.parent = parent
        self.css: Dict[str, str] = dict(raw.get("css") or {})

        for attr in _OPTIONAL_ATTRS:
            key = to_camel(attr)
            if key in raw:
                setattr(self, attr, raw[key])
        if "vectorNetwork" in raw:
            self.vector_network = VectorNetwork.model_validate(raw["vectorNetwork"])
        if "vectorPaths" in raw:
            self.vector_paths = [VectorPath.model_validate(p) for p in raw["vectorPaths"]]
        if "children" in raw:
            self.children = [make_node(c, self) for c in raw["children"]]

    def __repr__(self) -> str:
        return f"<{self.type} {self.id} {self.name!r}>"


class SnapshotTextNode(SnapshotNode):
    """
    Text with optional per-character overrides in ``characterStyles``.
    A ``null`` entry marks a character whose style cannot be read.
    """

    def __init__(self, raw: Dict[str, Any], parent: Optional[SnapshotNode] = None):
        super().__init__(raw, parent)
        self.characters: str = raw.get("characters", "")
        self._base = {k: raw.get(k, v) for k, v in _TEXT_STYLE_DEFAULTS.items()}
        self._per_char: List[Optional[Dict[str, Any]]] = list(raw.get("characterStyles") or [])

    def _char_value(self, key: str, i: int) -> Any:
        if not 0 <= i < len(self.characters):
            raise IndexError(f"character {i} out of range for {self.id}")
        if i < len(self._per_char):
            override = self._per_char[i]
            if override is None:
                raise LookupError(f"style of character {i} is unavailable")
            return override.get(key, self._base[key])
        return self._base[key]

    def _range(self, key: str, start: int, end: int) -> Any:
        return _uniform(self._char_value(key, i) for i in range(start, end))

    def _whole(self, key: str) -> Any:
        values = []
        for i in range(len(self.characters)):
            try:
                values.append(self._char_value(key, i))
            except LookupError:
                continue
        return _uniform(values) if values else self._base[key]

    @property
    def font_size(self):
        return self._whole("fontSize")

    @property
    def font_name(self):
        return self._whole("fontName")

    @property
    def font_weight(self):
        return self._whole("fontWeight")

    @property
    def text_decoration(self):
        return self._whole("textDecoration")

    @property
    def text_case(self):
        return self._whole("textCase")

    @property
    def letter_spacing(self):
        return self._whole("letterSpacing")

    @property
    def line_height(self):
        return self._whole("lineHeight")

    def get_range_font_size(self, start: int, end: int):
        return self._range("fontSize", start, end)

    def get_range_font_name(self, start: int, end: int):
        return self._range("fontName", start, end)

    def get_range_fills(self, start: int, end: int):
        return self._range("fills", start, end)

    def get_range_text_decoration(self, start: int, end: int):
        return self._range("textDecoration", start, end)

    def get_range_text_case(self, start: int, end: int):
        return self._range("textCase", start, end)

    def get_range_letter_spacing(self, start: int, end: int):
        return self._range("letterSpacing", start, end)

    def get_range_line_height(self, start: int, end: int):
        return self._range("lineHeight", start, end)


def make_node(raw: Dict[str, Any], parent: Optional[SnapshotNode] = None) -> SnapshotNode:
    if raw.get("type") == "TEXT":
        return SnapshotTextNode(raw, parent)
    return SnapshotNode(raw, parent)


class SnapshotDocument:
    """DesignHost over a snapshot. Notices are kept in ``notifications``."""

    def __init__(self, raw: Dict[str, Any], selection: Optional[Sequence[str]] = None):
        self.page = SnapshotNode({
            "id": raw.get("id", "0:1"),
            "name": raw.get("name", "Page 1"),
            "type": "PAGE",
            "children": list(raw.get("children") or []),
        })
        self._by_id: Dict[str, SnapshotNode] = {}
        self._index(self.page)

        fonts = raw.get("fonts")
        self.fonts = None if fonts is None else {(f["family"], f.get("style", "Regular")) for f in fonts}
        self.notifications: List[str] = []

        ids = (raw.get("selection") or []) if selection is None else selection
        self._selection = [self.get(i) for i in ids]

    def _index(self, node: SnapshotNode) -> None:
        self._by_id[node.id] = node
        for child in getattr(node, "children", []):
            self._index(child)

    def get(self, id: str) -> SnapshotNode:
        try:
            return self._by_id[id]
        except KeyError:
            raise ValueError(f"Unknown node id in selection: {id}") from None

    def contains(self, id: str) -> bool:
        return id in self._by_id

    # ---------- DesignHost ----------

    @property
    def selection(self) -> List[SnapshotNode]:
        return list(self._selection)

    async def get_css(self, node: SnapshotNode) -> Dict[str, str]:
        return dict(node.css)

    async def load_font(self, font_name: Any) -> None:
        if is_mixed(font_name):
            raise ValueError("cannot load the mixed font marker")
        font = font_name if isinstance(font_name, FontName) else FontName.model_validate(font_name)
        if self.fonts is not None and (font.family, font.style) not in self.fonts:
            raise LookupError(f"font not available: {font.family} {font.style}")

    async def flatten(self, node: SnapshotNode) -> SnapshotNode:
        raw = node.raw.get("flattened")
        if raw is None:
            raise ValueError(f"{node.id} has no flattened geometry")
        raw = {
            "type": "VECTOR",
            "name": node.name,
            "x": node.x,
            "y": node.y,
            "width": node.width,
            "height": node.height,
            **raw,
            "id": transient_id(node.id, "flattened"),
        }
        parent = node.parent or self.page
        artifact = make_node(raw, parent)
        siblings = parent.children
        siblings.insert(siblings.index(node) + 1 if node in siblings else len(siblings), artifact)
        self._by_id[artifact.id] = artifact
        return artifact

    def remove(self, node: SnapshotNode) -> None:
        parent = node.parent
        if parent is not None:
            parent.children[:] = [c for c in parent.children if c is not node]
        self._by_id.pop(node.id, None)

    def notify(self, message: str) -> None:
        log.info("notify: %s", message)
        self.notifications.append(message)


def load_document(json_obj: Any, selection: Optional[Sequence[str]] = None) -> SnapshotDocument:
    # 1) a bare list of top-level nodes
    if isinstance(json_obj, list):
        return SnapshotDocument({"children": json_obj}, selection)
    if isinstance(json_obj, dict):
        # 2) the page itself
        if "children" in json_obj:
            return SnapshotDocument(json_obj, selection)
        # 3) wrapped
        for k in POSSIBLE_WRAPPER_KEYS:
            v = json_obj.get(k)
            if isinstance(v, dict):
                return load_document(v, selection)
    raise ValueError("Unsupported snapshot shape; expected a node list or a page with 'children'.")


def load_document_from_path(path: str, selection: Optional[Sequence[str]] = None) -> SnapshotDocument:
    with open(path, "r", encoding="utf-8") as f:
        obj = json.load(f)
    return load_document(obj, selection)
