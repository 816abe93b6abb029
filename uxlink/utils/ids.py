import hashlib
import json
from typing import Any, Dict


def sha256_str(s: str) -> str:
    return hashlib.sha256(s.encode("utf-8")).hexdigest()


def node_id(raw: Dict[str, Any]) -> str:
    """The snapshot's id, or a stable one derived from the node's content."""
    if raw.get("id"):
        return str(raw["id"])
    return "gen:" + sha256_str(json.dumps(raw, sort_keys=True, default=str)[:160])[:12]


def transient_id(source_id: str, purpose: str) -> str:
    return f"{source_id}:{purpose}"
