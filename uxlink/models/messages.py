from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field

from uxlink.models.layers import NodeRecord


class PluginMessage(BaseModel):
    """Inbound message from the UI surface."""
    type: Literal["send", "get", "clipboardSuccess"]


class ClipboardPayload(BaseModel):
    layers: List[NodeRecord] = Field(default_factory=list)


class OutboundMessage(BaseModel):
    type: Literal["copyToClipboard"] = "copyToClipboard"
    data: ClipboardPayload


class MessageExchange(BaseModel):
    # what the UI received and what the user was told, for one inbound message
    messages: List[Dict[str, Any]] = Field(default_factory=list)
    notifications: List[str] = Field(default_factory=list)


class ExtractRequest(BaseModel):
    document: Dict[str, Any]
    selection: Optional[List[str]] = None  # overrides document["selection"]
