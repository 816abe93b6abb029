from fastapi import APIRouter, Depends, HTTPException
from typing import Any, Dict, List

from uxlink.core.config import settings
from uxlink.core.errors import EmptySelection
from uxlink.models.messages import ExtractRequest, MessageExchange, PluginMessage
from uxlink.services.controller import PluginController
from uxlink.services.serializer import extract_layers
from uxlink.services.snapshot import SnapshotDocument, load_document, load_document_from_path

router = APIRouter(
    prefix="/api/plugin",
    tags=["Plugin"],
)


def get_host() -> SnapshotDocument:
    """The configured document, loaded fresh for every request."""
    if not settings.document_configured:
        raise HTTPException(400, "No document is configured (UXLINK_DOCUMENT_PATH missing).")
    try:
        return load_document_from_path(settings.document_path)
    except (OSError, ValueError) as e:
        raise HTTPException(400, f"Could not load document: {e}")


@router.post("/messages", summary="Handle a message from the plugin UI", response_model=MessageExchange)
async def handle_message(message: PluginMessage, host: SnapshotDocument = Depends(get_host)):
    posted: List[Dict[str, Any]] = []
    controller = PluginController(host, posted.append, isolate_failures=settings.isolate_node_failures)
    try:
        await controller.on_message(message)
    except Exception as e:
        raise HTTPException(500, f"Extraction error: {e}")
    return MessageExchange(messages=posted, notifications=host.notifications)


@router.post("/extract", summary="Extract layer records from an inline document snapshot")
async def extract(req: ExtractRequest):
    try:
        host = load_document(req.document, req.selection)
    except ValueError as e:
        raise HTTPException(400, str(e))
    try:
        layers = await extract_layers(host, isolate_failures=settings.isolate_node_failures)
    except EmptySelection as e:
        raise HTTPException(400, str(e))
    except Exception as e:
        raise HTTPException(500, f"Extraction error: {e}")
    return {"layers": [layer.model_dump(by_alias=True) for layer in layers]}
