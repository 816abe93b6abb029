import logging
from typing import Any, Callable, Dict

from uxlink.core.errors import EmptySelection
from uxlink.models.messages import ClipboardPayload, OutboundMessage, PluginMessage
from uxlink.services.host import DesignHost
from uxlink.services.serializer import extract_layers

log = logging.getLogger(__name__)

COPIED_NOTICE = "✓ Copied! UXLink will process it automatically"


class PluginController:
    """
    Handles messages from the UI surface.

    post_message: delivers an outbound message (a plain dict) to the UI. The
      UI turns it into text and writes the clipboard.
    """

    def __init__(
        self,
        host: DesignHost,
        post_message: Callable[[Dict[str, Any]], None],
        isolate_failures: bool = False,
    ):
        self.host = host
        self.post_message = post_message
        self.isolate_failures = isolate_failures

    async def on_message(self, message: PluginMessage) -> None:
        log.debug("message: %s", message.type)
        if message.type == "send":
            await self.send()
        elif message.type == "get":
            self.host.notify(f"Got: {len(self.host.selection)} items selected")
        elif message.type == "clipboardSuccess":
            self.host.notify(COPIED_NOTICE)

    async def send(self) -> None:
        try:
            layers = await extract_layers(self.host, isolate_failures=self.isolate_failures)
        except EmptySelection as e:
            self.host.notify(str(e))
            return
        out = OutboundMessage(data=ClipboardPayload(layers=layers))
        self.post_message(out.model_dump(by_alias=True))
