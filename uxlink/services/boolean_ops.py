import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from uxlink.core.errors import FlattenFailure
from uxlink.models.layers import BooleanData
from uxlink.services.host import DesignHost
from uxlink.services.vector_paths import vector_payload

log = logging.getLogger(__name__)


@asynccontextmanager
async def flattened(host: DesignHost, node: Any) -> AsyncIterator[Any]:
    """Yield a transient flattened copy of *node*; it is removed on every exit path."""
    try:
        artifact = await host.flatten(node)
    except Exception as e:
        raise FlattenFailure(node.id, e) from e
    try:
        yield artifact
    finally:
        if artifact is not None:
            host.remove(artifact)


async def resolve_boolean(host: DesignHost, node: Any) -> BooleanData:
    data = BooleanData(operation=node.boolean_operation)
    try:
        async with flattened(host, node) as vector:
            if vector is not None and getattr(vector, "type", None) == "VECTOR":
                data.result_vector = vector_payload(vector)
            else:
                log.warning("flattening %s did not produce a vector", node.id)
    except FlattenFailure as e:
        log.warning("%s", e)
    except Exception as e:
        log.warning("%s", FlattenFailure(node.id, e))
    return data
