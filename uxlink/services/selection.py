import logging
from typing import Any, List, Sequence

from uxlink.core.errors import EmptySelection

log = logging.getLogger(__name__)


def _parent_id(node: Any):
    parent = getattr(node, "parent", None)
    return parent.id if parent is not None else None


def order_selection(selection: Sequence[Any]) -> List[Any]:
    """
    Order the selected root nodes for serialization.

    Siblings of one common parent are put back into that parent's child
    order (z-order), whatever order the selection arrived in. Nodes with
    different or missing parents keep the order they were received in.
    """
    nodes = list(selection)
    if not nodes:
        raise EmptySelection()
    if len(nodes) == 1:
        return nodes

    parents = {_parent_id(n) for n in nodes}
    parent = getattr(nodes[0], "parent", None)
    if len(parents) != 1 or parent is None:
        log.debug("selection spans %s parents; keeping received order", len(parents))
        return nodes

    z_index = {child.id: i for i, child in enumerate(parent.children)}
    # stable sort; a node the parent does not list sorts last
    return sorted(nodes, key=lambda n: z_index.get(n.id, len(z_index)))
