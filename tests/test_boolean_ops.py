from __future__ import annotations

import asyncio
import logging
from types import SimpleNamespace

from uxlink.services.boolean_ops import resolve_boolean


def _child_ids(doc):
    return [c.id for c in doc.page.children]


def test_flattened_vector_becomes_result_vector(make_doc):
    doc = make_doc()
    before = _child_ids(doc)
    data = asyncio.run(resolve_boolean(doc, doc.get("2:1")))

    assert data.operation == "SUBTRACT"
    assert data.result_vector is not None
    assert len(data.result_vector.paths) == 1
    assert len(data.result_vector.paths[0].points) == 3
    assert data.result_vector.paths[0].closed is True
    assert _child_ids(doc) == before
    assert not doc.contains("2:1:flattened")


def test_flatten_failure_keeps_operation_and_drops_result(make_doc, page_raw, caplog):
    del page_raw["children"][1]["flattened"]
    doc = make_doc()
    before = _child_ids(doc)

    with caplog.at_level(logging.WARNING):
        data = asyncio.run(resolve_boolean(doc, doc.get("2:1")))

    assert data.operation == "SUBTRACT"
    assert data.result_vector is None
    assert "resultVector" not in data.model_dump(by_alias=True)
    assert _child_ids(doc) == before
    assert "could not flatten boolean node 2:1" in caplog.text


def test_non_vector_result_is_still_removed(make_doc, page_raw):
    page_raw["children"][1]["flattened"] = {"type": "GROUP"}
    doc = make_doc()
    before = _child_ids(doc)

    data = asyncio.run(resolve_boolean(doc, doc.get("2:1")))

    assert data.result_vector is None
    assert _child_ids(doc) == before


class _BrokenArtifact:
    type = "VECTOR"
    id = "tmp"

    @property
    def vector_network(self):
        raise RuntimeError("network unreadable")


class _RecordingHost:
    def __init__(self):
        self.created = []
        self.removed = []

    async def flatten(self, node):
        artifact = _BrokenArtifact()
        self.created.append(artifact)
        return artifact

    def remove(self, node):
        self.removed.append(node)


def test_artifact_removed_when_reading_it_fails(caplog):
    host = _RecordingHost()
    node = SimpleNamespace(id="9:9", boolean_operation="UNION")

    with caplog.at_level(logging.WARNING):
        data = asyncio.run(resolve_boolean(host, node))

    assert data.operation == "UNION"
    assert data.result_vector is None
    assert host.removed == host.created
    assert "network unreadable" in caplog.text
