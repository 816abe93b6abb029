from __future__ import annotations

import json
from pathlib import Path

from fastapi.testclient import TestClient

import main
from uxlink.core.config import settings
from uxlink.routers.plugin import get_host


def test_health():
    client = TestClient(main.app)
    assert client.get("/health").json() == {"status": "ok"}


def test_messages_use_configured_document(tmp_path: Path, monkeypatch, page_raw):
    doc_path = tmp_path / "page.json"
    doc_path.write_text(json.dumps(page_raw), encoding="utf-8")
    monkeypatch.setattr(settings, "document_path", str(doc_path))

    client = TestClient(main.app)
    resp = client.post("/api/plugin/messages", json={"type": "send"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["notifications"] == []
    (msg,) = body["messages"]
    assert msg["type"] == "copyToClipboard"
    assert msg["data"]["layers"][0]["type"] == "frame"

    resp = client.post("/api/plugin/messages", json={"type": "get"})
    assert resp.json() == {"messages": [], "notifications": ["Got: 1 items selected"]}


def test_messages_with_overridden_host(make_doc):
    doc = make_doc([])
    main.app.dependency_overrides[get_host] = lambda: doc
    try:
        client = TestClient(main.app)
        resp = client.post("/api/plugin/messages", json={"type": "send"})
    finally:
        main.app.dependency_overrides.clear()
    assert resp.status_code == 200
    assert resp.json() == {"messages": [], "notifications": ["No selection found"]}


def test_messages_without_document_is_400(monkeypatch):
    monkeypatch.setattr(settings, "document_path", "")
    client = TestClient(main.app)
    resp = client.post("/api/plugin/messages", json={"type": "send"})
    assert resp.status_code == 400
    assert "UXLINK_DOCUMENT_PATH" in resp.json()["detail"]


def test_unknown_message_type_is_rejected(make_doc):
    main.app.dependency_overrides[get_host] = lambda: make_doc()
    try:
        client = TestClient(main.app)
        resp = client.post("/api/plugin/messages", json={"type": "paste"})
    finally:
        main.app.dependency_overrides.clear()
    assert resp.status_code == 422


def test_extract_inline_document(page_raw):
    client = TestClient(main.app)
    resp = client.post("/api/plugin/extract", json={"document": page_raw, "selection": ["3:1", "2:1"]})
    assert resp.status_code == 200
    layers = resp.json()["layers"]
    assert [layer["id"] for layer in layers] == ["2:1", "3:1"]
    assert layers[0]["shapeSpecific"]["operation"] == "SUBTRACT"
    assert layers[1]["type"] == "unknown"


def test_extract_empty_selection_is_400(page_raw):
    client = TestClient(main.app)
    resp = client.post("/api/plugin/extract", json={"document": page_raw, "selection": []})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "No selection found"


def test_extract_unknown_node_is_400(page_raw):
    client = TestClient(main.app)
    resp = client.post("/api/plugin/extract", json={"document": page_raw, "selection": ["nope"]})
    assert resp.status_code == 400
    assert "nope" in resp.json()["detail"]


def test_plugin_routes_are_grouped_under_one_tag():
    client = TestClient(main.app)
    paths = client.get("/openapi.json").json()["paths"]
    assert paths["/api/plugin/extract"]["post"]["tags"] == ["Plugin"]
    assert paths["/api/plugin/messages"]["post"]["tags"] == ["Plugin"]
