"""Shared fixtures: small document snapshots shaped like a live page."""

from __future__ import annotations

import copy
import logging
import sys

import pytest

from uxlink.services.snapshot import load_document

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,
    force=True,
)

TRIANGLE_NETWORK = {
    "vertices": [
        {"x": 0, "y": 0, "strokeCap": "NONE"},
        {"x": 10, "y": 0, "strokeCap": "NONE"},
        {"x": 10, "y": 10, "strokeCap": "ROUND"},
    ],
    "segments": [
        {"start": 0, "end": 1, "tangentStart": {"x": 1, "y": 2}, "tangentEnd": {"x": 3, "y": 4}},
        {"start": 1, "end": 2},
        {"start": 2, "end": 0},
    ],
    "regions": [{"windingRule": "NONZERO", "loops": [[0, 1, 2]]}],
}

PAGE = {
    "children": [
        {
            "id": "1:1", "name": "Card", "type": "FRAME",
            "x": 0, "y": 0, "width": 200, "height": 100,
            "css": {"background": "#FFFFFF", "border": "1px solid rgba(0, 0, 0, 0.25)"},
            "children": [
                {
                    "id": "1:2", "name": "Bg", "type": "RECTANGLE",
                    "x": 0, "y": 0, "width": 200, "height": 100,
                    "rotation": 0, "opacity": 0.5, "strokeWeight": 1, "cornerRadius": 8,
                    "css": {"background-color": "#EEEEEE", "stroke": "#000000"},
                },
                {
                    "id": "1:3", "name": "Title", "type": "TEXT",
                    "x": 10, "y": 10, "width": 80, "height": 20,
                    "characters": "Hi there",
                    "fontSize": 16, "fontName": {"family": "Inter", "style": "Regular"},
                    "textAlignHorizontal": "LEFT", "textAlignVertical": "TOP",
                    "textAutoResize": "WIDTH_AND_HEIGHT",
                    "css": {"color": "#111111"},
                },
                {
                    "id": "1:4", "name": "Arrow", "type": "VECTOR",
                    "x": 150, "y": 40, "width": 10, "height": 10,
                    "vectorNetwork": TRIANGLE_NETWORK,
                    "vectorPaths": [{"windingRule": "EVENODD", "data": "M 0 0 L 10 0 L 10 10 Z"}],
                    "css": {"fill": "#FF0000"},
                },
            ],
        },
        {
            "id": "2:1", "name": "Badge", "type": "BOOLEAN_OPERATION",
            "x": 300, "y": 0, "width": 20, "height": 20,
            "booleanOperation": "SUBTRACT",
            "css": {"background": "blue"},
            "flattened": {
                "vectorNetwork": TRIANGLE_NETWORK,
                "vectorPaths": [{"windingRule": "NONZERO", "data": "M 0 0 L 10 0 L 10 10 Z"}],
            },
            "children": [
                {"id": "2:2", "name": "Outer", "type": "ELLIPSE", "x": 0, "y": 0, "width": 20, "height": 20},
                {"id": "2:3", "name": "Inner", "type": "ELLIPSE", "x": 5, "y": 5, "width": 10, "height": 10},
            ],
        },
        {"id": "3:1", "name": "Slice", "type": "SLICE", "x": 0, "y": 200, "width": 50, "height": 50},
        {"id": "4:1", "name": "Divider", "type": "LINE", "x": 0, "y": 120, "width": 200, "height": 0,
         "strokeCap": "ARROW_LINES", "css": {"border-color": "#999999"}},
    ],
    "selection": ["1:1"],
}


@pytest.fixture
def page_raw() -> dict:
    return copy.deepcopy(PAGE)


@pytest.fixture
def make_doc(page_raw):
    """Build a fresh SnapshotDocument, optionally with a different selection."""

    def _make(selection=None, raw=None):
        return load_document(raw if raw is not None else page_raw, selection)

    return _make
