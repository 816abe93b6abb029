from typing import Dict, Optional

NONE = "none"

# first present wins
_FILL_KEYS = ["background", "background-color", "fill"]


def _first_present(css: Dict[str, str], keys) -> Optional[str]:
    for k in keys:
        v = css.get(k)
        if v:
            return v
    return None


def _border_color(border: str) -> Optional[str]:
    # "<width> solid <color...>"; colors like "rgba(0, 0, 0, 0.5)" contain spaces
    parts = border.split(" ")
    if len(parts) >= 3 and parts[1] == "solid":
        return " ".join(parts[2:])
    return None


def resolve_fill(css: Dict[str, str]) -> str:
    return _first_present(css, _FILL_KEYS) or NONE


def resolve_stroke(css: Dict[str, str]) -> str:
    if css.get("stroke"):
        return css["stroke"]
    if css.get("border-color"):
        return css["border-color"]
    if css.get("border"):
        return _border_color(css["border"]) or NONE
    return NONE
