import logging
from typing import Any, Iterator, Optional, Tuple

from uxlink.core.errors import FontLoadFailure, StyleSampleFailure
from uxlink.models.layers import CharacterStyle, TextData
from uxlink.models.network import FontName, is_mixed
from uxlink.services.host import DesignHost
from uxlink.services.style_runs import merge_style_runs

log = logging.getLogger(__name__)


def _plain(value: Any) -> Any:
    return None if is_mixed(value) else value


def _font_name(value: Any) -> Optional[FontName]:
    if value is None or is_mixed(value):
        return None
    if isinstance(value, FontName):
        return value
    return FontName.model_validate(value)


def _font_weight(value: Any) -> Optional[float]:
    # weights arrive as numbers; the mixed marker and anything else become null
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def has_mixed_styling(node: Any) -> bool:
    return any(is_mixed(getattr(node, attr, None)) for attr in ("font_size", "font_name", "font_weight"))


async def load_node_font(host: DesignHost, node: Any) -> None:
    try:
        await host.load_font(node.font_name)
    except Exception as e:
        raise FontLoadFailure(node.id, e) from e


def sample_character(node: Any, i: int) -> CharacterStyle:
    end = i + 1
    try:
        return CharacterStyle(
            font_size=_plain(node.get_range_font_size(i, end)),
            font_name=_font_name(node.get_range_font_name(i, end)),
            fills=_plain(node.get_range_fills(i, end)) or [],
            text_decoration=_plain(node.get_range_text_decoration(i, end)),
            text_case=_plain(node.get_range_text_case(i, end)),
            letter_spacing=_plain(node.get_range_letter_spacing(i, end)),
            line_height=_plain(node.get_range_line_height(i, end)),
        )
    except Exception as e:
        raise StyleSampleFailure(node.id, i, e) from e


def iter_character_styles(node: Any) -> Iterator[Tuple[int, CharacterStyle]]:
    """Per-character samples; a character that cannot be read is skipped."""
    for i in range(len(node.characters)):
        try:
            yield i, sample_character(node, i)
        except StyleSampleFailure as e:
            log.warning("%s", e)


async def text_payload(host: DesignHost, node: Any) -> TextData:
    try:
        await load_node_font(host, node)
    except FontLoadFailure as e:
        # style reads may be imprecise, but keep going
        log.warning("%s", e)

    data = TextData(
        characters=node.characters,
        font_size=_plain(node.font_size),
        font_name=_font_name(node.font_name),
        font_weight=_font_weight(node.font_weight),
        text_align_horizontal=getattr(node, "text_align_horizontal", None),
        text_align_vertical=getattr(node, "text_align_vertical", None),
        line_height=_plain(getattr(node, "line_height", None)),
        letter_spacing=_plain(getattr(node, "letter_spacing", None)),
        paragraph_spacing=getattr(node, "paragraph_spacing", None),
        text_case=_plain(getattr(node, "text_case", None)),
        text_decoration=_plain(getattr(node, "text_decoration", None)),
        text_auto_resize=getattr(node, "text_auto_resize", None),
        has_mixed_styling=has_mixed_styling(node),
    )
    if data.has_mixed_styling:
        data.styled_ranges = merge_style_runs(iter_character_styles(node))
    return data
