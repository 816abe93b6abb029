from typing import Iterable, List, Tuple

from uxlink.models.layers import CharacterStyle, StyledRange


def merge_style_runs(samples: Iterable[Tuple[int, CharacterStyle]]) -> List[StyledRange]:
    """
    Collapse ``(index, style)`` samples into contiguous runs of equal style.

    Samples arrive in index order. A sample whose style equals the open run's
    style (field-by-field) extends that run to cover it; anything else closes
    the run and opens a new one at that index. Equal styles separated by a
    different one stay separate runs.
    """
    ranges: List[StyledRange] = []
    for index, style in samples:
        if ranges and ranges[-1].style == style:
            ranges[-1].end = index + 1
            continue
        ranges.append(StyledRange(start=index, end=index + 1, style=style))
    return ranges
