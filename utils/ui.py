from __future__ import annotations
from typing import List, Sequence, TypeVar

from .config import GRID_ITEM_WIDTH

T = TypeVar("T")


def compute_row_capacity(viewport_width: int, cell_width: int = GRID_ITEM_WIDTH) -> int:
    """
    Calculates how many grid cells fit side by side in the viewport.
    A viewport narrower than one cell yields 0, meaning no layout is possible yet.
    """
    if cell_width <= 0:
        raise ValueError(f"cell_width must be positive, got {cell_width}")
    if viewport_width < cell_width:
        return 0
    return int(viewport_width) // cell_width


def partition_into_rows(items: Sequence[T], row_capacity: int) -> List[List[T]]:
    """
    Splits items into consecutive rows of at most row_capacity entries.
    The last row may be shorter; it is never padded.
    """
    if row_capacity < 1:
        return []
    return [list(items[i:i + row_capacity]) for i in range(0, len(items), row_capacity)]
