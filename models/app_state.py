from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple, Union

from utils.config import MAIN_WINDOW_ID, SVG_DIR
from utils.strings import tr
from utils.ui import compute_row_capacity, partition_into_rows

from .svg_model import ImageEntry, list_images


class OverlayId(Enum):
    """Panels that can be shown in the context drawer."""
    ABOUT = "about"

    def title(self) -> str:
        return tr(self.value)


class MenuAction(Enum):
    ABOUT = "about"

    def message(self) -> "Message":
        if self is MenuAction.ABOUT:
            return ToggleOverlay(OverlayId.ABOUT)
        raise ValueError(f"Unhandled menu action: {self}")


# --- Messages ---


@dataclass(frozen=True)
class RequestOpenLink:
    url: str


@dataclass(frozen=True)
class ToggleOverlay:
    overlay: OverlayId


@dataclass(frozen=True)
class SetRowCapacity:
    capacity: Optional[int]


Message = Union[RequestOpenLink, ToggleOverlay, SetRowCapacity]


# --- Effects ---


@dataclass(frozen=True)
class SetWindowTitle:
    title: str


@dataclass(frozen=True)
class SetContextTitle:
    title: str


@dataclass(frozen=True)
class MeasureViewport:
    """Ask the runtime for the window width; the answer comes back as SetRowCapacity."""
    window_id: str = MAIN_WINDOW_ID


@dataclass(frozen=True)
class OpenUrl:
    url: str


Effect = Union[SetWindowTitle, SetContextTitle, MeasureViewport, OpenUrl]


@dataclass(frozen=True)
class ResizeEvent:
    window_id: str
    width: int
    height: int


# --- State ---


@dataclass(frozen=True)
class AppState:
    items: Tuple[ImageEntry, ...] = ()
    overlay: Optional[OverlayId] = None
    row_capacity: Optional[int] = None

    @property
    def overlay_visible(self) -> bool:
        return self.overlay is not None

    @property
    def is_laid_out(self) -> bool:
        return self.row_capacity is not None


def _normalize_capacity(capacity: Optional[int]) -> Optional[int]:
    if capacity is None or capacity < 1:
        return None
    return int(capacity)


def init(directory: Optional[Union[str, Path]] = SVG_DIR) -> Tuple[AppState, List[Effect]]:
    """
    Builds the startup state and the requests the runtime must carry out.
    The viewport width is unknown until the window exists, so the grid
    starts in the "layout unknown" mode and a measurement is requested.
    """
    state = AppState(items=tuple(list_images(directory)))
    effects: List[Effect] = [SetWindowTitle(tr("app-title")), MeasureViewport(MAIN_WINDOW_ID)]
    return state, effects


def update(state: AppState, message: Message) -> Tuple[AppState, List[Effect]]:
    """Applies one message and returns the next state plus follow-up effects."""
    if isinstance(message, RequestOpenLink):
        return state, [OpenUrl(message.url)]

    if isinstance(message, ToggleOverlay):
        if state.overlay == message.overlay:
            return replace(state, overlay=None), []
        return replace(state, overlay=message.overlay), [SetContextTitle(message.overlay.title())]

    if isinstance(message, SetRowCapacity):
        capacity = _normalize_capacity(message.capacity)
        return replace(state, row_capacity=capacity), []

    raise TypeError(f"Unknown message: {message!r}")


def resize_message(event: ResizeEvent) -> Optional[SetRowCapacity]:
    """Turns a resize notification into a message; other windows are ignored."""
    if event.window_id != MAIN_WINDOW_ID:
        return None
    return SetRowCapacity(compute_row_capacity(event.width))


def grid_rows(state: AppState) -> Optional[List[List[ImageEntry]]]:
    """Rows to draw, or None while the row capacity is still unknown."""
    if state.row_capacity is None:
        return None
    return partition_into_rows(state.items, state.row_capacity)
