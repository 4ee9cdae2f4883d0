from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from natsort import natsorted

from utils.config import SVG_EXT


@dataclass(frozen=True)
class ImageEntry:
    path: Path

    @property
    def label(self) -> str:
        return self.path.stem


def _is_svg_file(path: Path) -> bool:
    # Suffix match is case-sensitive: "c.SVG" is not picked up.
    try:
        return path.suffix == SVG_EXT and path.is_file()
    except OSError:
        return False


def list_images(directory: Optional[Union[str, Path]]) -> List[ImageEntry]:
    """
    Lists the SVG files directly inside *directory*.

    A missing, empty or unreadable directory is not an error; it simply
    yields no images. Subdirectories are not traversed. Results are sorted
    naturally by file name so the grid order is stable between runs.
    """
    if not directory:
        return []

    path = Path(directory)
    if not path.is_dir():
        return []

    try:
        children = list(path.iterdir())
    except OSError as e:
        print(f"[WARN] Could not scan {path}: {e}")
        return []

    svg_files = natsorted([p for p in children if _is_svg_file(p)], key=lambda p: p.name)
    print(f"[INFO] Found {len(svg_files)} SVG files in {path}")
    return [ImageEntry(p) for p in svg_files]
