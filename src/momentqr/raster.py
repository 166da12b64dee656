from __future__ import annotations

from typing import List

import cv2
import numpy as np
import segno

from . import config
from .matrix import encode
from .packer import well_formed


def rasterize(
    grid: np.ndarray,
    size_px: int = config.DEFAULT_SIZE_PX,
    quiet_px: int = config.DEFAULT_QUIET_PX,
    fg: int = config.DEFAULT_COLOR_FG,
    bg: int = config.DEFAULT_COLOR_BG,
) -> np.ndarray:
    """Draw `grid` centered on a square canvas with at least `quiet_px` of margin.

    The canvas is always `size_px` x `size_px`. Modules are scaled by the largest
    integer factor that fits; when none does, the canvas stays blank.
    """
    size_px = max(0, int(size_px))
    quiet_px = max(0, int(quiet_px))
    canvas = np.full((size_px, size_px), bg, dtype=np.uint8)
    matrix = np.asarray(grid, dtype=np.uint8)
    n = matrix.shape[0]
    inner = size_px - 2 * quiet_px
    scale = max(0, inner // n) if n else 0
    if scale == 0:
        return canvas

    actual = scale * n
    offset = quiet_px + (inner - actual) // 2
    arr = np.repeat(np.repeat(matrix, scale, axis=0), scale, axis=1)
    canvas[offset : offset + actual, offset : offset + actual] = np.where(arr > 0, fg, bg).astype(np.uint8)
    return canvas


def render(
    text: str,
    size_px: int = config.DEFAULT_SIZE_PX,
    quiet_px: int = config.DEFAULT_QUIET_PX,
) -> np.ndarray:
    return rasterize(encode(text), size_px, quiet_px)


def reference_matrix(text: str, error: str = config.REFERENCE_ERROR) -> np.ndarray:
    """Standards-compliant symbol for `text`, without its quiet zone."""
    qr = segno.make(well_formed(text), error=error, micro=False, boost_error=False)
    return np.array(qr.matrix, dtype=np.uint8)


def to_ascii(grid: np.ndarray, dark: str = "##", light: str = "  ") -> str:
    lines: List[str] = []
    for row in np.asarray(grid):
        lines.append("".join(dark if cell else light for cell in row))
    return "\n".join(lines)


def write_image(path: str, canvas: np.ndarray) -> str:
    if not cv2.imwrite(path, canvas):
        raise RuntimeError(f"Unable to write image to {path}")
    return path


def show(canvas: np.ndarray, title: str = "momentqr", delay_ms: int = 0) -> None:
    cv2.imshow(title, canvas)
    cv2.waitKey(delay_ms)
    cv2.destroyAllWindows()
