"""Module grid layout: finder squares, timing tracks and zigzag data placement."""

from __future__ import annotations

from typing import Iterator, List, Tuple

import numpy as np

from . import config
from .models import Module
from .packer import pack


def finder_anchors(size: int = config.SIZE) -> List[Tuple[int, int]]:
    edge = size - config.FINDER_SIZE
    return [(0, 0), (0, edge), (edge, 0)]


def _finder_module(i: int, j: int) -> Module:
    last = config.FINDER_SIZE - 1
    on_ring = (0 <= i <= last and j in (0, last)) or (0 <= j <= last and i in (0, last))
    in_core = 2 <= i <= last - 2 and 2 <= j <= last - 2
    return Module.DARK if on_ring or in_core else Module.LIGHT


def place_finder(modules: np.ndarray, r0: int, c0: int) -> None:
    size = modules.shape[0]
    for i in range(-1, config.FINDER_SIZE + 1):
        for j in range(-1, config.FINDER_SIZE + 1):
            rr, cc = r0 + i, c0 + j
            if not (0 <= rr < size and 0 <= cc < size):
                continue
            modules[rr, cc] = _finder_module(i, j)


def place_timing(modules: np.ndarray) -> None:
    size = modules.shape[0]
    t = config.TIMING_INDEX
    for i in range(config.FINDER_SIZE + 1, size - config.FINDER_SIZE - 1):
        bit = Module.DARK if i % 2 == 0 else Module.LIGHT
        modules[t, i] = bit
        modules[i, t] = bit


class _BitCursor:
    """Reads bits MSB-first out of a byte buffer, one placement at a time."""

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.index = 0
        self.total = len(data) * 8

    def exhausted(self) -> bool:
        return self.index >= self.total

    def next_bit(self) -> int:
        byte = self.data[self.index // 8]
        bit = (byte >> (7 - self.index % 8)) & 1
        self.index += 1
        return bit


def zigzag(size: int) -> Iterator[Tuple[int, int]]:
    """Yield (row, col) in data scan order: column pairs right to left, alternating up and down."""
    t = config.TIMING_INDEX
    col = size - 1
    up = True
    while col > 0:
        if col == t:
            col -= 1
        for i in range(size):
            row = size - 1 - i if up else i
            for c in (0, 1):
                yield row, col - c
        col -= 2
        up = not up


def _is_reserved(modules: np.ndarray, row: int, col: int) -> bool:
    t = config.TIMING_INDEX
    # Only DARK cells count as taken: light finder and separator cells are
    # left open and get overwritten by data. Existing output depends on it.
    return modules[row, col] == Module.DARK or row == t or col == t


def place_data(modules: np.ndarray, data: bytes) -> int:
    """Stream `data` into free cells; return the number of bits placed."""
    cursor = _BitCursor(data)
    for row, col in zigzag(modules.shape[0]):
        if cursor.exhausted():
            break
        if _is_reserved(modules, row, col):
            continue
        modules[row, col] = cursor.next_bit()
    return cursor.index


def build(buffer: bytes, size: int = config.SIZE) -> np.ndarray:
    modules = np.zeros((size, size), dtype=np.uint8)
    for r0, c0 in finder_anchors(size):
        place_finder(modules, r0, c0)
    place_timing(modules)
    place_data(modules, bytes(buffer))
    return modules


def encode(text: str) -> np.ndarray:
    return build(pack(text))
