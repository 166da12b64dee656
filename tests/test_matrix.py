from __future__ import annotations

import numpy as np
import pytest

from momentqr import SIZE, Module, build, encode, pack
from momentqr.matrix import finder_anchors, place_data, place_finder, place_timing

DARK = Module.DARK
LIGHT = Module.LIGHT


def _structure_only() -> np.ndarray:
    modules = np.zeros((SIZE, SIZE), dtype=np.uint8)
    for r0, c0 in finder_anchors():
        place_finder(modules, r0, c0)
    place_timing(modules)
    return modules


@pytest.mark.parametrize("text", ["", "hi", "https://ex.co/s/abc", "z" * 80])
def test_build_shape(text: str) -> None:
    grid = build(pack(text))
    assert grid.shape == (25, 25)
    assert SIZE == 25
    assert set(np.unique(grid)) <= {0, 1}


def test_finder_anchors_cover_three_corners() -> None:
    assert finder_anchors() == [(0, 0), (0, 18), (18, 0)]


@pytest.mark.parametrize("text", ["", "hi", "a" * 44])
def test_finder_fixed_points(text: str) -> None:
    grid = encode(text)
    assert grid[0, 0] == DARK
    assert grid[3, 3] == DARK
    assert grid[1, 1] == LIGHT
    # top-right and bottom-left corners and centers
    assert grid[0, 24] == DARK
    assert grid[3, 21] == DARK
    assert grid[24, 0] == DARK
    assert grid[21, 3] == DARK
    assert grid[6, 0] == DARK and grid[0, 6] == DARK


def test_finder_layout_top_left() -> None:
    grid = encode("hi")
    ring = [grid[0, j] for j in range(7)] + [grid[6, j] for j in range(7)]
    ring += [grid[i, 0] for i in range(7)] + [grid[i, 6] for i in range(7)]
    assert all(v == DARK for v in ring)
    assert np.all(grid[2:5, 2:5] == DARK)
    light_ring = [(1, j) for j in range(1, 6)] + [(5, j) for j in range(1, 6)]
    light_ring += [(i, 1) for i in range(1, 6)] + [(i, 5) for i in range(1, 6)]
    assert all(grid[r, c] == LIGHT for r, c in light_ring)
    # separator
    assert np.all(grid[7, 0:8] == LIGHT)
    assert np.all(grid[0:8, 7] == LIGHT)
    assert np.all(grid[17, 0:8] == LIGHT)


@pytest.mark.parametrize("text", ["", "hi", "a" * 44])
def test_timing_alternation(text: str) -> None:
    grid = encode(text)
    for i in range(8, SIZE - 8):
        expected = DARK if i % 2 == 0 else LIGHT
        assert grid[6, i] == expected
        assert grid[i, 6] == expected
    assert grid[6, 8] == DARK


def test_data_starts_bottom_right_msb_first() -> None:
    grid = encode("hi")
    # 'h' = 0x68 = 0110 1000, right sub-column first, moving up
    placed = [grid[24, 24], grid[24, 23], grid[23, 24], grid[23, 23], grid[22, 24], grid[22, 23], grid[21, 24], grid[21, 23]]
    assert placed == [0, 1, 1, 0, 1, 0, 0, 0]
    # 'i' = 0x69 = 0110 1001
    placed = [grid[20, 24], grid[20, 23], grid[19, 24], grid[19, 23], grid[18, 24], grid[18, 23], grid[17, 24], grid[17, 23]]
    assert placed == [0, 1, 1, 0, 1, 0, 0, 1]


def test_light_finder_cells_are_overwritten_by_data() -> None:
    structure = _structure_only()
    assert structure[5, 23] == LIGHT and structure[4, 23] == LIGHT

    grid = encode("hi")
    # bits 36..40 land in the light ring of the top-right finder; byte 4 is 0xEC
    assert grid[5, 23] == DARK
    assert grid[4, 23] == DARK
    assert grid[3, 23] == LIGHT
    assert grid[2, 23] == LIGHT
    assert grid[1, 23] == LIGHT

    ones = build(b"\xff" * 44)
    assert np.all(ones[1:6, 23] == DARK)
    assert np.all(ones[1:6, 19] == DARK)
    assert np.all(ones[1, 19:24] == DARK)
    assert np.all(ones[0:6, 17] == DARK)
    assert np.all(ones[7, 17:25] == DARK)


def test_data_placement_stops_when_bits_run_out() -> None:
    grid = build(b"\xff" * 44)
    # pair 10/9 runs downward and takes the last 42 bits
    assert grid[21, 10] == DARK
    assert grid[21, 9] == DARK
    assert np.all(grid[22:25, 9:11] == LIGHT)
    assert np.all(grid[:, 7:9] == _structure_only()[:, 7:9])
    assert np.array_equal(grid[:, :6], _structure_only()[:, :6])


def test_place_data_counts_bits() -> None:
    modules = _structure_only()
    assert place_data(modules, b"\xff" * 44) == 352
    modules = _structure_only()
    assert place_data(modules, b"") == 0
    assert np.array_equal(modules, _structure_only())


def test_build_accepts_oversized_and_short_buffers() -> None:
    big = build(b"\xff" * 200)
    assert big.shape == (25, 25)
    for i in range(8, SIZE - 8):
        assert big[6, i] == (DARK if i % 2 == 0 else LIGHT)
    assert np.all(big[22:25, 9:11] == DARK)

    empty = build(b"")
    assert np.array_equal(empty, _structure_only())


def test_zero_buffer_leaves_structure() -> None:
    assert np.array_equal(build(bytes(44)), _structure_only())


def test_build_is_deterministic() -> None:
    text = "https://ex.co/session/abc"
    assert np.array_equal(encode(text), encode(text))
    assert not np.array_equal(encode("a"), encode("b"))
