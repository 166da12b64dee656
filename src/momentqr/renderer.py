from __future__ import annotations

import argparse
from typing import List

import numpy as np

from . import config
from .matrix import build
from .packer import pack_payload
from .raster import rasterize, reference_matrix, show, to_ascii, write_image


def grid_for(text: str, reference: bool = False) -> np.ndarray:
    if reference:
        return reference_matrix(text)
    packed = pack_payload(text)
    return build(packed.data)


def emit(
    grid: np.ndarray,
    size_px: int,
    quiet_px: int,
    output: str | None = None,
    ascii_art: bool = False,
    display: bool = False,
    tag: str = "render",
) -> np.ndarray:
    """Rasterize `grid` and send it to every requested sink."""
    canvas = rasterize(grid, size_px, quiet_px)
    if ascii_art:
        print(to_ascii(grid))
    if output:
        write_image(output, canvas)
        print(f"[{tag}] wrote {size_px}x{size_px} image ({grid.shape[0]} modules) to {output}")
    if display:
        show(canvas, title=f"momentqr {tag}")
    return canvas


def add_canvas_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--size", type=int, default=config.DEFAULT_SIZE_PX, help="Canvas edge in pixels")
    parser.add_argument("--quiet", type=int, default=config.DEFAULT_QUIET_PX, help="Blank margin in pixels")
    parser.add_argument("--output", help="Image path (format from extension, e.g. .png)")
    parser.add_argument("--show", action="store_true", help="Open a window with the result")


def check_canvas_arguments(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if args.size <= 0:
        parser.error("size must be > 0")
    if args.quiet < 0:
        parser.error("quiet must be >= 0")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render text as a compact matrix code")
    parser.add_argument("text", help="Text to encode")
    add_canvas_arguments(parser)
    parser.add_argument("--ascii", action="store_true", help="Print the module grid to stdout")
    parser.add_argument("--reference", action="store_true", help="Use a standards-compliant symbol instead")
    return parser


def main(argv: List[str] | None = None) -> None:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    check_canvas_arguments(parser, args)
    if not (args.output or args.ascii or args.show):
        parser.error("nothing to do; pass --output, --ascii or --show")

    grid = grid_for(args.text, reference=args.reference)
    emit(grid, args.size, args.quiet, output=args.output, ascii_art=args.ascii, display=args.show)


if __name__ == "__main__":
    main()
