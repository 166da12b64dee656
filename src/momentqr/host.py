from __future__ import annotations

import argparse
from typing import List

from . import config
from .renderer import add_canvas_arguments, check_canvas_arguments, emit, grid_for
from .session import log_event, resolve_session_id, session_url


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Show the join code for a hosted session")
    parser.add_argument("--origin", required=True, help="Site origin, e.g. https://example.com")
    parser.add_argument("--session", default=None, help=f"Session id (default {config.ANCHOR_SESSION_ID})")
    add_canvas_arguments(parser)
    parser.add_argument("--compact", action="store_true", help="Use the compact encoder instead of the reference symbol")
    return parser


def main(argv: List[str] | None = None) -> None:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    check_canvas_arguments(parser, args)

    session_id = resolve_session_id(args.session)
    url = session_url(args.origin, session_id)
    if not url:
        parser.error("origin must not be empty")
    log_event("anchor_host_active", session_id)
    print(f"[host] session={session_id} url={url}")

    grid = grid_for(url, reference=not args.compact)
    emit(grid, args.size, args.quiet, output=args.output, ascii_art=not (args.output or args.show), display=args.show, tag="host")


if __name__ == "__main__":
    main()
