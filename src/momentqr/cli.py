from __future__ import annotations

import logging
import sys
from typing import Callable, Dict, List, Optional

from . import host, renderer

COMMANDS: Dict[str, Callable[[Optional[List[str]]], None]] = {
    "render": renderer.main,
    "host": host.main,
}


def main(argv: list[str] | None = None) -> None:
    args = argv if argv is not None else sys.argv[1:]
    names = "|".join(COMMANDS)
    if not args:
        print(f"Usage: momentqr [{names}] ...")
        sys.exit(1)
    cmd, *rest = args
    handler = COMMANDS.get(cmd)
    if handler is None:
        print(f"Unknown command '{cmd}'. Use one of: {', '.join(COMMANDS)}.")
        sys.exit(1)
    logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")
    handler(rest)


if __name__ == "__main__":
    main()
