#!/usr/bin/env python3
"""Entry point: configure logging, build the facade, hand it to the console."""
from __future__ import annotations

import sys

from .cli import parse_args
from .console.controller import ConsoleController
from .logging_conf import get_logger, setup_logging
from .service.fs_service import FilesystemFacade

logger = get_logger("filemanager")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(args.log_level, log_file=args.log_file)

    # Exactly one facade, owned here and lent to the controller.
    facade = FilesystemFacade()
    ConsoleController(facade).run()
    logger.info("shutdown", extra={"event": "shutdown"})
    raise SystemExit(0)


if __name__ == "__main__":
    main()
