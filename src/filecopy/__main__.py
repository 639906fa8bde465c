"""Entry point: python -m filecopy <path1> [<path2> ... <pathN>] <dest dir>"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from filecopy.copying.driver import copy_entries
from filecopy.copying.errors import FatalCopyError
from filecopy.infrastructure.logger import logger

if TYPE_CHECKING:
    from collections.abc import Sequence

USAGE = "Usage: {prog} <reg file> <sym link> <dir> ... <dest dir>"


def main(argv: Sequence[str] | None = None, prog: str = "filecopy") -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    if len(args) < 2:
        print(USAGE.format(prog=prog), file=sys.stderr)
        return 1

    *sources, dest_dir = args

    try:
        result = copy_entries(sources, dest_dir)
    except FatalCopyError as err:
        logger.error("Copy aborted", operation=err.operation, path=err.path, error=err.reason)
        return 1

    logger.info(
        "Copy finished",
        files=result.files,
        symlinks=result.symlinks,
        directories=result.directories,
        skipped=result.skipped,
        warnings=len(result.warnings),
    )
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
