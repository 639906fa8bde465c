"""Entry point of the copy engine: destination check, then sequential dispatch."""

from __future__ import annotations

import errno
import os
from typing import TYPE_CHECKING

import structlog

from filecopy.copying.dispatcher import copy_entry
from filecopy.copying.errors import FatalCopyError
from filecopy.copying.types import CopyResult
from filecopy.infrastructure.config import CopyConfig
from filecopy.infrastructure.logger import logger

if TYPE_CHECKING:
    from collections.abc import Sequence


def check_destination(dest_dir: str) -> None:
    """Require write and search access on the destination directory."""
    try:
        os.stat(dest_dir)
    except OSError as err:
        raise FatalCopyError("access", dest_dir, err) from err
    if not os.access(dest_dir, os.W_OK | os.X_OK):
        raise FatalCopyError("access", dest_dir, OSError(errno.EACCES, os.strerror(errno.EACCES)))


def copy_entries(
    sources: Sequence[str | os.PathLike[str]],
    dest_dir: str | os.PathLike[str],
    config: CopyConfig | None = None,
) -> CopyResult:
    """Copy every source, left to right, into ``dest_dir``.

    Raises FatalCopyError on the first fatal condition; whatever was copied
    before that stays in place.
    """
    config = config or CopyConfig()
    dest = os.fspath(dest_dir)
    check_destination(dest)

    result = CopyResult()
    # Every diagnostic of this run carries the top-level destination.
    with structlog.contextvars.bound_contextvars(destination=dest):
        for source in sources:
            path = os.fspath(source)
            logger.debug("Copying entry", path=path)
            copy_entry(path, dest, config, result)
    return result
