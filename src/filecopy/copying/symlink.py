"""Symlink replication without dereferencing."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from filecopy.copying.errors import FatalCopyError, report_warning
from filecopy.copying.paths import compose_destination
from filecopy.infrastructure.logger import logger

if TYPE_CHECKING:
    from filecopy.copying.types import CopyResult, SourceEntry
    from filecopy.infrastructure.config import CopyConfig


def read_target(path: str, max_path: int) -> str:
    """Read a link target, refusing targets that would not fit in ``max_path`` bytes."""
    try:
        target = os.readlink(path)
    except OSError as err:
        raise FatalCopyError("readlink", path, err) from err
    if len(os.fsencode(target)) >= max_path:
        raise FatalCopyError("readlink", path, OSError(0, "symlink target too long"))
    return target


def copy_symlink(entry: SourceEntry, dest_dir: str, config: CopyConfig, result: CopyResult) -> None:
    """Recreate ``entry`` as a symlink in ``dest_dir`` pointing at the same target string.

    An existing destination entry is left untouched and reported as skipped.
    """
    target = read_target(entry.path, config.max_path)
    dst_path = compose_destination(entry.path, dest_dir)

    try:
        os.symlink(target, dst_path)
    except FileExistsError as err:
        report_warning(result, "ignored copy, destination exists", entry.path, err)
        result.skipped += 1
        return
    except OSError as err:
        raise FatalCopyError("symlink", dst_path, err) from err

    result.symlinks += 1

    # The link's own timestamps, fetched again after creation.
    try:
        st = os.lstat(entry.path)
    except OSError as err:
        report_warning(result, "reading source metadata failed", entry.path, err)
        return
    try:
        os.utime(dst_path, ns=(st.st_atime_ns, st.st_mtime_ns), follow_symlinks=False)
    except (OSError, NotImplementedError) as err:
        report_warning(result, "setting timestamps failed", dst_path, err)
        return

    logger.debug("Copied symlink", path=entry.path, copied_to=dst_path, target=target)
