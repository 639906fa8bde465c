"""Directory replication with pre-order recursive descent."""

from __future__ import annotations

import os
import stat
from typing import TYPE_CHECKING

from filecopy.copying.errors import FatalCopyError, report_warning
from filecopy.copying.paths import compose_destination, join_child
from filecopy.infrastructure.logger import logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from filecopy.copying.types import CopyResult, SourceEntry
    from filecopy.infrastructure.config import CopyConfig


def _apply_times(entry: SourceEntry, dst_path: str, result: CopyResult) -> None:
    try:
        os.utime(dst_path, ns=entry.times_ns)
    except OSError as err:
        report_warning(result, "setting timestamps failed", dst_path, err)


def _apply_exact_mode(entry: SourceEntry, dst_path: str, result: CopyResult) -> None:
    try:
        if stat.S_IMODE(os.stat(dst_path).st_mode) != entry.mode:
            os.chmod(dst_path, entry.mode)
    except OSError as err:
        report_warning(result, "setting permissions failed", dst_path, err)


def copy_dir(
    entry: SourceEntry,
    dest_dir: str,
    config: CopyConfig,
    result: CopyResult,
    copy_child: Callable[[str, str], None],
) -> None:
    """Create the mirror of ``entry`` inside ``dest_dir`` and copy its children into it.

    The directory itself is created and stamped before any child is visited.
    An existing destination directory is reused, so a partially populated
    tree can be completed by running again. ``copy_child`` is called with
    each child's source path and the new directory.
    """
    dst_path = compose_destination(entry.path, dest_dir)

    # Owner keeps full access until the children are in place.
    create_mode = entry.mode | stat.S_IRWXU if config.preserve_exact_mode else entry.mode

    created = True
    try:
        os.mkdir(dst_path, create_mode)
    except FileExistsError as err:
        report_warning(result, "ignored copy, destination exists", entry.path, err)
        created = False
    except OSError as err:
        raise FatalCopyError("mkdir", dst_path, err) from err

    _apply_times(entry, dst_path, result)

    try:
        children = os.scandir(entry.path)
    except OSError as err:
        raise FatalCopyError("opendir", entry.path, err) from err

    with children:
        for child in children:
            # scandir never yields "." or ".."
            copy_child(join_child(entry.path, child.name), dst_path)

    if created:
        result.directories += 1
        if config.preserve_exact_mode:
            _apply_exact_mode(entry, dst_path, result)
    # Children bumped the mtime.
    _apply_times(entry, dst_path, result)

    logger.debug("Copied directory", path=entry.path, copied_to=dst_path)
