"""Type dispatch: the single place a source path is classified."""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from filecopy.copying.directory import copy_dir
from filecopy.copying.errors import FatalCopyError, report_warning
from filecopy.copying.regular import copy_file
from filecopy.copying.symlink import copy_symlink
from filecopy.copying.types import EntryKind, SourceEntry

if TYPE_CHECKING:
    from filecopy.copying.types import CopyResult
    from filecopy.infrastructure.config import CopyConfig


def stat_entry(path: str) -> SourceEntry:
    """Fetch the non-dereferenced metadata of ``path``."""
    try:
        st = os.lstat(path)
    except OSError as err:
        raise FatalCopyError("lstat", path, err) from err
    return SourceEntry.from_stat(path, st)


def copy_entry(path: str, dest_dir: str, config: CopyConfig, result: CopyResult) -> None:
    """Copy ``path`` into ``dest_dir`` according to its own type.

    Symlinks are never followed. Entries that are not regular files,
    symlinks or directories are reported and skipped.
    """
    entry = stat_entry(path)

    if entry.kind is EntryKind.SYMLINK:
        copy_symlink(entry, dest_dir, config, result)
    elif entry.kind is EntryKind.REGULAR_FILE:
        copy_file(entry, dest_dir, config, result)
    elif entry.kind is EntryKind.DIRECTORY:
        copy_child = functools.partial(_copy_child, config=config, result=result)
        copy_dir(entry, dest_dir, config, result, copy_child)
    else:
        report_warning(result, "wrong file type", path)
        result.skipped += 1


def _copy_child(path: str, dest_dir: str, *, config: CopyConfig, result: CopyResult) -> None:
    copy_entry(path, dest_dir, config, result)
