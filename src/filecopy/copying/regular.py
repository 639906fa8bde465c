"""Regular-file copy: byte stream, then permission bits and timestamps."""

from __future__ import annotations

import errno
import os
import stat
from typing import TYPE_CHECKING

from filecopy.copying.errors import FatalCopyError, report_warning
from filecopy.copying.paths import compose_destination
from filecopy.infrastructure.logger import logger

if TYPE_CHECKING:
    from filecopy.copying.types import CopyResult, SourceEntry
    from filecopy.infrastructure.config import CopyConfig


def _close(fd: int, path: str, result: CopyResult) -> None:
    try:
        os.close(fd)
    except OSError as err:
        report_warning(result, "close failed", path, err)


def _write_all(fd: int, data: bytes, path: str) -> None:
    view = memoryview(data)
    while view:
        try:
            written = os.write(fd, view)
        except OSError as err:
            raise FatalCopyError("write", path, err) from err
        if written == 0:
            raise FatalCopyError("write", path, OSError(errno.EIO, "write made no progress"))
        view = view[written:]


def _stream(src_fd: int, dst_fd: int, entry: SourceEntry, dst_path: str, chunk_size: int) -> None:
    # A short read, including zero bytes, ends the stream.
    while True:
        try:
            chunk = os.read(src_fd, chunk_size)
        except OSError as err:
            raise FatalCopyError("read", entry.path, err) from err
        _write_all(dst_fd, chunk, dst_path)
        if len(chunk) < chunk_size:
            return


def copy_file(entry: SourceEntry, dest_dir: str, config: CopyConfig, result: CopyResult) -> None:
    """Copy a regular file into ``dest_dir``, overwriting any existing file of that name."""
    dst_path = compose_destination(entry.path, dest_dir)

    try:
        src_fd = os.open(entry.path, os.O_RDONLY)
    except OSError as err:
        raise FatalCopyError("open source", entry.path, err) from err

    try:
        try:
            dst_fd = os.open(dst_path, os.O_WRONLY | os.O_TRUNC | os.O_CREAT, entry.mode)
        except OSError as err:
            raise FatalCopyError("open destination", dst_path, err) from err

        try:
            _stream(src_fd, dst_fd, entry, dst_path, config.chunk_size)

            if config.preserve_exact_mode:
                try:
                    if stat.S_IMODE(os.fstat(dst_fd).st_mode) != entry.mode:
                        os.fchmod(dst_fd, entry.mode)
                except OSError as err:
                    report_warning(result, "setting permissions failed", dst_path, err)

            try:
                os.utime(dst_fd, ns=entry.times_ns)
            except OSError as err:
                report_warning(result, "setting timestamps failed", dst_path, err)
        finally:
            _close(dst_fd, dst_path, result)
    finally:
        _close(src_fd, entry.path, result)

    result.files += 1
    logger.debug("Copied file", path=entry.path, copied_to=dst_path)
