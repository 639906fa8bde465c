"""Copy engine domain types."""

from __future__ import annotations

import os
import stat
from enum import Enum

from pydantic import BaseModel, ConfigDict


class EntryKind(str, Enum):
    REGULAR_FILE = "regular_file"
    SYMLINK = "symlink"
    DIRECTORY = "directory"
    OTHER = "other"


class SourceEntry(BaseModel):
    """A source path and its non-dereferenced metadata, fetched right before dispatch."""

    model_config = ConfigDict(frozen=True)

    path: str
    kind: EntryKind
    mode: int  # Permission bits only (S_IMODE)
    atime_ns: int
    mtime_ns: int

    @classmethod
    def from_stat(cls, path: str, st: os.stat_result) -> SourceEntry:
        if stat.S_ISLNK(st.st_mode):
            kind = EntryKind.SYMLINK
        elif stat.S_ISREG(st.st_mode):
            kind = EntryKind.REGULAR_FILE
        elif stat.S_ISDIR(st.st_mode):
            kind = EntryKind.DIRECTORY
        else:
            kind = EntryKind.OTHER
        return cls(
            path=path,
            kind=kind,
            mode=stat.S_IMODE(st.st_mode),
            atime_ns=st.st_atime_ns,
            mtime_ns=st.st_mtime_ns,
        )

    @property
    def times_ns(self) -> tuple[int, int]:
        return (self.atime_ns, self.mtime_ns)


class CopyResult(BaseModel):
    files: int = 0
    symlinks: int = 0
    directories: int = 0
    skipped: int = 0
    warnings: list[str] = []

    def warn(self, message: str) -> None:
        self.warnings.append(message)
