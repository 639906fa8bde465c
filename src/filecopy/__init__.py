"""Recursive copy of regular files, symlinks and directories into a destination directory."""

from __future__ import annotations

from filecopy.copying.driver import copy_entries
from filecopy.copying.errors import FatalCopyError
from filecopy.copying.types import CopyResult

__all__ = [
    "CopyResult",
    "FatalCopyError",
    "copy_entries",
]
