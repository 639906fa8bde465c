"""Tests for copy engine types."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from filecopy.copying.types import CopyResult, EntryKind, SourceEntry
from tests.conftest import write_file

if TYPE_CHECKING:
    from pathlib import Path


class TestSourceEntry:
    def test_from_stat_keeps_permission_bits_only(self, src_dir: Path) -> None:
        path = write_file(src_dir / "f", "x", 0o4755)
        entry = SourceEntry.from_stat(str(path), os.lstat(path))
        assert entry.kind is EntryKind.REGULAR_FILE
        assert entry.mode == 0o4755

    def test_times_ns(self, src_dir: Path) -> None:
        path = write_file(src_dir / "f", "x")
        os.utime(path, ns=(10, 20))
        entry = SourceEntry.from_stat(str(path), os.lstat(path))
        assert entry.times_ns == (10, 20)

    def test_is_immutable(self, src_dir: Path) -> None:
        path = write_file(src_dir / "f", "x")
        entry = SourceEntry.from_stat(str(path), os.lstat(path))
        with pytest.raises(ValidationError):
            entry.mode = 0o777


class TestCopyResult:
    def test_warn_appends(self) -> None:
        result = CopyResult()
        result.warn("one")
        result.warn("two")
        assert result.warnings == ["one", "two"]

    def test_results_do_not_share_warnings(self) -> None:
        first = CopyResult()
        first.warn("only here")
        assert CopyResult().warnings == []
