"""Tests for type dispatch."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from filecopy.copying.dispatcher import copy_entry, stat_entry
from filecopy.copying.errors import FatalCopyError
from filecopy.copying.types import EntryKind
from filecopy.infrastructure.config import CopyConfig
from tests.conftest import write_file

if TYPE_CHECKING:
    from pathlib import Path

    from filecopy.copying.types import CopyResult

needs_fifo = pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="mkfifo not available")


class TestStatEntry:
    def test_classifies_without_following_links(self, src_dir: Path) -> None:
        target = write_file(src_dir / "file", "x", 0o600)
        os.symlink(target, src_dir / "link")
        (src_dir / "dir").mkdir()

        assert stat_entry(str(src_dir / "file")).kind is EntryKind.REGULAR_FILE
        assert stat_entry(str(src_dir / "file")).mode == 0o600
        assert stat_entry(str(src_dir / "link")).kind is EntryKind.SYMLINK
        assert stat_entry(str(src_dir / "dir")).kind is EntryKind.DIRECTORY

    def test_missing_path_is_fatal(self, src_dir: Path) -> None:
        with pytest.raises(FatalCopyError) as exc_info:
            stat_entry(str(src_dir / "ghost"))
        assert exc_info.value.operation == "lstat"
        assert "ghost" in str(exc_info.value)


class TestCopyEntry:
    @pytest.fixture(autouse=True)
    def _setup(self, src_dir: Path, dst_dir: Path, result: CopyResult) -> None:
        self.src = src_dir
        self.dst = dst_dir
        self.result = result

    def test_dispatches_each_type(self) -> None:
        write_file(self.src / "f", "x")
        os.symlink("f", self.src / "l")
        (self.src / "d").mkdir()
        for name in ("f", "l", "d"):
            copy_entry(str(self.src / name), str(self.dst), CopyConfig(), self.result)
        assert (self.dst / "f").is_file()
        assert (self.dst / "l").is_symlink()
        assert (self.dst / "d").is_dir()

    @needs_fifo
    def test_fifo_is_skipped_with_warning(self) -> None:
        fifo = self.src / "pipe"
        os.mkfifo(fifo)
        copy_entry(str(fifo), str(self.dst), CopyConfig(), self.result)
        assert not os.path.lexists(self.dst / "pipe")
        assert self.result.skipped == 1
        assert self.result.warnings == [f"wrong file type: {fifo}"]

    @needs_fifo
    def test_siblings_of_unsupported_entry_are_copied(self) -> None:
        tree = self.src / "tree"
        write_file(tree / "a.txt", "a")
        os.mkfifo(tree / "pipe")
        write_file(tree / "z.txt", "z")
        copy_entry(str(tree), str(self.dst), CopyConfig(), self.result)
        assert (self.dst / "tree" / "a.txt").read_text() == "a"
        assert (self.dst / "tree" / "z.txt").read_text() == "z"
        assert not os.path.lexists(self.dst / "tree" / "pipe")
