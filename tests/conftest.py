"""Shared fixtures for copy engine tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from filecopy.copying.types import CopyResult
from filecopy.infrastructure.config import CopyConfig

if TYPE_CHECKING:
    from pathlib import Path

running_as_root = pytest.mark.skipif(
    hasattr(os, "geteuid") and os.geteuid() == 0,
    reason="permission checks are bypassed for root",
)


@pytest.fixture()
def src_dir(tmp_path: Path) -> Path:
    """Empty directory to build source trees in."""
    path = tmp_path / "src_root"
    path.mkdir()
    return path


@pytest.fixture()
def dst_dir(tmp_path: Path) -> Path:
    """Empty, writable destination directory."""
    path = tmp_path / "dst"
    path.mkdir()
    return path


@pytest.fixture()
def config() -> CopyConfig:
    return CopyConfig()


@pytest.fixture()
def result() -> CopyResult:
    return CopyResult()


def write_file(path: Path, content: bytes | str = b"", mode: int = 0o644) -> Path:
    """Create a file with the given content and exact permission bits."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, str):
        content = content.encode()
    path.write_bytes(content)
    os.chmod(path, mode)
    return path
