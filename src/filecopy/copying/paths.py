"""Destination path composition."""

from __future__ import annotations

import os


def entry_name(source: str | os.PathLike[str]) -> str:
    """Final component of ``source``, ignoring trailing separators.

    Behaves like POSIX basename(3): ``"/a/b/"`` and ``"/a/b"`` give ``"b"``,
    a path made only of separators gives ``"/"``. ``.`` and ``..`` are kept.
    """
    raw = os.fspath(source)
    stripped = raw.rstrip("/")
    if not stripped:
        return "/" if raw else ""
    return stripped.rsplit("/", 1)[-1]


def compose_destination(source: str | os.PathLike[str], dest_dir: str | os.PathLike[str]) -> str:
    """Build ``<dest_dir>/<basename(source)>`` with exactly one separator added."""
    return f"{os.fspath(dest_dir)}/{entry_name(source)}"


def join_child(directory: str, name: str) -> str:
    """Full source path of a directory entry."""
    return f"{directory}/{name}"
