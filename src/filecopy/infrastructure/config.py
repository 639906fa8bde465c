"""Configuration constants and copy tuning settings."""

from __future__ import annotations

import os

DEFAULT_CHUNK_SIZE: int = 8192  # BUFSIZ on glibc
DEFAULT_MAX_PATH: int = 4096  # PATH_MAX on Linux


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "")
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


CHUNK_SIZE: int = max(1, _env_int("FILECOPY_CHUNK_SIZE", DEFAULT_CHUNK_SIZE))
MAX_PATH: int = max(1, _env_int("FILECOPY_MAX_PATH", DEFAULT_MAX_PATH))
PRESERVE_EXACT_MODE: bool = os.environ.get("FILECOPY_PRESERVE_EXACT_MODE", "true").lower() != "false"


class CopyConfig:
    """Tuning knobs for a copy run."""

    def __init__(
        self,
        chunk_size: int = CHUNK_SIZE,
        max_path: int = MAX_PATH,
        preserve_exact_mode: bool = PRESERVE_EXACT_MODE,
    ) -> None:
        self.chunk_size = max(1, chunk_size)
        self.max_path = max_path
        self.preserve_exact_mode = preserve_exact_mode
