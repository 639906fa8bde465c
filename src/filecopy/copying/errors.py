"""Fatal and non-fatal error reporting for the copy engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

from filecopy.infrastructure.logger import logger

if TYPE_CHECKING:
    from filecopy.copying.types import CopyResult


def _reason(error: Exception | None) -> str | None:
    if error is None:
        return None
    return getattr(error, "strerror", None) or str(error)


class FatalCopyError(Exception):
    """Error that aborts the whole copy run.

    Raised at the failing call site and propagated unchanged up to the CLI,
    which is the only place that turns it into an exit status.
    """

    def __init__(self, operation: str, path: str, error: OSError | None = None) -> None:
        self.operation = operation
        self.path = path
        self.error = error
        self.reason = _reason(error)
        message = f"{operation}: {path}" if self.reason is None else f"{operation}: {path}: {self.reason}"
        super().__init__(message)


def report_warning(result: CopyResult, event: str, path: str, error: Exception | None = None) -> None:
    """Log a non-fatal condition and record it on the run result."""
    reason = _reason(error)
    if reason is None:
        logger.warning(event, path=path)
        result.warn(f"{event}: {path}")
    else:
        logger.warning(event, path=path, error=reason)
        result.warn(f"{event}: {path}: {reason}")
