"""LoggerProtocol definition for structured logging.

Backend-agnostic logging interface used where errors reach a boundary
(HTTP exception handlers). Implementations MUST keep logs structured
(message + key-value context).

Usage:
    from errkind.core.container import get_logger
    from errkind.domain.protocols import LoggerProtocol

    logger: LoggerProtocol = get_logger().bind(request_path=request.url.path)
    logger.warning("Request rejected", kind=err.kind.name, code=int(err.kind))
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Covers the levels boundary code logs at and context binding.
    """

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message (client-side failures)."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.
        """
        ...
