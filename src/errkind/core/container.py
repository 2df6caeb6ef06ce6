"""Composition root for boundary dependencies.

Usage:
    from errkind.core.container import get_logger

    logger = get_logger()
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from errkind.core.config import settings
from errkind.core.enums import Environment

if TYPE_CHECKING:
    from errkind.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache
def get_logger() -> "LoggerProtocol":
    """Return the process-wide logger singleton.

    Adapter selection:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from errkind.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = settings.environment != Environment.DEVELOPMENT
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)
