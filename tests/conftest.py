"""Shared pytest fixtures.

Provides leaf errors and a prebuilt four-link chain used across the
rendering, accessor and boundary tests.
"""

import pytest
import structlog

from errkind import E, Kind, new
from errkind.core.container import get_logger


@pytest.fixture
def leaf_error():
    """Plain text error used as the terminal cause."""
    return new("foo")


@pytest.fixture
def mega_error():
    """Four-link chain ending at a plain text error.

    Renders as
    "no part of group: invalid key: can't unmarshal bar: io error: network unreachable".
    """
    err_io = E(new("network unreachable"), "io error", Kind.IO)
    err_unmarshal = E(err_io, "can't unmarshal bar", Kind.UNMARSHAL)
    err_decrypt = E(err_unmarshal, "invalid key", Kind.DECRYPT)
    return E(err_decrypt, "no part of group", Kind.PERMISSION)


@pytest.fixture(autouse=True)
def reset_logging():
    """Isolate logging state between tests.

    Drops the cached logger so patched settings take effect, and restores
    structlog defaults that a ConsoleAdapter may have replaced.
    """
    get_logger.cache_clear()
    structlog.reset_defaults()
    yield
    get_logger.cache_clear()
    structlog.reset_defaults()
