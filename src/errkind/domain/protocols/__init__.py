"""Domain protocols.

Usage:
    from errkind.domain.protocols import LoggerProtocol
"""

from errkind.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
