"""Logging adapters implementing LoggerProtocol."""

from errkind.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
