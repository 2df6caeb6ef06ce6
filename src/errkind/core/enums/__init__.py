"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from errkind.core.enums import Kind, Environment
"""

from errkind.core.enums.environment import Environment
from errkind.core.enums.kind import Kind

__all__ = ["Kind", "Environment"]
