"""Game managers.

- log_manager.py: Event-driven battle log with categories and levels
"""

from .log_manager import LogCategory, LogLevel, LogManager, LogMessage

__all__ = [
    "LogCategory",
    "LogLevel",
    "LogManager",
    "LogMessage",
]
