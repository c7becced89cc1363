# Utils module
"""
Shared utilities for logging, backup, configuration and OS access.
"""

from .logger import AuditLogger
from .backup import BackupManager
from .config import Settings, load_settings
from .registry import Registry
from .results import Outcome, TweakResult

__all__ = [
    "AuditLogger",
    "BackupManager",
    "Settings",
    "load_settings",
    "Registry",
    "Outcome",
    "TweakResult",
]
