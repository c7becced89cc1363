"""Settings loader - reads config/settings.yaml with defaults."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .system import DEFAULT_TIMEOUT, get_desktop_dir


DEFAULT_SETTINGS_PATH = Path("config/settings.yaml")


@dataclass
class Settings:
    """Runtime settings.

    Attributes:
        backup_dir: Directory where snapshot files are written.
        restore_latest: Restore the newest snapshot instead of this run's path.
        proceed_on_backup_failure: Keep applying after a failed backup.
        audit_dir: Where to write the audit log, or None to skip it.
        pause_on_exit: Wait for Enter before exiting in interactive use.
        command_timeout: Seconds allowed for each external command.
    """

    backup_dir: Path
    restore_latest: bool = True
    proceed_on_backup_failure: bool = True
    audit_dir: Optional[Path] = None
    pause_on_exit: bool = True
    command_timeout: int = DEFAULT_TIMEOUT


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML file safely.

    Args:
        path: Path to YAML file.

    Returns:
        Parsed YAML mapping or empty dict.
    """
    try:
        if path.exists():
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
                return data if isinstance(data, dict) else {}
    except (yaml.YAMLError, UnicodeDecodeError, IOError):
        pass
    return {}


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name)
    return section if isinstance(section, dict) else {}


def _flag(section: Dict[str, Any], key: str, default: bool) -> bool:
    value = section.get(key)
    return value if isinstance(value, bool) else default


def _seconds(section: Dict[str, Any], key: str, default: int) -> int:
    value = section.get(key)
    if isinstance(value, bool):
        return default
    try:
        seconds = int(value)
    except (TypeError, ValueError):
        return default
    return seconds if seconds > 0 else default


def _directory(section: Dict[str, Any], key: str) -> Optional[Path]:
    value = section.get(key)
    if not isinstance(value, str) or not value.strip():
        return None
    return Path(value.strip()).expanduser()


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings, falling back to defaults for anything missing.

    Empty or wrongly typed values are treated as missing.

    Args:
        path: Path to settings.yaml. Defaults to config/settings.yaml.

    Returns:
        Populated Settings.
    """
    data = _load_yaml(path or DEFAULT_SETTINGS_PATH)

    backup = _section(data, "backup")
    audit = _section(data, "audit")
    interactive = _section(data, "interactive")
    commands = _section(data, "commands")

    return Settings(
        backup_dir=_directory(backup, "directory") or get_desktop_dir(),
        restore_latest=_flag(backup, "restore_latest", True),
        proceed_on_backup_failure=_flag(backup, "proceed_on_failure", True),
        audit_dir=_directory(audit, "directory"),
        pause_on_exit=_flag(interactive, "pause_on_exit", True),
        command_timeout=_seconds(commands, "timeout_seconds", DEFAULT_TIMEOUT),
    )
