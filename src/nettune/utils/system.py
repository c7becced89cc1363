"""System helpers - privilege checks and external command execution."""

import ctypes
import os
import subprocess
from pathlib import Path
from typing import List, Optional


# Only defined on Windows builds of Python
CREATE_NO_WINDOW = getattr(subprocess, "CREATE_NO_WINDOW", 0)

DEFAULT_TIMEOUT = 60


class PrivilegeError(RuntimeError):
    """Raised when the process lacks administrator rights."""


def is_windows() -> bool:
    return os.name == "nt"


def is_admin() -> bool:
    """Check whether the current process is elevated.

    Returns:
        True if running as Administrator, False otherwise (including
        on platforms without the shell32 API).
    """
    try:
        return bool(ctypes.windll.shell32.IsUserAnAdmin())
    except (AttributeError, OSError):
        return False


def require_admin() -> None:
    """Fail fast when not elevated.

    Raises:
        PrivilegeError: If the process is not running as Administrator.
    """
    if not is_admin():
        raise PrivilegeError(
            "Administrator privileges are required. "
            "Right-click your terminal and choose 'Run as administrator'."
        )


def run_command(
    args: List[str],
    timeout: int = DEFAULT_TIMEOUT,
) -> Optional[subprocess.CompletedProcess]:
    """Run an external command without a console window.

    Args:
        args: Program and arguments.
        timeout: Seconds to wait before giving up.

    Returns:
        The completed process, or None if it could not be run or timed out.
    """
    try:
        return subprocess.run(
            args,
            capture_output=True,
            text=True,
            timeout=timeout,
            creationflags=CREATE_NO_WINDOW
        )
    except (subprocess.TimeoutExpired, subprocess.SubprocessError, OSError):
        return None


def run_powershell(
    script: str,
    timeout: int = DEFAULT_TIMEOUT,
) -> Optional[subprocess.CompletedProcess]:
    """Run a PowerShell snippet and return the completed process."""
    return run_command(["powershell", "-NoProfile", "-Command", script], timeout=timeout)


def succeeded(result: Optional[subprocess.CompletedProcess]) -> bool:
    return result is not None and result.returncode == 0


def ps_quote(value: str) -> str:
    """Quote a value as a single-quoted PowerShell string literal."""
    return "'" + value.replace("'", "''") + "'"


def get_desktop_dir() -> Path:
    """Return the invoking user's desktop directory."""
    profile = os.environ.get("USERPROFILE")
    base = Path(profile) if profile else Path.home()
    return base / "Desktop"
