"""Registry access - value writes via winreg, subtree export/import via reg.exe."""

from pathlib import Path
from typing import Any, Tuple

try:
    import winreg
except ImportError:
    winreg = None  # Non-Windows interpreter; every operation reports failure

from .system import DEFAULT_TIMEOUT, run_command, succeeded


HIVE_NAMES = {
    "HKLM": "HKEY_LOCAL_MACHINE",
    "HKEY_LOCAL_MACHINE": "HKEY_LOCAL_MACHINE",
    "HKCU": "HKEY_CURRENT_USER",
    "HKEY_CURRENT_USER": "HKEY_CURRENT_USER",
}

VALUE_TYPES = ("REG_DWORD", "REG_SZ")


def split_key_path(key_path: str) -> Tuple[str, str]:
    """Split "HKLM\\SYSTEM\\..." into a canonical hive name and subkey.

    Raises:
        ValueError: If the hive prefix is not recognised.
    """
    hive, _, subkey = key_path.partition("\\")
    try:
        return HIVE_NAMES[hive.upper()], subkey
    except KeyError:
        raise ValueError(f"Unknown registry hive in {key_path!r}") from None


class Registry:
    """Reads and writes registry values, exports and imports subtrees."""

    def __init__(self, timeout: int = DEFAULT_TIMEOUT):
        """Initialize registry access.

        Args:
            timeout: Seconds allowed for each reg.exe invocation.
        """
        self.timeout = timeout

    def _open_hive(self, key_path: str):
        if winreg is None:
            raise OSError("winreg is not available on this platform")
        hive_name, subkey = split_key_path(key_path)
        return getattr(winreg, hive_name), subkey

    def set_value(self, key_path: str, name: str, value: Any, value_type: str = "REG_DWORD") -> None:
        """Create the key if needed and write a value.

        Args:
            key_path: Full key path including hive, e.g. "HKLM\\SYSTEM\\...".
            name: Value name.
            value: Data to write.
            value_type: "REG_DWORD" or "REG_SZ".

        Raises:
            OSError: If the write fails (access denied, bad path, no winreg).
            ValueError: If value_type is not supported.
        """
        if value_type not in VALUE_TYPES:
            raise ValueError(f"Unsupported value type: {value_type}")
        hive, subkey = self._open_hive(key_path)
        data = int(value) if value_type == "REG_DWORD" else str(value)
        with winreg.CreateKeyEx(hive, subkey, 0, winreg.KEY_WRITE) as key:
            winreg.SetValueEx(key, name, 0, getattr(winreg, value_type), data)

    def export_key(self, key_path: str, destination: Path) -> bool:
        """Export a subtree to a .reg file, overwriting any existing file.

        Returns:
            True if reg.exe succeeded and the file exists.
        """
        result = run_command(
            ["reg", "export", key_path, str(destination), "/y"],
            timeout=self.timeout,
        )
        return succeeded(result) and destination.exists()

    def import_file(self, source: Path) -> bool:
        """Merge a .reg file into the registry.

        Returns:
            True if reg.exe reported success.
        """
        result = run_command(["reg", "import", str(source)], timeout=self.timeout)
        return succeeded(result)
