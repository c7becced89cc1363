"""Backup manager - snapshots the TCP/IP registry subtree and replays it."""

from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .registry import Registry
from .results import Outcome, TweakResult
from .system import get_desktop_dir


TCPIP_PARAMETERS_KEY = r"HKLM\SYSTEM\CurrentControlSet\Services\Tcpip\Parameters"

SNAPSHOT_PREFIX = "NetworkBackup_"
SNAPSHOT_SUFFIX = ".reg"


class BackupManager:
    """Manages registry snapshots taken before making changes."""

    def __init__(
        self,
        backup_dir: Optional[Path] = None,
        registry: Optional[Registry] = None,
        key_path: str = TCPIP_PARAMETERS_KEY,
    ):
        """Initialize the backup manager.

        Args:
            backup_dir: Directory to save snapshot files. Defaults to the desktop.
            registry: Registry accessor used for export and import.
            key_path: Subtree captured by each snapshot.
        """
        self.backup_dir = backup_dir or get_desktop_dir()
        self.registry = registry or Registry()
        self.key_path = key_path

    def snapshot_path(self, timestamp: Optional[datetime] = None) -> Path:
        """Build the snapshot file path for a given moment.

        Args:
            timestamp: Moment embedded in the name, to second precision.

        Returns:
            Path inside the backup directory.
        """
        timestamp = timestamp or datetime.now()
        filename = f"{SNAPSHOT_PREFIX}{timestamp.strftime('%Y%m%d_%H%M%S')}{SNAPSHOT_SUFFIX}"
        return self.backup_dir / filename

    def backup_registry_key(self, key_path: str, filepath: Path) -> Optional[Path]:
        """Backup a registry key to a .reg file.

        Args:
            key_path: Full registry path (e.g., "HKLM\\SYSTEM\\...").
            filepath: Destination file.

        Returns:
            Path to backup file, or None if failed.
        """
        try:
            filepath.parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            return None

        if self.registry.export_key(key_path, filepath):
            return filepath
        return None

    def create_snapshot(self, destination: Path) -> TweakResult:
        """Capture the watched subtree into a snapshot file.

        A failure is reported as a warning and never raises; the caller
        decides whether to carry on without a safety net.

        Args:
            destination: Where to write the snapshot.

        Returns:
            SUCCESS with the file path, or WARNING if the export failed.
        """
        saved = self.backup_registry_key(self.key_path, destination)
        if saved is None:
            return TweakResult(
                action="backup",
                target=str(destination),
                outcome=Outcome.WARNING,
                detail=f"Could not export {self.key_path}; continuing without a backup",
            )
        return TweakResult(
            action="backup",
            target=str(saved),
            outcome=Outcome.SUCCESS,
            detail=f"Saved {self.key_path}",
        )

    def restore_snapshot(self, snapshot: Path) -> TweakResult:
        """Replay a snapshot file into the registry.

        Args:
            snapshot: Snapshot file to import.

        Returns:
            SUCCESS if imported, WARNING if reg.exe reported a failure,
            ERROR (with no registry writes) if the file does not exist.
        """
        if not snapshot.is_file():
            return TweakResult(
                action="restore",
                target=str(snapshot),
                outcome=Outcome.ERROR,
                detail=f"Backup file not found: {snapshot}",
            )

        if self.registry.import_file(snapshot):
            return TweakResult(
                action="restore",
                target=str(snapshot),
                outcome=Outcome.SUCCESS,
                detail="Settings restored; a reboot is recommended",
            )
        return TweakResult(
            action="restore",
            target=str(snapshot),
            outcome=Outcome.WARNING,
            detail="reg import reported a failure; some values may not have been restored",
        )

    def list_snapshots(self) -> List[Path]:
        """List snapshot files in the backup directory, oldest first."""
        if not self.backup_dir.is_dir():
            return []
        files = self.backup_dir.glob(f"{SNAPSHOT_PREFIX}*{SNAPSHOT_SUFFIX}")
        # Names embed a sortable timestamp
        return sorted(files, key=lambda p: p.name)

    def find_latest_snapshot(self) -> Optional[Path]:
        """Find the most recent snapshot file, if any."""
        snapshots = self.list_snapshots()
        return snapshots[-1] if snapshots else None
