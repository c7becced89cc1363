"""Network optimizer - runs one of the three modes as a single linear pass."""

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional

from .tweaks import AdapterTweak, BaseTweak, DnsTweak, ServiceTweak, TcpTweak
from .utils import AuditLogger, BackupManager, Registry, Settings, load_settings
from .utils.results import Outcome, TweakResult


class Mode(Enum):
    APPLY = "Apply"
    RESTORE = "Restore"
    BACKUP_ONLY = "BackupOnly"

    @classmethod
    def parse(cls, value: str) -> "Mode":
        """Look up a mode by name, case-insensitively.

        Raises:
            ValueError: If the name is not one of the three modes.
        """
        for mode in cls:
            if mode.value.lower() == value.strip().lower():
                return mode
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"Invalid mode {value!r}; choose one of: {choices}")


SECTION_TITLES = {
    "tcp": "Applying TCP/IP parameters...",
    "adapters": "Disabling adapter power saving...",
    "dns": "Optimizing DNS cache...",
    "services": "Restarting network services...",
}


class NetworkOptimizer:
    """Backs up, applies and restores the network-stack tweaks."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        registry: Optional[Registry] = None,
        audit: Optional[AuditLogger] = None,
        started_at: Optional[datetime] = None,
        tweaks: Optional[List[BaseTweak]] = None,
    ):
        """Initialize the optimizer.

        The snapshot path is fixed here, from the invocation timestamp, and
        stays the same for the rest of the run.

        Args:
            settings: Runtime settings. Defaults to config/settings.yaml.
            registry: Registry accessor shared by backup and tweaks.
            audit: Logger for results. Defaults to a console-only logger.
            started_at: Invocation timestamp.
            tweaks: Settings groups to apply, in order.
        """
        self.settings = settings or load_settings()
        self.registry = registry or Registry(timeout=self.settings.command_timeout)
        self.audit = audit or AuditLogger(self.settings.audit_dir)
        self.started_at = started_at or datetime.now()

        self.backup_manager = BackupManager(self.settings.backup_dir, self.registry)
        self.snapshot_path = self.backup_manager.snapshot_path(self.started_at)

        timeout = self.settings.command_timeout
        self.tweaks = tweaks if tweaks is not None else [
            TcpTweak(self.registry, timeout),
            AdapterTweak(self.registry, timeout),
            DnsTweak(self.registry, timeout),
            ServiceTweak(self.registry, timeout),
        ]

    def run(self, mode: Mode) -> List[TweakResult]:
        """Run exactly one mode.

        Args:
            mode: The mode selected at startup.

        Returns:
            Every result recorded during the run.
        """
        if mode is Mode.BACKUP_ONLY:
            return [self.backup()]
        if mode is Mode.RESTORE:
            return [self.restore()]
        return self.apply()

    def backup(self) -> TweakResult:
        """Snapshot the TCP/IP parameters subtree to this run's backup path."""
        self.audit.log_message(f"Backing up {self.backup_manager.key_path}...")
        result = self.audit.record(self.backup_manager.create_snapshot(self.snapshot_path))
        if result.ok:
            self.audit.log_message(f"Backup saved to: {result.target}")
        return result

    def apply(self) -> List[TweakResult]:
        """Back up, then apply every settings group in order.

        Returns:
            The backup result followed by each group's results.
        """
        results = [self.backup()]

        if not results[0].ok and not self.settings.proceed_on_backup_failure:
            results.append(self.audit.record(TweakResult(
                action="apply",
                target="all settings",
                outcome=Outcome.WARNING,
                detail="Backup failed and proceed_on_failure is off; no settings were changed",
            )))
            return results

        for tweak in self.tweaks:
            self.audit.log_message(SECTION_TITLES.get(tweak.tweak_name, f"Applying {tweak.tweak_name}..."))
            results.extend(self.audit.record_all(tweak.apply()))

        self.audit.log_message("Optimization complete. Restart the computer for all changes to take effect.")
        return results

    def resolve_snapshot(self, snapshot: Optional[Path] = None) -> Path:
        """Pick the snapshot to restore.

        An explicit path wins. Otherwise the newest snapshot in the backup
        directory when restore_latest is on, else this run's own path.
        """
        if snapshot is not None:
            return snapshot
        if self.settings.restore_latest:
            latest = self.backup_manager.find_latest_snapshot()
            if latest is not None:
                return latest
        return self.snapshot_path

    def restore(self, snapshot: Optional[Path] = None) -> TweakResult:
        """Replay a snapshot into the registry.

        Args:
            snapshot: Snapshot file to import; see resolve_snapshot().

        Returns:
            The restore result. ERROR means nothing was written.
        """
        path = self.resolve_snapshot(snapshot)
        self.audit.log_message(f"Restoring settings from {path}...")
        result = self.audit.record(self.backup_manager.restore_snapshot(path))
        if result.ok:
            self.audit.log_message(result.detail or "Settings restored.")
        return result
