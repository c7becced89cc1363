"""
Command-line entry point.

Usage:
    nettune [--mode {Apply,Restore,BackupOnly}]
"""

import argparse
import sys
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel

from .optimizer import Mode, NetworkOptimizer
from .utils import AuditLogger, load_settings
from .utils.results import Outcome
from .utils.system import PrivilegeError, is_windows, require_admin


def _mode_arg(value: str) -> Mode:
    try:
        return Mode.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nettune",
        description="Apply Windows network-stack tweaks, with backup and restore",
    )
    parser.add_argument(
        "--mode",
        type=_mode_arg,
        default=Mode.APPLY,
        metavar="{Apply,Restore,BackupOnly}",
        help="Apply (default) backs up then tunes; Restore replays the newest "
             "NetworkBackup_*.reg in the backup directory (see backup.restore_latest); "
             "BackupOnly only writes the backup file"
    )
    return parser


def _pause(enabled: bool) -> None:
    if enabled and sys.stdin is not None and sys.stdin.isatty():
        try:
            input("\nPress Enter to exit...")
        except EOFError:
            pass


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()

    if not is_windows():
        console.print("[bold red]This tool can only be run on Windows.[/bold red]")
        return 1

    settings = load_settings()

    try:
        require_admin()
    except PrivilegeError as e:
        console.print(f"[bold red]{e}[/bold red]")
        _pause(settings.pause_on_exit)
        return 1

    console.print(Panel.fit(
        f"[bold blue]Network Tuner[/bold blue]\nMode: [bold]{args.mode.value}[/bold]",
    ))

    audit = AuditLogger(settings.audit_dir, console)
    optimizer = NetworkOptimizer(settings, audit=audit)
    results = optimizer.run(args.mode)
    audit.finalize()

    _pause(settings.pause_on_exit)
    return 1 if any(r.outcome is Outcome.ERROR for r in results) else 0


if __name__ == "__main__":
    sys.exit(main())
