"""Audit logger - echoes results to the console and optionally keeps a session log."""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from rich.console import Console
from rich.markup import escape

from .results import Outcome, TweakResult


LEVEL_STYLES = {
    "INFO": "cyan",
    "WARNING": "yellow",
    "ERROR": "bold red",
}

# SUCCESS and IGNORED results are recorded but not echoed
OUTCOME_LEVELS = {
    Outcome.WARNING: "WARNING",
    Outcome.ERROR: "ERROR",
}


class AuditLogger:
    """Records every result of a run and reports the noteworthy ones."""

    def __init__(self, output_dir: Optional[Path] = None, console: Optional[Console] = None):
        """Initialize the audit logger.

        Args:
            output_dir: Directory to save audit logs. None keeps everything in memory.
            console: Console for user-facing output.
        """
        self.console = console or Console()
        self.output_dir = output_dir
        self.session_id = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        self.log_file: Optional[Path] = None

        self.results: List[TweakResult] = []

        if self.output_dir is not None:
            try:
                self.output_dir.mkdir(parents=True, exist_ok=True)
                self.log_file = self.output_dir / f"{self.session_id}_execution.log"
                self._write_header()
            except OSError as e:
                self.console.print(
                    f"[yellow]WARNING: Audit log disabled, cannot write to "
                    f"{escape(str(self.output_dir))}: {escape(str(e))}[/yellow]"
                )
                self.output_dir = None
                self.log_file = None

    def _write_header(self):
        """Write log file header."""
        with open(self.log_file, 'w', encoding='utf-8') as f:
            f.write("# Network Tuner - Audit Log\n")
            f.write(f"# Session: {self.session_id}\n")
            f.write(f"# Started: {datetime.now().isoformat()}\n")
            f.write(f"# {'=' * 70}\n\n")

    def _append(self, line: str):
        if self.log_file is None:
            return
        with open(self.log_file, 'a', encoding='utf-8') as f:
            f.write(line)

    def log_message(self, message: str, level: str = "INFO"):
        """Log a general message.

        Args:
            message: Message to log.
            level: Log level (INFO, WARNING, ERROR).
        """
        style = LEVEL_STYLES.get(level, "")
        prefix = "" if level == "INFO" else f"{level}: "
        self.console.print(f"[{style}]{prefix}{escape(message)}[/{style}]" if style else escape(message))
        self._append(f"[{datetime.now().isoformat()}] {level}: {message}\n")

    def record(self, result: TweakResult) -> TweakResult:
        """Record a result, echoing it if its outcome warrants.

        Args:
            result: The result to record.

        Returns:
            The same result, for chaining.
        """
        self.results.append(result)

        level = OUTCOME_LEVELS.get(result.outcome)
        if level is not None:
            style = LEVEL_STYLES[level]
            text = result.detail or result.action
            self.console.print(f"[{style}]{level}: {escape(text)} ({escape(result.target)})[/{style}]")

        self._append(f"[{result.timestamp}] {result.outcome.value.upper()}: {result.action} - {result.target}\n")
        if result.detail:
            self._append(f"  Detail: {result.detail}\n")
        return result

    def record_all(self, results: List[TweakResult]) -> List[TweakResult]:
        for result in results:
            self.record(result)
        return results

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of recorded results.

        Returns:
            Summary statistics.
        """
        by_outcome: Dict[str, int] = {outcome.value: 0 for outcome in Outcome}
        for result in self.results:
            by_outcome[result.outcome.value] += 1

        return {
            "session_id": self.session_id,
            "total_actions": len(self.results),
            "by_outcome": by_outcome,
            "log_file": str(self.log_file) if self.log_file else None,
        }

    def finalize(self) -> Dict[str, Any]:
        """Finalize the session, saving the structured log if enabled.

        Returns:
            Session summary.
        """
        summary = self.get_summary()
        if self.output_dir is None:
            return summary

        self._append(f"\n# {'=' * 70}\n")
        self._append(f"# Session Complete: {datetime.now().isoformat()}\n")
        self._append(f"# Total actions: {summary['total_actions']}\n")

        yaml_log = self.output_dir / f"{self.session_id}_changes.yaml"
        with open(yaml_log, 'w', encoding='utf-8') as f:
            yaml.dump({
                "session": summary,
                "results": [r.to_dict() for r in self.results],
            }, f, default_flow_style=False, allow_unicode=True, sort_keys=False)

        return summary
