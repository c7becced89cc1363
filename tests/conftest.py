"""Shared fixtures: an in-memory registry and a recording subprocess.run."""

import io
import json
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import psutil
import pytest
import yaml
from rich.console import Console

from nettune.optimizer import NetworkOptimizer
from nettune.utils import AuditLogger, Settings
from nettune.utils.backup import TCPIP_PARAMETERS_KEY


ORIGINAL_TCP_VALUES = {
    "TcpWindowSize": 65535,
    "DefaultTTL": 128,
    "MaxUserPort": 5000,
    "TcpTimedWaitDelay": 240,
    "Hostname": "WORKSTATION",
}


class FakeRegistry:
    """In-memory stand-in for nettune.utils.registry.Registry."""

    def __init__(self, keys: Optional[Dict[str, Dict[str, Any]]] = None):
        self.keys = {k: dict(v) for k, v in (keys or {}).items()}
        self.denied: set = set()
        self.writes: List[tuple] = []
        self.imports: List[Path] = []
        self.export_fails = False

    def set_value(self, key_path, name, value, value_type="REG_DWORD"):
        if name in self.denied:
            raise PermissionError(f"[WinError 5] Access is denied: {name}")
        self.writes.append((key_path, name, value))
        self.keys.setdefault(key_path, {})[name] = value

    def export_key(self, key_path, destination: Path) -> bool:
        if self.export_fails:
            return False
        payload = {"key": key_path, "values": self.keys.get(key_path, {})}
        destination.write_text(yaml.safe_dump(payload), encoding="utf-8")
        return True

    def import_file(self, source: Path) -> bool:
        data = yaml.safe_load(source.read_text(encoding="utf-8"))
        self.imports.append(source)
        # Merge, like reg import: captured values overwrite, others stay
        self.keys.setdefault(data["key"], {}).update(data["values"])
        return True


class FakeRun:
    """Records commands passed to subprocess.run and returns canned results."""

    def __init__(self):
        self.calls: List[str] = []
        self.rules: List[tuple] = []

    def respond(self, needle: str, returncode: int = 0, stdout: str = "", stderr: str = ""):
        self.rules.append((needle, returncode, stdout, stderr))

    def __call__(self, args, **kwargs):
        command = " ".join(args)
        self.calls.append(command)
        # Latest matching rule wins
        for needle, returncode, stdout, stderr in reversed(self.rules):
            if needle in command:
                return subprocess.CompletedProcess(args, returncode, stdout, stderr)
        return subprocess.CompletedProcess(args, 0, "", "")

    def commands_containing(self, needle: str) -> List[str]:
        return [c for c in self.calls if needle in c]


def adapters_json(*adapters):
    return json.dumps([
        {"Name": name, "InterfaceDescription": f"{name} controller", "Status": status, "ifIndex": i}
        for i, (name, status) in enumerate(adapters, start=1)
    ])


@pytest.fixture
def fake_registry():
    return FakeRegistry({TCPIP_PARAMETERS_KEY: ORIGINAL_TCP_VALUES})


@pytest.fixture
def fake_run(monkeypatch):
    runner = FakeRun()
    runner.respond("Get-NetAdapter |", stdout=adapters_json(("Ethernet", "Up"), ("Wi-Fi", "Disconnected")))
    monkeypatch.setattr(subprocess, "run", runner)
    return runner


@pytest.fixture
def installed_services(monkeypatch):
    installed = {"Dnscache", "iphlpsvc"}

    def win_service_get(name):
        if name not in installed:
            raise psutil.NoSuchProcess(pid=None, name=name, msg="service not found")
        return object()

    monkeypatch.setattr(psutil, "win_service_get", win_service_get, raising=False)
    return installed


@pytest.fixture
def console_output():
    return io.StringIO()


@pytest.fixture
def audit(console_output):
    return AuditLogger(console=Console(file=console_output, force_terminal=False, width=200))


@pytest.fixture
def settings(tmp_path):
    return Settings(backup_dir=tmp_path / "Desktop", pause_on_exit=False)


@pytest.fixture
def optimizer(settings, fake_registry, audit, fake_run, installed_services):
    return NetworkOptimizer(
        settings,
        registry=fake_registry,
        audit=audit,
        started_at=datetime(2024, 3, 5, 14, 7, 9),
    )
