"""Tests for the command-line entry point."""

import pytest

from nettune import cli
from nettune.optimizer import Mode
from nettune.utils import Settings
from nettune.utils.system import PrivilegeError


@pytest.fixture
def windows_host(monkeypatch, tmp_path):
    settings = Settings(backup_dir=tmp_path / "Desktop", pause_on_exit=False)
    monkeypatch.setattr(cli, "is_windows", lambda: True)
    monkeypatch.setattr(cli, "require_admin", lambda: None)
    monkeypatch.setattr(cli, "load_settings", lambda: settings)
    return settings


def test_mode_defaults_to_apply():
    assert cli.build_parser().parse_args([]).mode is Mode.APPLY


def test_mode_argument_accepts_any_case():
    assert cli.build_parser().parse_args(["--mode", "backuponly"]).mode is Mode.BACKUP_ONLY


def test_invalid_mode_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.build_parser().parse_args(["--mode", "Turbo"])

    assert exc.value.code == 2
    assert "Invalid mode" in capsys.readouterr().err


def test_non_windows_host_exits_with_failure(monkeypatch, capsys):
    monkeypatch.setattr(cli, "is_windows", lambda: False)

    assert cli.main([]) == 1
    assert "only be run on Windows" in capsys.readouterr().out


def test_missing_admin_rights_stop_before_any_work(windows_host, monkeypatch, fake_run, capsys):
    def deny():
        raise PrivilegeError("Administrator privileges are required.")

    monkeypatch.setattr(cli, "require_admin", deny)

    assert cli.main(["--mode", "Apply"]) == 1
    assert "Administrator privileges are required" in capsys.readouterr().out
    assert fake_run.calls == []


def test_restore_without_backup_exits_with_failure(windows_host, fake_run, capsys):
    assert cli.main(["--mode", "Restore"]) == 1
    assert "Backup file not found" in capsys.readouterr().out
    assert fake_run.calls == []


def test_backup_only_failure_still_exits_cleanly(windows_host, fake_run, capsys):
    # reg.exe "succeeds" but leaves no file behind
    assert cli.main(["--mode", "BackupOnly"]) == 0

    assert len(fake_run.commands_containing("reg export")) == 1
    assert "WARNING" in capsys.readouterr().out


def test_help_names_the_file_restore_uses():
    help_text = cli.build_parser().format_help()

    assert "newest" in help_text
    assert "NetworkBackup_*.reg" in help_text
