"""Tests for settings loading."""

from pathlib import Path

from nettune.utils.config import load_settings
from nettune.utils.system import DEFAULT_TIMEOUT


def test_defaults_when_file_missing(tmp_path, monkeypatch):
    monkeypatch.setenv("USERPROFILE", str(tmp_path))

    settings = load_settings(tmp_path / "nope.yaml")

    assert settings.backup_dir == tmp_path / "Desktop"
    assert settings.restore_latest is True
    assert settings.proceed_on_backup_failure is True
    assert settings.audit_dir is None
    assert settings.pause_on_exit is True
    assert settings.command_timeout == DEFAULT_TIMEOUT


def test_values_read_from_yaml(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "backup:\n"
        f"  directory: {tmp_path / 'backups'}\n"
        "  restore_latest: false\n"
        "  proceed_on_failure: false\n"
        "audit:\n"
        f"  directory: {tmp_path / 'audit'}\n"
        "interactive:\n"
        "  pause_on_exit: false\n"
        "commands:\n"
        "  timeout_seconds: 15\n",
        encoding="utf-8",
    )

    settings = load_settings(path)

    assert settings.backup_dir == tmp_path / "backups"
    assert settings.restore_latest is False
    assert settings.proceed_on_backup_failure is False
    assert settings.audit_dir == tmp_path / "audit"
    assert settings.pause_on_exit is False
    assert settings.command_timeout == 15


def test_malformed_yaml_falls_back_to_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    path = tmp_path / "settings.yaml"
    path.write_text("backup: [unclosed\n", encoding="utf-8")

    settings = load_settings(path)

    assert settings.backup_dir == tmp_path / "Desktop"
    assert settings.proceed_on_backup_failure is True


def test_shipped_config_loads():
    shipped = Path(__file__).parent.parent / "config" / "settings.yaml"

    settings = load_settings(shipped)

    assert settings.restore_latest is True
    assert settings.audit_dir is None


def test_empty_timeout_falls_back_to_default(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("commands:\n  timeout_seconds:\n", encoding="utf-8")

    assert load_settings(path).command_timeout == DEFAULT_TIMEOUT


def test_non_numeric_timeout_falls_back_to_default(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("commands:\n  timeout_seconds: soon\n", encoding="utf-8")

    assert load_settings(path).command_timeout == DEFAULT_TIMEOUT


def test_undecodable_file_falls_back_to_defaults(tmp_path, monkeypatch):
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    path = tmp_path / "settings.yaml"
    path.write_bytes(b"\xff\xfebackup:\n  proceed_on_failure: false\n")

    settings = load_settings(path)

    assert settings.proceed_on_backup_failure is True
    assert settings.backup_dir == tmp_path / "Desktop"


def test_quoted_flag_is_not_treated_as_true(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "backup:\n"
        "  proceed_on_failure: \"false\"\n"
        "  restore_latest: \"no\"\n",
        encoding="utf-8",
    )

    settings = load_settings(path)

    # Strings are not booleans; the defaults apply
    assert settings.proceed_on_backup_failure is True
    assert settings.restore_latest is True


def test_non_string_directory_is_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    path = tmp_path / "settings.yaml"
    path.write_text("backup:\n  directory: 42\naudit:\n  directory: [a, b]\n", encoding="utf-8")

    settings = load_settings(path)

    assert settings.backup_dir == tmp_path / "Desktop"
    assert settings.audit_dir is None
