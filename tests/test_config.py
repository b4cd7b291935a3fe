from __future__ import annotations

from pathlib import Path

import pytest

from core.config import ENV_FILES, AppSettings, get_user_config_dir, write_user_env_vars


def test_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)

    settings = AppSettings()

    assert settings.backend_bin == "juju"
    assert settings.selector_bin == "fzf"
    assert settings.selector_height == "40%"
    assert settings.echo_commands is True


def test_env_prefix(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("JFZ_BACKEND_BIN", "/snap/bin/juju")
    monkeypatch.setenv("JFZ_ECHO_COMMANDS", "false")

    settings = AppSettings()

    assert settings.backend_bin == "/snap/bin/juju"
    assert settings.echo_commands is False


def test_dotenv_in_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("JFZ_SELECTOR_BIN=sk\n", encoding="utf-8")

    assert AppSettings().selector_bin == "sk"


def test_write_user_env_vars_merges(tmp_path: Path):
    env_path = tmp_path / "jfz" / ".env"
    env_path.parent.mkdir()
    env_path.write_text("# comment\nJFZ_BACKEND_BIN=juju\nJFZ_SELECTOR_HEIGHT='30%'\n", encoding="utf-8")

    write_user_env_vars({"JFZ_BACKEND_BIN": "/opt/juju"}, env_path=env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "# jfz user config (.env)"
    assert "JFZ_BACKEND_BIN=/opt/juju" in lines
    assert "JFZ_SELECTOR_HEIGHT=30%" in lines


def test_user_config_dir_honours_xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert get_user_config_dir() == tmp_path / "jfz"


def test_user_config_dir_defaults_to_dot_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert get_user_config_dir() == tmp_path / ".config" / "jfz"


def test_project_env_file_overrides_user_env_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    user_file = tmp_path / "user.env"
    user_file.write_text("JFZ_BACKEND_BIN=/user/juju\nJFZ_SELECTOR_BIN=sk\n", encoding="utf-8")
    (project / ".env").write_text("JFZ_BACKEND_BIN=/project/juju\n", encoding="utf-8")
    files = (str(user_file), *ENV_FILES[1:])

    settings = AppSettings(_env_file=files)

    assert AppSettings.model_config["env_file"] == ENV_FILES
    assert ENV_FILES[-1] == ".env"
    assert settings.backend_bin == "/project/juju"
    assert settings.selector_bin == "sk"
