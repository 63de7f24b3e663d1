"""Tests for PromptSettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from promptloop.config.settings import PromptSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PROMPTLOOP_CONFIG", "PROMPTLOOP_QUIET", "PROMPTLOOP_ASK__TYPE"):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = PromptSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.ask.type == "line"
        assert settings.ask.secret is False

    def test_frozen(self, tmp_path: Path) -> None:
        settings = PromptSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "promptloop.toml").write_text('[ask]\ntype = "int"\n')
        settings = PromptSettings.from_cli(start=tmp_path)
        assert settings.ask.type == "int"
        assert settings.ask.secret is False
        assert settings.config_path == (tmp_path / "promptloop.toml").resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        (tmp_path / "promptloop.toml").write_text("[ask]\nsecret = true\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert PromptSettings.from_cli(start=nested).ask.secret is True

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text('[ask]\ntype = "bool"\n')
        assert PromptSettings.from_cli(config_path=str(cfg)).ask.type == "bool"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "promptloop.toml").write_text("[ask\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            PromptSettings.from_cli(start=tmp_path)

    def test_invalid_type_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "promptloop.toml").write_text('[ask]\ntype = "date"\n')
        with pytest.raises(Exception):
            PromptSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_cli_flag_beats_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROMPTLOOP_QUIET", "false")
        assert PromptSettings.from_cli(start=tmp_path, quiet=True).quiet is True

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "promptloop.toml").write_text('[ask]\ntype = "int"\n')
        monkeypatch.setenv("PROMPTLOOP_ASK__TYPE", "float")
        assert PromptSettings.from_cli(start=tmp_path).ask.type == "float"
