"""Tests for the wtpack config loader (wtpack.yaml)."""

from pathlib import Path

import pytest

from wtpack.config import WtpackConfig, find_config, load_config

# --- find_config ---


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path):
        cfg = tmp_path / "wtpack.yaml"
        cfg.write_text("show: true\n", encoding="utf-8")
        assert find_config(tmp_path) == cfg

    def test_finds_in_parent(self, tmp_path: Path):
        cfg = tmp_path / "wtpack.yaml"
        cfg.write_text("show: true\n", encoding="utf-8")
        child = tmp_path / "packages" / "web"
        child.mkdir(parents=True)
        assert find_config(child) == cfg

    def test_returns_none_when_missing(self, tmp_path: Path):
        assert find_config(tmp_path) is None

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert find_config() is None

    def test_ignores_directories_named_config(self, tmp_path: Path):
        (tmp_path / "wtpack.yaml").mkdir()
        assert find_config(tmp_path) is None


# --- load_config ---


class TestLoadConfig:
    def test_explicit_path(self, tmp_path: Path):
        cfg_path = tmp_path / "wtpack.yaml"
        cfg_path.write_text(
            "lockfile: ./app/package-lock.json\ncommand: npm\nshow: true\n",
            encoding="utf-8",
        )
        cfg = load_config(cfg_path)
        assert cfg.config_path == cfg_path
        assert cfg.lockfile == str((tmp_path / "app" / "package-lock.json").resolve())
        assert cfg.command == "npm"
        assert cfg.show is True

    def test_explicit_path_not_found(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError, match="not found"):
            load_config(tmp_path / "nope.yaml")

    def test_auto_discover(self, tmp_path: Path, monkeypatch):
        cfg_path = tmp_path / "wtpack.yaml"
        cfg_path.write_text("command: /usr/local/bin/npm\n", encoding="utf-8")
        child = tmp_path / "sub"
        child.mkdir()
        monkeypatch.chdir(child)
        cfg = load_config()
        assert cfg.config_path == cfg_path
        assert cfg.command == "/usr/local/bin/npm"

    def test_auto_discover_disabled(self, tmp_path: Path, monkeypatch):
        (tmp_path / "wtpack.yaml").write_text("show: true\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        cfg = load_config(auto_discover=False)
        assert cfg == WtpackConfig()

    def test_defaults(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        cfg = load_config()
        assert cfg.lockfile is None
        assert cfg.command == "npm"
        assert cfg.show is False

    def test_empty_file_uses_defaults(self, tmp_path: Path):
        cfg_path = tmp_path / "wtpack.yaml"
        cfg_path.write_text("", encoding="utf-8")
        cfg = load_config(cfg_path)
        assert cfg.config_path == cfg_path
        assert cfg.command == "npm"
        assert cfg.lockfile is None

    def test_lockfile_relative_to_yaml(self, tmp_path: Path):
        sub = tmp_path / "config-dir"
        sub.mkdir()
        cfg_path = sub / "wtpack.yaml"
        cfg_path.write_text("lockfile: ../package-lock.json\n", encoding="utf-8")
        cfg = load_config(cfg_path)
        assert cfg.lockfile == str((tmp_path / "package-lock.json").resolve())

    def test_non_mapping_rejected(self, tmp_path: Path):
        cfg_path = tmp_path / "wtpack.yaml"
        cfg_path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Expected a YAML mapping"):
            load_config(cfg_path)
