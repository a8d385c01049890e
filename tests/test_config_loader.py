"""Tests for configuration loading."""

from pathlib import Path

import pytest

from ifn.config.loader import (
    DEFAULT_DATABASE_URL,
    get_database_url,
    get_export_indent,
    get_log_level,
    load_config,
    resolve_config_path,
)


def test_load_config_reads_yaml(tmp_path):
    path = tmp_path / "ifn.config.yaml"
    path.write_text("storage:\n  database_url: postgresql://ifn@localhost/ifn\nlogging:\n  level: DEBUG\n")

    config = load_config(path)

    assert get_database_url(config) == "postgresql://ifn@localhost/ifn"
    assert get_log_level(config) == "DEBUG"


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_config(tmp_path / "missing.yaml")


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "ifn.config.yaml"
    path.write_text("")
    assert load_config(path) == {}


def test_load_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "ifn.config.yaml"
    path.write_text("- storage\n- logging\n")
    with pytest.raises(ValueError, match="must be a dictionary"):
        load_config(path)


def test_load_config_rejects_bad_section(tmp_path):
    path = tmp_path / "ifn.config.yaml"
    path.write_text("storage: ifn.db\n")
    with pytest.raises(ValueError, match="'storage'"):
        load_config(path)


def test_database_url_fallbacks():
    assert get_database_url({"storage": {"sqlite_path": "data/ifn.db"}}) == "sqlite:///data/ifn.db"
    assert get_database_url({}) == DEFAULT_DATABASE_URL
    assert get_database_url({"storage": None}) == DEFAULT_DATABASE_URL


def test_export_indent_default_and_override():
    assert get_export_indent({}) == 2
    assert get_export_indent({"export": {"indent": None}}) is None


def test_config_path_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("IFN_CONFIG", str(tmp_path / "other.yaml"))
    assert resolve_config_path() == tmp_path / "other.yaml"
    assert resolve_config_path(Path("explicit.yaml")) == Path("explicit.yaml")
