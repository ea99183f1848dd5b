from __future__ import annotations

from pathlib import Path

import pytest

from contact_batcher.config.loader import SCHEMA_PATH, ConfigError, load_config
from contact_batcher.models.config_models import ExporterConfig


def test_load_config_success(write_config: Path):
    cfg = load_config(write_config)
    assert cfg.chunk_size == 2
    assert cfg.export_directory == "out"
    assert cfg.status_column == "C_CONTACTADO"
    assert cfg.excluded_directories == frozenset({"out", "node_modules", ".git"})
    # unspecified keys keep their defaults
    assert cfg.export_headers == ("nome", "numero", "e-mail")
    assert cfg.export_sheet_name == "Hoja1"
    assert cfg.name_placeholder == "Sin nombre"


def test_defaults_match_historical_constants():
    cfg = load_config(None)
    assert cfg == ExporterConfig()
    assert cfg.chunk_size == 50
    assert cfg.export_directory == "exportados"
    assert cfg.status_column == "C_CONTACTADO"
    assert (cfg.fills.ok, cfg.fills.warn, cfg.fills.bad) == ("FFC6EFCE", "FFFFEB9C", "FFFFC7CE")


def test_load_config_missing_file(temp_workdir: Path):
    missing = temp_workdir / "config" / "not_exists.yml"
    with pytest.raises(ConfigError):
        load_config(missing)
    assert load_config(missing, required=False) == ExporterConfig()


def test_empty_file_gives_defaults(temp_workdir: Path):
    cfg_path = temp_workdir / "config" / "export.yml"
    cfg_path.write_text("", encoding="utf-8")
    assert load_config(cfg_path) == ExporterConfig()


def test_fill_colors_are_upper_cased(temp_workdir: Path):
    cfg_path = temp_workdir / "config" / "export.yml"
    cfg_path.write_text("fills:\n  ok: ff00ff00\n", encoding="utf-8")
    cfg = load_config(cfg_path)
    assert cfg.fills.ok == "FF00FF00"
    assert cfg.fills.warn == "FFFFEB9C"


def test_invalid_yaml(temp_workdir: Path):
    cfg_path = temp_workdir / "config" / "export.yml"
    cfg_path.write_text("chunk_size: [1,\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="invalid yaml"):
        load_config(cfg_path)


@pytest.mark.parametrize(
    "text",
    [
        "chunk_size: 0\n",
        "chunk_size: fifty\n",
        "fills:\n  ok: green\n",
        "export_headers: [nome, numero]\n",
        "extra_field: not_allowed\n",
    ],
)
def test_schema_violations(temp_workdir: Path, text: str):
    cfg_path = temp_workdir / "config" / "export.yml"
    cfg_path.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(cfg_path)
    assert "config validation failed" in str(e.value)


def test_non_mapping_root(temp_workdir: Path):
    cfg_path = temp_workdir / "config" / "export.yml"
    cfg_path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(cfg_path)


def test_schema_ships_with_package():
    assert SCHEMA_PATH.exists()


def test_repository_example_config_is_valid():
    example = Path(__file__).resolve().parents[2] / "config" / "export.yml"
    assert load_config(example) == ExporterConfig()
