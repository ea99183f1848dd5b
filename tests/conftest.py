# Shared pytest fixtures
from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pandas as pd
import pytest

from contact_batcher.logging.init import reset_logging


@pytest.fixture()
def temp_workdir(tmp_path: Path, monkeypatch) -> Path:
    (tmp_path / "config").mkdir()
    (tmp_path / "data").mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CONTACT_BATCHER_CONFIG", raising=False)
    yield tmp_path


@pytest.fixture(autouse=True)
def _clean_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def sample_config_yaml() -> str:
    return """chunk_size: 2
export_directory: out
status_column: C_CONTACTADO
fills:
  ok: FFC6EFCE
  warn: FFFFEB9C
  bad: FFFFC7CE
excluded_directories: [out, node_modules, .git]
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "export.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


def _make_excel(path: Path, rows: list[list[Any]], sheet_name: str = "Hoja1") -> Path:
    """Write ``rows`` positionally (first row = header, None = empty cell)."""
    df = pd.DataFrame(rows, dtype=object)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet_name, header=False, index=False)
    return path


@pytest.fixture()
def make_excel() -> Callable[..., Path]:
    return _make_excel


@pytest.fixture()
def contacts_xlsx(temp_workdir: Path) -> Path:
    """Source sheet used by the end-to-end scenarios."""
    return _make_excel(
        temp_workdir / "data" / "clientes.xlsx",
        [
            ["RFC", "Nombre", "Telefono"],
            ["AAA010101AAA", "Ana", "555-1111-2222"],
            [None, None, None],
            ["BBB020202BBB", "Beto", "notaphone"],
        ],
    )
