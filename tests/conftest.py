from pathlib import Path
from typing import Dict

import pytest

from buste_paga.shared_modules.config import Config

HEADER = [
    "GIORNO INIZIO",
    "NOME DIPENDENTE",
    "TEMPO TOT. ORD",
    "TEMPO TOT. STRAORD.",
    "NOME CANTIERE",
    "NOTE",
    "MIN. ORD. VAL",
    "MIN. STRAORD. VAL",
    "KM Auto Personale",
    "KM Auto Aziendale",
    "DURC",
    "LUOGO DI DESTINAZIONE",
    "POO",
    "POS",
    "PBP",
    "EXTRA",
]


@pytest.fixture
def make_row():
    """Erzeugt eine Rohzeile mit sinnvollen Standardwerten."""

    def _make_row(**overrides) -> Dict[str, str]:
        row = {
            "GIORNO INIZIO": "04-03-2024",
            "NOME DIPENDENTE": "Mario Rossi",
            "TEMPO TOT. ORD": "5 ore e 0 minuti",
            "TEMPO TOT. STRAORD.": "0 ore e 0 minuti",
            "NOME CANTIERE": "Cantiere Lugano",
            "NOTE": "",
            "MIN. ORD. VAL": "300",
            "MIN. STRAORD. VAL": "0",
            "KM Auto Personale": "0",
            "KM Auto Aziendale": "0",
            "DURC": "",
            "LUOGO DI DESTINAZIONE": "Lugano",
            "POO": "10",
            "POS": "12",
            "PBP": "8",
            "EXTRA": "",
        }
        row.update(overrides)
        return row

    return _make_row


def write_csv(path: Path, rows) -> Path:
    lines = [",".join(HEADER)]
    for row in rows:
        lines.append(",".join(f'"{row.get(col, "")}"' for col in HEADER))
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "buste_paga_config.yaml"
    path.write_text(
        f"""
structure:
  prj_root: "{tmp_path.as_posix()}"
  output_path: "output"
logging:
  log_file: null
  log_level: "DEBUG"
""",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def config(config_file: Path) -> Config:
    return Config(config_file)


@pytest.fixture
def csv_source(tmp_path: Path):
    """Schreibt Rohzeilen als Präsenzliste und gibt den Pfad zurück."""

    def _csv_source(rows, name: str = "presenze.csv") -> Path:
        return write_csv(tmp_path / name, rows)

    return _csv_source


@pytest.fixture(autouse=True)
def reset_config_singleton():
    Config._instance = None
    yield
    Config._instance = None
