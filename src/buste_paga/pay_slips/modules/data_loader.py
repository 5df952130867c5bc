from pathlib import Path
from typing import List

import pandas as pd
from loguru import logger

from buste_paga.pydantic_models.data import RawRow
from buste_paga.shared_modules.config import Config


class DataLoader:
    """
    Klasse zum Laden und Prüfen der Präsenzliste (CSV-Export der Zeiterfassung).
    Nutzt die Konfiguration für die erwarteten Spalten.
    """

    def __init__(self, config: Config):
        """
        Initialisiert den DataLoader mit einer Konfigurationsinstanz.

        Args:
            config (Config): Singleton-Konfiguration mit allen Einstellungen.
        """
        self.config = config

    def load_rows(self, source: Path) -> List[RawRow]:
        """
        Lädt die Präsenzliste und gibt sie als Liste von Zeilen
        (Spaltenüberschrift -> Wert als String) zurück.

        Args:
            source (Path): Pfad zur CSV-Datei.
        Returns:
            List[RawRow]: Alle Zeilen, leere Zellen als "".
        Raises:
            FileNotFoundError: Falls die Datei nicht existiert.
        """
        if not source.is_file():
            logger.error(f"Präsenzliste nicht gefunden: {source}")
            raise FileNotFoundError(f"Präsenzliste nicht gefunden: {source}")

        # Alles als Text lesen, keine NaN-Umwandlung: die Engine konvertiert selbst
        df = pd.read_csv(
            source,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8-sig",
        )
        # Zu kurze Zeilen werden von pandas mit NaN aufgefüllt
        df = df.fillna("")
        df.columns = [str(col).strip() for col in df.columns]
        logger.info(f"{len(df)} Zeilen aus {source.name} gelesen.")
        return df.to_dict("records")

    def check_data_consistency(self, rows: List[RawRow]) -> List[str]:
        """
        Prüft, ob alle erwarteten Spalten vorhanden sind. Fehlende Spalten werden
        nur gemeldet; die betroffenen Felder erhalten in der Engine Standardwerte.

        Args:
            rows (List[RawRow]): Geladene Zeilen.
        Returns:
            List[str]: Fehlende Spaltenüberschriften (sortiert).
        """
        if not rows:
            return []
        expected_columns = set(self.config.columns.expected_columns())
        missing_columns = sorted(expected_columns - set(rows[0].keys()))
        if missing_columns:
            logger.warning(f"Fehlende Spalten: {', '.join(missing_columns)}")
        return missing_columns
