"""
Wandelt Rohzeilen der Präsenzliste in typisierte AttendanceRecords um.

Zahlenfelder werden grosszügig gelesen: was sich nicht als Zahl lesen lässt,
wird zu 0. Ausnahme ist EXTRA, das als NaN erhalten bleibt und erst in der
Zusammenfassung aussortiert wird.
"""
from __future__ import annotations

import math
from typing import Iterable, List, Optional

from loguru import logger

from buste_paga.pydantic_models.config import ColumnMappingConfig
from buste_paga.pydantic_models.data import AttendanceRecord, RawRow
from buste_paga.shared_modules.utils import is_finite, safe_str, to_float


def parse_number(value, default: float = 0.0) -> float:
    """Liest eine Zahl; leere, fehlende oder ungültige Werte ergeben `default`."""
    number = to_float(value)
    return number if is_finite(number) else default


def parse_int(value, default: int = 0) -> int:
    """Liest eine Ganzzahl; Nachkommastellen werden abgeschnitten."""
    number = to_float(value)
    return int(number) if is_finite(number) else default


def parse_extra(value) -> float:
    """Leer oder fehlend ergibt 0, nicht numerisch ergibt NaN."""
    if not safe_str(value).strip():
        return 0.0
    number = to_float(value)
    return number if number is not None else math.nan


class RecordNormalizer:
    """
    Normalisiert Rohzeilen anhand der Spaltenzuordnung aus der Konfiguration.
    """

    def __init__(self, columns: Optional[ColumnMappingConfig] = None):
        self.columns = columns or ColumnMappingConfig()

    def _text(self, row: RawRow, column: str) -> str:
        return safe_str(row.get(column))

    def normalize(self, row: RawRow) -> Optional[AttendanceRecord]:
        """
        Gibt den AttendanceRecord zur Zeile zurück, oder None, wenn die Zeile
        keinen Starttag hat und daher verworfen wird.
        """
        cols = self.columns
        start_day = self._text(row, cols.start_day).strip()
        if not start_day:
            return None

        return AttendanceRecord(
            employee_name=self._text(row, cols.employee_name),
            start_day=start_day,
            ordinary_time_label=self._text(row, cols.ordinary_time_label),
            overtime_time_label=self._text(row, cols.overtime_time_label),
            site_name=self._text(row, cols.site_name),
            notes=self._text(row, cols.notes),
            durc=self._text(row, cols.durc),
            destination=self._text(row, cols.destination),
            ordinary_minutes=parse_number(row.get(cols.ordinary_minutes)),
            overtime_minutes=parse_number(row.get(cols.overtime_minutes)),
            personal_km=parse_int(row.get(cols.personal_km)),
            company_km=parse_int(row.get(cols.company_km)),
            ordinary_rate=self._text(row, cols.ordinary_rate),
            overtime_rate=self._text(row, cols.overtime_rate),
            meal_rate=self._text(row, cols.meal_rate),
            extra=parse_extra(row.get(cols.extra)),
        )

    def normalize_all(self, rows: Iterable[RawRow]) -> List[AttendanceRecord]:
        records: List[AttendanceRecord] = []
        dropped = 0
        for idx, row in enumerate(rows):
            record = self.normalize(row)
            if record is None:
                dropped += 1
                logger.debug(f"Zeile {idx} ohne Starttag verworfen.")
                continue
            records.append(record)
        if dropped:
            logger.debug(f"{dropped} Zeilen ohne Starttag verworfen.")
        return records
