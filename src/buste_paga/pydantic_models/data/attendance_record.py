from __future__ import annotations

from typing import Mapping

from pydantic import BaseModel

# Eine Zeile der Präsenzliste: Spaltenüberschrift -> Rohwert
RawRow = Mapping[str, str]


class AttendanceRecord(BaseModel):
    """
    Typisierte Zeile der Präsenzliste (eine Zeile = ein Einsatz eines Mitarbeiters).
    Zahlenfelder sind bereits konvertiert, die Sätze POO/POS/PBP bleiben Strings
    und werden erst in der Zusammenfassung ausgewertet.
    """
    employee_name: str = ""
    start_day: str                   # dd-mm-yyyy
    ordinary_time_label: str = ""
    overtime_time_label: str = ""
    site_name: str = ""
    notes: str = ""
    durc: str = ""
    destination: str = ""
    ordinary_minutes: float = 0.0
    overtime_minutes: float = 0.0
    personal_km: int = 0
    company_km: int = 0
    ordinary_rate: str = ""          # POO
    overtime_rate: str = ""          # POS
    meal_rate: str = ""              # PBP
    extra: float = 0.0               # NaN, falls nicht numerisch

    @property
    def sortable_day(self) -> str:
        """Gibt den Tag als yyyy-mm-dd zurück (dd-mm-yyyy umgedreht)."""
        return "-".join(reversed(self.start_day.split("-")))
