from __future__ import annotations

from typing import Iterable, List

from buste_paga.pydantic_models.data import AttendanceRecord


class PeriodFilter:
    """
    Wählt die Einsätze eines Monats aus und sortiert sie nach Mitarbeiter
    (aufsteigend) und Tag (absteigend).

    Ein Einsatz gehört zur Periode, wenn sein Starttag (dd-mm-yyyy) die
    Zeichenfolge "mm-yyyy" enthält. Es wird bewusst kein Datum geparst, damit
    das Verhalten den bestehenden Auswertungen entspricht.
    """

    def __init__(self, month: str, year: str):
        self.month = str(month).zfill(2)
        self.year = str(year)

    @property
    def period_key(self) -> str:
        return f"{self.month}-{self.year}"

    def matches(self, record: AttendanceRecord) -> bool:
        return self.period_key in record.start_day

    def apply(self, records: Iterable[AttendanceRecord]) -> List[AttendanceRecord]:
        selected = [record for record in records if self.matches(record)]
        # Zwei stabile Sortierungen: zuerst Tag absteigend, dann Name aufsteigend
        selected.sort(key=lambda r: r.sortable_day, reverse=True)
        selected.sort(key=lambda r: r.employee_name)
        return selected
