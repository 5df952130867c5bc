from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class DayAggregate(BaseModel):
    """
    Alle Einsätze eines Mitarbeiters an einem Tag.
    Texte werden aneinandergehängt, Zahlen summiert, Sätze gesammelt.
    """
    employee_name: str
    start_day: str
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
    extra: float = 0.0
    ordinary_rate_samples: List[str] = Field(default_factory=list)
    overtime_rate_samples: List[str] = Field(default_factory=list)
    meal_rate_samples: List[str] = Field(default_factory=list)
    merged_records: int = 0

    @property
    def worked_minutes(self) -> float:
        return self.ordinary_minutes + self.overtime_minutes
