from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from .day_aggregate import DayAggregate


class EmployeeSummary(BaseModel):
    """
    Monatssummen eines Mitarbeiters.

    Die Sätze stammen aus dem ersten Eintrag des ersten Tages; abweichende
    Sätze späterer Tage werden nicht berücksichtigt.
    """
    employee_name: str
    total_ordinary_minutes: float = 0.0
    total_overtime_minutes: float = 0.0
    total_personal_km: float = 0.0
    total_company_km: float = 0.0
    total_extra: float = 0.0
    ordinary_rate: float = float("nan")
    overtime_rate: float = float("nan")
    meal_rate: float = float("nan")
    meal_voucher_count: int = 0
    day_rows: List[DayAggregate] = Field(default_factory=list)

    @property
    def total_ordinary_hours(self) -> float:
        return self.total_ordinary_minutes / 60

    @property
    def total_overtime_hours(self) -> float:
        return self.total_overtime_minutes / 60

    @property
    def total_km(self) -> float:
        return self.total_personal_km + self.total_company_km
