from __future__ import annotations

import math
from typing import List, Mapping, Optional

from buste_paga.pydantic_models.config import PayrollRulesConfig
from buste_paga.pydantic_models.data import DayAggregate, EmployeeSummary
from buste_paga.shared_modules.utils import is_finite, to_float


def _first_sample(samples: List[str]) -> float:
    """Erster Satz eines Tages als Zahl, NaN wenn fehlend oder ungültig."""
    if not samples:
        return math.nan
    value = to_float(samples[0])
    return value if value is not None else math.nan


class EmployeeSummarizer:
    """
    Bildet die Monatssummen eines Mitarbeiters aus seinen Tagen und zählt die
    Essensgutscheine.
    """

    def __init__(self, rules: Optional[PayrollRulesConfig] = None):
        self.rules = rules or PayrollRulesConfig()

    def meal_voucher_value(self, day: DayAggregate) -> int:
        """
        Wert des Essensgutscheins eines Tages: der ganzzahlige Satz PBP, wenn am
        Tag mindestens meal_voucher_min_hours gearbeitet wurde, sonst 0.
        """
        hours = day.worked_minutes / 60
        if hours < self.rules.meal_voucher_min_hours:
            return 0
        rate = _first_sample(day.meal_rate_samples)
        return int(rate) if is_finite(rate) else 0

    def summarize(self, employee_name: str, days: Mapping[str, DayAggregate]) -> EmployeeSummary:
        summary = EmployeeSummary(employee_name=employee_name)
        rates_taken = False

        for day in days.values():
            summary.total_ordinary_minutes += day.ordinary_minutes
            summary.total_overtime_minutes += day.overtime_minutes
            summary.total_personal_km += day.personal_km
            summary.total_company_km += day.company_km
            if is_finite(day.extra):
                summary.total_extra += day.extra

            # Sätze gelten für die ganze Periode: erster Eintrag des ersten Tages
            if not rates_taken:
                summary.ordinary_rate = _first_sample(day.ordinary_rate_samples)
                summary.overtime_rate = _first_sample(day.overtime_rate_samples)
                summary.meal_rate = _first_sample(day.meal_rate_samples)
                rates_taken = True

            summary.meal_voucher_count += self.meal_voucher_value(day)
            summary.day_rows.append(day)

        return summary
