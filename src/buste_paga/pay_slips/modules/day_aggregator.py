from __future__ import annotations

from typing import Dict, Iterable, Optional

from buste_paga.pydantic_models.config import PayrollRulesConfig
from buste_paga.pydantic_models.data import AttendanceRecord, DayAggregate
from buste_paga.shared_modules.utils import is_finite

from .overtime_rule import OvertimeCapRule

# Mitarbeiter -> Tag -> DayAggregate
GroupedDays = Dict[str, Dict[str, DayAggregate]]

_TEXT_FIELDS = (
    "ordinary_time_label",
    "overtime_time_label",
    "site_name",
    "notes",
    "durc",
    "destination",
)
_SUM_FIELDS = ("ordinary_minutes", "overtime_minutes", "personal_km", "company_km")


class DayAggregator:
    """
    Fasst die Einsätze je Mitarbeiter und Tag zusammen.

    Jeder Text wird mit vorangestelltem Trennzeichen angehängt (auch der erste),
    Zahlen werden summiert und die Sätze POO/POS/PBP gesammelt. Nach jedem
    einzelnen Einsatz wird die Überstundenregel erneut geprüft.
    """

    def __init__(
        self,
        rules: Optional[PayrollRulesConfig] = None,
        overtime_rule: Optional[OvertimeCapRule] = None,
    ):
        self.rules = rules or PayrollRulesConfig()
        self.overtime_rule = overtime_rule or OvertimeCapRule(self.rules)

    def merge(self, day: DayAggregate, record: AttendanceRecord) -> None:
        separator = self.rules.label_separator
        for field in _TEXT_FIELDS:
            setattr(day, field, getattr(day, field) + separator + getattr(record, field))
        for field in _SUM_FIELDS:
            setattr(day, field, getattr(day, field) + getattr(record, field))
        # Nicht numerische EXTRA-Werte zählen nicht mit
        if is_finite(record.extra):
            day.extra += record.extra
        day.ordinary_rate_samples.append(record.ordinary_rate)
        day.overtime_rate_samples.append(record.overtime_rate)
        day.meal_rate_samples.append(record.meal_rate)
        day.merged_records += 1

        self.overtime_rule.apply(day)

    def aggregate(self, records: Iterable[AttendanceRecord]) -> GroupedDays:
        grouped: GroupedDays = {}
        for record in records:
            days = grouped.setdefault(record.employee_name, {})
            day = days.get(record.start_day)
            if day is None:
                day = DayAggregate(employee_name=record.employee_name, start_day=record.start_day)
                days[record.start_day] = day
            self.merge(day, record)
        return grouped
