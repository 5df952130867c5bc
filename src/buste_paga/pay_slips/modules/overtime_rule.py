from __future__ import annotations

import math
from typing import Optional

from loguru import logger

from buste_paga.pydantic_models.config import PayrollRulesConfig
from buste_paga.pydantic_models.data import DayAggregate
from buste_paga.shared_modules.utils import round_half_up


def format_hours_label(minutes: float) -> str:
    """
    Formatiert Minuten als "H ore e M minuti".
    Gerundete 60 Minuten werden in die Stunde übertragen, 0 Minuten als "00" ausgegeben.
    """
    hours = math.floor(minutes / 60)
    rest = round_half_up((minutes / 60 - hours) * 60)
    if rest == 60:
        hours += 1
        rest = 0
    rest_label = "00" if rest == 0 else str(rest)
    return f"{hours} ore e {rest_label} minuti"


class OvertimeCapRule:
    """
    Begrenzt die ordentlichen Minuten eines Tages auf die Tageshöchstgrenze
    (Standard 480 = 8 Stunden). Der Überschuss wird als Überstunden gezählt.
    """

    def __init__(self, rules: Optional[PayrollRulesConfig] = None):
        self.rules = rules or PayrollRulesConfig()

    @property
    def cap(self) -> int:
        return self.rules.daily_ordinary_minutes_cap

    @property
    def full_day_label(self) -> str:
        return f"{self.cap // 60} ore e {self.cap % 60} minuti"

    def apply(self, day: DayAggregate) -> bool:
        """
        Wendet die Regel auf den Tag an. Gibt True zurück, wenn umgebucht wurde.
        """
        if day.ordinary_minutes <= self.cap:
            return False

        delta = day.ordinary_minutes - self.cap
        day.overtime_minutes += delta
        day.ordinary_minutes = self.cap
        day.ordinary_time_label = self.full_day_label
        day.overtime_time_label = format_hours_label(day.overtime_minutes)
        logger.debug(
            f"{day.employee_name} {day.start_day}: {delta:g} Minuten in Überstunden umgebucht."
        )
        return True
