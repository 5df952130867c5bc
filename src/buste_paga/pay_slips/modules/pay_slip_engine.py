from __future__ import annotations

from typing import Iterable, List, Optional

from loguru import logger

from buste_paga.pydantic_models.config import ColumnMappingConfig, PayrollRulesConfig
from buste_paga.pydantic_models.data import EmployeePaySlip, RawRow

from .day_aggregator import DayAggregator
from .employee_summarizer import EmployeeSummarizer
from .pay_calculator import PayCalculator
from .period_filter import PeriodFilter
from .record_normalizer import RecordNormalizer


class PaySlipEngine:
    """
    Berechnet die Lohnabrechnungen einer Periode aus den Rohzeilen:
    normalisieren -> filtern -> je Tag zusammenfassen -> je Mitarbeiter
    summieren -> Beträge berechnen.

    Die Engine hält keinen Zustand zwischen zwei Aufrufen; jeder Aufruf
    arbeitet mit eigenen Zwischenergebnissen.
    """

    def __init__(
        self,
        rules: Optional[PayrollRulesConfig] = None,
        columns: Optional[ColumnMappingConfig] = None,
    ):
        self.rules = rules or PayrollRulesConfig()
        self.normalizer = RecordNormalizer(columns)
        self.aggregator = DayAggregator(self.rules)
        self.summarizer = EmployeeSummarizer(self.rules)
        self.calculator = PayCalculator(self.rules)

    def compute(self, rows: Iterable[RawRow], month: str, year: str) -> List[EmployeePaySlip]:
        period = PeriodFilter(month, year)
        records = self.normalizer.normalize_all(rows)
        selected = period.apply(records)
        logger.info(
            f"{len(selected)} von {len(records)} Einsätzen gehören zur Periode {period.period_key}."
        )

        grouped = self.aggregator.aggregate(selected)

        pay_slips: List[EmployeePaySlip] = []
        for employee_name, days in grouped.items():
            summary = self.summarizer.summarize(employee_name, days)
            breakdown = self.calculator.calculate(summary)
            logger.debug(
                f"{employee_name}: {len(days)} Tage, Total {breakdown.total_payable:.2f}"
            )
            pay_slips.append(EmployeePaySlip(summary=summary, breakdown=breakdown))
        return pay_slips
