from __future__ import annotations

from typing import Optional

from buste_paga.pydantic_models.config import PayrollRulesConfig
from buste_paga.pydantic_models.data import EmployeeSummary, PayBreakdown
from buste_paga.shared_modules.utils import is_finite, round_half_up


def finite_or_zero(value: float) -> float:
    return value if is_finite(value) else 0.0


class PayCalculator:
    """
    Berechnet die Beträge einer Lohnabrechnung aus der Monatszusammenfassung.

    Überstunden über banked_overtime_threshold_hours werden aufgeteilt: der
    Anteil banked_overtime_share wird als "IB" zurückgestellt und nicht
    ausbezahlt, der Rest bleibt im auszuzahlenden Überstundenbetrag. Beide Teile
    werden auf ganze Zahlen gerundet.
    """

    def __init__(self, rules: Optional[PayrollRulesConfig] = None):
        self.rules = rules or PayrollRulesConfig()

    def calculate(self, summary: EmployeeSummary) -> PayBreakdown:
        rules = self.rules
        ordinary_hours = summary.total_ordinary_minutes / 60
        overtime_hours = summary.total_overtime_minutes / 60

        ordinary_amount = finite_or_zero(ordinary_hours * summary.ordinary_rate)
        overtime_amount = finite_or_zero(overtime_hours * summary.overtime_rate)

        banked_hours = 0.0
        banked_amount = 0.0
        has_banked = overtime_hours > rules.banked_overtime_threshold_hours
        if has_banked:
            share = rules.banked_overtime_share
            banked_hours = float(round_half_up(share * overtime_hours))
            banked_amount = float(round_half_up(share * overtime_amount))
            overtime_amount = float(round_half_up((1 - share) * overtime_amount))

        mileage_amount = (
            summary.total_personal_km * rules.mileage_rate_per_km
            - summary.total_company_km * rules.mileage_rate_per_km
        )
        meal_voucher_amount = float(summary.meal_voucher_count)
        extra_amount = summary.total_extra

        total_payable = (
            ordinary_amount
            + overtime_amount
            + meal_voucher_amount
            + extra_amount
            + mileage_amount
        )

        return PayBreakdown(
            ordinary_amount=ordinary_amount,
            overtime_amount=overtime_amount,
            banked_overtime_hours=banked_hours,
            banked_overtime_amount=banked_amount,
            meal_voucher_amount=meal_voucher_amount,
            mileage_amount=mileage_amount,
            extra_amount=extra_amount,
            total_payable=total_payable,
            has_banked_overtime=has_banked,
        )
