import math

import pytest

from buste_paga.pay_slips.modules.pay_calculator import PayCalculator, finite_or_zero
from buste_paga.pydantic_models.config import PayrollRulesConfig
from buste_paga.pydantic_models.data import EmployeeSummary, PayBreakdown


def _summary(**fields) -> EmployeeSummary:
    values = {"employee_name": "Mario Rossi", "ordinary_rate": 10.0, "overtime_rate": 12.0}
    values.update(fields)
    return EmployeeSummary(**values)


def test_single_half_day():
    breakdown = PayCalculator().calculate(_summary(total_ordinary_minutes=300))

    assert breakdown.ordinary_amount == pytest.approx(50.0)
    assert breakdown.overtime_amount == 0
    assert breakdown.has_banked_overtime is False
    assert breakdown.meal_voucher_amount == 0
    assert breakdown.total_payable == pytest.approx(50.0)


def test_overtime_above_threshold_is_split():
    breakdown = PayCalculator().calculate(_summary(total_overtime_minutes=400))

    assert breakdown.has_banked_overtime is True
    assert breakdown.banked_overtime_hours == 1
    assert breakdown.banked_overtime_amount == 16
    assert breakdown.overtime_amount == 64
    assert breakdown.total_payable == pytest.approx(64)


def test_exactly_five_hours_is_not_split():
    breakdown = PayCalculator().calculate(_summary(total_overtime_minutes=300))

    assert breakdown.has_banked_overtime is False
    assert breakdown.banked_overtime_hours == 0
    assert breakdown.overtime_amount == pytest.approx(60)


def test_split_keeps_amount_within_rounding():
    breakdown = PayCalculator().calculate(
        _summary(total_overtime_minutes=300.6, overtime_rate=100.0)
    )

    assert breakdown.has_banked_overtime is True
    assert breakdown.banked_overtime_amount == 100
    assert breakdown.overtime_amount == 401
    assert breakdown.banked_overtime_amount + breakdown.overtime_amount == pytest.approx(501, abs=1)


def test_mileage_can_be_negative():
    calculator = PayCalculator()

    forward = calculator.calculate(_summary(total_personal_km=100, total_company_km=40))
    reverse = calculator.calculate(_summary(total_personal_km=40, total_company_km=100))

    assert forward.mileage_amount == pytest.approx(22.2)
    assert reverse.mileage_amount == pytest.approx(-22.2)


def test_missing_rates_give_zero_amounts():
    breakdown = PayCalculator().calculate(
        _summary(
            total_ordinary_minutes=480,
            total_overtime_minutes=60,
            ordinary_rate=math.nan,
            overtime_rate=math.nan,
            meal_voucher_count=8,
            total_extra=2.5,
        )
    )

    assert breakdown.ordinary_amount == 0
    assert breakdown.overtime_amount == 0
    assert breakdown.total_payable == pytest.approx(10.5)


def test_total_uses_reported_overtime():
    breakdown = PayCalculator().calculate(
        _summary(
            total_ordinary_minutes=600,
            total_overtime_minutes=400,
            meal_voucher_count=16,
            total_extra=4,
            total_personal_km=10,
        )
    )

    assert breakdown.total_payable == pytest.approx(100 + 64 + 16 + 4 + 3.7)


def test_rules_are_configurable():
    rules = PayrollRulesConfig(banked_overtime_threshold_hours=2.0, banked_overtime_share=0.5, mileage_rate_per_km=0.5)
    breakdown = PayCalculator(rules).calculate(
        _summary(total_overtime_minutes=240, total_personal_km=10)
    )

    assert breakdown.banked_overtime_hours == 2
    assert breakdown.banked_overtime_amount == 24
    assert breakdown.overtime_amount == 24
    assert breakdown.mileage_amount == pytest.approx(5.0)


def test_rounded_copy():
    breakdown = PayCalculator().calculate(_summary(total_personal_km=1, total_ordinary_minutes=7))
    rounded = breakdown.rounded()

    assert rounded.mileage_amount == 0.37
    assert rounded.ordinary_amount == 1.17
    assert breakdown.ordinary_amount != rounded.ordinary_amount


def test_finite_or_zero():
    assert finite_or_zero(math.nan) == 0
    assert finite_or_zero(math.inf) == 0
    assert finite_or_zero(1.5) == 1.5


def test_rounded_ties_go_up():
    breakdown = PayBreakdown(ordinary_amount=0.125, mileage_amount=-0.125, total_payable=2.675)
    rounded = breakdown.rounded()

    assert rounded.ordinary_amount == 0.13
    assert rounded.mileage_amount == -0.13
    assert rounded.total_payable == 2.68
