from __future__ import annotations

from pydantic import BaseModel

from buste_paga.shared_modules.utils import quantize_half_up


class PayBreakdown(BaseModel):
    """
    Beträge einer Lohnabrechnung. Die Werte sind ungerundet; gerundet wird
    erst bei der Darstellung (siehe rounded()).
    """
    ordinary_amount: float = 0.0
    overtime_amount: float = 0.0
    banked_overtime_hours: float = 0.0
    banked_overtime_amount: float = 0.0
    meal_voucher_amount: float = 0.0
    mileage_amount: float = 0.0
    extra_amount: float = 0.0
    total_payable: float = 0.0
    has_banked_overtime: bool = False

    def rounded(self, digits: int = 2) -> "PayBreakdown":
        """Gibt eine Kopie mit kaufmännisch auf `digits` Stellen gerundeten Beträgen zurück."""
        values = {
            name: float(quantize_half_up(value, digits)) if isinstance(value, float) else value
            for name, value in self.model_dump().items()
        }
        return PayBreakdown(**values)
