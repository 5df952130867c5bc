from pydantic import BaseModel, Field

class PayrollRulesConfig(BaseModel):
    """
    Fachliche Regeln der Lohnberechnung.

    Attribute:
        daily_ordinary_minutes_cap (int): Maximal anrechenbare ordentliche Minuten pro Tag.
        banked_overtime_threshold_hours (float): Ab dieser Anzahl Überstunden (strikt grösser)
            wird ein Teil als "IB" (Banca ore) zurückgestellt.
        banked_overtime_share (float): Anteil der Überstunden, der zurückgestellt wird.
        meal_voucher_min_hours (float): Mindeststunden pro Tag für einen Essensgutschein.
        mileage_rate_per_km (float): Kilometerpauschale.
        label_separator (str): Trennzeichen für zusammengeführte Texte eines Tages.
    """
    daily_ordinary_minutes_cap: int = Field(default=480, gt=0)
    banked_overtime_threshold_hours: float = 5.0
    banked_overtime_share: float = Field(default=0.2, ge=0.0, le=1.0)
    meal_voucher_min_hours: float = 6.0
    mileage_rate_per_km: float = 0.37
    label_separator: str = "<br/>"
