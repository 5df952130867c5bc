from pydantic import BaseModel

class ColumnMappingConfig(BaseModel):
    """
    Abbildung der Spaltenüberschriften der Präsenzliste (CSV) auf die Felder
    von AttendanceRecord. Die Standardwerte entsprechen dem Export der
    Zeiterfassung.
    """
    start_day: str = "GIORNO INIZIO"
    employee_name: str = "NOME DIPENDENTE"
    ordinary_time_label: str = "TEMPO TOT. ORD"
    overtime_time_label: str = "TEMPO TOT. STRAORD."
    site_name: str = "NOME CANTIERE"
    notes: str = "NOTE"
    ordinary_minutes: str = "MIN. ORD. VAL"
    overtime_minutes: str = "MIN. STRAORD. VAL"
    personal_km: str = "KM Auto Personale"
    company_km: str = "KM Auto Aziendale"
    durc: str = "DURC"
    destination: str = "LUOGO DI DESTINAZIONE"
    ordinary_rate: str = "POO"
    overtime_rate: str = "POS"
    meal_rate: str = "PBP"
    extra: str = "EXTRA"

    def expected_columns(self) -> list[str]:
        """Alle erwarteten Spaltenüberschriften in Felddefinitions-Reihenfolge."""
        return list(self.model_dump().values())
