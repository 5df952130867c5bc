from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, field_validator, model_validator

from buste_paga.shared_modules.utils import safe_str


class PaySlipFilter(BaseModel):
    """
    Pydantic-Modell für die Auswahl eines Lohnlaufs.

    - month: Monat zweistellig ("01".."12"); Zahlen werden mit führender Null ergänzt.
    - year: Jahr vierstellig.
    - source_file: Präsenzliste (CSV), die ausgewertet wird.

    Fehlende oder ungültige Angaben führen zu einem pydantic ValidationError,
    der alle Probleme auf einmal auflistet.
    """

    month: str
    year: str
    source_file: Path

    @model_validator(mode="before")
    def ensure_str_fields(cls, data):
        """
        Sorgt dafür, dass Monat und Jahr als str vorliegen, auch wenn sie als int
        aus einem Formular oder von der Kommandozeile kommen.
        """
        if isinstance(data, dict):
            for field in ["month", "year"]:
                if field in data and data[field] is not None:
                    data[field] = safe_str(data[field]).strip()
        return data

    @field_validator("month", mode="after")
    def valid_month(cls, v: str) -> str:
        if not v.isdigit() or not 1 <= int(v) <= 12:
            raise ValueError(f"Ungültiger Monat '{v}' (erwartet 01-12).")
        return f"{int(v):02d}"

    @field_validator("year", mode="after")
    def valid_year(cls, v: str) -> str:
        if len(v) != 4 or not v.isdigit():
            raise ValueError(f"Ungültiges Jahr '{v}' (erwartet YYYY).")
        return v

    @field_validator("source_file", mode="after")
    def source_must_exist(cls, v: Path) -> Path:
        if not v.is_file():
            raise ValueError(f"CSV-Datei nicht gefunden: {v}")
        return v

    @property
    def period_key(self) -> str:
        """Monat/Jahr-Teil eines Tages im Format dd-mm-yyyy, z.B. "03-2024"."""
        return f"{self.month}-{self.year}"

    def __str__(self) -> str:
        return f"PaySlipFilter(month={self.month}, year={self.year}, source_file={self.source_file.name})"
