from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from .pay_slip import EmployeePaySlip


class PaySlipRunResult(BaseModel):
    """
    Ergebnis eines Lohnlaufs: berechnete Abrechnungen, erzeugte Dokumente,
    Sammelarchiv und aufgetretene Fehler. Der Aufrufer entscheidet, wie er
    Erfolg und Fehler anzeigt.
    """
    pay_slips: List[EmployeePaySlip] = Field(default_factory=list)
    documents: List[Path] = Field(default_factory=list)
    archive: Optional[Path] = None
    errors: List[str] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return bool(self.documents) and not self.errors
