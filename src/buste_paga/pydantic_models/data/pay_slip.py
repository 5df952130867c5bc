from pydantic import BaseModel

from .employee_summary import EmployeeSummary
from .pay_breakdown import PayBreakdown


class EmployeePaySlip(BaseModel):
    """Zusammenfassung und Beträge eines Mitarbeiters für eine Periode."""
    summary: EmployeeSummary
    breakdown: PayBreakdown

    @property
    def employee_name(self) -> str:
        return self.summary.employee_name
