from .attendance_record import AttendanceRecord, RawRow
from .day_aggregate import DayAggregate
from .employee_summary import EmployeeSummary
from .pay_breakdown import PayBreakdown
from .pay_slip import EmployeePaySlip
from .pay_slip_context import PaySlipContext
from .pay_slip_filter import PaySlipFilter
from .pay_slip_run_result import PaySlipRunResult
