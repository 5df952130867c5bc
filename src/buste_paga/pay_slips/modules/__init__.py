from .data_loader import DataLoader
from .day_aggregator import DayAggregator
from .employee_summarizer import EmployeeSummarizer
from .overtime_rule import OvertimeCapRule, format_hours_label
from .pay_calculator import PayCalculator
from .pay_slip_engine import PaySlipEngine
from .pay_slip_factory import PaySlipFactory
from .pay_slip_processor import PaySlipProcessor
from .period_filter import PeriodFilter
from .record_normalizer import RecordNormalizer
