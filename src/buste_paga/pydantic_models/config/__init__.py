from .column_mapping_config import ColumnMappingConfig
from .formatting_config import FormattingConfig
from .logging_config import LoggingConfig
from .month_names_config import DEFAULT_MONTH_NAMES
from .payroll_rules_config import PayrollRulesConfig
from .structure_config import StructureConfig
from .templates_config import TemplatesConfig
