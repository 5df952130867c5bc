from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from loguru import logger

from buste_paga.pydantic_models.data import EmployeePaySlip, PaySlipContext
from buste_paga.shared_modules.config import Config
from buste_paga.shared_modules.utils import safe_filename

from .filters import FilterConfig, register_filters


class PaySlipFactory:
    """
    Factory-Klasse zur Erstellung der Lohnabrechnungen als HTML-Dokument.
    Nutzt Babel/Jinja2-Filter für die Formatierung.
    """

    def __init__(self, config: Config):
        self.config = config
        self.jinja_env = Environment(
            loader=FileSystemLoader(str(config.template_dir)),
            autoescape=select_autoescape(["html", "j2"]),
        )
        filter_config = FilterConfig(
            locale=config.formatting.locale or "en_US",
            currency=config.formatting.currency or "EUR",
            currency_format=config.formatting.currency_format,
            numeric_format=config.formatting.numeric_format,
            label_separator=config.payroll.label_separator,
            decimal_places=config.formatting.decimal_places,
        )
        register_filters(self.jinja_env, filter_config)

    def create_context(self, pay_slip: EmployeePaySlip, month: str, year: str) -> PaySlipContext:
        """
        Baut den Template-Kontext für eine Lohnabrechnung.

        Args:
            pay_slip (EmployeePaySlip): Zusammenfassung und Beträge des Mitarbeiters.
            month (str): Monat zweistellig.
            year (str): Jahr vierstellig.
        Returns:
            PaySlipContext: Kontext mit rohen Werten.
        """
        summary = pay_slip.summary
        return PaySlipContext(
            data={
                "employee_name": summary.employee_name,
                "month": month,
                "month_name": self.config.month_name(month),
                "year": year,
                "day_rows": summary.day_rows,
                "total_ordinary_hours": summary.total_ordinary_hours,
                "total_overtime_hours": summary.total_overtime_hours,
                "total_km": summary.total_km,
                "summary": summary,
                "breakdown": pay_slip.breakdown,
            }
        )

    def render(self, pay_slip: EmployeePaySlip, month: str, year: str) -> str:
        """
        Generiert das fertig formatierte HTML-Dokument.
        """
        template = self.jinja_env.get_template(self.config.templates.pay_slip_template)
        context = self.create_context(pay_slip, month, year)
        return template.render(**context.as_dict())

    def document_name(self, pay_slip: EmployeePaySlip, month: str, year: str) -> str:
        """
        Dateiname der Lohnabrechnung, z.B. "Mario Rossi_busta_paga_Marzo_2024.html".
        """
        name = self.config.templates.document_name.format(
            employee=pay_slip.employee_name,
            month=month,
            month_name=self.config.month_name(month),
            year=year,
        )
        return safe_filename(name)

    def archive_name(self, month: str, year: str) -> str:
        return safe_filename(
            self.config.templates.archive_name.format(
                month=month, month_name=self.config.month_name(month), year=year
            )
        )

    def write_document(self, pay_slip: EmployeePaySlip, month: str, year: str, output_path: Path) -> Path:
        """
        Rendert die Lohnabrechnung und speichert sie im Ausgabeverzeichnis.

        Raises:
            RuntimeError: Wenn das Dokument nicht geschrieben werden kann.
        """
        target = output_path / self.document_name(pay_slip, month, year)
        html = self.render(pay_slip, month, year)
        try:
            target.write_text(html, encoding="utf-8")
        except OSError as e:
            logger.error(f"Lohnabrechnung konnte nicht gespeichert werden: {e}")
            raise RuntimeError(f"Lohnabrechnung konnte nicht gespeichert werden: {e}")
        logger.debug(f"{target.name} erzeugt")
        return target
