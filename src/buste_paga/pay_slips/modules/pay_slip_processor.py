from pathlib import Path
from typing import List, Optional

from loguru import logger

from buste_paga.pydantic_models.data import PaySlipFilter, PaySlipRunResult
from buste_paga.shared_modules.config import Config
from buste_paga.shared_modules.utils import ensure_dir, log_exceptions, zip_documents

from .data_loader import DataLoader
from .pay_slip_engine import PaySlipEngine
from .pay_slip_factory import PaySlipFactory


class PaySlipProcessor:
    """
    Koordiniert den Gesamtprozess eines Lohnlaufs:
    - Präsenzliste laden und prüfen
    - Lohnabrechnungen berechnen
    - je Mitarbeiter ein Dokument erzeugen
    - alle Dokumente in ein ZIP-Archiv packen
    Fehler werden geloggt und im Ergebnis gesammelt, statt den Lauf abzubrechen.
    """

    def __init__(self, config: Config, output_path: Optional[Path] = None):
        """
        Args:
            config (Config): Singleton-Konfiguration.
            output_path (Path, optional): Zielverzeichnis, sonst structure.output_path.
        """
        self.config: Config = config
        self.output_path: Path = output_path or config.output_dir
        self.data_loader: DataLoader = DataLoader(config)
        self.engine: PaySlipEngine = PaySlipEngine(config.payroll, config.columns)
        self.pay_slip_factory: PaySlipFactory = PaySlipFactory(config)

    def run(self, filter: PaySlipFilter) -> PaySlipRunResult:
        """
        Führt den Lohnlauf für den im Filter gewählten Monat aus.
        """
        logger.info(f"Starte Lohnlauf mit Filter: {filter}")
        result = PaySlipRunResult()

        try:
            rows = self.data_loader.load_rows(filter.source_file)
        except Exception as e:
            logger.error(f"Präsenzliste konnte nicht gelesen werden: {e}")
            result.errors.append(f"Präsenzliste konnte nicht gelesen werden: {e}")
            return result

        self.data_loader.check_data_consistency(rows)

        result.pay_slips = self.engine.compute(rows, filter.month, filter.year)
        if not result.pay_slips:
            logger.warning(f"Keine Einsätze für {filter.period_key} gefunden.")
            result.errors.append(f"Keine Einsätze für {filter.period_key} gefunden.")
            return result

        output_path = ensure_dir(self.output_path)
        documents: List[Path] = []
        for pay_slip in result.pay_slips:
            message = f"Fehler bei der Lohnabrechnung für {pay_slip.employee_name}"
            written = False
            with log_exceptions(message):
                documents.append(
                    self.pay_slip_factory.write_document(
                        pay_slip, filter.month, filter.year, output_path
                    )
                )
                written = True
            if not written:
                result.errors.append(message)
        result.documents = documents
        logger.info(f"{len(documents)} Lohnabrechnungen erstellt.")

        if documents:
            archive_path = output_path / self.pay_slip_factory.archive_name(filter.month, filter.year)
            with log_exceptions("Fehler beim Archivieren der Lohnabrechnungen"):
                result.archive = zip_documents(documents, archive_path)
                logger.success(f"Alle Lohnabrechnungen archiviert in {archive_path.name}.")
            if result.archive is None:
                result.errors.append("Fehler beim Archivieren der Lohnabrechnungen")

        return result
