import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger
from pydantic import ValidationError

from buste_paga.pay_slips.modules.pay_slip_processor import PaySlipProcessor
from buste_paga.pydantic_models.data import PaySlipFilter
from buste_paga.shared_modules.config import Config

USAGE = "Aufruf: buste-paga <MM> <YYYY> <praesenzliste.csv> [config.yaml]"


def main(argv: Optional[List[str]] = None) -> int:
    """
    Einstiegspunkt für den Lohnlauf.
    Prüft die Eingaben, lädt die Konfiguration und startet die Verarbeitung.
    Gibt 0 bei Erfolg und 1 bei ungültigen Eingaben oder Fehlern zurück.
    """
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 3:
        print(USAGE)
        return 1

    month, year, source = args[0], args[1], args[2]
    config_path: Optional[Path] = Path(args[3]) if len(args) > 3 else None

    try:
        filter_obj = PaySlipFilter(month=month, year=year, source_file=Path(source))
    except ValidationError as e:
        problems = "; ".join(err["msg"] for err in e.errors())
        print(f"Ungültige Eingabe: {problems}")
        return 1

    try:
        config_obj = Config(config_path)
    except Exception as e:
        print(f"Konfiguration konnte nicht geladen werden: {e}")
        return 1

    logger.info("Starte Lohnlauf...")
    try:
        result = PaySlipProcessor(config=config_obj).run(filter_obj)
    except Exception as e:
        logger.exception(f"Fehler im Lohnlauf: {e}")
        return 1

    for error in result.errors:
        logger.warning(error)
    if not result.success:
        return 1

    logger.success(f"Lohnlauf abgeschlossen: {len(result.documents)} Dokumente, Archiv {result.archive}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
