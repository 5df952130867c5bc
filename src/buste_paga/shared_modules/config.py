import sys
from pathlib import Path
from typing import Any, Dict, Optional, Type

import yaml
from loguru import logger
from pydantic import BaseModel

from buste_paga.pydantic_models.config import (
    DEFAULT_MONTH_NAMES,
    ColumnMappingConfig,
    FormattingConfig,
    LoggingConfig,
    PayrollRulesConfig,
    StructureConfig,
    TemplatesConfig,
)
from buste_paga.shared_modules.utils import ensure_dir

PACKAGE_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "config" / "buste_paga_config.yaml"
DEFAULT_TEMPLATE_DIR = PACKAGE_ROOT / "templates"


class Config:
    """
    Singleton für das Laden und Prüfen der Konfiguration.
    Nutzt statische Pydantic-Modelle für alle Abschnitte.
    Fehlende Abschnitte werden mit den Standardwerten der Modelle belegt.
    """

    _instance: Optional["Config"] = None

    def __new__(cls, config_path: Optional[Path] = None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None):
        # Fallback-Logger für Fehler beim Laden der Config
        logger.remove()
        logger.add(sys.stderr, level="WARNING")
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        try:
            self.raw_config: Dict[str, Any] = self._load_config()
            self.structure = self._parse_section(self.raw_config, "structure", StructureConfig)
            self.logging = self._parse_section(self.raw_config, "logging", LoggingConfig)
            self._setup_logging()
            logger.debug(f"Lade Konfiguration von {self.config_path}")
        except Exception as e:
            logger.error(f"Fehler beim Laden der Konfiguration: {e}")
            raise

        self.formatting = self._parse_section(self.raw_config, "formatting", FormattingConfig)
        self.templates = self._parse_section(self.raw_config, "templates", TemplatesConfig)
        self.columns = self._parse_section(self.raw_config, "columns", ColumnMappingConfig)
        self.payroll = self._parse_section(self.raw_config, "payroll", PayrollRulesConfig)
        self.months = self._parse_months(self.raw_config.get("months"))

        self._validate_structure_and_paths()
        logger.debug("Konfiguration erfolgreich geladen und validiert.")
        self._initialized = True

    def _setup_logging(self) -> None:
        """
        Initialisiert loguru mit den Einstellungen aus der Config-Datei.
        Die Logdatei liegt in structure.log_path unterhalb der Projektwurzel.
        """
        logger.remove()
        log_level = getattr(self.logging, "log_level", None) or "INFO"
        log_file = getattr(self.logging, "log_file", None)
        if log_file:
            log_dir = ensure_dir(self.project_root / (self.structure.log_path or ".logs"))
            logger.add(log_dir / log_file, level=log_level, rotation="10 MB", retention="10 days")
        logger.add(sys.stderr, level=log_level)

    def _load_config(self) -> Dict[str, Any]:
        """
        Lädt die YAML-Konfigurationsdatei. Eine leere Datei ergibt eine leere Konfiguration.
        """
        if not self.config_path.exists():
            raise FileNotFoundError(f"Konfigurationsdatei nicht gefunden: {self.config_path}")
        with open(self.config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _parse_section(self, config: Dict[str, Any], section: str, model: Type[BaseModel]) -> Any:
        """
        Parst einen Abschnitt der Config mit dem passenden Pydantic-Modell.
        """
        data = config.get(section) or {}
        logger.debug(f"Parsiere Abschnitt '{section}': {data}")
        return model(**data)

    def _parse_months(self, data: Optional[Dict[Any, Any]]) -> Dict[str, str]:
        """
        Liest die Monatsnamen. Schlüssel werden zweistellig normalisiert,
        damit YAML-Zahlen (1, 10) und Strings ("01") gleich behandelt werden.
        """
        if not data:
            return dict(DEFAULT_MONTH_NAMES)
        return {str(key).zfill(2): str(value) for key, value in data.items()}

    def _validate_structure_and_paths(self) -> None:
        """
        Prüft einmalig alle Pfad- und Pflichtangaben. Scheitern die Prüfungen,
        wird die Konfiguration verworfen.
        """
        if not self.project_root.exists():
            logger.error(f"Projektwurzel existiert nicht: {self.project_root}")
            raise FileNotFoundError(f"Projektwurzel nicht gefunden: {self.project_root}")

        template_name = self.templates.pay_slip_template
        if not template_name:
            logger.error("templates.pay_slip_template ist nicht gesetzt.")
            raise ValueError("templates.pay_slip_template ist Pflicht.")

        template_file = self.template_dir / template_name
        if not template_file.exists():
            logger.error(f"Lohnabrechnungs-Template nicht gefunden: {template_file}")
            raise FileNotFoundError(f"Lohnabrechnungs-Template nicht gefunden: {template_file}")

        missing_months = sorted(set(DEFAULT_MONTH_NAMES) - set(self.months))
        if missing_months:
            logger.error(f"Monatsnamen fehlen für: {', '.join(missing_months)}")
            raise ValueError(f"Monatsnamen fehlen für: {', '.join(missing_months)}")

    @property
    def project_root(self) -> Path:
        return Path(self.structure.prj_root).expanduser().resolve()

    @property
    def output_dir(self) -> Path:
        return self.project_root / (self.structure.output_path or "output")

    @property
    def template_dir(self) -> Path:
        if self.structure.template_path:
            return (self.project_root / self.structure.template_path).resolve()
        return DEFAULT_TEMPLATE_DIR

    def month_name(self, month: str) -> str:
        """Gibt den Monatsnamen für "01".."12" zurück, sonst den Monat selbst."""
        return self.months.get(str(month).zfill(2), str(month))

    def get(self, key: str, default: Any = None) -> Any:
        """
        Allgemeiner Getter für beliebige Felder (dot-notation für verschachtelte Felder).
        """
        parts = key.split(".")
        val = self.raw_config
        for part in parts:
            if isinstance(val, dict) and part in val:
                val = val[part]
            else:
                logger.debug(f"Feld '{key}' nicht gefunden, Rückgabe Default: {default}")
                return default
        return val
