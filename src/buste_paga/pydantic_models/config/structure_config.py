from typing import Optional
from pydantic import BaseModel

class StructureConfig(BaseModel):
    """
    Modell für die Struktur-Konfiguration des Projekts.

    Attribute:
        prj_root (str): Wurzelverzeichnis des Projekts (Standard: aktuelles Verzeichnis).
        output_path (Optional[str]): Pfad zum Ausgabeverzeichnis (Standard: "output").
        template_path (Optional[str]): Pfad zum Template-Verzeichnis. Ohne Angabe
            wird das mitgelieferte Template-Verzeichnis des Pakets verwendet.
        log_path (Optional[str]): Pfad zum Log-Verzeichnis relativ zu prj_root (Standard: ".logs").
    """
    prj_root: str = "."
    output_path: Optional[str] = "output"
    template_path: Optional[str] = None
    log_path: Optional[str] = ".logs"
