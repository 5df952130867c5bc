import math
import re
from contextlib import contextmanager
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Any, Callable, Dict, Generator, List, Optional
from zipfile import ZIP_DEFLATED, ZipFile

from loguru import logger
from pydantic import BaseModel, ValidationError, field_validator


def safe_str(val) -> str:
    """
    Gibt immer einen String zurück, auch wenn val None oder numerisch ist.
    """
    return "" if val is None else str(val)


_LEADING_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

def _parse_float_str(s: str) -> Optional[float]:
    s = s.strip().replace("’", "").replace("'", "").replace(" ", "").replace(",", ".")
    try:
        return float(s)
    except ValueError:
        pass
    # Führende Zahl lesen, Rest ignorieren ("10€" -> 10)
    match = _LEADING_NUMBER_RE.match(s)
    return float(match.group(0)) if match else None

_FLOAT_CONVERTERS: Dict[type, Callable[[Any], Optional[float]]] = {
    type(None): lambda _v: None,
    int: lambda v: float(v),
    float: lambda v: float(v),
    str: _parse_float_str,
}

def to_float(v: Any) -> Optional[float]:
    """Typbasierte Zahl-Konvertierung (None/str/int/float -> float|None)."""
    conv = _FLOAT_CONVERTERS.get(type(v))
    return conv(v) if conv else None


def is_finite(value: Any) -> bool:
    """True für int/float-Werte, die weder NaN noch unendlich sind."""
    return isinstance(value, (int, float)) and math.isfinite(value)


def round_half_up(value: float) -> int:
    """Rundet kaufmännisch auf eine ganze Zahl (x.5 wird aufgerundet)."""
    return math.floor(value + 0.5)


def quantize_half_up(value: Any, digits: int = 2) -> Any:
    """
    Rundet endliche Zahlen kaufmännisch auf `digits` Nachkommastellen (als Decimal).
    Andere Werte werden unverändert zurückgegeben.
    """
    if not is_finite(value):
        return value
    return Decimal(str(value)).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)


@contextmanager
def log_exceptions(msg: str, continue_on_error: bool = True) -> Generator[None, None, None]:
    """
    Context-Manager für das Logging von Ausnahmen.
    Loggt eine Fehlermeldung und entscheidet, ob die Exception weitergereicht wird.

    Args:
        msg (str): Nachricht für das Logging im Fehlerfall.
        continue_on_error (bool): Bei False wird die Exception erneut ausgelöst, ansonsten nur geloggt.

    Beispiel:
        with log_exceptions("Fehler beim Erstellen der Abrechnung"):
            do_something()
    """
    try:
        yield
    except Exception as e:
        logger.error(f"{msg}: {e}")
        if not continue_on_error:
            raise


class DocumentList(BaseModel):
    """
    Pydantic-Modell für eine Liste von Dokumentpfaden.
    Sorgt für Validierung und Typsicherheit.
    """
    documents: List[Path]

    @field_validator("documents")
    def all_files_must_exist(cls, v: List[Path]) -> List[Path]:
        """
        Validiert, dass alle angegebenen Dateien existieren.
        """
        for file in v:
            if not file.exists():
                raise ValueError(f"Datei nicht gefunden: {file}")
        return v


def zip_documents(documents: List[Path], zip_path: Path) -> Path:
    """
    Erstellt ein ZIP-Archiv aus einer Liste von Dokumenten.
    Nutzt ein Pydantic-Modell zur Validierung der Dateiliste.

    Args:
        documents (List[Path]): Liste von Dokumentpfaden.
        zip_path (Path): Zielpfad für das ZIP-Archiv.

    Returns:
        Path: Pfad des erzeugten Archivs.
    """
    try:
        document_list = DocumentList(documents=documents)
    except ValidationError as e:
        logger.error(f"Ungültige Dokumentliste: {e}")
        raise

    with ZipFile(zip_path, "w", compression=ZIP_DEFLATED) as zipf:
        for file in document_list.documents:
            zipf.write(file, arcname=file.name)
    return zip_path


def ensure_dir(path: Path) -> Path:
    """Erzeugt ein Verzeichnis (rekursiv), falls es fehlt, und gibt den Pfad zurück."""
    path.mkdir(parents=True, exist_ok=True)
    return path


_UNSAFE_FILENAME_RE = re.compile(r'[\\/:*?"<>|]+')

def safe_filename(name: str) -> str:
    """Ersetzt Zeichen, die in Dateinamen nicht erlaubt sind, durch '_'."""
    return _UNSAFE_FILENAME_RE.sub("_", name).strip() or "senza_nome"
