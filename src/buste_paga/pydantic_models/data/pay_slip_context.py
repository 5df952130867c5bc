from typing import Any, Dict
from pydantic import BaseModel, Field


class PaySlipContext(BaseModel):
    """
    Kontext für das Template einer Lohnabrechnung.
    Enthält nur rohe Werte, keine formatierten Strings; formatiert wird im
    Template über die Jinja2-Filter.
    """
    data: Dict[str, Any] = Field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        """
        Ermöglicht den Zugriff auf Daten wie bei einem Dictionary.
        """
        return self.data.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.data[key] = value

    def as_dict(self) -> Dict[str, Any]:
        """
        Gibt eine Kopie der Daten als Dictionary zurück.
        """
        return self.data.copy()
