from typing import Dict

# Monatsnamen für die Darstellung auf der Lohnabrechnung
DEFAULT_MONTH_NAMES: Dict[str, str] = {
    "01": "Gennaio",
    "02": "Febbraio",
    "03": "Marzo",
    "04": "Aprile",
    "05": "Maggio",
    "06": "Giugno",
    "07": "Luglio",
    "08": "Agosto",
    "09": "Settembre",
    "10": "Ottobre",
    "11": "Novembre",
    "12": "Dicembre",
}
