from typing import Any, Optional

from babel.numbers import format_currency, format_decimal
from jinja2 import Environment, Undefined
from markupsafe import Markup, escape
from pydantic import BaseModel

from buste_paga.shared_modules.utils import quantize_half_up


class FilterConfig(BaseModel):
    """
    Pydantic-Modell für die Filter-Konfiguration.
    Sorgt für Typsicherheit und Validierung der Formatierungsoptionen.
    """
    locale: str = "en_US"
    currency: str = "EUR"
    currency_format: Optional[str] = None
    numeric_format: Optional[str] = "0.00"
    label_separator: str = "<br/>"
    decimal_places: int = 2


def babel_currency(
    value: Any,
    currency: str = "EUR",
    locale: str = "en_US",
    currency_format: Optional[str] = None,
    decimal_places: int = 2
) -> str:
    """Jinja2-Filter für Währungsformatierung mit Babel, Rundung kaufmännisch."""
    if value is None or isinstance(value, Undefined):
        return ""
    return format_currency(quantize_half_up(value, decimal_places), currency, format=currency_format, locale=locale)


def babel_decimal(
    value: Any,
    locale: str = "en_US",
    numeric_format: Optional[str] = None,
    decimal_places: int = 2
) -> str:
    """Jinja2-Filter für numerische Formatierung mit Babel, Rundung kaufmännisch."""
    if value is None or isinstance(value, Undefined):
        return ""
    return format_decimal(quantize_half_up(value, decimal_places), format=numeric_format, locale=locale)


def line_breaks(value: Any, separator: str = "<br/>") -> Markup:
    """
    Jinja2-Filter für zusammengeführte Tagestexte: jedes Teilstück wird
    escaped, die Trennzeichen werden als <br/> ausgegeben.
    """
    if value is None or isinstance(value, Undefined):
        return Markup("")
    parts = str(value).split(separator)
    return Markup("<br/>").join(escape(part) for part in parts)


def register_filters(env: Environment, config: FilterConfig) -> None:
    """
    Registriert alle Filter im Jinja2-Environment.
    Erwartet ein Pydantic-Modell für die Konfiguration.
    """
    env.filters["currency"] = lambda v: babel_currency(
        v,
        config.currency,
        config.locale,
        config.currency_format,
        config.decimal_places
    )
    env.filters["decimal"] = lambda v: babel_decimal(
        v,
        config.locale,
        config.numeric_format,
        config.decimal_places
    )
    env.filters["line_breaks"] = lambda v: line_breaks(v, config.label_separator)
