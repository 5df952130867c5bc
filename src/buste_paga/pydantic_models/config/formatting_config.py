from typing import Optional
from pydantic import BaseModel

class FormattingConfig(BaseModel):
    locale: Optional[str] = "en_US"
    currency: Optional[str] = "EUR"
    currency_format: Optional[str] = "0.00 ¤"
    numeric_format: Optional[str] = "0.00"
    decimal_places: int = 2
