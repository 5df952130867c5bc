from typing import Optional
from pydantic import BaseModel

class TemplatesConfig(BaseModel):
    pay_slip_template: Optional[str] = "busta_paga.html.j2"
    document_name: Optional[str] = "{employee}_busta_paga_{month_name}_{year}.html"
    archive_name: Optional[str] = "buste_paga_{month_name}_{year}.zip"
