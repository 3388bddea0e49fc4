from pydantic import BaseModel
from typing import Any, Optional


class SendResult(BaseModel):
    ok: bool
    error: Optional[str] = None
    detail: Optional[Any] = None


class EmailContent(BaseModel):
    subject: str
    text: str
    html: str
