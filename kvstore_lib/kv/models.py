from typing import Any, Optional
from pydantic import BaseModel


class SetPayload(BaseModel):
    namespace: Optional[str] = None
    key: Optional[str] = None
    value: Any = None


class DeletePayload(BaseModel):
    namespace: Optional[str] = None
    key: Optional[str] = None
