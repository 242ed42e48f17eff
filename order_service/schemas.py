from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class PaymentResponse(BaseModel):
    id: UUID
    value: float
    merchant_id: UUID
    region: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
