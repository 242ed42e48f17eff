from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class PaymentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    value: float
    merchant_id: UUID
    region: Optional[str] = None
    created_at: datetime
    updated_at: datetime
