from sqlalchemy import Column, DateTime, Float, Text, Uuid

from payment_service.database import Base


class Payment(Base):
    __tablename__ = "payments"

    id = Column(Uuid, primary_key=True, nullable=False)     # assigned by PaymentStore.create
    value = Column(Float)
    merchant_id = Column(Uuid, nullable=False)
    region = Column(Text)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False)
