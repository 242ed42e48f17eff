import uuid
from datetime import datetime, timezone
from typing import List

import structlog
from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from payment_service.errors import StorageError
from payment_service.models import Payment
from payment_service.replica import ReplicaRouter

logger = structlog.get_logger()

LIST_LIMIT = 20

SessionLocal = sessionmaker(autoflush=False, expire_on_commit=False)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PaymentStore:
    """Persistence for Payment rows, routed through a ReplicaRouter."""

    def __init__(self, router: ReplicaRouter[Engine]):
        self.router = router

    def create(self, payment: Payment) -> Payment:
        if payment.id is None:
            payment.id = uuid.uuid4()
        now = utcnow()
        payment.created_at = now
        payment.updated_at = now

        db = SessionLocal(bind=self.router.for_write())
        try:
            db.add(payment)
            db.commit()
            db.expunge(payment)
        except SQLAlchemyError as exc:
            db.rollback()
            raise StorageError(str(exc)) from exc
        finally:
            db.close()

        logger.info("payment_created", payment_id=str(payment.id), region=payment.region)
        return payment

    def list_recent(self, limit: int = LIST_LIMIT) -> List[Payment]:
        db = SessionLocal(bind=self.router.for_read())
        try:
            query = select(Payment).order_by(Payment.created_at.desc()).limit(limit)
            return list(db.scalars(query).all())
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc
        finally:
            db.close()
