import uuid
from typing import List

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from payment_service.config import Settings
from payment_service.errors import StorageError, UpstreamError
from payment_service.metadata import RegionLookup
from payment_service.models import Payment
from payment_service.schemas import PaymentOut
from payment_service.store import LIST_LIMIT, PaymentStore

logger = structlog.get_logger()

router = APIRouter()
health_router = APIRouter()

PAYMENT_VALUE = 1000.0
FALLBACK_REGION = "12345"
FORCED_FAILURE_MESSAGE = "failed to handle the request"


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> PaymentStore:
    return request.app.state.store


def get_region_lookup(request: Request) -> RegionLookup:
    return request.app.state.region_lookup


def server_error(message: str) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=500)


def resolve_region(lookup: RegionLookup) -> str:
    try:
        return lookup.fetch().decode("utf-8", errors="replace")
    except UpstreamError as exc:
        logger.info("region_lookup_failed", error=str(exc), fallback=FALLBACK_REGION)
        return FALLBACK_REGION


@health_router.get("/")
def health_check(lookup: RegionLookup = Depends(get_region_lookup)):
    try:
        body = lookup.fetch()
    except UpstreamError as exc:
        return PlainTextResponse(str(exc))
    return PlainTextResponse(body)


@router.get("/", response_model=List[PaymentOut])
def list_payments(
    settings: Settings = Depends(get_settings),
    store: PaymentStore = Depends(get_store),
):
    if settings.fail:
        return server_error(FORCED_FAILURE_MESSAGE)

    try:
        payments = store.list_recent(LIST_LIMIT)
    except StorageError as exc:
        logger.error("list_payments_failed", error=str(exc))
        return server_error(str(exc))

    return [PaymentOut.model_validate(p) for p in payments]


@router.post("/", response_model=PaymentOut)
def create_payment(
    settings: Settings = Depends(get_settings),
    store: PaymentStore = Depends(get_store),
    lookup: RegionLookup = Depends(get_region_lookup),
):
    if settings.fail:
        return server_error(FORCED_FAILURE_MESSAGE)

    payment = Payment(
        id=uuid.uuid4(),
        value=PAYMENT_VALUE,
        merchant_id=uuid.uuid4(),
        region=resolve_region(lookup),
    )

    try:
        payment = store.create(payment)
    except StorageError as exc:
        logger.error("create_payment_failed", error=str(exc))
        return server_error(str(exc))

    return PaymentOut.model_validate(payment)
