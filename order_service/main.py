from contextlib import asynccontextmanager
from typing import Optional

import structlog
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse

from order_service.client import PaymentClient, summarize
from order_service.config import Settings
from order_service.errors import DecodeError, UpstreamError
from order_service.logging_config import setup_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    setup_logging(settings.log_level, settings.environment)
    logger.info("order_service_started", port=settings.port, payment_service=settings.payment_service_url)
    yield


def get_payment_client(request: Request) -> PaymentClient:
    return request.app.state.payment_client


def create_app(settings: Optional[Settings] = None, payment_client: Optional[PaymentClient] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(title="Order Service", lifespan=lifespan)
    app.state.settings = settings
    app.state.payment_client = payment_client or PaymentClient(
        settings.payment_service_url, settings.payment_country_code
    )

    @app.post("/order", response_class=PlainTextResponse)
    def order(client: PaymentClient = Depends(get_payment_client)):
        try:
            payment = client.identify()
        except (UpstreamError, DecodeError) as exc:
            logger.error("order_failed", error=str(exc))
            return PlainTextResponse(str(exc), status_code=500)
        return summarize(payment)

    return app


if __name__ == "__main__":
    settings = Settings.from_env()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)
