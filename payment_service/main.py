from contextlib import asynccontextmanager
from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI

from payment_service.config import Settings
from payment_service.database import create_primary_engine, create_replica_engines, init_db
from payment_service.logging_config import setup_logging
from payment_service.metadata import RegionLookup
from payment_service.replica import ReplicaRouter
from payment_service.routes import health_router, router
from payment_service.store import PaymentStore

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    setup_logging(settings.log_level, settings.environment)
    init_db(app.state.replica_router.for_write())
    logger.info("payment_service_started", port=settings.port, replicas=len(app.state.replica_router.replicas))
    yield
    for engine in app.state.replica_router.all():
        engine.dispose()


def create_app(settings: Optional[Settings] = None, replica_router: Optional[ReplicaRouter] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    if replica_router is None:
        replica_router = ReplicaRouter(create_primary_engine(settings), create_replica_engines(settings))

    app = FastAPI(title="Payment Service", lifespan=lifespan)
    app.state.settings = settings
    app.state.replica_router = replica_router
    app.state.store = PaymentStore(replica_router)
    app.state.region_lookup = RegionLookup(settings.metadata_url)

    app.include_router(health_router)
    app.include_router(router, prefix=settings.api_prefix)
    return app


if __name__ == "__main__":
    settings = Settings.from_env()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)
