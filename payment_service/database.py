from typing import List

import structlog
from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import declarative_base

from payment_service.config import Settings

logger = structlog.get_logger()

Base = declarative_base()


def build_url(settings: Settings, host: str) -> URL:
    return URL.create(
        "postgresql+psycopg2",
        username=settings.postgres_user or None,
        password=settings.postgres_password or None,
        host=host,
        port=settings.postgres_port,
        database=settings.postgres_db or None,
        query={"sslmode": "disable"},
    )


def make_engine(url) -> Engine:
    return create_engine(
        url,
        connect_args={"check_same_thread": False} if str(url).startswith("sqlite") else {},
    )


def create_primary_engine(settings: Settings) -> Engine:
    url = settings.database_url or build_url(settings, settings.postgres_host)
    engine = make_engine(url)
    logger.debug("primary_engine_created", url=engine.url.render_as_string(hide_password=True))
    return engine


def create_replica_engines(settings: Settings) -> List[Engine]:
    engines = [make_engine(build_url(settings, host)) for host in settings.replica_hosts]
    if engines:
        logger.debug("replicas_registered", hosts=settings.replica_hosts)
    return engines


def init_db(engine: Engine):
    """Create missing tables. Only ever run against the primary."""
    Base.metadata.create_all(bind=engine)
