import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

# Force-load .env (reload-safe)
BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(dotenv_path=BASE_DIR / ".env")

DEFAULT_METADATA_URL = "http://metadata.google.internal/computeMetadata/v1/instance/region"


def parse_replica_hosts(raw: Optional[str]) -> List[str]:
    """Split a comma separated host list, dropping blank entries."""
    if not raw:
        return []
    return [host.strip() for host in raw.split(",") if host.strip()]


class Settings(BaseModel):
    database_url: Optional[str] = None
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = ""
    postgres_db: str = ""
    postgres_password: str = ""
    replica_hosts: List[str] = []

    country_code: str = ""
    fail: bool = False
    metadata_url: str = DEFAULT_METADATA_URL

    environment: str = "development"
    log_level: str = "INFO"
    port: int = 8080

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.getenv("DATABASE_URL") or None,
            postgres_host=os.getenv("POSTGRES_HOST", "localhost"),
            postgres_port=int(os.getenv("POSTGRES_PORT", "5432")),
            postgres_user=os.getenv("POSTGRES_USER", ""),
            postgres_db=os.getenv("POSTGRES_DB", ""),
            postgres_password=os.getenv("POSTGRES_PASSWORD", ""),
            replica_hosts=parse_replica_hosts(os.getenv("POSTGRES_REPLICA_IPS")),
            country_code=os.getenv("COUNTRY_CODE", ""),
            fail=os.getenv("FAIL") == "true",
            metadata_url=os.getenv("METADATA_URL", DEFAULT_METADATA_URL),
            environment=os.getenv("ENVIRONMENT", "development"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            port=int(os.getenv("PORT", "8080")),
        )

    @property
    def api_prefix(self) -> str:
        return f"/payments/{self.country_code}/api/v1"
