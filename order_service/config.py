import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(dotenv_path=BASE_DIR / ".env")


class Settings(BaseModel):
    payment_service_host: str = "localhost:8080"
    payment_country_code: str = "id"
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 8081

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            payment_service_host=os.getenv("PAYMENT_SERVICE_HOST", "localhost:8080"),
            payment_country_code=os.getenv("PAYMENT_COUNTRY_CODE", "id"),
            environment=os.getenv("ENVIRONMENT", "development"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            port=int(os.getenv("PORT", "8081")),
        )

    @property
    def payment_service_url(self) -> str:
        return f"http://{self.payment_service_host}"
