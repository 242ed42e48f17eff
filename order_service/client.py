import requests
import structlog
from pydantic import ValidationError

from order_service.errors import DecodeError, UpstreamError
from order_service.schemas import PaymentResponse

logger = structlog.get_logger()


class PaymentClient:
    """One-shot caller for the payment service's identify endpoint.

    ``http`` only needs a ``post(url)`` method returning an object with a
    ``content`` attribute, so a ``requests.Session`` or a test client fits.
    """

    def __init__(self, base_url: str, country_code: str = "id", http=requests):
        self.base_url = base_url.rstrip("/")
        self.country_code = country_code
        self.http = http

    @property
    def identify_url(self) -> str:
        return f"{self.base_url}/payments/{self.country_code}/api/v1/"

    def identify(self) -> PaymentResponse:
        try:
            res = self.http.post(self.identify_url)
        except requests.RequestException as exc:
            raise UpstreamError(str(exc)) from exc

        try:
            return PaymentResponse.model_validate_json(res.content)
        except ValidationError as exc:
            logger.warning("payment_decode_failed", url=self.identify_url)
            raise DecodeError(str(exc)) from exc


def summarize(payment: PaymentResponse) -> str:
    return f"merchant {payment.merchant_id} received payment {payment.value:f} USD"
