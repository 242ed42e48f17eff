import requests
import structlog

from payment_service.errors import UpstreamError

logger = structlog.get_logger()

METADATA_HEADERS = {"Metadata-Flavor": "Google"}


class RegionLookup:
    """Reads the instance region from the compute metadata server."""

    def __init__(self, url: str):
        self.url = url

    def fetch(self) -> bytes:
        try:
            res = requests.get(self.url, headers=METADATA_HEADERS, stream=True)
        except requests.RequestException as exc:
            raise UpstreamError(str(exc)) from exc

        try:
            return res.content
        except requests.RequestException as exc:
            # An unreadable body is reported as empty rather than as an error.
            logger.warning("metadata_body_unreadable", error=str(exc))
            return b""
        finally:
            res.close()
