"""HTTP transport for the CompactifAI API."""

import logging

import httpx

from compactifai.core.config import ClientConfig
from compactifai.core.exceptions import ServiceTimeoutError, ServiceUnreachableError
from compactifai.core.requests import PreparedRequest

logger = logging.getLogger(__name__)


class Transport:
    """Sends prepared requests to the API and returns the raw responses.

    Holds the base URL, bearer credential and timeouts; none of them change
    after construction. Status codes are not interpreted here.

    Args:
        base_url: Base URL of the API
        api_key: Bearer credential attached to every request
        timeout_s: Total timeout for requests in seconds
        connect_timeout_s: Connection timeout for requests in seconds
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout_s: float = 120.0,
        connect_timeout_s: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = httpx.Timeout(timeout_s, connect=connect_timeout_s)
        self._transport = transport

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "Transport":
        return cls(
            base_url=config.base_url,
            api_key=config.api_key,
            timeout_s=config.timeout_s,
            connect_timeout_s=config.connect_timeout_s,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> httpx.Timeout:
        return self._timeout

    def url_for(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Accept": "application/json",
        }

    async def send(self, prepared: PreparedRequest) -> httpx.Response:
        """
        Send a prepared request to the API.

        Args:
            prepared: Method, relative path and body of the request

        Returns:
            httpx.Response object with the body already read

        Raises:
            ServiceUnreachableError: If the connection to the API fails
            ServiceTimeoutError: If the request times out
        """
        url = self.url_for(prepared.path)

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                logger.debug("Sending %s %s", prepared.method, url)
                response = await client.request(
                    prepared.method,
                    url,
                    headers=self._headers(),
                    json=prepared.json,
                    data=prepared.data,
                    files=prepared.files,
                )
                logger.debug("Received %d from %s", response.status_code, url)
                return response

        except (httpx.ConnectError, httpx.NetworkError) as e:
            logger.error("Connection error to %s: %s", url, e)
            raise ServiceUnreachableError(
                f"Connection to API failed: {str(e)}",
                base_url=self._base_url,
            ) from e

        except httpx.TimeoutException as e:
            logger.error("Timeout error to %s: %s", url, e)
            raise ServiceTimeoutError(
                "API did not respond in time",
                base_url=self._base_url,
            ) from e
