# ABOUTME: Dependency container for the weather card using Pydantic BaseModel.
# ABOUTME: Builds the retrying httpx.AsyncClient and the service clients the controller needs.

import httpx
from pydantic import BaseModel, ConfigDict
from pydantic_ai.retries import AsyncTenacityTransport, RetryConfig, wait_retry_after
from tenacity import retry_if_exception, stop_after_attempt

from weather_card.city import ProfileProvider
from weather_card.weather_service import OpenMeteoGeocodingClient, OpenMeteoWeatherClient


class WidgetDeps(BaseModel):
    """Capabilities injected into the load controller."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    profile_provider: ProfileProvider | None = None

    @property
    def geocoder(self) -> OpenMeteoGeocodingClient:
        return OpenMeteoGeocodingClient(self.http_client)

    @property
    def weather(self) -> OpenMeteoWeatherClient:
        return OpenMeteoWeatherClient(self.http_client)


def is_transient(exc: BaseException) -> bool:
    """True for errors worth retrying: connection failures, read timeouts, 429 and 5xx."""
    if isinstance(exc, (httpx.ConnectError, httpx.ReadTimeout)):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        return status == 429 or status >= 500
    return False


def create_http_client() -> httpx.AsyncClient:
    """Create an httpx client with tenacity retry on transient HTTP errors.

    Retries connection errors, timeouts, and 429/5xx responses with exponential backoff.
    Other error statuses are raised on the first attempt.
    """
    transport = AsyncTenacityTransport(
        RetryConfig(
            retry=retry_if_exception(is_transient),
            wait=wait_retry_after(max_wait=30),
            stop=stop_after_attempt(3),
            reraise=True,
        ),
        validate_response=lambda r: r.raise_for_status(),
    )
    return httpx.AsyncClient(transport=transport)
