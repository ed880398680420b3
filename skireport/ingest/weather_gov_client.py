"""api.weather.gov forecast client with optional retry on rate limiting."""

import logging
import time

import httpx

from skireport.config.schema import WeatherApiConfig
from skireport.ingest.gridpoints import Gridpoint

logger = logging.getLogger(__name__)

WEATHER_GOV_BASE_URL = "https://api.weather.gov"
DEFAULT_USER_AGENT = "Snow-Report (skireport)"
RETRYABLE_STATUS = (429, 503)


class WeatherGovClient:
    def __init__(
        self,
        base_url: str = WEATHER_GOV_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
        max_retries: int = 0,
        retry_base_delay: float = 1.0,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    @classmethod
    def from_config(cls, config: WeatherApiConfig) -> "WeatherGovClient":
        return cls(
            base_url=config.base_url,
            user_agent=config.user_agent,
            timeout=config.timeout,
            max_retries=config.max_retries,
            retry_base_delay=config.retry_base_delay,
        )

    def get_forecast(self, gridpoint: Gridpoint) -> dict:
        """Fetch the twelve-hour period forecast for a gridpoint.

        A single attempt unless max_retries is configured; then rate limiting,
        503s and transport errors are retried with exponential backoff. The
        last error is raised as the httpx exception.
        """
        url = (
            f"{self.base_url}/gridpoints/{gridpoint.grid_id}/"
            f"{gridpoint.grid_x},{gridpoint.grid_y}/forecast"
        )
        headers = {"User-Agent": self.user_agent, "Accept": "application/geo+json"}

        attempt = 0
        while True:
            try:
                resp = httpx.get(url, headers=headers, timeout=self.timeout)
                resp.raise_for_status()
                return resp.json()
            except (httpx.HTTPStatusError, httpx.RequestError) as e:
                if attempt >= self.max_retries or not _is_retryable(e):
                    raise
                delay = self.retry_base_delay * (2**attempt)
                attempt += 1
                logger.warning(
                    "weather.gov %s failed (%s), retry %d/%d in %.1fs",
                    gridpoint, e, attempt, self.max_retries, delay,
                )
                time.sleep(delay)


def _is_retryable(error: httpx.HTTPError) -> bool:
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code in RETRYABLE_STATUS
    return True
