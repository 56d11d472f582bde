"""HTTP transport for the collection API with per-host spacing and envelope normalization."""

import asyncio
import threading
import time
from typing import Any, Awaitable, Callable, Dict, List, Optional
from urllib.parse import urlparse

import requests
from pydantic import BaseModel, ValidationError, field_validator

from artscope.config.loader import ApiSettings
from artscope.errors import SchemaViolation, TransportError
from artscope.utils.logging import get_logger

logger = get_logger(__name__)

FetchFn = Callable[[str], Awaitable[Any]]


class IiifConfig(BaseModel):
    iiif_url: Optional[str] = None


class ApiEnvelope(BaseModel):
    """Response envelope with ``data`` always normalized to a list of records."""

    data: List[Dict[str, Any]]
    config: Optional[IiifConfig] = None

    @field_validator("data", mode="before")
    @classmethod
    def _wrap_single_record(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return [value]
        return value


def parse_envelope(payload: Any) -> ApiEnvelope:
    """
    Validate a decoded response body and normalize its shape.

    Raises:
        SchemaViolation: If the body is not an object with a ``data`` record or list
    """
    if not isinstance(payload, dict):
        raise SchemaViolation(f"Response body must be a JSON object, got {type(payload).__name__}")
    try:
        return ApiEnvelope.model_validate(payload)
    except ValidationError as e:
        raise SchemaViolation(f"Malformed response envelope: {e}") from e


async def fetch_envelope(fetch: FetchFn, url: str) -> ApiEnvelope:
    """Fetch url through the injected transport and normalize the envelope."""
    return parse_envelope(await fetch(url))


class ApiFetcher:
    """Fetches JSON documents from the collection API with a shared session."""

    def __init__(
        self,
        settings: Optional[ApiSettings] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize fetcher.

        Args:
            settings: API settings. Defaults to built-in ApiSettings.
            session: Optional pre-built requests session (used by tests).
        """
        self.settings = settings or ApiSettings()
        self.timeout = self.settings.timeout_seconds
        self.min_interval_seconds = self.settings.min_interval_seconds
        self.session = session or requests.Session()
        self.session.headers.update(self._get_headers())

        # Track last fetch time per host
        self._last_fetch_time: Dict[str, float] = {}
        self._lock = threading.Lock()

    def _get_headers(self) -> Dict[str, str]:
        """Get HTTP headers for requests."""
        return {
            "User-Agent": self.settings.user_agent,
            "Accept": "application/json",
        }

    def _get_host_from_url(self, url: str) -> str:
        """Extract host from URL for request spacing."""
        parsed = urlparse(url)
        return parsed.netloc or parsed.path.split("/")[0]

    def _wait_for_rate_limit(self, url: str) -> None:
        """Wait if necessary to keep min_interval_seconds between requests to this host."""
        if self.min_interval_seconds <= 0:
            return
        host = self._get_host_from_url(url)
        with self._lock:
            last_time = self._last_fetch_time.get(host, 0)
            now = time.time()
            elapsed = now - last_time
            wait_time = self.min_interval_seconds - elapsed if elapsed < self.min_interval_seconds else 0
            # Reserve the slot before sleeping so concurrent callers queue behind it
            self._last_fetch_time[host] = now + wait_time

        if wait_time > 0:
            logger.debug(f"Rate limiting: waiting {wait_time:.2f}s for host {host}")
            time.sleep(wait_time)

    def fetch_json(self, url: str) -> Any:
        """
        GET url and decode the JSON body.

        Raises:
            TransportError: On connection errors, non-2xx responses or undecodable bodies
        """
        self._wait_for_rate_limit(url)
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            status_code = None
            if getattr(e, "response", None) is not None:
                status_code = e.response.status_code
            raise TransportError(f"Failed to fetch {url}: {e}", url=url, status_code=status_code) from e

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                f"Failed to decode JSON from {url}: {e}", url=url, status_code=response.status_code
            ) from e

    async def fetch(self, url: str) -> Any:
        """Async form of fetch_json; the blocking request runs in a worker thread."""
        return await asyncio.to_thread(self.fetch_json, url)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "ApiFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
