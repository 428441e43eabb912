"""Shared HTTP plumbing for the upstream provider adapters."""
import json
import time
from typing import Any, Dict, Optional

import httpx

from app.core import metrics
from app.core.logging import get_logger

logger = get_logger(__name__)


class UpstreamError(Exception):
    """
    An upstream provider call failed.

    Raised for non-2xx responses, transport failures and undecodable
    bodies. The message carries the provider label and, for HTTP errors,
    the status code (e.g. "API-Sports error: 503").
    """

    def __init__(self, provider: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code


class ProviderAdapter:
    """
    Base class for a single upstream provider.

    Subclasses set ``provider`` (metrics label) and ``label`` (error
    message prefix) and call ``_get_json``.
    """

    provider = "upstream"
    label = "Upstream"

    def __init__(self, client: httpx.AsyncClient, api_key: Optional[str] = None):
        self.client = client
        self.api_key = api_key

    @property
    def enabled(self) -> bool:
        """A provider without a credential is disabled, not broken."""
        return bool(self.api_key)

    async def _get_json(
        self,
        url: str,
        params: Optional[Dict[str, str]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        GET a URL and decode its JSON body.

        Raises:
            UpstreamError: On transport failure, non-2xx status or bad JSON
        """
        started = time.perf_counter()
        try:
            response = await self.client.get(url, params=params, headers=headers)
        except httpx.HTTPError as e:
            self._record("transport_error", started)
            logger.error(f"{self.label} request failed: {e}")
            raise UpstreamError(self.provider, f"{self.label} request failed: {e}") from e

        if not response.is_success:
            self._record("http_error", started)
            logger.error(
                f"{self.label} returned {response.status_code}",
                extra={"provider": self.provider, "status": response.status_code},
            )
            raise UpstreamError(
                self.provider,
                f"{self.label} error: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            self._record("decode_error", started)
            logger.error(f"{self.label} returned invalid JSON: {e}")
            raise UpstreamError(self.provider, f"{self.label} returned invalid JSON: {e}") from e

        self._record("success", started)
        return data

    def _record(self, outcome: str, started: float) -> None:
        metrics.record_upstream_request(self.provider, outcome, time.perf_counter() - started)
