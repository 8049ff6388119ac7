"""HTTP client for the BatchData property API.

One POST per logical operation; no retries. Failures are raised as the typed
errors in `core.errors` and shaped into envelopes by the tool layer.
"""
from typing import Any
import logging

import httpx

from core.config import Settings
from core.errors import ApiRequestError, SerializationError, TransportError
from utils.get_endpoint import Endpoint, get_endpoint

logger = logging.getLogger(__name__)


class ApiClient:
    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self._settings = settings
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._settings.api_url

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._settings.api_key}",
            "Content-Type": "application/json",
        }

    async def execute(self, endpoint: Endpoint | str, document: dict[str, Any]) -> Any:
        """POST `document` to `endpoint` and return the decoded JSON body.

        Raises:
            ApiRequestError: the API answered with a non-2xx status.
            SerializationError: the body of a 2xx answer was not JSON.
            TransportError: no response was received (DNS, connect, timeout, reset).
        """
        url = get_endpoint(self.base_url, endpoint)
        logger.info("POST %s", url)
        async with httpx.AsyncClient(
            timeout=self._settings.request_timeout, transport=self._transport
        ) as client:
            try:
                response = await client.post(url, json=document, headers=self._headers())
            except httpx.TransportError as e:
                logger.warning("Transport failure for %s: %r", url, e)
                raise TransportError(f"Request to {url} failed: {str(e) or type(e).__name__}") from e

        logger.info("POST %s -> %s", url, response.status_code)
        if not response.is_success:
            raise ApiRequestError(response.status_code, response.reason_phrase)
        try:
            return response.json()
        except ValueError as e:
            raise SerializationError(response.status_code, response.reason_phrase, str(e)) from e
