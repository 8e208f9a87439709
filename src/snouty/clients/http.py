# src/snouty/clients/http.py
"""HTTP client for the Antithesis launch API.

One request per invocation: the client opens an httpx.Client, sends the
POST and closes it. Nothing is retried; failures surface as
TransportError (network, timeout) or ApiError (non-2xx status).
"""

from typing import Any

import httpx
import structlog

from snouty.contracts import ApiError, ParameterSet, TransportError
from snouty.core.config import ApiSettings

logger = structlog.get_logger(__name__)

DEBUGGING_ENDPOINT = "debugging"


class AntithesisClient:
    """Authenticated client for ``/launch/<endpoint>`` calls.

    Args:
        settings: API credentials and base URL.
        transport: Optional httpx transport (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        settings: ApiSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._settings.api_base_url

    def _client(self) -> httpx.Client:
        kwargs: dict[str, Any] = {
            "base_url": self.base_url,
            "auth": httpx.BasicAuth(self._settings.username, self._settings.password),
            "timeout": self._settings.timeout_seconds,
        }
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.Client(**kwargs)

    def post(self, path: str, json: dict[str, Any]) -> httpx.Response:
        """POST ``json`` to ``path`` relative to the base URL.

        Raises:
            TransportError: If the request could not complete.
        """
        try:
            with self._client() as client:
                response = client.post(path, json=json)
        except httpx.TimeoutException as e:
            raise TransportError(
                f"request timed out after {self._settings.timeout_seconds:g}s: {e}"
            ) from e
        except httpx.RequestError as e:
            raise TransportError(str(e)) from e

        logger.debug(
            "received response",
            path=path,
            status=response.status_code,
            body_length=len(response.content),
        )
        return response

    def launch(self, endpoint: str, params: ParameterSet) -> str:
        """Send ``params`` to ``/launch/<endpoint>`` and return the body.

        Args:
            endpoint: Webhook name, or ``debugging`` for a debugging session.
            params: Parameters sent unredacted as the ``params`` field.

        Returns:
            Raw response body.

        Raises:
            TransportError: If the request could not complete.
            ApiError: If the API answered with a non-2xx status.
        """
        response = self.post(f"/launch/{endpoint}", json={"params": params.to_wire()})
        body = response.text
        if not response.is_success:
            raise ApiError(response.status_code, body)
        return body
