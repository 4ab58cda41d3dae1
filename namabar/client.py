"""HTTP client for the Namabar API.

Sets the authentication and JSON headers and delegates every request
to an ``httpx.Client``. Endpoint methods come from the generated
:class:`namabar.endpoints.Endpoints` mixin.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .configuration import Configuration, get_configuration
from .endpoints import Endpoints
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class Client(Endpoints):
    """Namabar API client.

    Example::

        namabar.configure(api_key="your-api-key")
        with namabar.client() as client:
            response = client.send_message(
                type="sms",
                to="+9647501234567",
                text="Hello from Namabar!",
                service_id="sms-service",
            )
            print(response.status_code, response.json())
    """

    base_uri = "https://api.namabar.krd"

    def __init__(
        self,
        config: Configuration | None = None,
        *,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config or get_configuration()
        if self.config is None:
            raise ConfigurationError(
                "Namabar is not configured; call namabar.configure() first"
            )
        if not self.config.api_key:
            raise ConfigurationError("Namabar API key is not set")

        self.base_url = base_url or self.base_uri
        self.headers: dict[str, str] = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "X-API-Key": self.config.api_key,
        }
        self._http = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    def default_options(self) -> dict[str, Any]:
        """Options every request starts from; safe to mutate."""
        return {"headers": dict(self.headers)}

    def _request(self, method: str, url: str, **opts: Any) -> httpx.Response:
        logger.debug("%s %s", method, url)
        response = self._http.request(method, url, **opts)
        logger.debug("%s %s -> %d", method, url, response.status_code)
        return response

    def get(self, url: str, **opts: Any) -> httpx.Response:
        return self._request("GET", url, **self._with_defaults(opts))

    def post(self, url: str, **opts: Any) -> httpx.Response:
        return self._request("POST", url, **self._with_defaults(opts))

    def put(self, url: str, **opts: Any) -> httpx.Response:
        return self._request("PUT", url, **self._with_defaults(opts))

    def patch(self, url: str, **opts: Any) -> httpx.Response:
        return self._request("PATCH", url, **self._with_defaults(opts))

    def delete(self, url: str, **opts: Any) -> httpx.Response:
        return self._request("DELETE", url, **self._with_defaults(opts))

    def _with_defaults(self, opts: dict[str, Any]) -> dict[str, Any]:
        merged = self.default_options()
        merged["headers"].update(opts.pop("headers", None) or {})
        merged.update(opts)
        return merged

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
