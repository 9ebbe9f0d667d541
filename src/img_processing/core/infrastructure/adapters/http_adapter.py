"""Thin adapter for issuing HTTP requests to the IMG Processing API."""

from collections.abc import Mapping
from typing import Any, Protocol

import requests

from img_processing.core.utils.config import ClientConfig
from img_processing.core.utils.constants import API_KEY_HEADER


class HttpAdapterProtocol(Protocol):
    """Minimal HTTP adapter protocol (transport-facing)."""

    @property
    def base_url(self) -> str: ...

    def get(self, path: str, *, params: Mapping[str, Any] | None = None) -> requests.Response: ...

    def post(
        self,
        path: str,
        *,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
    ) -> requests.Response: ...

    def delete(self, path: str) -> requests.Response: ...

    def close(self) -> None: ...


class HttpAdapter:
    """Low-level HTTP operations (mechanical, no error handling).

    This adapter:
    - Sends the API key header with every request, leaving an injected
      session's headers untouched
    - Closes only the session it created itself
    - Resolves relative paths against the configured base URL
    - Raises `requests.HTTPError` on non-2xx responses
    - Does NOT classify errors (lets them bubble up)
    """

    def __init__(self, config: ClientConfig, session: requests.Session | None = None) -> None:
        self._base_url = config.base_url
        self._timeout = config.timeout
        self._headers = {API_KEY_HEADER: config.api_key}
        self._owns_session = session is None
        self._session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self._base_url

    def url_for(self, path: str) -> str:
        return f"{self._base_url}{path.lstrip('/')}"

    def request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        """Send a request and raise for non-2xx statuses.

        Raises requests exceptions - classified by the transport.
        """
        response = self._session.request(
            method,
            self.url_for(path),
            headers=self._headers,
            timeout=self._timeout,
            **kwargs,
        )
        response.raise_for_status()
        return response

    def get(self, path: str, *, params: Mapping[str, Any] | None = None) -> requests.Response:
        return self.request("GET", path, params=params)

    def post(
        self,
        path: str,
        *,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
    ) -> requests.Response:
        return self.request("POST", path, json=json, data=data, files=files)

    def delete(self, path: str) -> requests.Response:
        return self.request("DELETE", path)

    def close(self) -> None:
        if self._owns_session:
            self._session.close()
