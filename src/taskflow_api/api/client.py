"""API client for a running TaskFlow server."""

import asyncio
from typing import Any, Optional

import httpx

from taskflow_api.config import get_config_manager


class APIError(Exception):
    """The server answered with a failed response envelope."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


def _envelope_message(response: httpx.Response) -> str:
    """Pull the most specific human-readable text out of an error envelope."""
    try:
        body = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    if not isinstance(body, dict):
        return f"HTTP {response.status_code}"
    error = body.get("error")
    message = body.get("message")
    if error and message:
        return f"{error}: {message}"
    return error or message or f"HTTP {response.status_code}"


class APIClient:
    """HTTP client for the TaskFlow API."""

    def __init__(
        self,
        profile: str = "default",
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config_manager = get_config_manager(profile)
        self.config = self.config_manager.config
        self.base_url = self.config.api.endpoint.rstrip("/")
        self.timeout = self.config.api.timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_headers(self) -> dict[str, str]:
        """Get HTTP headers."""
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self._get_headers(),
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[dict[str, Any]] = None,
        params: Optional[dict[str, Any]] = None,
        retry: Optional[int] = None,
    ) -> httpx.Response:
        """Make an HTTP request to the API.

        Transport errors and 5xx responses are retried with exponential
        backoff; 4xx responses raise APIError immediately.
        """
        if retry is None:
            retry = self.config.api.retry

        client = await self._get_client()
        url = path if path.startswith("/") else f"/{path}"

        last_exception: Optional[Exception] = None
        for attempt in range(retry + 1):
            try:
                response = await client.request(
                    method=method,
                    url=url,
                    json=json,
                    params=params,
                )
                response.raise_for_status()
                return response
            except httpx.HTTPStatusError as e:
                if 400 <= e.response.status_code < 500:
                    raise APIError(
                        e.response.status_code, _envelope_message(e.response)
                    ) from e
                last_exception = e
            except httpx.RequestError as e:
                last_exception = e

            if attempt < retry:
                await asyncio.sleep(2**attempt)

        if isinstance(last_exception, httpx.HTTPStatusError):
            raise APIError(
                last_exception.response.status_code,
                _envelope_message(last_exception.response),
            ) from last_exception
        if last_exception:
            raise last_exception
        raise RuntimeError("Request failed after all retries")

    async def get(
        self, path: str, *, params: Optional[dict[str, Any]] = None
    ) -> httpx.Response:
        """Make a GET request."""
        return await self.request("GET", path, params=params)

    async def post(
        self, path: str, *, json: Optional[dict[str, Any]] = None
    ) -> httpx.Response:
        """Make a POST request."""
        return await self.request("POST", path, json=json)

    async def put(
        self, path: str, *, json: Optional[dict[str, Any]] = None
    ) -> httpx.Response:
        """Make a PUT request."""
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> httpx.Response:
        """Make a DELETE request."""
        return await self.request("DELETE", path)


def get_client(profile: str = "default") -> APIClient:
    """Get an API client instance."""
    return APIClient(profile)
