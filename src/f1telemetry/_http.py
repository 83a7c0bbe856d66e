"""Low-level async HTTP transport wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from f1telemetry.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from f1telemetry.exceptions import (
    OpenF1APIError,
    OpenF1ConnectionError,
    OpenF1TimeoutError,
    OpenF1ValidationError,
)


def _is_no_results(response: httpx.Response) -> bool:
    """OpenF1 answers a filter that matches nothing with 404 and a detail body."""
    if response.status_code != 404:
        return False
    try:
        body = response.json()
    except ValueError:
        return False
    return isinstance(body, dict) and "no results" in str(body.get("detail", "")).lower()


def _handle_response(response: httpx.Response) -> list[dict[str, Any]]:
    """Validate response status and return parsed JSON."""
    if _is_no_results(response):
        return []
    if response.status_code >= 400:
        raise OpenF1APIError(
            status_code=response.status_code,
            message=response.text,
        )
    try:
        data = response.json()
    except ValueError as exc:
        raise OpenF1ValidationError(f"Response is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise OpenF1ValidationError(f"Expected a JSON array, got {type(data).__name__}")
    return data


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(self, endpoint: str, params: list[tuple[str, str]]) -> list[dict[str, Any]]:
        """Perform an async GET request and return parsed JSON."""
        try:
            response = await self._client.get(endpoint, params=params)
        except httpx.ConnectError as exc:
            raise OpenF1ConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise OpenF1TimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise OpenF1ConnectionError(str(exc)) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
