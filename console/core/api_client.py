import json
import logging
from typing import Any, Dict, Optional

import httpx

from core.config import settings
from core.errors import ApiError, UNEXPECTED_ERROR_MESSAGE

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    """Pull the remote `detail` out of an error body, or fall back to the status code."""
    try:
        data = response.json()
    except ValueError:
        data = {}
    detail = data.get("detail") if isinstance(data, dict) else None
    if isinstance(detail, str) and detail:
        return detail
    return f"Request failed with status {response.status_code}"


class ApiClient:
    """
    Async JSON client for the remote beer service.

    Every call either returns the decoded body or raises ApiError. There is
    no retry and no timeout; callers repeat the call if they want to.
    """

    def __init__(self, base_url: Optional[str] = None, client: Optional[httpx.AsyncClient] = None):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=None)

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json"}

    async def _request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        content = json.dumps(body) if body is not None else None

        try:
            response = await self._client.request(
                method,
                url,
                headers=self._headers(),
                content=content,
                params=params,
            )
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as e:
            logger.warning("%s %s failed: %r", method, url, e)
            raise ApiError(UNEXPECTED_ERROR_MESSAGE) from e

        if not response.is_success:
            message = _error_message(response)
            logger.warning("%s %s -> %s: %s", method, url, response.status_code, message)
            raise ApiError(message, status_code=response.status_code)

        if response.status_code == 204:
            return {}

        try:
            return response.json()
        except ValueError as e:
            logger.warning("%s %s returned an undecodable body", method, url)
            raise ApiError(UNEXPECTED_ERROR_MESSAGE, status_code=response.status_code) from e

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self._request("GET", path, params=params)

    async def post(self, path: str, body: Any) -> Any:
        return await self._request("POST", path, body=body)

    async def put(self, path: str, body: Any) -> Any:
        return await self._request("PUT", path, body=body)

    async def delete(self, path: str) -> Any:
        return await self._request("DELETE", path)
