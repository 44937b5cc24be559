"""
Base API client with common functionality
"""

import asyncio
from abc import ABC
from typing import Optional, Dict, Any
import httpx
from task_manager_web.utils.logger import logger
from task_manager_web.utils.error_handler import BackendError
from task_manager_web.config.constants import MAX_RETRIES, RETRY_DELAY, REQUEST_TIMEOUT


class BaseAPIClient(ABC):
    """Base class for JSON API clients with common functionality"""

    def __init__(
        self,
        base_url: str,
        timeout: float = REQUEST_TIMEOUT,
        retries: int = MAX_RETRIES,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize base API client

        Args:
            base_url: Base URL for API
            timeout: Request timeout in seconds
            retries: Attempts per request (1 means no retry)
            client: Existing httpx client to reuse (owned by the caller)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retries = max(1, retries)
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout)
        self.logger = logger

    def _build_url(self, endpoint: str) -> str:
        """Join endpoint onto base URL ("" means the base URL itself)"""
        endpoint = endpoint.strip("/")
        if not endpoint:
            return self.base_url
        return f"{self.base_url}/{endpoint}"

    async def _request(
        self,
        method: str,
        endpoint: str = "",
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        json_data: Any = None,
    ) -> Any:
        """
        Make HTTP request with retry logic

        Transport errors and 5xx responses are retried while attempts
        remain; 4xx responses fail immediately.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE)
            endpoint: API endpoint relative to base URL
            headers: Request headers
            params: Query parameters
            json_data: JSON body

        Returns:
            Parsed JSON body, or None for an empty body

        Raises:
            BackendError: If request fails after all retries
        """
        url = self._build_url(endpoint)

        for attempt in range(self.retries):
            last_attempt = attempt == self.retries - 1
            try:
                self.logger.debug(f"Request: {method} {url} (attempt {attempt + 1}/{self.retries})")

                request_kwargs = {
                    "method": method,
                    "url": url,
                    "headers": headers,
                    "params": params,
                }

                if json_data is not None:
                    request_kwargs["json"] = json_data
                    self.logger.debug(f"Request JSON data: {json_data}")

                response = await self.client.request(**request_kwargs)

                self.logger.debug(f"Response status: {response.status_code}")
                if response.status_code >= 400:
                    self.logger.warning(f"Error response body: {response.text[:1000]}")

                response.raise_for_status()

                # 204 No Content or empty body
                if response.status_code == 204 or not response.content.strip():
                    return None

                try:
                    return response.json()
                except ValueError:
                    self.logger.warning(f"Non-JSON success body from {method} {url}")
                    return None

            except httpx.HTTPStatusError as e:
                status_code = e.response.status_code
                if status_code >= 500 and not last_attempt:
                    self.logger.warning(
                        f"Request failed with status {status_code}, "
                        f"retrying in {RETRY_DELAY} seconds..."
                    )
                    await asyncio.sleep(RETRY_DELAY * (attempt + 1))
                    continue

                raise BackendError(
                    f"Request failed with status code {status_code}",
                    status_code=status_code,
                    data=_parse_error_body(e.response),
                ) from e

            except httpx.RequestError as e:
                if not last_attempt:
                    self.logger.warning(
                        f"Request error: {e}, retrying in {RETRY_DELAY} seconds..."
                    )
                    await asyncio.sleep(RETRY_DELAY * (attempt + 1))
                    continue

                self.logger.error(f"Request error after {self.retries} attempts: {e!r}")
                raise BackendError(str(e) or type(e).__name__) from e

    async def get(self, endpoint: str = "", params: Optional[Dict[str, Any]] = None) -> Any:
        """Make GET request"""
        return await self._request("GET", endpoint, params=params)

    async def post(self, endpoint: str = "", json_data: Any = None) -> Any:
        """Make POST request"""
        return await self._request("POST", endpoint, json_data=json_data)

    async def put(self, endpoint: str = "", json_data: Any = None) -> Any:
        """Make PUT request"""
        return await self._request("PUT", endpoint, json_data=json_data)

    async def patch(self, endpoint: str = "", json_data: Any = None) -> Any:
        """Make PATCH request"""
        return await self._request("PATCH", endpoint, json_data=json_data)

    async def delete(self, endpoint: str = "") -> Any:
        """Make DELETE request"""
        return await self._request("DELETE", endpoint)

    async def close(self):
        """Close HTTP client"""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.close()


def _parse_error_body(response: httpx.Response) -> Any:
    """JSON body of an error response, or None if it has none"""
    try:
        return response.json()
    except ValueError:
        return None
