"""
Task backend API client
"""

from typing import Any, Optional
import httpx
from task_manager_web.api.base_client import BaseAPIClient
from task_manager_web.config.settings import settings


class TaskBackendClient(BaseAPIClient):
    """Client for the backend's REST `tasks` resource

    Bodies are passed through untouched in both directions.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize backend client

        Args:
            base_url: URL of the tasks resource (defaults to API_BASE_URL)
            client: Existing httpx client to reuse
        """
        super().__init__(
            base_url or settings.API_BASE_URL,
            timeout=settings.BACKEND_TIMEOUT,
            retries=settings.BACKEND_MAX_RETRIES,
            client=client,
        )

    async def list_tasks(self) -> Any:
        return await self.get()

    async def get_task(self, task_id: str) -> Any:
        return await self.get(f"/{task_id}")

    async def create_task(self, payload: Any) -> Any:
        return await self.post(json_data=payload)

    async def update_task(self, task_id: str, payload: Any) -> Any:
        return await self.put(f"/{task_id}", json_data=payload)

    async def update_task_status(self, task_id: str, payload: Any) -> Any:
        return await self.patch(f"/{task_id}/status", json_data=payload)

    async def delete_task(self, task_id: str) -> None:
        await self.delete(f"/{task_id}")
