"""
Proxy API client used by the UI controller
"""

from typing import Any, List, Optional, Union
import httpx
from pydantic import ValidationError
from task_manager_web.api.base_client import BaseAPIClient
from task_manager_web.config.settings import settings
from task_manager_web.models.task import StatusUpdate, Task, TaskFormData, TaskStatus
from task_manager_web.utils.error_handler import (
    BackendError,
    TaskActionError,
    error_from_envelope,
)

TaskId = Union[int, str]


class TaskProxyClient(BaseAPIClient):
    """Client for the proxy's /api/tasks routes

    Failures surface as TaskActionError, or TaskValidationError when the
    error body carries a validationErrors map (create/update only).
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize proxy client

        Args:
            base_url: Proxy origin (defaults to PROXY_BASE_URL)
            client: Existing httpx client to reuse
        """
        base_url = (base_url or settings.PROXY_BASE_URL).rstrip("/")
        super().__init__(f"{base_url}/api/tasks", client=client)

    async def list_tasks(self) -> List[Task]:
        """Fetch every task"""
        try:
            data = await self.get()
        except BackendError as e:
            raise TaskActionError(e.message) from e

        if not isinstance(data, list):
            raise TaskActionError("Unexpected task list response")

        try:
            return [Task.model_validate(item) for item in data]
        except ValidationError as e:
            raise TaskActionError(f"Malformed task in list: {e.error_count()} error(s)") from e

    async def create_task(self, data: TaskFormData) -> Any:
        """Create a task; validation failures are reported per field"""
        try:
            return await self.post(json_data=data.to_payload())
        except BackendError as e:
            raise error_from_envelope(e.data) from e

    async def update_task(self, task_id: TaskId, data: TaskFormData) -> Any:
        """Replace a task's editable fields"""
        try:
            return await self.put(f"/{task_id}", json_data=data.to_payload())
        except BackendError as e:
            raise error_from_envelope(e.data) from e

    async def update_task_status(self, task_id: TaskId, status: TaskStatus) -> Any:
        """Status-only transition; errors are never parsed per field"""
        try:
            return await self.patch(
                f"/{task_id}/status", json_data=StatusUpdate(status=status).model_dump(mode="json")
            )
        except BackendError as e:
            raise TaskActionError(e.message) from e

    async def delete_task(self, task_id: TaskId) -> None:
        try:
            await self.delete(f"/{task_id}")
        except BackendError as e:
            raise TaskActionError(e.message) from e
