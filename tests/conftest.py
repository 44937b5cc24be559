"""
Pytest configuration and fixtures
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient
from task_manager_web.api.proxy_client import TaskProxyClient
from task_manager_web.config.settings import settings
from task_manager_web.models.task import Task
from task_manager_web.ui.controller import TaskUIController
from task_manager_web.ui.state import UIState
from task_manager_web.web.main import app


@pytest.fixture
def backend_url():
    """Backend tasks resource the proxy forwards to"""
    return settings.API_BASE_URL.rstrip("/")


@pytest.fixture
def sample_tasks():
    """Task list as the backend returns it"""
    return [
        {
            "id": 1,
            "title": "Test Task",
            "description": "Review case file",
            "status": "TODO",
            "dueDateTime": "2026-02-01T10:00:00",
            "createdAt": "2026-01-15T09:30:00",
        },
        {
            "id": 2,
            "title": "Test Task 2",
            "description": None,
            "status": "IN_PROGRESS",
            "dueDateTime": "2026-02-03T14:45:00",
            "createdAt": "2026-01-16T11:00:00",
        },
    ]


@pytest.fixture
def proxy_app():
    """Proxy app with startup/shutdown run"""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def mock_proxy_client(sample_tasks):
    """Mock proxy client"""
    client = MagicMock(spec=TaskProxyClient)
    client.list_tasks = AsyncMock(
        return_value=[Task.model_validate(task) for task in sample_tasks]
    )
    client.create_task = AsyncMock(return_value={"id": 3, "title": "New Task"})
    client.update_task = AsyncMock(return_value={"id": 1, "title": "Updated Task"})
    client.update_task_status = AsyncMock(return_value={"id": 1, "status": "COMPLETED"})
    client.delete_task = AsyncMock(return_value=None)
    return client


@pytest.fixture
def rendered_pages():
    """Collects every page the controller renders"""
    return []


@pytest.fixture
def controller(mock_proxy_client, rendered_pages):
    """UI controller with mocked proxy client that confirms every delete"""
    return TaskUIController(
        mock_proxy_client,
        confirm=lambda message: True,
        display=rendered_pages.append,
    )


@pytest.fixture
def ui_state():
    return UIState()
