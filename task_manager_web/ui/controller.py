"""
Task UI controller
"""

import asyncio
from typing import Any, Callable, Optional, Union
from task_manager_web.api.proxy_client import TaskProxyClient
from task_manager_web.models.task import Task, TaskFormData, TaskStatus
from task_manager_web.ui.renderer import render_state
from task_manager_web.ui.state import Banner, BannerKind, UIState
from task_manager_web.utils.date_utils import format_datetime_for_input
from task_manager_web.utils.error_handler import TaskActionError, TaskValidationError
from task_manager_web.utils.logger import logger
from task_manager_web.config.constants import (
    MSG_CONFIRM_DELETE,
    MSG_DELETE_FAILED,
    MSG_LOAD_FAILED,
    MSG_SAVE_FAILED,
    MSG_STATUS_FAILED,
    MSG_STATUS_UPDATED,
    MSG_TASK_CREATED,
    MSG_TASK_DELETED,
    MSG_TASK_UPDATED,
    MSG_VALIDATION_FAILED,
    SUCCESS_BANNER_DELAY,
)

TaskId = Union[int, str]


class TaskUIController:
    """Turns user actions into proxy calls and redraws the page

    Handlers take the UIState they act on. After every mutation the task
    list is thrown away and fetched again in full.
    """

    def __init__(
        self,
        client: TaskProxyClient,
        confirm: Optional[Callable[[str], bool]] = None,
        display: Optional[Callable[[str], Any]] = None,
        success_banner_delay: float = SUCCESS_BANNER_DELAY,
    ):
        """
        Initialize controller

        Args:
            client: Proxy API client
            confirm: Asks the user a yes/no question (delete confirmation);
                without it every delete is refused
            display: Receives the page HTML after each state change
            success_banner_delay: Seconds before a success banner disappears
        """
        self.client = client
        self.confirm = confirm or (lambda message: False)
        self.display = display
        self.success_banner_delay = success_banner_delay
        self._banner_timer: Optional[asyncio.TimerHandle] = None
        self.logger = logger

    # Rendering

    def render(self, state: UIState) -> str:
        html = render_state(state)
        if self.display is not None:
            self.display(html)
        return html

    # Banners

    def _set_banner(self, state: UIState, banner: Optional[Banner]) -> None:
        if self._banner_timer is not None:
            self._banner_timer.cancel()
            self._banner_timer = None
        state.banner = banner

    def show_error(self, state: UIState, *lines: str) -> None:
        self._set_banner(state, Banner.error(*lines))

    def show_success(self, state: UIState, message: str) -> None:
        banner = Banner.success(message)
        self._set_banner(state, banner)
        loop = asyncio.get_running_loop()
        self._banner_timer = loop.call_later(
            self.success_banner_delay, self._dismiss_success, state, banner
        )

    def _dismiss_success(self, state: UIState, banner: Banner) -> None:
        # A newer banner has taken the slot
        if state.banner is not banner:
            return
        self._banner_timer = None
        state.banner = None
        self.render(state)

    def hide_banner(self, state: UIState) -> None:
        self._set_banner(state, None)

    def hide_error(self, state: UIState) -> None:
        if state.banner is not None and state.banner.kind == BannerKind.ERROR:
            self._set_banner(state, None)

    # Proxy calls

    async def create_task(self, data: TaskFormData) -> Any:
        return await self.client.create_task(data)

    async def update_task(self, task_id: TaskId, data: TaskFormData) -> Any:
        return await self.client.update_task(task_id, data)

    # Handlers

    async def load_tasks(self, state: UIState) -> bool:
        """
        Replace the cached task list with a fresh fetch

        Returns:
            True if the list was loaded, False if it was left empty
        """
        state.loading = True
        self.hide_error(state)
        self.render(state)

        try:
            state.tasks = await self.client.list_tasks()
            return True
        except TaskActionError as e:
            self.logger.error(f"Error loading tasks: {e.message}")
            state.tasks = []
            self.show_error(state, MSG_LOAD_FAILED)
            return False
        finally:
            state.loading = False
            self.render(state)

    async def submit(self, state: UIState, data: TaskFormData) -> bool:
        """
        Create or update depending on edit mode

        Only one submit runs at a time; a submit issued while another is
        in flight does nothing.

        Returns:
            True if the task was saved
        """
        if state.submitting:
            self.logger.debug("Submit ignored: a save is already in progress")
            return False

        state.submitting = True
        state.form = data
        self.hide_banner(state)
        self.render(state)

        try:
            if state.is_editing:
                await self.update_task(state.editing_task_id, data)
                self.show_success(state, MSG_TASK_UPDATED)
            else:
                await self.create_task(data)
                self.show_success(state, MSG_TASK_CREATED)

            state.reset_form()
            await self.load_tasks(state)
            return True
        except TaskValidationError as e:
            self.logger.warning(f"Task rejected by validation: {e.validation_errors}")
            self.show_error(state, MSG_VALIDATION_FAILED, *e.lines())
            return False
        except TaskActionError as e:
            self.logger.error(f"Error saving task: {e.message}")
            self.show_error(state, e.message or MSG_SAVE_FAILED)
            return False
        finally:
            state.submitting = False
            self.render(state)

    def start_edit(self, state: UIState, task: Task) -> None:
        """Switch to update mode with the form filled from the task"""
        state.editing_task_id = task.id
        state.form = TaskFormData(
            title=task.title,
            description=task.description or "",
            status=task.status,
            due_date_time=format_datetime_for_input(task.due_date_time),
        )
        self.render(state)

    def cancel_edit(self, state: UIState) -> None:
        state.reset_form()
        self.hide_banner(state)
        self.render(state)

    async def update_task_status(self, state: UIState, task_id: TaskId, status: TaskStatus) -> bool:
        self.hide_error(state)

        try:
            await self.client.update_task_status(task_id, status)
        except TaskActionError as e:
            self.logger.error(f"Error updating status of task {task_id}: {e.message}")
            self.show_error(state, MSG_STATUS_FAILED)
            self.render(state)
            return False

        if await self.load_tasks(state):
            self.show_success(state, MSG_STATUS_UPDATED)
            self.render(state)
        return True

    async def delete_task(self, state: UIState, task_id: TaskId) -> bool:
        """Delete after confirmation; a refusal issues no request"""
        if not self.confirm(MSG_CONFIRM_DELETE):
            return False

        self.hide_error(state)

        try:
            await self.client.delete_task(task_id)
        except TaskActionError as e:
            self.logger.error(f"Error deleting task {task_id}: {e.message}")
            self.show_error(state, MSG_DELETE_FAILED)
            self.render(state)
            return False

        if await self.load_tasks(state):
            self.show_success(state, MSG_TASK_DELETED)
            self.render(state)
        return True
