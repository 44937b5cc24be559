"""
View models: plain data derived from UIState, ready for the renderer

Nothing here touches HTML; escaping happens in the templates.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union
from task_manager_web.models.task import Task, TaskStatus
from task_manager_web.ui.state import Banner, UIState
from task_manager_web.utils.date_utils import format_datetime_for_display
from task_manager_web.utils.formatters import format_status, format_task_count
from task_manager_web.config.constants import (
    FORM_TITLE_CREATE,
    FORM_TITLE_EDIT,
    LABEL_CREATE,
    LABEL_SAVING,
    LABEL_UPDATE,
    MSG_EMPTY_LIST,
)


@dataclass(frozen=True)
class TaskActionView:
    """One button under a task"""
    label: str
    action: str  # "edit", "status" or "delete"
    style: str  # "primary", "secondary" or "danger"
    target_status: Optional[str] = None


@dataclass(frozen=True)
class TaskView:
    id: Union[int, str]
    title: str
    description: Optional[str]
    status: str
    status_label: str
    due_display: str
    created_display: str
    actions: List[TaskActionView] = field(default_factory=list)


@dataclass(frozen=True)
class FormView:
    heading: str
    submit_label: str
    submit_disabled: bool
    cancel_visible: bool
    title: str
    description: str
    status: str
    due_date_time: str
    editing_task_id: Optional[Union[int, str]] = None
    status_options: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class PageView:
    form: FormView
    tasks: List[TaskView]
    task_count: str
    empty_message: str
    loading: bool
    banner: Optional[Banner]


def task_actions(status: str) -> List[TaskActionView]:
    """
    Buttons offered for a task in the given status

    Edit and Delete are always offered; Mark Complete unless already
    COMPLETED; Start only from a status that is neither IN_PROGRESS
    nor COMPLETED.
    """
    actions = [TaskActionView("Edit", "edit", "primary")]

    if status != TaskStatus.COMPLETED.value:
        actions.append(
            TaskActionView("Mark Complete", "status", "secondary", TaskStatus.COMPLETED.value)
        )

    if status not in (TaskStatus.IN_PROGRESS.value, TaskStatus.COMPLETED.value):
        actions.append(
            TaskActionView("Start", "status", "secondary", TaskStatus.IN_PROGRESS.value)
        )

    actions.append(TaskActionView("Delete", "delete", "danger"))
    return actions


def build_task_view(task: Task) -> TaskView:
    return TaskView(
        id=task.id,
        title=task.title,
        description=task.description or None,
        status=task.status,
        status_label=format_status(task.status),
        due_display=format_datetime_for_display(task.due_date_time),
        created_display=format_datetime_for_display(task.created_at),
        actions=task_actions(task.status),
    )


def build_form_view(state: UIState) -> FormView:
    if state.submitting:
        submit_label = LABEL_SAVING
    elif state.is_editing:
        submit_label = LABEL_UPDATE
    else:
        submit_label = LABEL_CREATE

    return FormView(
        heading=FORM_TITLE_EDIT if state.is_editing else FORM_TITLE_CREATE,
        submit_label=submit_label,
        submit_disabled=state.submitting,
        cancel_visible=state.is_editing,
        title=state.form.title,
        description=state.form.description,
        status=state.form.status,
        due_date_time=state.form.due_date_time,
        editing_task_id=state.editing_task_id,
        status_options=[s.value for s in TaskStatus],
    )


def build_page_view(state: UIState) -> PageView:
    """Whole-page view; the task list is rebuilt from scratch every time"""
    return PageView(
        form=build_form_view(state),
        tasks=[build_task_view(task) for task in state.tasks],
        task_count=format_task_count(len(state.tasks)),
        empty_message=MSG_EMPTY_LIST,
        loading=state.loading,
        banner=state.banner,
    )
