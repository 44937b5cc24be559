"""
UI state passed through the controller's handlers
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union
from task_manager_web.models.task import Task, TaskFormData


class BannerKind(str, Enum):
    ERROR = "error"
    SUCCESS = "success"


@dataclass(frozen=True)
class Banner:
    """Single-slot transient message; lines are rendered one per row"""
    kind: BannerKind
    lines: List[str]

    @classmethod
    def error(cls, *lines: str) -> "Banner":
        return cls(BannerKind.ERROR, list(lines))

    @classmethod
    def success(cls, message: str) -> "Banner":
        return cls(BannerKind.SUCCESS, [message])


@dataclass
class UIState:
    """Everything the page shows; the task list is a disposable cache"""
    tasks: List[Task] = field(default_factory=list)
    editing_task_id: Optional[Union[int, str]] = None
    form: TaskFormData = field(default_factory=TaskFormData)
    submitting: bool = False
    loading: bool = False
    banner: Optional[Banner] = None

    @property
    def is_editing(self) -> bool:
        return self.editing_task_id is not None

    def reset_form(self) -> None:
        """Back to create mode with an empty form"""
        self.form = TaskFormData()
        self.editing_task_id = None
