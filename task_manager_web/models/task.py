"""
Task model
"""

from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, Field, ConfigDict


class TaskStatus(str, Enum):
    """Task status values accepted by the backend"""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class Task(BaseModel):
    """Task as returned by the backend"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Union[int, str]
    title: str = ""
    description: Optional[str] = None
    # Kept as sent: the backend is the source of truth for these values
    status: str = TaskStatus.TODO.value
    due_date_time: Optional[str] = Field(None, alias="dueDateTime")
    created_at: Optional[str] = Field(None, alias="createdAt")


class TaskFormData(BaseModel):
    """User-editable task fields, as submitted from the form"""

    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    description: str = ""
    status: str = TaskStatus.TODO.value
    due_date_time: str = Field("", alias="dueDateTime")

    def to_payload(self) -> dict:
        """Request body for create/update (never carries id or createdAt)"""
        return self.model_dump(by_alias=True)


class StatusUpdate(BaseModel):
    """Body of the status-only transition"""

    status: TaskStatus
