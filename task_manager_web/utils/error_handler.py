"""
Error handling utilities
"""

from typing import Any, Dict, List, Optional
from task_manager_web.models.response import ErrorEnvelope


class TaskManagerError(Exception):
    """Base exception for task manager errors"""
    pass


class BackendError(TaskManagerError):
    """Backend call failed (non-2xx response or transport error)"""
    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        data: Any = None,
    ):
        self.message = message
        self.status_code = status_code
        self.data = data
        super().__init__(self.message)

    @property
    def backend_message(self) -> Optional[str]:
        """Message from the backend's JSON body, if it sent one"""
        if isinstance(self.data, dict) and self.data.get("message"):
            return str(self.data["message"])
        return None

    @property
    def validation_errors(self) -> Optional[Dict[str, Any]]:
        """Field map from the backend's JSON body, if it sent one"""
        if isinstance(self.data, dict) and isinstance(self.data.get("validationErrors"), dict):
            return self.data["validationErrors"]
        return None


class TaskActionError(TaskManagerError):
    """Generic failure of a UI action"""
    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(self.message)


class TaskValidationError(TaskActionError):
    """Backend rejected the task with field-level messages"""
    def __init__(self, validation_errors: Dict[str, str], message: str = ""):
        self.validation_errors = validation_errors
        super().__init__(message)

    def lines(self) -> List[str]:
        """One "field: message" line per rejected field"""
        return [f"{field}: {msg}" for field, msg in self.validation_errors.items()]


def build_error_envelope(
    label: str,
    error: BackendError,
    include_validation: bool = False,
) -> ErrorEnvelope:
    """
    Normalize a backend failure into the proxy error body

    Args:
        label: Fixed per-route error label
        error: Backend failure
        include_validation: Forward the backend's validationErrors map

    Returns:
        ErrorEnvelope for the response body
    """
    return ErrorEnvelope(
        error=label,
        message=error.backend_message or error.message,
        validation_errors=error.validation_errors if include_validation else None,
    )


def error_status_code(error: BackendError) -> int:
    """HTTP status for a failed proxy call: the backend's, else 500"""
    return error.status_code or 500


def error_from_envelope(body: Any, fallback_message: str = "") -> TaskActionError:
    """
    Turn a proxy error body into a UI error variant

    Args:
        body: Parsed JSON error body (may be anything, including None)
        fallback_message: Message when the body carries none

    Returns:
        TaskValidationError when the body has a validationErrors map,
        TaskActionError otherwise
    """
    if not isinstance(body, dict):
        return TaskActionError(fallback_message)

    message = body.get("message") or fallback_message
    validation_errors = body.get("validationErrors")
    if isinstance(validation_errors, dict) and validation_errors:
        return TaskValidationError(
            {str(field): str(msg) for field, msg in validation_errors.items()},
            message=str(message),
        )

    return TaskActionError(str(message))
