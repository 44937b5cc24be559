"""
Application constants
"""

# Backend API
DEFAULT_API_BASE_URL = "http://localhost:8080/api/tasks"
DEFAULT_PROXY_BASE_URL = "http://localhost:3000"
DEFAULT_PORT = 3000

# Retry configuration
MAX_RETRIES = 1  # one attempt, no retry
RETRY_DELAY = 1  # seconds
REQUEST_TIMEOUT = 30  # seconds

# Proxy error labels (one per route)
ERROR_FETCH_TASKS = "Failed to fetch tasks"
ERROR_FETCH_TASK = "Failed to fetch task"
ERROR_CREATE_TASK = "Failed to create task"
ERROR_UPDATE_TASK = "Failed to update task"
ERROR_UPDATE_STATUS = "Failed to update task status"
ERROR_DELETE_TASK = "Failed to delete task"

# UI messages
MSG_LOAD_FAILED = "Failed to load tasks. Please ensure the backend server is running."
MSG_SAVE_FAILED = "Failed to save task. Please try again."
MSG_STATUS_FAILED = "Failed to update task status. Please try again."
MSG_DELETE_FAILED = "Failed to delete task. Please try again."
MSG_VALIDATION_FAILED = "Validation failed:"
MSG_TASK_CREATED = "Task created successfully!"
MSG_TASK_UPDATED = "Task updated successfully!"
MSG_STATUS_UPDATED = "Task status updated successfully!"
MSG_TASK_DELETED = "Task deleted successfully!"
MSG_CONFIRM_DELETE = "Are you sure you want to delete this task?"
MSG_EMPTY_LIST = "No tasks found. Create your first task to get started."
MSG_TASK_NOT_FOUND = "Task not found. It may have been deleted."
MSG_INVALID_BODY = "Invalid request body"

# UI labels
LABEL_SAVING = "Saving..."
LABEL_CREATE = "Create Task"
LABEL_UPDATE = "Update Task"
FORM_TITLE_CREATE = "Create New Task"
FORM_TITLE_EDIT = "Edit Task"

# Success banners disappear after this delay
SUCCESS_BANNER_DELAY = 3.0  # seconds

# Date formats
DISPLAY_DATETIME_FORMAT = "%d/%m/%Y, %H:%M"  # en-GB
INPUT_DATETIME_FORMAT = "%Y-%m-%dT%H:%M"

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
