"""
Proxy server: relays /api/tasks calls to the task backend and serves the
task page, whose forms drive the UI controller
"""

from typing import Any, Awaitable, Callable, Optional
import httpx
from fastapi import Body, Depends, FastAPI, Form, Request, Response
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from task_manager_web.api.proxy_client import TaskProxyClient
from task_manager_web.api.task_backend_client import TaskBackendClient
from task_manager_web.models.response import ErrorEnvelope, HealthResponse
from task_manager_web.models.task import Task, TaskFormData, TaskStatus
from task_manager_web.ui.controller import TaskUIController
from task_manager_web.ui.renderer import render_confirm_delete
from task_manager_web.ui.state import UIState
from task_manager_web.ui.view_models import build_task_view
from task_manager_web.utils.date_utils import utc_now_iso
from task_manager_web.utils.error_handler import (
    BackendError,
    build_error_envelope,
    error_status_code,
)
from task_manager_web.utils.logger import logger
from task_manager_web.config.settings import settings
from task_manager_web.config.constants import (
    ERROR_CREATE_TASK,
    ERROR_DELETE_TASK,
    ERROR_FETCH_TASK,
    ERROR_FETCH_TASKS,
    ERROR_UPDATE_STATUS,
    ERROR_UPDATE_TASK,
    MSG_CONFIRM_DELETE,
    MSG_INVALID_BODY,
    MSG_STATUS_FAILED,
    MSG_TASK_NOT_FOUND,
)

app = FastAPI(title="Task Manager Web")


@app.on_event("startup")
async def startup():
    """Create the shared backend client and the in-process proxy client"""
    settings.validate()
    app.state.backend_client = TaskBackendClient()
    # Page routes reach /api/tasks through the app itself
    app.state.ui_http = httpx.AsyncClient(transport=httpx.ASGITransport(app=app))
    logger.info(f"Task Manager proxy listening on port {settings.PORT}")
    logger.info(f"API Base URL: {settings.API_BASE_URL}")


@app.on_event("shutdown")
async def shutdown():
    """Close the shared clients"""
    await app.state.ui_http.aclose()
    await app.state.backend_client.close()


def get_backend_client(request: Request) -> TaskBackendClient:
    return request.app.state.backend_client


def get_ui_controller(request: Request) -> TaskUIController:
    """Controller for one page request, talking to the proxy routes"""
    client = TaskProxyClient(settings.PROXY_BASE_URL, client=request.app.state.ui_http)
    return TaskUIController(client)


async def relay(
    call: Callable[[], Awaitable[Any]],
    label: str,
    success_status: int = 200,
    include_validation: bool = False,
) -> Response:
    """
    Run one backend call and shape the proxy response

    Args:
        call: Backend call to await
        label: Error label for this route
        success_status: Status code on success
        include_validation: Forward the backend's validationErrors on failure

    Returns:
        Backend body with success_status, or the error envelope with the
        backend's status (500 when there is none)
    """
    try:
        data = await call()
    except BackendError as e:
        logger.error(f"{label}: {e.message}")
        envelope = build_error_envelope(label, e, include_validation=include_validation)
        return JSONResponse(status_code=error_status_code(e), content=envelope.to_content())

    if success_status == 204:
        return Response(status_code=204)
    return JSONResponse(status_code=success_status, content=data)


# Proxy API

@app.get("/api/tasks")
async def list_tasks(backend: TaskBackendClient = Depends(get_backend_client)):
    return await relay(backend.list_tasks, ERROR_FETCH_TASKS)


@app.get("/api/tasks/{task_id}")
async def get_task(task_id: str, backend: TaskBackendClient = Depends(get_backend_client)):
    return await relay(lambda: backend.get_task(task_id), ERROR_FETCH_TASK)


@app.post("/api/tasks")
async def create_task(
    payload: Any = Body(None),
    backend: TaskBackendClient = Depends(get_backend_client),
):
    return await relay(
        lambda: backend.create_task(payload),
        ERROR_CREATE_TASK,
        success_status=201,
        include_validation=True,
    )


@app.put("/api/tasks/{task_id}")
async def update_task(
    task_id: str,
    payload: Any = Body(None),
    backend: TaskBackendClient = Depends(get_backend_client),
):
    return await relay(
        lambda: backend.update_task(task_id, payload),
        ERROR_UPDATE_TASK,
        include_validation=True,
    )


@app.patch("/api/tasks/{task_id}/status")
async def update_task_status(
    task_id: str,
    payload: Any = Body(None),
    backend: TaskBackendClient = Depends(get_backend_client),
):
    return await relay(lambda: backend.update_task_status(task_id, payload), ERROR_UPDATE_STATUS)


@app.delete("/api/tasks/{task_id}")
async def delete_task(task_id: str, backend: TaskBackendClient = Depends(get_backend_client)):
    return await relay(lambda: backend.delete_task(task_id), ERROR_DELETE_TASK, success_status=204)


API_ERROR_LABELS = {
    list_tasks: ERROR_FETCH_TASKS,
    get_task: ERROR_FETCH_TASK,
    create_task: ERROR_CREATE_TASK,
    update_task: ERROR_UPDATE_TASK,
    update_task_status: ERROR_UPDATE_STATUS,
    delete_task: ERROR_DELETE_TASK,
}


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Unreadable request bodies on /api/tasks get the route's error envelope"""
    label = API_ERROR_LABELS.get(request.scope.get("endpoint"))
    if label is None:
        return await request_validation_exception_handler(request, exc)

    errors = exc.errors()
    detail = errors[0].get("msg") if errors else None
    message = f"{MSG_INVALID_BODY}: {detail}" if detail else MSG_INVALID_BODY
    logger.warning(f"{label}: {message}")

    envelope = ErrorEnvelope(error=label, message=message)
    return JSONResponse(status_code=400, content=envelope.to_content())


# Task page

def find_task(state: UIState, task_id: str) -> Optional[Task]:
    return next((task for task in state.tasks if str(task.id) == task_id), None)


@app.get("/", response_class=HTMLResponse)
async def index(controller: TaskUIController = Depends(get_ui_controller)):
    """Main page: create form and the current task list"""
    state = UIState()
    await controller.load_tasks(state)
    return HTMLResponse(controller.render(state))


@app.post("/tasks", response_class=HTMLResponse)
async def submit_task_form(
    title: str = Form(""),
    description: str = Form(""),
    status: str = Form(TaskStatus.TODO.value),
    due_date_time: str = Form("", alias="dueDateTime"),
    editing_task_id: str = Form(""),
    controller: TaskUIController = Depends(get_ui_controller),
):
    """Create, or update when the form carries the id of the task being edited"""
    state = UIState(editing_task_id=editing_task_id or None)
    await controller.load_tasks(state)

    data = TaskFormData(
        title=title,
        description=description,
        status=status,
        due_date_time=due_date_time,
    )
    await controller.submit(state, data)
    return HTMLResponse(controller.render(state))


@app.post("/tasks/cancel", response_class=HTMLResponse)
async def cancel_task_form(controller: TaskUIController = Depends(get_ui_controller)):
    state = UIState()
    await controller.load_tasks(state)
    controller.cancel_edit(state)
    return HTMLResponse(controller.render(state))


@app.get("/tasks/{task_id}/edit", response_class=HTMLResponse)
async def edit_task_page(task_id: str, controller: TaskUIController = Depends(get_ui_controller)):
    """Page with the form filled from the task, in update mode"""
    state = UIState()
    if await controller.load_tasks(state):
        task = find_task(state, task_id)
        if task is None:
            controller.show_error(state, MSG_TASK_NOT_FOUND)
        else:
            controller.start_edit(state, task)
    return HTMLResponse(controller.render(state))


@app.post("/tasks/{task_id}/status", response_class=HTMLResponse)
async def change_task_status(
    task_id: str,
    status: str = Form(""),
    controller: TaskUIController = Depends(get_ui_controller),
):
    state = UIState()
    await controller.load_tasks(state)

    try:
        new_status = TaskStatus(status)
    except ValueError:
        logger.warning(f"Rejected status {status!r} for task {task_id}")
        controller.show_error(state, MSG_STATUS_FAILED)
        return HTMLResponse(controller.render(state))

    await controller.update_task_status(state, task_id, new_status)
    return HTMLResponse(controller.render(state))


@app.get("/tasks/{task_id}/delete", response_class=HTMLResponse)
async def confirm_delete_page(task_id: str, controller: TaskUIController = Depends(get_ui_controller)):
    """Ask before deleting; falls back to the main page if the task is gone"""
    state = UIState()
    if await controller.load_tasks(state):
        task = find_task(state, task_id)
        if task is not None:
            return HTMLResponse(render_confirm_delete(build_task_view(task), MSG_CONFIRM_DELETE))
        controller.show_error(state, MSG_TASK_NOT_FOUND)
    return HTMLResponse(controller.render(state))


@app.post("/tasks/{task_id}/delete", response_class=HTMLResponse)
async def delete_task_form(
    task_id: str,
    confirmed: str = Form(""),
    controller: TaskUIController = Depends(get_ui_controller),
):
    """Delete once the confirmation form was submitted"""
    controller.confirm = lambda message: confirmed == "yes"
    state = UIState()
    await controller.load_tasks(state)
    await controller.delete_task(state, task_id)
    return HTMLResponse(controller.render(state))


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    return HealthResponse(status="ok", timestamp=utc_now_iso())


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
