"""
HTML renderer for the task page

All markup is produced by Jinja2 templates with autoescaping on, so every
value taken from a task (title, description, status, dates) is escaped in
one place.
"""

from pathlib import Path
from jinja2 import Environment, FileSystemLoader, select_autoescape
from task_manager_web.ui.state import Banner, UIState
from task_manager_web.ui.view_models import FormView, PageView, TaskView, build_page_view

templates_dir = Path(__file__).parent / "templates"

environment = Environment(
    loader=FileSystemLoader(str(templates_dir)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_task_list(page: PageView) -> str:
    """Full redraw of the task list (count, empty state, every task)"""
    return environment.get_template("task_list.html").render(page=page)


def render_form(form: FormView) -> str:
    return environment.get_template("task_form.html").render(form=form)


def render_banner(banner: Banner) -> str:
    return environment.get_template("banner.html").render(banner=banner)


def render_page(page: PageView) -> str:
    return environment.get_template("index.html").render(page=page)


def render_state(state: UIState) -> str:
    """Render the whole page for the current UI state"""
    return render_page(build_page_view(state))


def render_confirm_delete(task: TaskView, question: str) -> str:
    """Confirmation page shown before a task is deleted"""
    return environment.get_template("confirm_delete.html").render(task=task, question=question)
