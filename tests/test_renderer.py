"""
Tests for view models and HTML rendering
"""

import html
import re
from task_manager_web.models.task import Task, TaskFormData
from task_manager_web.ui.renderer import (
    render_banner,
    render_confirm_delete,
    render_form,
    render_state,
    render_task_list,
)
from task_manager_web.ui.state import Banner, UIState
from task_manager_web.ui.view_models import (
    build_form_view,
    build_page_view,
    build_task_view,
    task_actions,
)

HOSTILE_TITLE = "<script>alert(\"x\")</script> & 'friends'"
HOSTILE_DESCRIPTION = "<img src=x onerror='boom'> \"quoted\" & more"


def _labels(status):
    return [action.label for action in task_actions(status)]


def _text_of(css_class, markup):
    match = re.search(rf'<[a-z0-9]+ class="{css_class}">(.*?)</', markup, re.S)
    return match.group(1).strip()


def test_actions_for_todo():
    assert _labels("TODO") == ["Edit", "Mark Complete", "Start", "Delete"]


def test_actions_for_in_progress():
    assert _labels("IN_PROGRESS") == ["Edit", "Mark Complete", "Delete"]


def test_actions_for_completed():
    assert _labels("COMPLETED") == ["Edit", "Delete"]


def test_action_targets():
    targets = {a.label: a.target_status for a in task_actions("TODO")}
    assert targets["Mark Complete"] == "COMPLETED"
    assert targets["Start"] == "IN_PROGRESS"


def test_title_and_description_are_escaped():
    """No raw metacharacters from task text reach the page"""
    state = UIState(tasks=[Task(id=1, title=HOSTILE_TITLE, description=HOSTILE_DESCRIPTION)])

    markup = render_task_list(build_page_view(state))

    title = _text_of("task-title", markup)
    description = _text_of("task-description", markup)
    for rendered in (title, description):
        assert not re.search(r"[<>\"']", rendered)
        assert not re.search(r"&(?![a-z]+;|#\d+;)", rendered)
    assert html.unescape(title) == HOSTILE_TITLE
    assert html.unescape(description) == HOSTILE_DESCRIPTION
    assert "<script>" not in markup


def test_status_label_and_dates(sample_tasks):
    state = UIState(tasks=[Task.model_validate(sample_tasks[1])])

    markup = render_task_list(build_page_view(state))

    assert "IN PROGRESS" in markup
    assert "03/02/2026, 14:45" in markup
    assert "16/01/2026, 11:00" in markup


def test_missing_description_not_rendered(sample_tasks):
    state = UIState(tasks=[Task.model_validate(sample_tasks[1])])

    markup = render_task_list(build_page_view(state))

    assert "task-description" not in markup


def test_empty_list_and_count():
    markup = render_task_list(build_page_view(UIState()))

    assert "No tasks found. Create your first task to get started." in markup
    assert "(0)" in markup


def test_count_matches_tasks(sample_tasks):
    state = UIState(tasks=[Task.model_validate(t) for t in sample_tasks])

    markup = render_task_list(build_page_view(state))

    assert "(2)" in markup
    assert markup.count('class="task-item"') == 2


def test_form_create_mode():
    form = build_form_view(UIState())

    assert form.heading == "Create New Task"
    assert form.submit_label == "Create Task"
    assert not form.cancel_visible
    assert not form.submit_disabled


def test_form_edit_mode():
    form = build_form_view(UIState(editing_task_id=4))

    assert form.heading == "Edit Task"
    assert form.submit_label == "Update Task"
    assert form.cancel_visible

    markup = render_form(form)
    assert 'name="editing_task_id" value="4"' in markup
    assert 'formaction="/tasks/cancel"' in markup


def test_form_while_saving():
    form = build_form_view(UIState(submitting=True))

    assert form.submit_label == "Saving..."
    assert form.submit_disabled
    assert "disabled" in render_form(form)


def test_form_values_are_escaped():
    state = UIState(form=TaskFormData(title='"><b>x</b>', due_date_time="2026-02-01T10:00"))

    markup = render_form(build_form_view(state))

    assert "<b>" not in markup
    assert 'value="2026-02-01T10:00"' in markup


def test_banner_lines_are_escaped():
    markup = render_banner(Banner.error("Validation failed:", "title: <must> not be blank"))

    assert 'class="error-message"' in markup
    assert "Validation failed:<br>title: &lt;must&gt; not be blank" in markup


def test_render_state_full_page(sample_tasks):
    state = UIState(
        tasks=[Task.model_validate(t) for t in sample_tasks],
        banner=Banner.success("Task created successfully!"),
    )

    page = render_state(state)

    assert page.startswith("<!DOCTYPE html>")
    assert "success-message" in page
    assert "Review case file" in page


def test_form_create_mode_posts_without_task_id():
    markup = render_form(build_form_view(UIState()))

    assert '<form id="task-form" method="post" action="/tasks">' in markup
    assert "editing_task_id" not in markup
    assert "cancel-btn" not in markup


def test_task_actions_are_links_and_forms(sample_tasks):
    page = build_page_view(UIState(tasks=[Task.model_validate(sample_tasks[0])]))

    markup = render_task_list(page)

    assert 'href="/tasks/1/edit"' in markup
    assert 'href="/tasks/1/delete"' in markup
    assert markup.count('action="/tasks/1/status"') == 2
    assert 'name="status" value="COMPLETED"' in markup
    assert 'name="status" value="IN_PROGRESS"' in markup


def test_confirm_delete_page_is_escaped():
    task = Task(id=7, title=HOSTILE_TITLE, status="TODO")

    markup = render_confirm_delete(build_task_view(task), "Are you sure you want to delete this task?")

    assert "<script>" not in markup
    assert "Are you sure you want to delete this task?" in markup
    assert 'action="/tasks/7/delete"' in markup
    assert 'name="confirmed" value="yes"' in markup
