"""
Services for Tasks app.

Each handler takes the repository and renderer it works against and
returns a response variant (Page, Fragment or Redirect). Nothing here
touches Django's request/response objects beyond reading headers in
is_enhanced_client(), which keeps the handlers testable without a server.
"""
import logging
import re
from typing import Callable, Optional, Union

from django.http import HttpRequest

from .dtos import Fragment, Page, Redirect
from .rendering import Renderer, render as default_render
from .repository import TaskRepository

logger = logging.getLogger(__name__)

TASKS_URL = "/tasks"
PAGE_TITLE = "Tasks"

HTMX_HEADER = "HX-Request"

TITLE_REQUIRED_MESSAGE = "Title is required. Please enter at least one character."
TASK_DELETED_MESSAGE = "Task deleted."
TASK_NOT_DELETED_MESSAGE = "Could not delete task."


def is_enhanced_client(request: HttpRequest) -> bool:
    """True only when the HX-Request header is present and equals "true" (any case)."""
    value = request.headers.get(HTMX_HEADER)
    return value is not None and value.lower() == "true"


def _respond_by_mode(enhanced: bool, build_fragment: Callable[[], Fragment]) -> Union[Fragment, Redirect]:
    """
    Pick the answer for the client mode.

    Enhanced clients get the fragment; plain clients always get a
    Post/Redirect/Get redirect back to the list. The fragment is only
    rendered when it is going to be sent.
    """
    if enhanced:
        return build_fragment()
    return Redirect(location=TASKS_URL)


def _status(render: Renderer, message: str, *, alert: bool = False) -> str:
    return render("tasks/_status.html", {"message": message, "alert": alert})


def list_tasks(repository: TaskRepository, *, render: Renderer = default_render) -> Page:
    """Render the full task page. Both client modes get the same page."""
    model = {
        "title": PAGE_TITLE,
        "tasks": repository.all(),
    }
    return Page(html=render("tasks/index.html", model))


def create_task(
    repository: TaskRepository,
    title: Optional[str],
    *,
    enhanced: bool,
    render: Renderer = default_render,
) -> Union[Fragment, Redirect]:
    """
    Validate and store a new task.

    Blank titles (after trimming) never reach the repository. Enhanced
    clients get a 400 alert fragment; plain clients are redirected with no
    error detail.
    """
    title = (title or "").strip()

    if not title:
        logger.warning("Rejected task with blank title")
        return _respond_by_mode(
            enhanced,
            lambda: Fragment(html=_status(render, TITLE_REQUIRED_MESSAGE, alert=True), status=400),
        )

    task = repository.add(title)
    logger.info(f"Created task {task.id}")

    def created_fragment() -> Fragment:
        item = render("tasks/_task_item.html", {"task": task})
        status = render("tasks/_status.html", {"task": task})
        return Fragment(html=item + status, status=201)

    return _respond_by_mode(enhanced, created_fragment)


TASK_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_task_id(raw_id) -> Optional[int]:
    """
    Parse a path id.

    Only plain ASCII digits with an optional sign count. Whitespace,
    underscores and non-ASCII digits, which int() would accept, yield None.
    """
    if raw_id is None:
        return None
    raw_id = str(raw_id)
    if not TASK_ID_PATTERN.fullmatch(raw_id):
        return None
    return int(raw_id)


def delete_task(
    repository: TaskRepository,
    raw_id,
    *,
    enhanced: bool,
    render: Renderer = default_render,
) -> Union[Fragment, Redirect]:
    """
    Delete a task by its path id.

    An unparseable id and an unknown id are the same outcome: nothing is
    removed and only the status message changes.
    """
    task_id = parse_task_id(raw_id)
    removed = task_id is not None and repository.delete(task_id)
    logger.info(f"Delete task {raw_id!r}: removed={removed}")

    message = TASK_DELETED_MESSAGE if removed else TASK_NOT_DELETED_MESSAGE
    return _respond_by_mode(enhanced, lambda: Fragment(html=_status(render, message)))
