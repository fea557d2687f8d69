"""
Task routes with HTMX progressive enhancement.

Every mutating route answers in two modes:
- Plain clients (no JavaScript): Post/Redirect/Get with 303 See Other
- Enhanced clients (HX-Request: true): HTML fragments, including an
  out-of-band #status update

The routes only translate HTTP into handler calls; the handlers in
services.py decide what to answer and respond() turns that into a
Django HttpResponse.
"""
from typing import Union

from django.http import HttpRequest, HttpResponse, HttpResponseRedirect
from django.utils.cache import patch_vary_headers
from ninja import Form, Router

from .apps import get_repository
from .dtos import Fragment, Page, Redirect
from .schemas import TaskForm
from .services import HTMX_HEADER, create_task, delete_task, is_enhanced_client, list_tasks

router = Router(tags=["Tasks"])

HTML_CONTENT_TYPE = "text/html; charset=utf-8"


def respond(result: Union[Page, Fragment, Redirect]) -> HttpResponse:
    """Convert a handler result into an HttpResponse."""
    if isinstance(result, Redirect):
        response = HttpResponseRedirect(result.location, status=result.status)
    elif isinstance(result, (Page, Fragment)):
        response = HttpResponse(result.html, content_type=HTML_CONTENT_TYPE, status=result.status)
    else:
        raise TypeError(f"Unsupported handler result: {result!r}")

    # Same URL, different body per client mode.
    patch_vary_headers(response, (HTMX_HEADER,))
    return response


@router.get("", auth=None)
def list_tasks_api(request: HttpRequest):
    """
    List all tasks as a full page.
    Plain and enhanced clients get the same page.
    """
    return respond(list_tasks(get_repository()))


@router.post("", auth=None)
def create_task_api(request: HttpRequest, payload: Form[TaskForm]):
    """
    Add a new task.

    - Enhanced: 201 with the new <li> and a status fragment, or 400 with an
      alert fragment when the title is blank
    - Plain: 303 back to /tasks either way
    """
    result = create_task(
        get_repository(),
        payload.title,
        enhanced=is_enhanced_client(request),
    )
    return respond(result)


@router.post("/{task_id}/delete", auth=None)
def delete_task_api(request: HttpRequest, task_id: str):
    """
    Delete a task.

    - Enhanced: 200 with only the out-of-band status, so the targeted <li>
      is swapped out for nothing
    - Plain: 303 back to /tasks
    Non-numeric ids behave like unknown ids.
    """
    result = delete_task(
        get_repository(),
        task_id,
        enhanced=is_enhanced_client(request),
    )
    return respond(result)
