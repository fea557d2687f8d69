"""
Template rendering for the Tasks app.

Handlers depend only on the `Renderer` call shape, so tests can swap in a
recording stub. The default implementation goes through Django's template
loader with autoescaping on, which keeps user-supplied titles escaped in
both full pages and fragments.
"""
from typing import Any, Callable, Mapping

from django.conf import settings
from django.template.loader import render_to_string

Renderer = Callable[[str, Mapping[str, Any]], str]


def render(template_name: str, model: Mapping[str, Any]) -> str:
    """Render `template_name` with `model` and return the HTML string."""
    context = {"htmx_script_url": settings.HTMX_SCRIPT_URL}
    context.update(model)
    return render_to_string(template_name, context)
