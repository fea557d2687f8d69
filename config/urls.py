"""
URL configuration for the task list project.
"""
from django.urls import path
from django.views.generic import RedirectView
from ninja import NinjaAPI

api = NinjaAPI(
    title="Task List",
    version="1.0.0",
    description="Task list with HTMX progressive enhancement",
    docs_url=None,
    openapi_url=None,
)

from apps.tasks.api import router as tasks_router

api.add_router("/tasks", tasks_router)

urlpatterns = [
    path('', RedirectView.as_view(url='/tasks', permanent=False)),
    path('', api.urls),
]
