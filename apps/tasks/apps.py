import logging

from django.apps import AppConfig, apps

from .repository import TaskRepository

logger = logging.getLogger(__name__)


class TasksConfig(AppConfig):
    """
    Owns the process-wide task repository.

    Views resolve the store through get_repository() instead of importing a
    module global, so tests can swap in an isolated TaskRepository.
    """
    name = "apps.tasks"
    label = "tasks"
    verbose_name = "Tasks"

    repository = None

    def ready(self):
        if self.repository is None:
            self.repository = TaskRepository()
        logger.info("Task repository initialised (in-memory, not persisted)")


def get_repository() -> TaskRepository:
    return apps.get_app_config("tasks").repository
