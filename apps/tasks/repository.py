"""
In-memory task repository.

Holds every task for the lifetime of the process. Ids are handed out from a
monotonically increasing counter and are never reused, even after delete.
All access goes through a single lock so the threaded dev server and
WSGI/ASGI workers sharing one process cannot interleave writes.
"""
import logging
import threading
from typing import Dict, List, Optional

from .dtos import Task

logger = logging.getLogger(__name__)


class TaskRepository:
    """
    Process-local task store.

    The repository performs no validation; callers make sure titles are
    non-blank before calling add().
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._tasks: Dict[int, Task] = {}
        self._last_id = 0

    def all(self) -> List[Task]:
        """Return a snapshot of every task in insertion order."""
        with self._lock:
            return list(self._tasks.values())

    def get(self, task_id: int) -> Optional[Task]:
        with self._lock:
            return self._tasks.get(task_id)

    def add(self, title: str) -> Task:
        """Store a new task under the next free id and return it."""
        with self._lock:
            self._last_id += 1
            task = Task(id=self._last_id, title=title)
            self._tasks[task.id] = task
        logger.debug(f"Stored task {task.id}")
        return task

    def delete(self, task_id: int) -> bool:
        """
        Remove a task.

        Returns False when no task has that id; a missing id is an
        ordinary outcome, not an error.
        """
        with self._lock:
            return self._tasks.pop(task_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)
