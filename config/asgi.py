"""
ASGI config for the task list project.

Works with any ASGI server (Daphne, Uvicorn). Sync views run in a thread
pool, so the in-memory task repository is shared across threads and guards
itself with a lock.
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

from django.core.asgi import get_asgi_application

# Initialize Django at import time (worker startup), not on first request.
application = get_asgi_application()
