"""
API Schemas for Tasks app.
Ninja schemas for form-encoded request bodies.
"""
from ninja import Schema


class TaskForm(Schema):
    """Create-task form. A missing field arrives as an empty title."""
    title: str = ""
