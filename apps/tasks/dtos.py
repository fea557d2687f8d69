"""DTOs for Tasks app - task records and the response variants handlers return."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Task:
    """A single task held by the repository."""
    id: int
    title: str

    @property
    def dom_id(self) -> str:
        return f"task-{self.id}"


@dataclass(frozen=True)
class Page:
    """Full HTML page, always 200."""
    html: str
    status: int = 200


@dataclass(frozen=True)
class Fragment:
    """HTML fragment for an enhanced (HTMX) client."""
    html: str
    status: int = 200


@dataclass(frozen=True)
class Redirect:
    """Post/Redirect/Get answer for a plain client."""
    location: str
    status: int = 303
