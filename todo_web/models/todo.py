from typing import List

from pydantic import BaseModel, ConfigDict


class Todo(BaseModel):
    """A single to-do record as sent by the upstream service."""

    model_config = ConfigDict(frozen=True, strict=True)

    id: int
    userId: int
    title: str
    completed: bool


def completed_filter(status: str) -> bool:
    # Only the literal "completed" selects finished items; anything else means incomplete.
    return status == "completed"


def filter_by_status(todos: List[Todo], status: str) -> List[Todo]:
    completed = completed_filter(status)
    return [todo for todo in todos if todo.completed == completed]
