"""
Domain exceptions raised by the service layer.

The API layer translates these into HTTP responses: ``ValidationError``
becomes 400 and ``NotFoundError`` becomes 404.
"""

from typing import Optional


class ToDoError(Exception):
    """Base class for errors raised by the to-do services."""


class ValidationError(ToDoError):
    """Raised when input violates a business rule (e.g. blank title)."""


class NotFoundError(ToDoError):
    """Raised when no to-do item exists with the requested id."""

    def __init__(self, todo_id: int, message: Optional[str] = None) -> None:
        self.todo_id = todo_id
        super().__init__(message or f"ToDo not found with id: {todo_id}")
