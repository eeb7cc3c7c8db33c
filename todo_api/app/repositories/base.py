"""
Repository contract for to-do persistence.

The services depend only on this interface, so the in‑memory store can
be replaced by another backend without touching services or endpoints.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from todo_api.app.models.todo import ToDo


class ToDoRepository(ABC):
    """Abstract persistence operations for ``ToDo`` records."""

    @abstractmethod
    def save(self, todo: ToDo) -> ToDo:
        """Insert or overwrite a record.

        A record without an ``id`` is assigned the next identifier.
        Returns the stored record.
        """

    @abstractmethod
    def find_by_id(self, todo_id: int) -> Optional[ToDo]:
        """Return the record with ``todo_id`` or ``None``."""

    @abstractmethod
    def find_all(self) -> List[ToDo]:
        """Return all records."""

    @abstractmethod
    def delete_by_id(self, todo_id: int) -> None:
        """Remove the record if present; do nothing otherwise."""

    @abstractmethod
    def exists(self, todo_id: int) -> bool:
        """Return whether a record with ``todo_id`` is stored."""
