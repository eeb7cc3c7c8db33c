"""
In‑memory implementation of ``ToDoRepository``.

Records live in a dictionary keyed by id for the lifetime of the
process.  A single lock guards both the dictionary and the id sequence,
so concurrent request handlers never observe a half-applied write and
never receive the same id for two new records.  The store hands out
copies: a caller must go through ``save`` to change stored state.
"""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import Dict, List, Optional

from todo_api.app.models.todo import ToDo
from todo_api.app.repositories.base import ToDoRepository


class InMemoryToDoStore(ToDoRepository):
    """Thread-safe dictionary store with a monotonically increasing id."""

    def __init__(self) -> None:
        self._items: Dict[int, ToDo] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def save(self, todo: ToDo) -> ToDo:
        """Save a record, assigning a new id if it has none."""
        with self._lock:
            if todo.id is None:
                stored = replace(todo, id=self._next_id)
                self._next_id += 1
            else:
                stored = replace(todo)
                # Keep the sequence ahead of explicitly chosen ids.
                self._next_id = max(self._next_id, stored.id + 1)
            self._items[stored.id] = stored
            return replace(stored)

    def find_by_id(self, todo_id: int) -> Optional[ToDo]:
        with self._lock:
            todo = self._items.get(todo_id)
            return replace(todo) if todo is not None else None

    def find_all(self) -> List[ToDo]:
        with self._lock:
            return [replace(todo) for todo in self._items.values()]

    def delete_by_id(self, todo_id: int) -> None:
        with self._lock:
            self._items.pop(todo_id, None)

    def exists(self, todo_id: int) -> bool:
        with self._lock:
            return todo_id in self._items

    # ------------------------------------------------------------------
    # Maintenance helpers
    # ------------------------------------------------------------------
    def count(self) -> int:
        """Return the number of stored records."""
        with self._lock:
            return len(self._items)

    def clear(self) -> None:
        """Drop every record and restart the id sequence at 1."""
        with self._lock:
            self._items.clear()
            self._next_id = 1
