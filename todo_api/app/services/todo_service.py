"""
Service for managing to-do items.

The service enforces the rules the repository does not know about: a
to-do must have a non-blank title, and every operation on an existing
item first checks that the item exists.  Failures are raised as
``ValidationError`` or ``NotFoundError`` before anything is written, so
an operation either fully succeeds or leaves the repository untouched.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional

from todo_api.app.core.exceptions import NotFoundError, ValidationError
from todo_api.app.models.todo import ToDo
from todo_api.app.repositories.base import ToDoRepository
from todo_api.app.schemas.todo import ToDoCreate, ToDoUpdate


logger = logging.getLogger(__name__)


class ToDoService:
    """Business operations on to-do items backed by a ``ToDoRepository``."""

    def __init__(self, repository: ToDoRepository) -> None:
        self.repository = repository

    @staticmethod
    def _require_title(title: Optional[str]) -> None:
        if title is None or not title.strip():
            logger.warning("Rejected to-do with blank title")
            raise ValidationError("ToDo title cannot be empty")

    # ------------------------------------------------------------------
    # Creation and lookup
    # ------------------------------------------------------------------
    def create(self, data: ToDoCreate) -> ToDo:
        """Validate and store a new to-do item.

        The identifier is always assigned by the repository and the item
        starts out not completed.

        Raises
        ------
        ValidationError
            If the title is missing or blank after trimming whitespace.
        """
        self._require_title(data.title)
        todo = self.repository.save(ToDo(title=data.title, description=data.description))
        logger.info("Created ToDo %s", todo.id)
        return todo

    def get(self, todo_id: int) -> ToDo:
        """Return the to-do with ``todo_id``.

        Raises
        ------
        NotFoundError
            If no such item exists.
        """
        todo = self.repository.find_by_id(todo_id)
        if todo is None:
            logger.warning("ToDo %s not found", todo_id)
            raise NotFoundError(todo_id)
        return todo

    def list(self) -> List[ToDo]:
        """Return all to-do items."""
        return self.repository.find_all()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def update(self, todo_id: int, patch: ToDoUpdate) -> ToDo:
        """Apply a partial update to an existing to-do.

        Only non-null fields of ``patch`` overwrite the stored values, as
        sent; the ``completed`` flag is never changed here.
        """
        existing = self.get(todo_id)
        changes = {}
        if patch.title is not None:
            changes["title"] = patch.title
        if patch.description is not None:
            changes["description"] = patch.description
        todo = self.repository.save(replace(existing, **changes))
        logger.info("Updated ToDo %s (%s)", todo_id, ", ".join(changes) or "no changes")
        return todo

    def delete(self, todo_id: int) -> None:
        """Delete the to-do with ``todo_id``.

        Raises
        ------
        NotFoundError
            If no such item exists.
        """
        if not self.repository.exists(todo_id):
            logger.warning("ToDo %s not found", todo_id)
            raise NotFoundError(todo_id)
        self.repository.delete_by_id(todo_id)
        logger.info("Deleted ToDo %s", todo_id)

    def mark_complete(self, todo_id: int) -> ToDo:
        """Mark the to-do as completed.  Calling it again is a no-op."""
        existing = self.get(todo_id)
        todo = self.repository.save(replace(existing, completed=True))
        logger.info("Marked ToDo %s as complete", todo_id)
        return todo
