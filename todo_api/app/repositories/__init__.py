"""
Persistence layer.

``base`` declares the repository contract consumed by the services and
``memory`` provides the in‑process implementation used by default.
Another backend (for example a database) only needs to implement
``ToDoRepository`` to be plugged into ``create_app``.
"""

from .base import ToDoRepository
from .memory import InMemoryToDoStore

__all__ = ["ToDoRepository", "InMemoryToDoStore"]
