"""
The to-do record stored by the repositories.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ToDo:
    """A single to-do item.

    ``id`` stays ``None`` until the repository assigns one on the first
    save; after that it never changes.  ``completed`` is only switched on
    through ``ToDoService.mark_complete``.
    """

    title: str
    description: Optional[str] = None
    completed: bool = False
    id: Optional[int] = None
