"""
Pydantic schemas for to-do items.

``ToDoCreate`` and ``ToDoUpdate`` describe request bodies and
``ToDoRead`` the response body.  ``ToDoUpdate`` is a patch: every field
is optional and only non-null values are applied.  Fields a client may
not set (``id``, ``completed``) are absent from the request schemas and
ignored if sent.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ToDoCreate(BaseModel):
    """Schema for creating a new to-do item.

    ``title`` is optional at the schema level so that a missing or blank
    title is rejected by the service with a 400 rather than by request
    validation.
    """

    title: Optional[str] = Field(None, description="Title of the to-do item; must not be blank")
    description: Optional[str] = Field(None, description="Free-form description")


class ToDoUpdate(BaseModel):
    """Schema for updating an existing to-do item.

    All fields are optional; only provided non-null values are applied.
    """

    title: Optional[str] = None
    description: Optional[str] = None


class ToDoRead(BaseModel):
    """Schema for reading a to-do item."""

    id: int
    title: str
    description: Optional[str] = None
    completed: bool = False

    model_config = {
        "from_attributes": True,
    }
