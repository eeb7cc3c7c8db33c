"""
To-do endpoints for API v1.

These routes expose create, read, update, delete and mark-complete
operations for to-do items.  Handlers only deal with HTTP concerns:
business rules live in ``ToDoService``, whose ``ValidationError`` and
``NotFoundError`` are translated into 400 and 404 responses here.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from todo_api.app.api.dependencies import get_todo_service
from todo_api.app.core.exceptions import NotFoundError, ValidationError
from todo_api.app.schemas.todo import ToDoCreate, ToDoRead, ToDoUpdate
from todo_api.app.services.todo_service import ToDoService


router = APIRouter()


@router.post("/todos", response_model=ToDoRead, status_code=status.HTTP_201_CREATED)
async def create_todo(
    todo_in: ToDoCreate,
    service: ToDoService = Depends(get_todo_service),
) -> ToDoRead:
    """Create a new to-do item.

    The identifier is assigned by the server.  Returns HTTP 400 if the
    title is missing or blank.
    """
    try:
        todo = service.create(todo_in)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return ToDoRead.model_validate(todo)


@router.get("/todos/{todo_id}", response_model=ToDoRead)
async def get_todo(
    todo_id: int,
    service: ToDoService = Depends(get_todo_service),
) -> ToDoRead:
    """Retrieve a single to-do item by its ID.  Raises 404 if absent."""
    try:
        todo = service.get(todo_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return ToDoRead.model_validate(todo)


@router.get("/todos", response_model=List[ToDoRead])
async def list_todos(service: ToDoService = Depends(get_todo_service)) -> List[ToDoRead]:
    """Return all to-do items."""
    return [ToDoRead.model_validate(todo) for todo in service.list()]


@router.put("/todos/{todo_id}", response_model=ToDoRead)
async def update_todo(
    todo_id: int,
    updates: ToDoUpdate,
    service: ToDoService = Depends(get_todo_service),
) -> ToDoRead:
    """Update an existing to-do item.

    Partial updates are supported; fields that are omitted or null keep
    their current value.  The ``completed`` flag cannot be changed here.
    """
    try:
        todo = service.update(todo_id, updates)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return ToDoRead.model_validate(todo)


@router.delete("/todos/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(
    todo_id: int,
    service: ToDoService = Depends(get_todo_service),
) -> Response:
    """Delete a to-do item.  Responds with 204 and an empty body."""
    try:
        service.delete(todo_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/todos/{todo_id}/complete", response_model=ToDoRead)
async def complete_todo(
    todo_id: int,
    service: ToDoService = Depends(get_todo_service),
) -> ToDoRead:
    """Mark a to-do item as completed.  Repeated calls are harmless."""
    try:
        todo = service.mark_complete(todo_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return ToDoRead.model_validate(todo)
