"""
API dependencies.

Routes obtain the ``ToDoService`` through ``get_todo_service`` instead of
importing a module-level instance; the service (and the repository it
wraps) is created by ``create_app`` and kept on ``app.state``.
"""

from fastapi import Request

from todo_api.app.services.todo_service import ToDoService


def get_todo_service(request: Request) -> ToDoService:
    """Return the service attached to the running application."""
    return request.app.state.todo_service
