"""
Top‑level router for version 1 of the API.

This router aggregates resource routers under a unified prefix.  When
new resources are introduced, update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import todos

router = APIRouter()

# The todos router defines its own "/todos" paths internally, so no
# prefix is given here.
router.include_router(todos.router, tags=["todos"])
