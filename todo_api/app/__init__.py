"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The code is layered: ``api/v1/endpoints`` translates HTTP
to service calls, ``services`` enforces business rules, and
``repositories`` stores the records.  Versioning is handled by grouping
routers under the ``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401
