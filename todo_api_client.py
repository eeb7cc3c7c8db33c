"""ToDo API client.

This module defines a small client wrapper around the ToDo REST API.  It
uses the ``requests`` library internally and exposes one method per
endpoint:

* :meth:`ToDoAPI.list_todos` – return all to-do items.
* :meth:`ToDoAPI.get_todo` – fetch a single item by its identifier.
* :meth:`ToDoAPI.create_todo` – create an item.
* :meth:`ToDoAPI.update_todo` – partially update an item.
* :meth:`ToDoAPI.delete_todo` – delete an item.
* :meth:`ToDoAPI.complete_todo` – mark an item as completed.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is empty and ``error`` is a dictionary with
the keys ``status_code`` and ``message``.

The client supports optional authentication via an API key which will be
sent in the ``Authorization`` header, for deployments that put the
service behind an authenticating proxy.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)


class ToDoAPI:
    """Client for interacting with the ToDo API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/v1",
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            prefix: Path prefix of the versioned API.
            api_key: Optional API key.  If set, an ``Authorization`` header
                with the value ``Bearer <api_key>`` is included in all
                requests.
            session: Optional requests session.  If not supplied a session
                will be created automatically.
            timeout: Request timeout in seconds.
        """
        self.base_url = f"{base_url.rstrip('/')}/{prefix.strip('/')}".rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, etc.).
            path: Path relative to the API prefix (e.g. ``/todos``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies) and ``error``
            is ``None``.  On failure, ``data`` is ``None`` and ``error``
            describes the issue.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # To-do operations
    # ------------------------------------------------------------------
    def list_todos(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all to-do items."""
        data, error = self._request("GET", "/todos")
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    def get_todo(self, todo_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve a single to-do item by ID."""
        return self._request("GET", f"/todos/{todo_id}")

    def create_todo(
        self, title: str, description: Optional[str] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create a to-do item and return it with its assigned ID."""
        return self._request("POST", "/todos", json_body={"title": title, "description": description})

    def update_todo(
        self,
        todo_id: int,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Update the title and/or description of a to-do item.

        Arguments left as ``None`` are not sent, so the server keeps the
        current values.
        """
        payload = {k: v for k, v in {"title": title, "description": description}.items() if v is not None}
        return self._request("PUT", f"/todos/{todo_id}", json_body=payload)

    def delete_todo(self, todo_id: int) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Delete a to-do item.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/todos/{todo_id}")
        if error:
            return False, error
        return True, None

    def complete_todo(self, todo_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Mark a to-do item as completed."""
        return self._request("PATCH", f"/todos/{todo_id}/complete")
