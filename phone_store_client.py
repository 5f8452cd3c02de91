"""Phone Store API client.

This module defines a simple client wrapper around the Phone Store
REST API.  The client uses the ``requests`` library internally to make
HTTP calls and exposes one method per operation:

* :meth:`list_phones` – return the full phone collection.
* :meth:`create_phone` – append a new phone record.
* :meth:`update_phone` – merge fields into an existing record.
* :meth:`delete_phone` – remove the records with a given ``id``.
* :meth:`upload_phones` – replace the whole collection with a JSON file.

Every method returns a ``(data, error)`` tuple and never raises for
HTTP or transport failures.  ``error`` is ``None`` on success or a
dictionary with keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class PhoneStoreClient:
    """Client for interacting with the Phone Store API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None,
        files: Dict[str, Any] | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/phones``).
            json_body: JSON body to send with the request.
            files: Multipart files to upload.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies) and ``error``
            is ``None``. On failure, ``data`` is ``None`` and ``error``
            describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                files=files,
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
                    message = err_json.get("detail") or err_json.get("error") or str(err_json)
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
    # Phone operations
    # ------------------------------------------------------------------
    def list_phones(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the full phone collection.

        Returns:
            A tuple ``(phones, error)``. ``phones`` is empty on failure.
        """
        data, error = self._request("GET", "/phones")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def create_phone(self, phone: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a phone record; the caller supplies its ``id``."""
        return self._request("POST", "/phones", json_body=phone)

    def update_phone(
        self, phone_id: str, changes: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Merge ``changes`` into the phone with the given ``id``."""
        return self._request("PUT", f"/phones/{phone_id}", json_body=changes)

    def delete_phone(self, phone_id: str) -> Tuple[bool, Optional[Error]]:
        """Delete the phones with the given ``id``.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/phones/{phone_id}")
        if error:
            return False, error
        return True, None

    def upload_phones(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Replace the whole collection with the JSON file at ``path``."""
        try:
            with open(path, "rb") as f:
                files = {"phones": (os.path.basename(path), f, "application/json")}
                data, error = self._request("POST", "/upload-phones", files=files)
        except OSError as exc:
            logger.error("Cannot open %s: %s", path, exc)
            return [], {"status_code": None, "message": str(exc)}
        if error:
            return [], error
        return data if isinstance(data, list) else [], None
