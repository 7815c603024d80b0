"""Work Tracker API client.

This module defines a small client wrapper around the Work Tracker
REST API.  The client uses the ``requests`` library internally and is
meant for scripts and other services that need to register clients or
update service records without a browser.

The client exposes high‑level methods:

* :meth:`health_check` – ping the server.
* :meth:`list_clients`, :meth:`create_client`, :meth:`delete_client`.
* :meth:`list_services` – the dashboard list, with optional filters.
* :meth:`create_service`, :meth:`update_service`, :meth:`delete_service`.
* :meth:`get_statistics` – dashboard counters.

No method raises on HTTP or network errors.  Every method returns a
tuple ``(data, error)``; on failure ``data`` is empty and ``error`` is
a dictionary with ``status_code`` and ``message``.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header, for deployments that sit
behind an authenticating proxy.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class WorkTrackerAPI:
    """Client for interacting with the Work Tracker API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3001``.
                The ``/api`` prefix is added by the client.
            api_key: Optional API key sent as ``Bearer <api_key>``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to ``/api`` (e.g. ``/v1/services/``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies) and ``error``
            is ``None``.
        """
        url = f"{self.base_url}/api{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
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
                    detail = err_json.get("detail") or err_json.get("message") or err_json
                    message = detail if isinstance(detail, str) else str(detail)
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
    # Health
    # ------------------------------------------------------------------
    def health_check(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/health")

    # ------------------------------------------------------------------
    # Client operations
    # ------------------------------------------------------------------
    def list_clients(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/v1/clients/")
        if error:
            return [], error
        return data or [], None

    def create_client(
        self,
        name: str,
        services: Optional[List[Dict[str, Any]]] = None,
        client_id: Optional[str] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Register a client, optionally with its services.

        Args:
            name: Client name.
            services: Service entries with ``service_name``,
                ``work_name``, ``submission_date`` and optional
                ``priority``.
            client_id: Optional id; re‑posting the same id returns the
                existing client.
        Returns:
            A tuple ``(client, error)``.
        """
        payload: Dict[str, Any] = {"name": name, "services": services or []}
        if client_id:
            payload["id"] = client_id
        return self._request("POST", "/v1/clients/", json_body=payload)

    def delete_client(self, client_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/v1/clients/{client_id}")
        if error:
            return False, error
        return True, None

    # ------------------------------------------------------------------
    # Service record operations
    # ------------------------------------------------------------------
    def list_services(self, **filters: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve service records in display order.

        Keyword arguments ``priority``, ``status``, ``client_id`` and
        ``client_name`` are passed as filters; ``None`` values are
        dropped.
        """
        params = {key: value for key, value in filters.items() if value is not None}
        data, error = self._request("GET", "/v1/services/", params=params or None)
        if error:
            return [], error
        return data or [], None

    def create_service(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/v1/services/", json_body=payload)

    def update_service(
        self, service_id: int, updates: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Partially update a service record.

        The server re‑applies the priority forcing rule, so the returned
        ``priority`` may differ from the one sent.
        """
        return self._request("PUT", f"/v1/services/{service_id}", json_body=updates)

    def delete_service(self, service_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/v1/services/{service_id}")
        if error:
            return False, error
        return True, None

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------
    def get_statistics(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/v1/statistics/")
