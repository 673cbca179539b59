"""Shared HTTP transport utilities for REST adapters.

This module provides a thin wrapper around ``requests.Session`` so adapter
implementations share timeout policy, retry behavior, and JSON header
construction.

Dependencies:
    - ``requests`` for network I/O.
    - ``postboard.adapters.api_errors`` for typed transport failures.

Call context:
    - Constructed by ``postboard/adapters/posts_rest.py``.
    - Used only inside adapter layer methods; use cases interact through ports.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import requests
from requests import exceptions as req_exc

from postboard.adapters.api_errors import ApiConnectionError, ApiEncodeError, ApiError, ApiTimeoutError

LOGGER = logging.getLogger(__name__)


@dataclass
class HttpConfig:
    """Timeout and retry configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Default timeout in seconds for JSON API calls.
        retries: Number of retry attempts after the initial request. Only
            timeout/connectivity failures are retried.
    """
    request_timeout_s: int = 10
    retries: int = 0


class RetryingSession:
    """Shared requests wrapper with JSON headers and retry loops.

    This class is intentionally transport-only. Callers provide endpoint URLs and
    decide how to map non-2xx responses into use-case errors.
    """

    def __init__(self, cfg: HttpConfig) -> None:
        """Create a retry-enabled session.

        Args:
            cfg: Shared timeout and retry settings.

        Side Effects:
            Creates a persistent ``requests.Session`` object.
        """
        self.session = requests.Session()
        self.cfg = cfg

    def _headers(self, json_body: bool = False) -> Dict[str, str]:
        """Build request headers for adapter calls.

        Args:
            json_body: Whether to add ``Content-Type: application/json``.

        Returns:
            Dictionary of request headers.
        """
        headers = {"Accept": "application/json"}
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    @staticmethod
    def _encode(json_body: Optional[Dict[str, Any]], context: str) -> Optional[str]:
        if json_body is None:
            return None
        try:
            return json.dumps(json_body)
        except (TypeError, ValueError) as exc:
            raise ApiEncodeError(f"Failed to encode request body: {exc}", context=context) from exc

    def _send(self, context: str, url: str, call: Callable[[], requests.Response]) -> requests.Response:
        """Run ``call`` with retries on timeout/connectivity failures.

        Raises:
            ApiTimeoutError: If the last attempt timed out.
            ApiConnectionError: If the last attempt could not connect.
            ApiError: For any other ``requests`` failure (not retried).
        """
        last_err: Optional[ApiError] = None
        attempts = max(0, self.cfg.retries) + 1
        for attempt in range(attempts):
            LOGGER.debug("%s (attempt %d/%d)", context, attempt + 1, attempts)
            try:
                return call()
            except req_exc.Timeout as exc:
                # ConnectTimeout is also a ConnectionError; report it as a timeout.
                last_err = ApiTimeoutError(f"Request to {url} timed out: {exc}", context=context)
            except req_exc.ConnectionError as exc:
                last_err = ApiConnectionError(f"Could not reach {url}: {exc}", context=context)
            except req_exc.RequestException as exc:
                raise ApiError(str(exc), context=context) from exc
        raise last_err

    def get(self, url: str, *, timeout: Optional[int] = None) -> requests.Response:
        """Send a GET request.

        Call Chain:
            Adapter methods -> ``RetryingSession.get`` -> ``requests.Session.get``.
        """
        return self._send(
            f"GET {url}",
            url,
            lambda: self.session.get(
                url,
                headers=self._headers(),
                timeout=timeout or self.cfg.request_timeout_s,
            ),
        )

    def post(
        self,
        url: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> requests.Response:
        """Send a JSON POST request.

        Raises:
            ApiEncodeError: If ``json_body`` cannot be serialized.

        Side Effects:
            Serializes ``json_body`` with ``json.dumps`` before sending.
        """
        context = f"POST {url}"
        data = self._encode(json_body, context)
        return self._send(
            context,
            url,
            lambda: self.session.post(
                url,
                data=data,
                headers=self._headers(json_body=json_body is not None),
                timeout=timeout or self.cfg.request_timeout_s,
            ),
        )

    def put(
        self,
        url: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        timeout: Optional[int] = None,
    ) -> requests.Response:
        """Send a JSON PUT request (same encoding rules as ``post``)."""
        context = f"PUT {url}"
        data = self._encode(json_body, context)
        return self._send(
            context,
            url,
            lambda: self.session.put(
                url,
                data=data,
                headers=self._headers(json_body=json_body is not None),
                timeout=timeout or self.cfg.request_timeout_s,
            ),
        )

    def delete(self, url: str, *, timeout: Optional[int] = None) -> requests.Response:
        """Send a DELETE request without a body."""
        return self._send(
            f"DELETE {url}",
            url,
            lambda: self.session.delete(
                url,
                headers=self._headers(),
                timeout=timeout or self.cfg.request_timeout_s,
            ),
        )


__all__ = ["HttpConfig", "RetryingSession"]
