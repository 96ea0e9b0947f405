"""
Thin wrapper around ``requests`` that adds logging,
retries and unified error handling.

The :class:`HttpRequester` class is used by :class:`~mx_ids_lib.client.MxIdsClient`
to talk to the mx-ids REST API.  It centralises:

* construction of absolute URLs from a base URL,
* automatic inclusion of a bearer token,
* a configurable retry policy via ``urllib3.Retry``,
* conversion of HTTP error codes into the library‑specific exception hierarchy
  (:class:`AuthenticationError`, :class:`RateLimitError`,
  :class:`ValidationError`, :class:`MxIdsError`).
"""

import logging
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from mx_ids_lib.exceptions import (
    AuthenticationError,
    RateLimitError,
    ValidationError,
    MxIdsError,
)


class HttpRequester:
    """
    Helper for making HTTP calls with built‑in retries and error translation.

    Parameters
    ----------
    base_url : str
        Base URL of the remote service (e.g. ``"http://localhost:8090"``).
        A trailing slash is stripped automatically.
    token : Optional[str]
        Bearer token used for ``Authorization`` header; if empty, no header is added.
    timeout : int, default ``10``
        Per‑request timeout in seconds.
    retries : int, default ``2``
        Number of retry attempts for transient failures.  The back‑off factor
        is ``0.5`` seconds.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module‑level logger is used.
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: int = 10,
        retries: int = 2,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()

        if token:
            self.session.headers.update({"Authorization": f"Bearer {token}"})

        self.logger = logger or logging.getLogger(__name__)

        # retry‑policy
        retry_strategy = Retry(
            total=retries,
            backoff_factor=0.5,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET", "POST"],
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

    def _full_url(self, path: str) -> str:
        """
        Join ``path`` (e.g. ``/api/validate/curp``) to the base URL; the
        leading slash is optional.
        """
        return f"{self.base_url}/{path.lstrip('/')}"

    @staticmethod
    def _handle_response(resp: requests.Response) -> requests.Response:
        """
        Translate HTTP error codes of the mx-ids API into library exceptions.

        Identifier validation failures are *not* errors here: the validation
        endpoints answer ``200`` with ``valid: false``.  Only the record
        endpoint (``/validate/employee``), oversized batches and malformed
        payloads answer ``400``.

        Raises
        ------
        AuthenticationError
            When the server returns ``401`` or ``403``.
        RateLimitError
            When the server returns ``429`` after the retries are exhausted.
        ValidationError
            When the server returns ``400``; the message carries the body,
            i.e. the ``error`` and ``details`` produced by ``mx_ids_api``.
        MxIdsError
            For any other client or server error (status code 4xx/5xx).
        """
        status = resp.status_code
        if status in (401, 403):
            raise AuthenticationError("Invalid or missing token")
        if status == 429:
            raise RateLimitError("Rate limit exceeded")
        if status == 400:
            raise ValidationError(f"HTTP 400: {resp.text}")
        if 400 <= status < 600:
            raise MxIdsError(f"HTTP {status}: {resp.text}")
        return resp

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = self._full_url(path)
        resp = getattr(self.session, method.lower())(
            url, timeout=self.timeout, **kwargs
        )
        self.logger.debug("%s %s -> %s", method, url, resp.status_code)
        return self._handle_response(resp)

    def get(self, path: str, **kwargs) -> requests.Response:
        """
        Issue a ``GET`` (``/ping``, ``/version``) and return the response.

        Error statuses are raised as described in :meth:`_handle_response`;
        a ``2xx`` response is returned as is, JSON decoding is left to the
        caller.
        """
        return self._request("GET", path, **kwargs)

    def post(
        self, path: str, json: Optional[Dict[str, Any]] = None, **kwargs
    ) -> requests.Response:
        """
        ``POST`` a JSON payload to a validation or anonymization endpoint.

        The payload itself is not logged since it carries personal
        identifiers; only the method, URL and status code are.  A ``400``
        becomes :class:`ValidationError`, authentication failures
        :class:`AuthenticationError`, throttling :class:`RateLimitError`
        and any other 4xx/5xx :class:`MxIdsError`.
        """
        return self._request("POST", path, json=json, **kwargs)
