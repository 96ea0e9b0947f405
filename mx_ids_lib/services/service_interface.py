import abc
from typing import Dict, Any, Optional, Type

from mx_ids_lib.utils.http import HttpRequester
from mx_ids_lib.exceptions import MxIdsError

# Endpoint prefix used by the server unless MX_IDS_EP_PREFIX overrides it
DEFAULT_API_PREFIX = "/api"


class BaseServiceInterface(abc.ABC):
    """
    Abstract base class for REST endpoint wrappers.

    Sub‑classes set the ``endpoint`` attribute (the relative URL to which the
    request is sent), the HTTP ``method`` and, for ``POST`` endpoints, the
    ``model_cls`` attribute (the Pydantic model used to validate the request
    payload).  ``call`` performs the request and returns the decoded JSON,
    raising :class:`MxIdsError` when the body cannot be decoded.
    """

    # URL of the endpoint, relative to the API prefix
    endpoint: str = ""

    method: str = "POST"

    # Pydantic model class used to validate the request payload.
    model_cls: Optional[Type[Any]] = None

    def __init__(self, http: HttpRequester, logger, prefix: str = DEFAULT_API_PREFIX):
        self.http = http
        self.logger = logger
        self.path = f"{prefix.rstrip('/')}{self.endpoint}"

    def call(self, raw_payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Send the request to the configured endpoint and return the JSON body.

        Parameters
        ----------
        raw_payload : Optional[Dict[str, Any]]
            Request body for ``POST`` endpoints.  When ``model_cls`` is set,
            the payload is validated against it before sending.

        Returns
        -------
        dict
            The parsed JSON response from the service.

        Raises
        ------
        MxIdsError
            If the response body cannot be decoded as JSON.
        """
        if self.method == "GET":
            resp = self.http.get(self.path)
        else:
            if self.model_cls is not None:
                raw_payload = self.model_cls(**(raw_payload or {})).model_dump()
            resp = self.http.post(self.path, json=raw_payload)

        try:
            j = resp.json()
        except ValueError as exc:
            raise MxIdsError(f"Invalid response format: {exc}")
        return j
