from mx_ids_lib.services.service_interface import BaseServiceInterface


class PingService(BaseServiceInterface):
    """
    Service wrapper for the health‑check ``/ping`` endpoint.

    Returns the JSON payload provided by the service, ``{"status": "ok"}``.
    """

    endpoint = "/ping"
    method = "GET"


class VersionService(BaseServiceInterface):
    """
    Service wrapper for the ``/version`` endpoint.
    """

    endpoint = "/version"
    method = "GET"
