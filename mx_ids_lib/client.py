import logging
from typing import Optional, Dict, Any, List, Type

from mx_ids_lib.utils.http import HttpRequester
from mx_ids_lib.exceptions import NoArgsAndNoPayloadError
from mx_ids_lib.services.health import PingService, VersionService
from mx_ids_lib.services.service_interface import (
    DEFAULT_API_PREFIX,
    BaseServiceInterface,
)
from mx_ids_lib.services.validation import (
    AnonymizeTextService,
    ValidateBatchService,
    ValidateCurpService,
    ValidateEmployeeService,
    ValidateRfcService,
)


class MxIdsClient:
    """
    Client for the mx-ids REST API (``mx_ids_api``).

    Invalid identifiers are reported in the response body (``valid: false``),
    not as exceptions; exceptions are raised for transport and HTTP errors.

    ``prefix`` must match the server's ``MX_IDS_EP_PREFIX`` (``/api`` by
    default).
    """

    def __init__(
        self,
        api: str,
        token: Optional[str] = None,
        timeout: int = 10,
        retries: int = 2,
        logger: Optional[logging.Logger] = None,
        prefix: str = DEFAULT_API_PREFIX,
    ) -> None:
        self.base_url = api.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.retries = retries
        self.prefix = prefix
        self.logger = logger or logging.getLogger(__name__)
        self.http = HttpRequester(
            base_url=self.base_url,
            token=self.token,
            timeout=self.timeout,
            retries=self.retries,
            logger=self.logger,
        )

    def _service(self, service_cls: Type[BaseServiceInterface]) -> BaseServiceInterface:
        return service_cls(self.http, self.logger, prefix=self.prefix)

    # ------------------------------------------------------------------ #
    def ping(self) -> Dict[str, Any]:
        return self._service(PingService).call()

    def version(self) -> Dict[str, Any]:
        return self._service(VersionService).call()

    # ------------------------------------------------------------------ #
    def validate_curp(self, value: str) -> Dict[str, Any]:
        return self._service(ValidateCurpService).call({"value": value})

    def validate_rfc(self, value: str) -> Dict[str, Any]:
        return self._service(ValidateRfcService).call({"value": value})

    def validate_batch(
        self,
        curp: Optional[List[str]] = None,
        rfc: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        if not curp and not rfc:
            raise NoArgsAndNoPayloadError("No CURP and no RFC were passed!")
        return self._service(ValidateBatchService).call(
            {"curp": curp or [], "rfc": rfc or []}
        )

    def validate_employee(self, rfc: str, curp: Optional[str] = None) -> Dict[str, Any]:
        return self._service(ValidateEmployeeService).call({"rfc": rfc, "curp": curp})

    # ------------------------------------------------------------------ #
    def anonymize_text(self, text: str) -> Dict[str, Any]:
        return self._service(AnonymizeTextService).call({"text": text})
