"""
Service wrappers for the validation and anonymization endpoints.

Every wrapper posts a payload validated by its ``model_cls``; the responses
are returned as plain dictionaries (``ValidationResult.model_dump`` shape for
the single-identifier endpoints).
"""

from mx_ids_lib.services.service_interface import BaseServiceInterface
from mx_ids_lib.data_models.identifiers import (
    AnonymizeTextModel,
    BatchIdentifiersModel,
    IdentifierModel,
)


class ValidateCurpService(BaseServiceInterface):
    endpoint = "/validate/curp"
    model_cls = IdentifierModel


class ValidateRfcService(BaseServiceInterface):
    endpoint = "/validate/rfc"
    model_cls = IdentifierModel


class ValidateBatchService(BaseServiceInterface):
    endpoint = "/validate/batch"
    model_cls = BatchIdentifiersModel


class ValidateEmployeeService(BaseServiceInterface):
    """
    Posts an employee record to ``/validate/employee``.

    No client-side model: the record model rejects invalid identifiers, and
    the server is the one expected to report them (HTTP 400).
    """

    endpoint = "/validate/employee"
    model_cls = None


class AnonymizeTextService(BaseServiceInterface):
    endpoint = "/anonymize_text"
    model_cls = AnonymizeTextModel
