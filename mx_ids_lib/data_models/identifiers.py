"""
Pydantic models for records and request payloads that carry identifiers.

``EmployeeIdentifiersModel`` and ``CompanyRegistrationModel`` mirror the
checks the shop application runs before saving an employee or registering the
business: the RFC is mandatory, the employee CURP is optional.  Both store the
normalized (stripped, upper-cased) identifiers.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from mx_ids_lib.validators import check_curp, check_rfc

RFC_INVALID_MSG = "RFC inválido."
CURP_INVALID_MSG = "CURP inválida."
COMPANY_RFC_INVALID_MSG = (
    "El RFC no es válido. Verifica estructura, fecha y dígito verificador."
)


class EmployeeIdentifiersModel(BaseModel):
    """
    Identifiers stored on an employee record.

    Attributes
    ----------
    rfc : str
        Required individual or organization RFC.
    curp : Optional[str]
        Optional CURP; a blank string is treated as "not provided".
    """

    rfc: str
    curp: Optional[str] = None

    @field_validator("rfc")
    @classmethod
    def _validate_rfc(cls, value: str) -> str:
        result = check_rfc(value)
        if not result.valid:
            raise ValueError(RFC_INVALID_MSG)
        return result.identifier

    @field_validator("curp")
    @classmethod
    def _validate_curp(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        result = check_curp(value)
        if not result.valid:
            raise ValueError(CURP_INVALID_MSG)
        return result.identifier


class CompanyRegistrationModel(BaseModel):
    rfc: str

    @field_validator("rfc")
    @classmethod
    def _validate_rfc(cls, value: str) -> str:
        result = check_rfc(value)
        if not result.valid:
            raise ValueError(COMPANY_RFC_INVALID_MSG)
        return result.identifier


class IdentifierModel(BaseModel):
    """Single identifier sent to ``/validate/curp`` or ``/validate/rfc``."""

    value: str


class BatchIdentifiersModel(BaseModel):
    curp: List[str] = Field(default_factory=list)
    rfc: List[str] = Field(default_factory=list)


class AnonymizeTextModel(BaseModel):
    """
    Text whose valid CURP/RFC occurrences should be replaced by placeholders.
    """

    text: str
