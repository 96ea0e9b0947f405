"""
Result models returned by the identifier validators.

The boolean validators (``is_valid_curp`` / ``is_valid_rfc``) collapse every
failure into ``False``.  The models below keep the same outcome but also
record *which* stage rejected the identifier, so that callers such as the
REST API or the CLI can report a reason.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class IdentifierKind(str, Enum):
    CURP = "curp"
    # RFC whose layout could not be matched to a taxpayer type
    RFC = "rfc"
    RFC_MORAL = "rfc_moral"
    RFC_FISICA = "rfc_fisica"


class ValidationReason(str, Enum):
    """
    Stage at which the validation stopped.

    ``OK`` is the only reason paired with ``valid=True``.
    """

    OK = "ok"
    EMPTY = "empty"
    WRONG_LENGTH = "wrong_length"
    MALFORMED = "malformed"
    INVALID_DATE = "invalid_date"
    UNKNOWN_CHARACTER = "unknown_character"
    CHECKSUM_MISMATCH = "checksum_mismatch"


class ValidationResult(BaseModel):
    """
    Outcome of validating a single identifier.

    Attributes
    ----------
    identifier : str
        The normalized (stripped, upper-cased) input.
    kind : IdentifierKind
        Identifier family; for RFCs the taxpayer type once the layout matched.
    valid : bool
        Final verdict.
    reason : ValidationReason
        ``ok`` or the first failing stage.
    date : Optional[datetime.date]
        Birth/registration date decoded from the identifier, when the date
        stage was reached and passed.
    """

    identifier: str
    kind: IdentifierKind
    valid: bool
    reason: ValidationReason
    date: Optional[datetime.date] = None

    @classmethod
    def failure(
        cls,
        identifier: str,
        kind: IdentifierKind,
        reason: ValidationReason,
        date: Optional[datetime.date] = None,
    ) -> "ValidationResult":
        return cls(
            identifier=identifier, kind=kind, valid=False, reason=reason, date=date
        )
