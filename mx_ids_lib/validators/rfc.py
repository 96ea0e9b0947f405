"""
RFC (Registro Federal de Contribuyentes) validation.

Accepts organization RFCs (persona moral, 12 characters) and individual
RFCs (persona física, 13 characters).  After stripping and upper-casing, an
RFC is valid when its layout matches the template for its length, the
embedded YYMMDD date exists (``00-49`` -> 2000s, ``50-99`` -> 1900s) and its
last character equals the SAT mod-11 check character.
"""

from mx_ids_lib.exceptions import InvalidIdentifierError
from mx_ids_lib.validators.checksum import rfc_check_character
from mx_ids_lib.validators.dates import rfc_registration_date
from mx_ids_lib.validators.structure import (
    RFC_FISICA_LENGTH,
    RFC_MORAL_LENGTH,
    RfcKind,
    normalize_identifier,
    rfc_kind,
)
from mx_ids_lib.data_models.validation import (
    IdentifierKind,
    ValidationReason,
    ValidationResult,
)

_KIND_BY_RFC_KIND = {
    RfcKind.MORAL: IdentifierKind.RFC_MORAL,
    RfcKind.FISICA: IdentifierKind.RFC_FISICA,
}


def check_rfc(raw: str) -> ValidationResult:
    """
    Validate *raw* as an RFC and report the first failing stage.

    Parameters
    ----------
    raw: str
        Candidate RFC, in any case and with optional surrounding whitespace.

    Returns
    -------
    ValidationResult
        ``kind`` is ``rfc_moral`` / ``rfc_fisica`` once the layout matched,
        plain ``rfc`` before that.
    """
    rfc = normalize_identifier(raw)
    if not rfc:
        return ValidationResult.failure("", IdentifierKind.RFC, ValidationReason.EMPTY)

    if len(rfc) not in (RFC_MORAL_LENGTH, RFC_FISICA_LENGTH):
        return ValidationResult.failure(
            rfc, IdentifierKind.RFC, ValidationReason.WRONG_LENGTH
        )

    matched = rfc_kind(rfc)
    if matched is None:
        return ValidationResult.failure(
            rfc, IdentifierKind.RFC, ValidationReason.MALFORMED
        )
    kind = _KIND_BY_RFC_KIND[matched]

    registration_date = rfc_registration_date(rfc)
    if registration_date is None:
        return ValidationResult.failure(rfc, kind, ValidationReason.INVALID_DATE)

    expected = rfc_check_character(rfc[:-1])
    if expected is None:
        return ValidationResult.failure(
            rfc, kind, ValidationReason.UNKNOWN_CHARACTER, registration_date
        )
    if expected != rfc[-1]:
        return ValidationResult.failure(
            rfc, kind, ValidationReason.CHECKSUM_MISMATCH, registration_date
        )

    return ValidationResult(
        identifier=rfc,
        kind=kind,
        valid=True,
        reason=ValidationReason.OK,
        date=registration_date,
    )


def is_valid_rfc(raw: str) -> bool:
    """
    Return ``True`` if *raw* is a valid RFC, ``False`` otherwise.
    """
    return check_rfc(raw).valid


def ensure_valid_rfc(raw: str) -> str:
    """
    Return the normalized RFC or raise :class:`InvalidIdentifierError`.
    """
    result = check_rfc(raw)
    if not result.valid:
        raise InvalidIdentifierError(result)
    return result.identifier
