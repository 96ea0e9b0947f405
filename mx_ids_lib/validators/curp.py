"""
CURP (Clave Única de Registro de Población) validation.

A CURP passes when, after stripping and upper-casing:

1. it is exactly 18 characters long,
2. it matches the official layout,
3. its birth date exists (century taken from the marker at offset 16),
4. its last digit equals the RENAPO mod-10 check digit.
"""

from mx_ids_lib.exceptions import InvalidIdentifierError
from mx_ids_lib.validators.checksum import curp_check_digit
from mx_ids_lib.validators.dates import curp_birth_date
from mx_ids_lib.validators.structure import (
    CURP_LENGTH,
    matches_curp_structure,
    normalize_identifier,
)
from mx_ids_lib.data_models.validation import (
    IdentifierKind,
    ValidationReason,
    ValidationResult,
)


def check_curp(raw: str) -> ValidationResult:
    """
    Validate *raw* as a CURP and report the first failing stage.

    Never raises; non-string input is reported as ``empty``.
    """
    curp = normalize_identifier(raw)
    if not curp:
        return ValidationResult.failure("", IdentifierKind.CURP, ValidationReason.EMPTY)

    if len(curp) != CURP_LENGTH:
        return ValidationResult.failure(
            curp, IdentifierKind.CURP, ValidationReason.WRONG_LENGTH
        )

    if not matches_curp_structure(curp):
        return ValidationResult.failure(
            curp, IdentifierKind.CURP, ValidationReason.MALFORMED
        )

    birth_date = curp_birth_date(curp)
    if birth_date is None:
        return ValidationResult.failure(
            curp, IdentifierKind.CURP, ValidationReason.INVALID_DATE
        )

    expected = curp_check_digit(curp[:-1])
    if expected is None:
        return ValidationResult.failure(
            curp, IdentifierKind.CURP, ValidationReason.UNKNOWN_CHARACTER, birth_date
        )
    if str(expected) != curp[-1]:
        return ValidationResult.failure(
            curp, IdentifierKind.CURP, ValidationReason.CHECKSUM_MISMATCH, birth_date
        )

    return ValidationResult(
        identifier=curp,
        kind=IdentifierKind.CURP,
        valid=True,
        reason=ValidationReason.OK,
        date=birth_date,
    )


def is_valid_curp(raw: str) -> bool:
    """
    Return ``True`` if *raw* is a valid CURP, ``False`` otherwise.
    """
    return check_curp(raw).valid


def ensure_valid_curp(raw: str) -> str:
    """
    Return the normalized CURP or raise :class:`InvalidIdentifierError`.
    """
    result = check_curp(raw)
    if not result.valid:
        raise InvalidIdentifierError(result)
    return result.identifier
