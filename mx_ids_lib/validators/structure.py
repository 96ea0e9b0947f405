"""
Fixed-template structural matching for CURP and RFC identifiers.

The patterns only check the character-class layout.  The day range accepted
by the RFC templates (01-31 for any month) is loose; calendar
validity is checked later by :mod:`mx_ids_lib.validators.dates`.
"""

import re
from enum import Enum
from typing import Optional

CURP_LENGTH = 18
RFC_MORAL_LENGTH = 12
RFC_FISICA_LENGTH = 13

_CURP_REGEX = re.compile(
    r"[A-Z]{4}"  # name-derived letters
    r"[0-9]{6}"  # birth date YYMMDD
    r"[HM]"  # sex
    r"[A-Z]{2}"  # birth state
    r"[B-DF-HJ-NP-TV-Z]{3}"  # internal consonants
    r"[A-Z0-9]"  # century marker / differentiator
    r"[0-9]"  # check digit
)

_RFC_DATE = r"[0-9]{2}(?:0[1-9]|1[0-2])(?:0[1-9]|[12][0-9]|3[01])"

_RFC_MORAL_REGEX = re.compile(r"[A-Z&Ñ]{3}" + _RFC_DATE + r"[A-Z0-9]{3}")
_RFC_FISICA_REGEX = re.compile(r"[A-Z&Ñ]{4}" + _RFC_DATE + r"[A-Z0-9]{3}")


class RfcKind(str, Enum):
    """Taxpayer type encoded by the RFC length."""

    MORAL = "moral"  # organization, 12 characters
    FISICA = "fisica"  # individual, 13 characters


def normalize_identifier(raw) -> Optional[str]:
    """
    Strip surrounding whitespace and upper-case *raw*.

    Returns ``None`` for anything that is not a string.
    """
    if not isinstance(raw, str):
        return None
    return raw.strip().upper()


def matches_curp_structure(value: str) -> bool:
    """
    Return ``True`` when *value* (already normalized) has the CURP layout.
    """
    return len(value) == CURP_LENGTH and _CURP_REGEX.fullmatch(value) is not None


def rfc_kind(value: str) -> Optional[RfcKind]:
    """
    Return the RFC kind whose template *value* matches, or ``None``.

    Parameters
    ----------
    value: str
        Normalized (stripped, upper-cased) candidate RFC.

    Returns
    -------
    Optional[RfcKind]
        ``RfcKind.MORAL`` for a 12-character organization RFC,
        ``RfcKind.FISICA`` for a 13-character individual RFC,
        ``None`` when the layout does not match either template.
    """
    if len(value) == RFC_MORAL_LENGTH and _RFC_MORAL_REGEX.fullmatch(value):
        return RfcKind.MORAL
    if len(value) == RFC_FISICA_LENGTH and _RFC_FISICA_REGEX.fullmatch(value):
        return RfcKind.FISICA
    return None
