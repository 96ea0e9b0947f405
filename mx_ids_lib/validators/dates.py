"""
Extraction of the YYMMDD date embedded in CURP and RFC identifiers.

CURP and RFC resolve the two-digit year differently, so each identifier has
its own helper:

* CURP - the character at offset 16 decides the century: a digit means
  ``19YY``, a letter means ``20YY``.
* RFC - purely numeric: ``00-49`` means ``20YY``, ``50-99`` means ``19YY``.
"""

import datetime
import string
from typing import Optional

CURP_DATE_OFFSET = 4
CURP_CENTURY_MARKER_OFFSET = 16

RFC_MORAL_DATE_OFFSET = 3
RFC_FISICA_DATE_OFFSET = 4

# Last two-digit year that belongs to the 2000s in an RFC
RFC_CENTURY_PIVOT = 49


def _build_date(year: int, mm: str, dd: str) -> Optional[datetime.date]:
    if not (_is_ascii_number(mm) and _is_ascii_number(dd)):
        return None
    try:
        return datetime.date(year, int(mm), int(dd))
    except ValueError:
        return None


def _is_ascii_number(value: str) -> bool:
    return bool(value) and all(ch in string.digits for ch in value)


def resolve_curp_year(yy: str, century_marker: str) -> Optional[int]:
    """
    Four-digit CURP birth year, or ``None`` when *yy* is not two digits or
    *century_marker* is not a single character.
    """
    if len(yy) != 2 or not _is_ascii_number(yy):
        return None
    if len(century_marker) != 1:
        return None
    if century_marker in string.digits:
        return 1900 + int(yy)
    return 2000 + int(yy)


def resolve_rfc_year(yy: str) -> Optional[int]:
    """
    Four-digit RFC year, or ``None`` when *yy* is not two digits.
    """
    if len(yy) != 2 or not _is_ascii_number(yy):
        return None
    year = int(yy)
    return 2000 + year if year <= RFC_CENTURY_PIVOT else 1900 + year


def curp_birth_date(curp: str) -> Optional[datetime.date]:
    """
    Decode the birth date of a normalized 18-character CURP.

    Parameters
    ----------
    curp: str
        Upper-cased CURP.  Only the date field (offsets 4-9) and the century
        marker (offset 16) are inspected.

    Returns
    -------
    Optional[datetime.date]
        The birth date, or ``None`` if the string is too short or the date
        does not exist in the Gregorian calendar.
    """
    if len(curp) <= CURP_CENTURY_MARKER_OFFSET:
        return None
    start = CURP_DATE_OFFSET
    year = resolve_curp_year(
        curp[start : start + 2], curp[CURP_CENTURY_MARKER_OFFSET]
    )
    if year is None:
        return None
    return _build_date(year, curp[start + 2 : start + 4], curp[start + 4 : start + 6])


def rfc_registration_date(rfc: str) -> Optional[datetime.date]:
    """
    Decode the date of a normalized 12- or 13-character RFC.

    Organizations (12 characters) carry the date at offset 3, individuals
    (13 characters) at offset 4.  Any other length yields ``None``.
    """
    if len(rfc) == 12:
        start = RFC_MORAL_DATE_OFFSET
    elif len(rfc) == 13:
        start = RFC_FISICA_DATE_OFFSET
    else:
        return None
    year = resolve_rfc_year(rfc[start : start + 2])
    if year is None:
        return None
    return _build_date(year, rfc[start + 2 : start + 4], rfc[start + 4 : start + 6])
