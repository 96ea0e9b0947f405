"""
Check-character computation for CURP (mod 10) and RFC (mod 11).

Both functions receive the *base* of an identifier, i.e. every character
except the trailing check character, and return the expected check value.
A character missing from the value table makes the base uncomputable and the
functions return ``None`` instead of treating it as zero.
"""

from typing import Optional

from mx_ids_lib.validators.alphabets import CURP_CHAR_VALUES, RFC_CHAR_VALUES

CURP_BASE_LENGTH = 17


def curp_check_digit(base: str) -> Optional[int]:
    """
    Compute the RENAPO check digit of a 17-character CURP base.

    The algorithm:
    1. Map every character through :data:`CURP_CHAR_VALUES`.
    2. Multiply the value at index ``i`` by ``18 - i`` (weights 18 down to 2).
    3. The check digit is ``(10 - sum % 10) % 10``.

    Parameters
    ----------
    base: str
        The first 17 characters of an upper-cased CURP.

    Returns
    -------
    Optional[int]
        The expected check digit, or ``None`` when *base* has the wrong
        length or contains a character outside the table.
    """
    if len(base) != CURP_BASE_LENGTH:
        return None

    total = 0
    for idx, ch in enumerate(base):
        value = CURP_CHAR_VALUES.get(ch)
        if value is None:
            return None
        total += value * (CURP_BASE_LENGTH + 1 - idx)

    return (10 - total % 10) % 10


def rfc_check_character(base: str) -> Optional[str]:
    """
    Compute the SAT check character of an RFC base (11 or 12 characters).

    Weights descend from ``len(base) + 1`` to 2.  With ``dv = 11 - sum % 11``
    the check character is ``'0'`` for ``dv == 11``, ``'A'`` for ``dv == 10``
    and the decimal digit of ``dv`` otherwise.

    Parameters
    ----------
    base: str
        An upper-cased RFC without its last character.

    Returns
    -------
    Optional[str]
        The expected check character, or ``None`` for an empty base or a
        character outside :data:`RFC_CHAR_VALUES`.
    """
    if not base:
        return None

    total = 0
    weight = len(base) + 1
    for ch in base:
        value = RFC_CHAR_VALUES.get(ch)
        if value is None:
            return None
        total += value * weight
        weight -= 1

    dv = 11 - total % 11
    if dv == 11:
        return "0"
    if dv == 10:
        return "A"
    return str(dv)
