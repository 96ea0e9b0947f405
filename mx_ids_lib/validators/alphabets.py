"""
Character value tables used by the check-digit algorithms.

Both tables are read-only views built once at import time.  They are kept
separate because the CURP (RENAPO) and RFC (SAT) algorithms accept different
character sets.
"""

import string
from types import MappingProxyType
from typing import Dict, Mapping

# Alphabetical order with ``Ñ`` placed right after ``N``
LETTERS = "ABCDEFGHIJKLMNÑOPQRSTUVWXYZ"


def _base_values() -> Dict[str, int]:
    values = {ch: int(ch) for ch in string.digits}
    for idx, ch in enumerate(LETTERS):
        values[ch] = 10 + idx
    return values


# RENAPO table: 0-9 -> 0..9, A -> 10 ... N -> 23, Ñ -> 24, O -> 25 ... Z -> 36
CURP_CHAR_VALUES: Mapping[str, int] = MappingProxyType(_base_values())

# SAT table: same letters and digits, ``&`` shares the value of ``Ñ``
RFC_CHAR_VALUES: Mapping[str, int] = MappingProxyType(
    {**_base_values(), "&": 24, " ": 37}
)
