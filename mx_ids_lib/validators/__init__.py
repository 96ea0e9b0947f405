"""
CURP and RFC validators.

The public API consists of the boolean checks (``is_valid_curp``,
``is_valid_rfc``), the reason-reporting checks (``check_curp``,
``check_rfc``) and the raising variants (``ensure_valid_curp``,
``ensure_valid_rfc``).
"""

from mx_ids_lib.validators.curp import check_curp, ensure_valid_curp, is_valid_curp
from mx_ids_lib.validators.rfc import check_rfc, ensure_valid_rfc, is_valid_rfc

__all__ = [
    "check_curp",
    "check_rfc",
    "ensure_valid_curp",
    "ensure_valid_rfc",
    "is_valid_curp",
    "is_valid_rfc",
]
