from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from mx_ids_lib.exceptions import (
    MxIdsError,
    InvalidIdentifierError,
    AuthenticationError,
    RateLimitError,
    ValidationError,
)
from mx_ids_lib.validators import (
    check_curp,
    check_rfc,
    ensure_valid_curp,
    ensure_valid_rfc,
    is_valid_curp,
    is_valid_rfc,
)
from mx_ids_lib.client import MxIdsClient

try:
    __version__ = version("mx-ids")
except PackageNotFoundError:
    # Source checkout without installation: same file setup.py reads
    __version__ = (Path(__file__).parent.parent / ".version").read_text().strip()

__all__ = [
    "MxIdsClient",
    "MxIdsError",
    "InvalidIdentifierError",
    "AuthenticationError",
    "RateLimitError",
    "ValidationError",
    "check_curp",
    "check_rfc",
    "ensure_valid_curp",
    "ensure_valid_rfc",
    "is_valid_curp",
    "is_valid_rfc",
]
