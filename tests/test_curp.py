import datetime
import string

import pytest

from mx_ids_lib.exceptions import InvalidIdentifierError
from mx_ids_lib.validators import check_curp, ensure_valid_curp, is_valid_curp
from mx_ids_lib.data_models.validation import IdentifierKind, ValidationReason

from conftest import VALID_CURPS

GOOD = "GODE561231HDFRRN00"


@pytest.mark.parametrize("curp", VALID_CURPS)
def test_valid_curps(curp):
    assert is_valid_curp(curp)


@pytest.mark.parametrize("curp", VALID_CURPS)
def test_case_and_whitespace_are_ignored(curp):
    assert is_valid_curp(curp.lower())
    assert is_valid_curp(f"  {curp}\t\n")


@pytest.mark.parametrize("length", [n for n in range(0, 30) if n != 18])
def test_wrong_lengths_are_invalid(length):
    assert not is_valid_curp((GOOD * 2)[:length])


@pytest.mark.parametrize("digit", [d for d in string.digits if d != GOOD[-1]])
def test_any_other_check_digit_is_invalid(digit):
    assert not is_valid_curp(GOOD[:-1] + digit)


@pytest.mark.parametrize(
    "curp",
    [
        "HODE561231HDFRRN00",  # first letter changed
        "GPDE561231HDFRRN00",
        "GODE561231HDFRRP00",  # last consonant changed
        "GODE571231HDFRRN00",  # birth year changed
    ],
)
def test_single_character_changes_are_detected(curp):
    assert not is_valid_curp(curp)


def test_century_marker_changes_the_date_verdict():
    assert is_valid_curp("LOPA000229HDFPRBA6")
    result = check_curp("LOPA000229HDFPRB06")
    assert not result.valid
    assert result.reason is ValidationReason.INVALID_DATE


@pytest.mark.parametrize("raw", [None, 123, b"GODE561231HDFRRN00", ["x"]])
def test_non_strings_never_raise(raw):
    assert is_valid_curp(raw) is False


def test_check_curp_success_result():
    result = check_curp(" gode561231hdfrrn00 ")
    assert result.valid
    assert result.identifier == GOOD
    assert result.kind is IdentifierKind.CURP
    assert result.reason is ValidationReason.OK
    assert result.date == datetime.date(1956, 12, 31)


@pytest.mark.parametrize(
    "raw, reason",
    [
        ("", ValidationReason.EMPTY),
        ("   ", ValidationReason.EMPTY),
        ("GODE561231HDFRRN0", ValidationReason.WRONG_LENGTH),
        ("GODE561231XDFRRN00", ValidationReason.MALFORMED),
        ("GODE560431HDFRRN00", ValidationReason.INVALID_DATE),
        ("GODE561231HDFRRN01", ValidationReason.CHECKSUM_MISMATCH),
    ],
)
def test_check_curp_reasons(raw, reason):
    result = check_curp(raw)
    assert not result.valid
    assert result.reason is reason


def test_checksum_mismatch_keeps_the_decoded_date():
    result = check_curp("GODE561231HDFRRN01")
    assert result.date == datetime.date(1956, 12, 31)


def test_ensure_valid_curp():
    assert ensure_valid_curp("gode561231hdfrrn00") == GOOD

    with pytest.raises(InvalidIdentifierError) as exc_info:
        ensure_valid_curp("GODE561231HDFRRN01")
    assert exc_info.value.result.reason is ValidationReason.CHECKSUM_MISMATCH
    assert "checksum_mismatch" in str(exc_info.value)
