import datetime

import pytest

from mx_ids_lib.exceptions import InvalidIdentifierError
from mx_ids_lib.validators import check_rfc, ensure_valid_rfc, is_valid_rfc
from mx_ids_lib.data_models.validation import IdentifierKind, ValidationReason

from conftest import VALID_RFCS


@pytest.mark.parametrize("rfc", VALID_RFCS)
def test_valid_rfcs(rfc):
    assert is_valid_rfc(rfc)


@pytest.mark.parametrize("rfc", VALID_RFCS)
def test_case_and_whitespace_are_ignored(rfc):
    assert is_valid_rfc(rfc.lower())
    assert is_valid_rfc(f"\n {rfc}  ")


def test_lowercase_enye_is_upper_cased():
    assert is_valid_rfc("añc680524p70")


@pytest.mark.parametrize("length", [n for n in range(0, 30) if n not in (12, 13)])
def test_wrong_lengths_are_invalid(length):
    assert not is_valid_rfc(("GODE561231GR8" * 3)[:length])


def test_check_character_ten_maps_to_a():
    assert is_valid_rfc("ABC680524PDA")
    assert not is_valid_rfc("ABC680524PD0")


def test_check_character_eleven_maps_to_zero():
    assert is_valid_rfc("ABC680524P70")
    assert not is_valid_rfc("ABC680524P7A")


@pytest.mark.parametrize("check", list("123456789AB"))
def test_forced_wrong_check_character_is_invalid(check):
    assert not is_valid_rfc("ABC680524P7" + check)


def test_individual_rfc_wrong_check_character():
    assert not is_valid_rfc("GODE561231GR9")


def test_century_boundary_in_full_validation():
    # 2000-02-29 exists, 1900-02-29 would not
    result = check_rfc("ABC000229P76")
    assert result.valid
    assert result.date == datetime.date(2000, 2, 29)


@pytest.mark.parametrize("raw", [None, 42, 12.5, {"rfc": "GODE561231GR8"}])
def test_non_strings_never_raise(raw):
    assert is_valid_rfc(raw) is False


def test_check_rfc_kinds():
    moral = check_rfc("ABC680524P70")
    assert moral.kind is IdentifierKind.RFC_MORAL
    assert moral.date == datetime.date(1968, 5, 24)

    fisica = check_rfc("GODE561231GR8")
    assert fisica.kind is IdentifierKind.RFC_FISICA
    assert fisica.date == datetime.date(1956, 12, 31)


@pytest.mark.parametrize(
    "raw, reason, kind",
    [
        ("", ValidationReason.EMPTY, IdentifierKind.RFC),
        ("ABC680524P7", ValidationReason.WRONG_LENGTH, IdentifierKind.RFC),
        ("ABC681324P70", ValidationReason.MALFORMED, IdentifierKind.RFC),
        ("ABC680532P70", ValidationReason.MALFORMED, IdentifierKind.RFC),
        ("1BC680524P70", ValidationReason.MALFORMED, IdentifierKind.RFC),
        ("ABC680431P70", ValidationReason.INVALID_DATE, IdentifierKind.RFC_MORAL),
        ("ABC990229P70", ValidationReason.INVALID_DATE, IdentifierKind.RFC_MORAL),
        ("GODE560230GR8", ValidationReason.INVALID_DATE, IdentifierKind.RFC_FISICA),
        ("ABC680524P71", ValidationReason.CHECKSUM_MISMATCH, IdentifierKind.RFC_MORAL),
    ],
)
def test_check_rfc_reasons(raw, reason, kind):
    result = check_rfc(raw)
    assert not result.valid
    assert result.reason is reason
    assert result.kind is kind


def test_ensure_valid_rfc():
    assert ensure_valid_rfc(" godE561231gr8 ") == "GODE561231GR8"

    with pytest.raises(InvalidIdentifierError) as exc_info:
        ensure_valid_rfc("ABC680431P70")
    assert exc_info.value.result.reason is ValidationReason.INVALID_DATE
