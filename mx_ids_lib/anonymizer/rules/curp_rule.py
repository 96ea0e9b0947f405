"""
Rule that anonymizes valid CURP identifiers.
"""

from mx_ids_lib.anonymizer.core.base_rule import BaseRule
from mx_ids_lib.validators import is_valid_curp


class CurpRule(BaseRule):
    """
    Detects 18-character CURP candidates, validates them and replaces only the
    valid ones with ``{{CURP}}``.
    """

    # Not preceded/followed by another identifier character
    REGEX = r"(?<![\w&])[A-Z]{4}[0-9]{6}[A-Z0-9]{8}(?![\w&])"

    _ANONYMIZATION_TAG_PLACEHOLDER = "{{CURP}}"

    def __init__(self):
        super().__init__(
            regex=CurpRule.REGEX,
            placeholder=CurpRule._ANONYMIZATION_TAG_PLACEHOLDER,
            validator=is_valid_curp,
        )
