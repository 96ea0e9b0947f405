"""
Rule that anonymizes valid RFC identifiers (organizations and individuals).
"""

from mx_ids_lib.anonymizer.core.base_rule import BaseRule
from mx_ids_lib.validators import is_valid_rfc


class RfcRule(BaseRule):
    """
    Detects 12/13-character RFC candidates, validates the check character and
    replaces only the valid ones with ``{{RFC}}``.
    """

    REGEX = r"(?<![\w&])[A-ZÑ&]{3,4}[0-9]{6}[A-Z0-9]{3}(?![\w&])"

    _ANONYMIZATION_TAG_PLACEHOLDER = "{{RFC}}"

    def __init__(self):
        super().__init__(
            regex=RfcRule.REGEX,
            placeholder=RfcRule._ANONYMIZATION_TAG_PLACEHOLDER,
            validator=is_valid_rfc,
        )
