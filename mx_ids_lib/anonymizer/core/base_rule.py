"""
Regex-driven base class for identifier anonymization rules.
"""

import re
from typing import Callable

from mx_ids_lib.anonymizer.core.rule_interface import AnonymizeRuleI


class BaseRule(AnonymizeRuleI):
    """
    Replaces regex candidates that pass a validator with a placeholder.

    Parameters
    ----------
    regex: str
        Candidate pattern.  It is compiled case-insensitively.
    placeholder: str
        Replacement text, e.g. ``{{CURP}}``.
    validator: Callable[[str], bool]
        Predicate applied to every candidate; only candidates for which it
        returns ``True`` are replaced.
    """

    def __init__(self, regex: str, placeholder: str, validator: Callable[[str], bool]):
        self.regex = re.compile(regex, re.IGNORECASE)
        self.placeholder = placeholder
        self.validator = validator

    def apply(self, text: str) -> str:
        def replacer(match: re.Match) -> str:
            candidate = match.group(0)
            return self.placeholder if self.validator(candidate) else candidate

        return self.regex.sub(replacer, text)
