"""
Top‑level package for the identifier anonymizer.

The public API currently consists of:
- Anonymizer (core)
- AnonymizeRuleI (interface)
- Concrete rule implementations (CurpRule, RfcRule)
"""

from mx_ids_lib.anonymizer.core.anonymizer import Anonymizer
from mx_ids_lib.anonymizer.core.rule_interface import AnonymizeRuleI
from mx_ids_lib.anonymizer.rules import CurpRule, RfcRule

__all__ = ["Anonymizer", "AnonymizeRuleI", "CurpRule", "RfcRule"]
