"""
Anonymizer module
=================

Provides the :class:`Anonymizer` class – a thin orchestration layer that
applies a configurable sequence of
:class:`~mx_ids_lib.anonymizer.core.rule_interface.AnonymizeRuleI`
implementations to arbitrary payloads.  The public API supports:

* Plain‑text anonymisation via :meth:`Anonymizer.anonymize`.
* Recursive anonymisation of complex data structures (``dict``, ``list`` and
  nested combinations) via :meth:`Anonymizer.anonymize_payload`.
"""

from typing import List, Dict, Any, Optional

from mx_ids_lib.anonymizer.core.rule_interface import AnonymizeRuleI
from mx_ids_lib.anonymizer.rules import CurpRule, RfcRule


class Anonymizer:
    """
    Orchestrates the application of a list of anonymisation rules.

    Rules run in the order given, each one on the output of the previous.
    The default order masks CURPs before RFCs: the first ten characters of a
    CURP look like the start of an individual RFC, so CURPs are removed first.

    Attributes
    ----------
    rules : List[AnonymizeRuleI]
        The active rule set used by the instance.
    """

    def __init__(self, rules: Optional[List[AnonymizeRuleI]] = None):
        self.rules = rules if rules is not None else self.default_rules()

    @staticmethod
    def default_rules() -> List[AnonymizeRuleI]:
        return [CurpRule(), RfcRule()]

    def anonymize(self, text: str) -> str:
        """
        Run all configured rules over *text* and return the result.
        """
        return self._anonymize_text(text=text)

    def anonymize_payload(self, payload: Dict | str | List | Any):
        """
        Recursively anonymise a payload of arbitrary type.

        * ``str`` – processed by :meth:`_anonymize_text`.
        * ``dict`` – keys and values are anonymised recursively.
        * ``list`` – every element is anonymised recursively.
        * any other type – returned unchanged.
        """
        if type(payload) is str:
            return self._anonymize_text(text=payload)
        elif type(payload) is dict:
            return self._anonymize_dict(dict_payload=payload)
        elif type(payload) is list:
            return self._anonymize_list(list_payload=payload)
        return payload

    def _anonymize_text(self, text: str) -> str:
        for rule in self.rules:
            text = rule.apply(text)
        return text

    def _anonymize_list(self, list_payload: List[Any]) -> List:
        return [self.anonymize_payload(payload=_e) for _e in list_payload]

    def _anonymize_dict(self, dict_payload: Dict[Any, Any]) -> Dict[Any, Any]:
        _p = {}
        for k, v in dict_payload.items():
            _k = self.anonymize_payload(payload=k)
            _p[_k] = self.anonymize_payload(payload=v)
        return _p
