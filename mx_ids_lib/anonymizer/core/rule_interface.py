"""
Definition of the rule interface that every anonymization rule must implement.
"""

from abc import ABC, abstractmethod


class AnonymizeRuleI(ABC):
    """
    Abstract base class for all anonymization rules.

    Sub‑classes must implement the :meth:`apply` method, which receives a
    string and returns a new string where the identifiers recognised by the
    rule have been replaced with a placeholder.
    """

    @abstractmethod
    def apply(self, text: str) -> str:
        """
        Apply the rule to *text* and return the transformed string.
        """
        raise NotImplementedError
