"""
Package that contains concrete anonymization rule implementations.
"""

from mx_ids_lib.anonymizer.rules.curp_rule import CurpRule
from mx_ids_lib.anonymizer.rules.rfc_rule import RfcRule
