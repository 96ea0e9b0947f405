"""
Identifier validation command‑line interface.

Validates CURP and RFC identifiers given as arguments, or one per line from a
file (or standard input), and prints one result line per identifier.

---

# Quick ways to run the script

1. Identifiers as arguments

>>> mx-ids-validate GODE561231GR8 GODE561231HDFRRN00

2. A file with one identifier per line, JSON output

>>> mx-ids-validate -f employees.txt --json

3. Piping data

>>> cut -d, -f3 personal.csv | mx-ids-validate --type rfc

The exit status is ``0`` when every identifier is valid and ``1`` otherwise.
"""

import argparse
import json
import sys
from typing import Iterable, List, Optional

from mx_ids_lib.validators import check_curp, check_rfc
from mx_ids_lib.validators.structure import CURP_LENGTH, normalize_identifier
from mx_ids_lib.data_models.validation import ValidationResult

TYPE_AUTO = "auto"
TYPE_CURP = "curp"
TYPE_RFC = "rfc"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate Mexican CURP and RFC identifiers."
    )
    parser.add_argument(
        "identifiers",
        nargs="*",
        help="Identifiers to validate (defaults to reading --file or STDIN).",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=argparse.FileType("r", encoding="utf-8"),
        default=None,
        help="File with one identifier per line.",
    )
    parser.add_argument(
        "-t",
        "--type",
        choices=[TYPE_AUTO, TYPE_CURP, TYPE_RFC],
        default=TYPE_AUTO,
        help="Identifier type; 'auto' treats 18-character values as CURP.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per identifier.",
    )
    return parser


def validate_identifier(value: str, id_type: str = TYPE_AUTO) -> ValidationResult:
    if id_type == TYPE_CURP:
        return check_curp(value)
    if id_type == TYPE_RFC:
        return check_rfc(value)
    normalized = normalize_identifier(value) or ""
    if len(normalized) == CURP_LENGTH:
        return check_curp(value)
    return check_rfc(value)


def format_result(result: ValidationResult, as_json: bool = False) -> str:
    if as_json:
        return json.dumps(result.model_dump(mode="json"), ensure_ascii=False)
    verdict = "VALID" if result.valid else "INVALID"
    return "\t".join(
        [result.identifier, result.kind.value, verdict, result.reason.value]
    )


def _read_lines(stream) -> Iterable[str]:
    for line in stream:
        if line.strip():
            yield line


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.identifiers:
        values = args.identifiers
    else:
        values = _read_lines(args.file or sys.stdin)

    all_valid = True
    for value in values:
        result = validate_identifier(value, args.type)
        all_valid = all_valid and result.valid
        print(format_result(result, as_json=args.json))

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
