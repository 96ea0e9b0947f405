"""
Anonymisation command‑line interface.

Reads text from a file (or standard input), replaces every valid CURP with
``{{CURP}}`` and every valid RFC with ``{{RFC}}``, and writes the result to a
file (or standard output).  Each rule can be disabled via a dedicated
command‑line flag.

>>> mx-ids-mask nomina.txt -o nomina_masked.txt
>>> echo "RFC del taller: GODE561231GR8" | mx-ids-mask
"""

import argparse
import sys
from typing import List, Optional

from mx_ids_lib.anonymizer import Anonymizer, CurpRule, RfcRule


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Mask valid CURP and RFC identifiers in text."
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Input file (defaults to STDIN).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=argparse.FileType("w", encoding="utf-8"),
        default=sys.stdout,
        help="Output file (defaults to STDOUT).",
    )
    parser.add_argument(
        "--disable-curp",
        action="store_true",
        help="Do not apply CURP anonymisation.",
    )
    parser.add_argument(
        "--disable-rfc",
        action="store_true",
        help="Do not apply RFC anonymisation.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    # CURP first: an individual RFC looks like the start of a CURP
    rules = []
    if not args.disable_curp:
        rules.append(CurpRule())
    if not args.disable_rfc:
        rules.append(RfcRule())

    anonymizer = Anonymizer(rules)

    input_text = args.input.read()
    result = anonymizer.anonymize(input_text)
    args.output.write(result)
    args.output.flush()


if __name__ == "__main__":
    main()
