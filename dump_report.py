"""Dump the department/manager report for an organization JSON file.

Usage:
  python dump_report.py ORG.json            # rows to stdout
  python dump_report.py ORG.json OUT.csv    # rows to OUT.csv
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from org_report.errors import ReportError, error_context, error_kind
from org_report.hashing import canonical_serialize, report_hash
from org_report.report import generate_report


def main(argv: list) -> int:
    if len(argv) not in (2, 3):
        print(__doc__)
        return 2

    in_path = argv[1]
    try:
        with open(in_path, "r", encoding="utf-8") as f:
            document = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        print(f"FAIL ({type(exc).__name__}): {exc}", file=sys.stderr)
        return 1

    try:
        rows = generate_report(document)
    except ReportError as exc:
        print(f"FAIL ({error_kind(exc)}): {exc}", file=sys.stderr)
        print(f"  context: {error_context(exc)}", file=sys.stderr)
        return 1

    if len(argv) == 3:
        out_path = argv[2]
        with open(out_path, "wb") as f:
            f.write(canonical_serialize(rows))
        print(f"Dumped {len(rows) - 1} rows to {out_path}")
    else:
        for row in rows:
            print(row)

    print(f"report_hash={report_hash(rows)}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
