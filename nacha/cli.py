"""Command line utility for the NACHA validator."""

import logging
import os
import sys

from .base import ERROR, HINT, INFORMATION, WARNING
from .engine import validate
from .summary import summarize

logger = logging.getLogger(__name__)

SEVERITY_LABELS = {
    ERROR: "Errors",
    WARNING: "Warnings",
    INFORMATION: "Information",
    HINT: "Hints",
}


def print_report(diagnostics, summary):
    """Prints the diagnostics grouped by severity, then the quick summary."""
    if not diagnostics:
        print("OK. No problems found in the file.")

    for severity, label in SEVERITY_LABELS.items():
        grouped = [d for d in diagnostics if d["severity"] == severity]
        if not grouped:
            continue
        print(f"\n{label}:")
        for diag in grouped:
            print(
                f"   - Line {diag['line'] + 1}, col {diag['start'] + 1}-{diag['end']}: "
                f"{diag['message']}"
            )

    print("\n=== Quick summary ===")
    print(f"Batches: {summary['batches']}")
    print(f"Entries: {summary['entries']}")
    print(f"Credits: $ {summary['total_credit']:.2f}")
    print(f"Debits: $ {summary['total_debit']:.2f}")
    print(f"Net amount: $ {summary['net_amount']:.2f}")


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    print("=== NACHA ACH file validator ===")
    if argv:
        path = argv[0].strip()
    else:
        path = input("Enter the full path of the ACH file: ").strip()

    if not os.path.isfile(path):
        print("Error: file not found. Check the path and try again.")
        return 1

    with open(path, "r", encoding="latin-1", newline="") as f:
        text = f.read()

    if not text:
        print("Error: file is empty.")
        return 1

    logger.info("Validating %s", path)
    diagnostics = validate(text)
    print_report(diagnostics, summarize(text))

    return 1 if any(d["severity"] == ERROR for d in diagnostics) else 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    sys.exit(main())
