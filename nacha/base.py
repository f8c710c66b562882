"""Shared utilities and helpers for the NACHA validators."""

import re

RECORD_LENGTH = 94
BLOCKING_FACTOR = 10

RECORD_TYPES = {"1", "5", "6", "7", "8", "9"}

FILE_HEADER = "1"
BATCH_HEADER = "5"
ENTRY_DETAIL = "6"
ADDENDA = "7"
BATCH_CONTROL = "8"
FILE_CONTROL = "9"
PADDING = "padding"
BLANK = "blank"

# Same numbering the editors use for their diagnostic severities
ERROR = 0
WARNING = 1
INFORMATION = 2
HINT = 3

SEVERITY_NAMES = {
    "error": ERROR,
    "warning": WARNING,
    "information": INFORMATION,
    "hint": HINT,
}

DEFAULT_SEVERITIES = {
    "overlong_record": HINT,
    "block_count": WARNING,
    "creation_time": WARNING,
}

ROUTING_WEIGHTS = [3, 7, 1, 3, 7, 1, 3, 7]

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(text):
    """
    Splits the file text on CRLF or LF boundaries.
    A final newline produces a trailing empty line, like the editors show it.
    """
    return _LINE_BREAK.split(text or "")


def is_padding(line: str) -> bool:
    """Blocking filler: a full record made only of nines."""
    return len(line) == RECORD_LENGTH and line == "9" * RECORD_LENGTH


def classify_line(line: str) -> str:
    """
    Returns BLANK, PADDING or the one character record type tag.
    Unknown tags are returned as-is; callers check them against RECORD_TYPES.
    """
    if len(line) == 0:
        return BLANK
    if is_padding(line):
        return PADDING
    return line[0]


def last_non_blank_index(lines):
    for idx in range(len(lines) - 1, -1, -1):
        if lines[idx]:
            return idx
    return -1


def routing_check_digit(routing8: str) -> int:
    """
    Check digit of an ABA routing number (9th digit), computed from the
    first 8 digits. The caller must make sure routing8 has 8 digits.
    """
    total = sum(int(d) * weight for d, weight in zip(routing8, ROUTING_WEIGHTS))
    return (10 - (total % 10)) % 10


def validate_routing_number(value: str):
    """
    Validates a full 9 digit routing number typed by the user.

    Returns (errors, info), where:
      - errors: list of messages (size, non numeric, wrong check digit)
      - info: dict with the extracted parts (prefix, check digit, expected)
    """
    errors = []
    info = {}

    digits = (value or "").strip()
    if len(digits) != 9:
        errors.append(f"Invalid length: expected 9 digits, received {len(digits)}.")
        return errors, info
    if not is_digits(digits):
        errors.append(f"Routing number '{digits}' must contain only digits.")
        return errors, info

    prefix = digits[0:8]
    expected = routing_check_digit(prefix)
    found = int(digits[8])
    info["prefix"] = prefix
    info["federal_reserve_district"] = digits[0:2]
    info["check_digit"] = found
    info["expected_check_digit"] = expected

    if expected != found:
        errors.append(f"Invalid check digit. Expected {expected}, found {found}.")

    return errors, info


def is_digits(value: str, size=None) -> bool:
    """ASCII digits only, optionally with an exact size."""
    if not value or not value.isascii() or not value.isdigit():
        return False
    return size is None or len(value) == size


def parse_amount(raw: str):
    """
    Converts a zero-filled cents field into an int.
    Returns None when the field is empty or not numeric.
    """
    raw = (raw or "").strip()
    if not is_digits(raw):
        return None
    return int(raw)


def format_dollars(cents: int) -> str:
    return f"${cents / 100:.2f}"


def make_diagnostic(line, start, end, message, severity=ERROR):
    return {
        "line": line,
        "start": start,
        "end": end,
        "message": message,
        "severity": severity,
    }


def resolve_severities(overrides=None):
    """
    Merges user overrides into DEFAULT_SEVERITIES.
    Values can be the severity numbers or their names ('warning', 'hint', ...).
    """
    severities = dict(DEFAULT_SEVERITIES)
    for key, value in (overrides or {}).items():
        if key not in DEFAULT_SEVERITIES or value is None:
            continue
        if isinstance(value, str):
            value = SEVERITY_NAMES.get(value.strip().lower(), severities[key])
        severities[key] = value
    return severities
