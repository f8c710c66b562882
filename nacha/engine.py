"""
Single pass validation of NACHA ACH files.

The scan walks the lines once, keeping an explicit scan state and the batch
and file accumulators, and collects diagnostics instead of stopping on the
first problem. Every rule runs on its own, so one bad record never hides
findings elsewhere in the file.
"""

import logging
import math

from .base import (
    BLANK,
    BLOCKING_FACTOR,
    ERROR,
    PADDING,
    RECORD_LENGTH,
    RECORD_TYPES,
    classify_line,
    format_dollars,
    is_digits,
    last_non_blank_index,
    make_diagnostic,
    resolve_severities,
    routing_check_digit,
    split_lines,
)
from .layouts import IAT_MANDATORY_ADDENDA, IAT_SEC_CODE

logger = logging.getLogger(__name__)

# Scan states
BEFORE_FILE = "before_file"
IN_FILE = "in_file"
IN_BATCH = "in_batch"
AFTER_FILE = "after_file"

HASH_MODULUS = 10 ** 10

SERVICE_CLASSES = {"200", "220", "225", "280"}
SERVICE_CLASSES_IAT = {"200", "220", "225"}

# (snapshot key, batch control start, end, label); header positions in _open_batch
BATCH_CONTROL_MATCHES = [
    ("service_class", 1, 4, "Service Class Code"),
    ("company_id", 44, 54, "Company Identification"),
    ("odfi", 79, 87, "Originating DFI Identification"),
    ("batch_number", 87, 94, "Batch Number"),
]


def _field(line, start, end):
    """Field text, or None when the record is too short to hold it."""
    if len(line) < end:
        return None
    return line[start:end]


def _add(ctx, idx, start, end, message, severity=ERROR):
    ctx["diagnostics"].append(make_diagnostic(idx, start, end, message, severity))


def _new_totals():
    return {"count": 0, "debit": 0, "credit": 0, "hash": 0}


def _last_record_index(lines, last_idx):
    """Index of the last line that is neither blank nor padding, or -1."""
    for idx in range(last_idx, -1, -1):
        if classify_line(lines[idx]) not in (BLANK, PADDING):
            return idx
    return -1


def _parse_numeric(raw):
    """Zero-filled numeric field: every position must be a digit."""
    return int(raw) if is_digits(raw) else None


def _format_hash(value):
    return f"{value % HASH_MODULUS:010d}"


def _check_equals(ctx, idx, line, start, end, expected, label, severity=ERROR):
    value = _field(line, start, end)
    if value is not None and value != expected:
        _add(ctx, idx, start, end, f"{label} '{value}' must be '{expected}'", severity)


def _check_total(ctx, idx, line, start, end, label, calculated, formatter=str, severity=ERROR):
    """Compares a declared control total with the value computed during the scan."""
    raw = _field(line, start, end)
    if raw is None:
        return
    declared = _parse_numeric(raw)
    if declared is None:
        _add(ctx, idx, start, end, f"{label} '{raw}' is not numeric")
        return
    if declared != calculated:
        _add(
            ctx,
            idx,
            start,
            end,
            f"{label} {formatter(declared)} does not match calculated value {formatter(calculated)}",
            severity,
        )


def _check_record(ctx, idx, line, kind):
    """Record type and record length rules shared by every non padding record."""
    if kind not in RECORD_TYPES:
        _add(
            ctx,
            idx,
            0,
            1,
            f"Unknown record type '{kind}'. Expected one of 1,5,6,7,8,9",
        )

    if len(line) < RECORD_LENGTH:
        _add(
            ctx,
            idx,
            0,
            max(1, len(line)),
            f"Record length {len(line)} is less than required {RECORD_LENGTH} characters",
        )
    elif len(line) > RECORD_LENGTH:
        _add(
            ctx,
            idx,
            RECORD_LENGTH,
            len(line),
            f"Record length {len(line)} exceeds {RECORD_LENGTH} characters (extra trailing data)",
            ctx["severities"]["overlong_record"],
        )


def _count_record(ctx, amount=0, side=None, routing=None):
    """Adds one entry/addenda record to the open batch (if any) and to the file."""
    targets = [ctx["file"]]
    if ctx["batch"] is not None:
        targets.append(ctx["batch"])
    for totals in targets:
        totals["count"] += 1
        if side:
            totals[side] += amount
        if routing is not None:
            totals["hash"] += routing


def _on_file_header(ctx, idx, line):
    if ctx["header_seen"]:
        _add(ctx, idx, 0, 1, "Multiple File Header records (type 1) found")
    if idx != 0:
        _add(ctx, idx, 0, 1, "File Header (type 1) should be the first record")
    ctx["header_seen"] = True

    _check_equals(ctx, idx, line, 1, 3, "01", "Priority Code")

    destination = _field(line, 3, 13)
    if destination is not None and not destination.strip():
        _add(ctx, idx, 3, 13, "Immediate Destination is blank")
    origin = _field(line, 13, 23)
    if origin is not None and not origin.strip():
        _add(ctx, idx, 13, 23, "Immediate Origin is blank")

    creation_date = _field(line, 23, 29)
    if creation_date is not None and not is_digits(creation_date, 6):
        _add(ctx, idx, 23, 29, f"File Creation Date '{creation_date}' must be YYMMDD")
    creation_time = _field(line, 29, 33)
    if creation_time is not None and creation_time.strip() and not is_digits(creation_time, 4):
        _add(
            ctx,
            idx,
            29,
            33,
            f"File Creation Time '{creation_time}' should be HHMM",
            ctx["severities"]["creation_time"],
        )

    _check_equals(ctx, idx, line, 34, 37, "094", "Record Size")
    _check_equals(ctx, idx, line, 37, 39, "10", "Blocking Factor")
    _check_equals(ctx, idx, line, 39, 40, "1", "Format Code")

    if ctx["state"] == BEFORE_FILE:
        return IN_FILE
    return ctx["state"]


def _open_batch(idx, line):
    def snapshot(start, end):
        value = _field(line, start, end)
        return value.strip() if value is not None else None

    totals = _new_totals()
    totals.update(
        {
            "line": idx,
            "service_class": snapshot(1, 4),
            "company_id": snapshot(40, 50),
            "sec_code": line[50:53].strip(),
            "odfi": snapshot(79, 87),
            "batch_number": snapshot(87, 94),
        }
    )
    return totals


def _on_batch_header(ctx, idx, line):
    ctx["file"]["batches"] += 1
    if not ctx["header_seen"]:
        _add(ctx, idx, 0, 1, "Batch Header (type 5) appears before File Header (type 1)")
    if ctx["state"] == IN_BATCH:
        _add(ctx, idx, 0, 1, "Nested Batch Header (type 5) without closing previous batch (type 8)")

    batch = _open_batch(idx, line)
    ctx["batch"] = batch
    ctx["sec_code"] = batch["sec_code"]
    iat = batch["sec_code"] == IAT_SEC_CODE

    service_class = _field(line, 1, 4)
    allowed = SERVICE_CLASSES_IAT if iat else SERVICE_CLASSES
    if service_class is not None and service_class not in allowed:
        _add(
            ctx,
            idx,
            1,
            4,
            f"Service Class Code '{service_class}' is invalid for SEC code "
            f"'{batch['sec_code']}' (expected one of {', '.join(sorted(allowed))})",
        )

    if iat:
        indicator = _field(line, 4, 20)
        if indicator is not None and indicator.strip() != IAT_SEC_CODE:
            _add(ctx, idx, 4, 20, f"IAT Indicator '{indicator.strip()}' must read 'IAT'")

    effective_date = _field(line, 69, 75)
    if effective_date is not None and not is_digits(effective_date, 6):
        _add(ctx, idx, 69, 75, f"Effective Entry Date '{effective_date}' must be YYMMDD")

    _check_equals(ctx, idx, line, 78, 79, "1", "Originator Status Code")

    return IN_BATCH


def _on_entry_detail(ctx, idx, line):
    if ctx["state"] != IN_BATCH:
        _add(ctx, idx, 0, 1, "Record type 6 appears outside of an open batch (type 5..8)")

    side = None
    amount = 0
    transaction_code = _field(line, 1, 3)
    if transaction_code is not None and not is_digits(transaction_code, 2):
        _add(ctx, idx, 1, 3, f"Transaction Code '{transaction_code}' must be 2 digits")
        transaction_code = None

    raw_amount = _field(line, 29, 39)
    if raw_amount is not None:
        parsed = _parse_numeric(raw_amount)
        if parsed is None:
            _add(ctx, idx, 29, 39, f"Amount '{raw_amount}' is not numeric")
        elif transaction_code is not None:
            amount = parsed
            side = "credit" if int(transaction_code[1]) <= 4 else "debit"

    routing = None
    rdfi = _field(line, 3, 11)
    if rdfi is not None:
        if not is_digits(rdfi, 8):
            _add(ctx, idx, 3, 11, f"Receiving DFI Identification '{rdfi}' must be 8 digits")
        else:
            routing = int(rdfi)
            check_digit = _field(line, 11, 12)
            expected = routing_check_digit(rdfi)
            if check_digit is not None and check_digit != str(expected):
                _add(
                    ctx,
                    idx,
                    11,
                    12,
                    f"Invalid Check Digit '{check_digit}' for routing prefix {rdfi} (expected {expected})",
                )

    _count_record(ctx, amount, side, routing)

    indicator = _field(line, 78, 79)
    if ctx["sec_code"] == IAT_SEC_CODE:
        if indicator is not None and indicator != "1":
            _add(ctx, idx, 78, 79, f"IAT Addenda Record Indicator '{indicator}' must be '1'")
        declared = _field(line, 12, 16)
        if declared is not None:
            addenda = _parse_numeric(declared)
            if addenda is None or addenda < IAT_MANDATORY_ADDENDA:
                _add(
                    ctx,
                    idx,
                    12,
                    16,
                    f"IAT entries require at least {IAT_MANDATORY_ADDENDA} addenda records "
                    f"(Number of Addenda Records is '{declared.strip()}')",
                )
    elif indicator is not None and indicator not in ("0", "1"):
        _add(ctx, idx, 78, 79, f"Addenda Record Indicator '{indicator}' must be '0' or '1'")

    return ctx["state"]


def _on_addenda(ctx, idx, line):
    if ctx["state"] != IN_BATCH:
        _add(ctx, idx, 0, 1, "Record type 7 appears outside of an open batch (type 5..8)")
    _count_record(ctx)
    return ctx["state"]


def _on_batch_control(ctx, idx, line):
    batch = ctx["batch"]
    if ctx["state"] != IN_BATCH or batch is None:
        _add(ctx, idx, 0, 1, "Batch Control (type 8) appears without a matching Batch Header (type 5)")
        return ctx["state"]

    for key, start, end, label in BATCH_CONTROL_MATCHES:
        value = _field(line, start, end)
        expected = batch[key]
        if value is None or expected is None:
            continue
        if value.strip() != expected:
            _add(
                ctx,
                idx,
                start,
                end,
                f"{label} '{value.strip()}' does not match Batch Header (expected '{expected}')",
            )

    _check_total(ctx, idx, line, 4, 10, "Entry/Addenda Count", batch["count"])
    _check_total(
        ctx, idx, line, 10, 20, "Entry Hash", batch["hash"] % HASH_MODULUS, _format_hash
    )
    _check_total(
        ctx, idx, line, 20, 32, "Total Debit Entry Dollar Amount", batch["debit"], format_dollars
    )
    _check_total(
        ctx, idx, line, 32, 44, "Total Credit Entry Dollar Amount", batch["credit"], format_dollars
    )

    ctx["batch"] = None
    ctx["sec_code"] = ""
    return IN_FILE if ctx["header_seen"] else BEFORE_FILE


def _on_file_control(ctx, idx, line):
    if not ctx["header_seen"]:
        _add(ctx, idx, 0, 1, "File Control (type 9) appears before File Header (type 1)")
    if idx < ctx["last_record"]:
        _add(ctx, idx, 0, 1, "File Control (type 9) should be the final record in the file")
    if ctx["state"] == IN_BATCH:
        _add(ctx, idx, 0, 1, "File closed (type 9) while a batch is still open (missing type 8)")

    totals = ctx["file"]
    blocks = math.ceil(ctx["records"] / BLOCKING_FACTOR)

    _check_total(ctx, idx, line, 1, 7, "Batch Count", totals["batches"])
    _check_total(
        ctx, idx, line, 7, 13, "Block Count", blocks, severity=ctx["severities"]["block_count"]
    )
    _check_total(ctx, idx, line, 13, 21, "Entry/Addenda Count", totals["count"])
    _check_total(
        ctx, idx, line, 21, 31, "Entry Hash", totals["hash"] % HASH_MODULUS, _format_hash
    )
    _check_total(
        ctx, idx, line, 31, 43, "Total Debit Entry Dollar Amount", totals["debit"], format_dollars
    )
    _check_total(
        ctx, idx, line, 43, 55, "Total Credit Entry Dollar Amount", totals["credit"], format_dollars
    )

    ctx["batch"] = None
    ctx["sec_code"] = ""
    return AFTER_FILE


TRANSITIONS = {
    "1": _on_file_header,
    "5": _on_batch_header,
    "6": _on_entry_detail,
    "7": _on_addenda,
    "8": _on_batch_control,
    "9": _on_file_control,
}


def _check_end_of_file(ctx, last_idx):
    lines = ctx["lines"]
    if not ctx["header_seen"]:
        _add(ctx, 0, 0, 1, "Missing File Header (type 1) record")

    last_record = ctx["last_record"]
    if last_record < 0 or classify_line(lines[last_record]) != "9":
        _add(ctx, last_idx, 0, 1, "Missing File Control (type 9) at end of file")

    if ctx["state"] == IN_BATCH and ctx["batch"] is not None:
        _add(
            ctx,
            ctx["batch"]["line"],
            0,
            1,
            "Batch Header (type 5) is never closed by a Batch Control (type 8)",
        )


def validate(text, severities=None):
    """
    Validates the text of a NACHA file and returns the diagnostics found,
    in scan order.

    Each diagnostic is a dict with 'line' (0-based), 'start'/'end' (columns,
    end exclusive), 'message' and 'severity' (ERROR, WARNING, INFORMATION or
    HINT). 'severities' overrides the tolerated-defect severities
    (see DEFAULT_SEVERITIES).
    """
    lines = split_lines(text)
    last_idx = last_non_blank_index(lines)
    if last_idx < 0:
        return []

    ctx = {
        "lines": lines,
        "state": BEFORE_FILE,
        "header_seen": False,
        "sec_code": "",
        "batch": None,
        "file": dict(_new_totals(), batches=0),
        "records": sum(1 for line in lines if line),
        "last_record": _last_record_index(lines, last_idx),
        "severities": resolve_severities(severities),
        "diagnostics": [],
    }
    logger.debug("Validating NACHA text with %d lines (%d records)", len(lines), ctx["records"])

    for idx, line in enumerate(lines):
        kind = classify_line(line)
        if kind == BLANK:
            if idx < last_idx:
                _add(ctx, idx, 0, 0, "Blank line inside the file")
            continue
        if kind == PADDING:
            continue

        _check_record(ctx, idx, line, kind)
        transition = TRANSITIONS.get(kind)
        if transition is not None:
            ctx["state"] = transition(ctx, idx, line)

    _check_end_of_file(ctx, last_idx)

    logger.debug(
        "Validation finished: %d batches, %d entry/addenda records, %d diagnostics",
        ctx["file"]["batches"],
        ctx["file"]["count"],
        len(ctx["diagnostics"]),
    )
    return ctx["diagnostics"]
