"""Field information for a position of the file (what an editor hover shows)."""

from .base import BATCH_HEADER, FILE_HEADER, is_padding, split_lines
from .layouts import PADDING_DESCRIPTION, RECORD_DESCRIPTIONS, field_at, record_description

BATCH_RECORDS = {"5", "6", "7", "8"}


def _header_sec_code(line):
    if line[0:1] == BATCH_HEADER and len(line) >= 53:
        return line[50:53].strip()
    return None


def sec_code_at(lines, line_index):
    """
    SEC code of the nearest Batch Header at or above the line.
    The search stops at a File Header; only batch records (5 to 8) have one.
    """
    if line_index < 0 or line_index >= len(lines):
        return ""
    if lines[line_index][0:1] not in BATCH_RECORDS:
        return ""
    for idx in range(line_index, -1, -1):
        sec_code = _header_sec_code(lines[idx])
        if sec_code is not None:
            return sec_code
        if lines[idx][0:1] == FILE_HEADER:
            break
    return ""


def sec_codes(lines):
    """sec_code_at for every line, in a single forward pass."""
    codes = []
    current = ""
    for line in lines:
        sec_code = _header_sec_code(line)
        if sec_code is not None:
            current = sec_code
        elif line[0:1] == FILE_HEADER:
            current = ""
        codes.append(current if line[0:1] in BATCH_RECORDS else "")
    return codes


def describe_line(line, column, sec_code=""):
    """
    Describes the record and the field under the column of one line.

    Returns None for blank lines and unknown record types. Otherwise a dict
    with:
      - record: description of the record type (with the SEC code, if any)
      - sec_code: SEC code of the enclosing batch
      - field: the field descriptor, or None past the last field
      - value: field text without surrounding spaces
      - position: 1-based 'start-end' positions of the field
      - length: field size
    """
    if not line:
        return None

    if is_padding(line):
        return {
            "record": PADDING_DESCRIPTION,
            "sec_code": "",
            "field": None,
            "value": "",
            "position": None,
            "length": None,
        }

    record_type = line[0]
    if record_type not in RECORD_DESCRIPTIONS:
        return None

    field = field_at(record_type, column, line, sec_code)
    info = {
        "record": record_description(record_type, sec_code),
        "sec_code": sec_code,
        "field": field,
        "value": "",
        "position": None,
        "length": None,
    }
    if field:
        info["value"] = line[field["start"]:field["end"]].strip()
        info["position"] = f"{field['start'] + 1}-{field['end']}"
        info["length"] = field["end"] - field["start"]
    return info


def describe_position(text, line_index, column):
    """describe_line for (line_index, column) of the whole text; None out of range."""
    lines = split_lines(text)
    if line_index < 0 or line_index >= len(lines):
        return None
    return describe_line(lines[line_index], column, sec_code_at(lines, line_index))
