"""NACHA record layouts and field lookups."""
from .domestic import (
    LAYOUT_ADDENDA,
    LAYOUT_BATCH_CONTROL,
    LAYOUT_BATCH_HEADER,
    LAYOUT_ENTRY_DETAIL,
    LAYOUT_FILE_CONTROL,
    LAYOUT_FILE_HEADER,
    LAYOUTS_DOMESTIC,
    PADDING_DESCRIPTION,
    RECORD_DESCRIPTIONS,
)

from .iat import (
    IAT_MANDATORY_ADDENDA,
    IAT_SEC_CODE,
    LAYOUT_IAT_BATCH_HEADER,
    LAYOUT_IAT_ENTRY_DETAIL,
    LAYOUTS_IAT,
    LAYOUTS_IAT_ADDENDA,
)


def fields_for(record_type: str, line: str = "", sec_code: str = ""):
    """
    Returns the ordered field list for a record.

    The Standard Entry Class of the enclosing batch decides the layout:
    - IAT Batch Header / Entry Detail use the IAT layouts;
    - IAT addenda pick one of the mandatory layouts (10 to 16) from the
      addenda type code in positions 2-3, falling back to the generic one;
    - everything else uses the domestic layout.
    Unknown record types give an empty list.
    """
    sec_code = (sec_code or "").strip()
    if sec_code == IAT_SEC_CODE:
        if record_type in LAYOUTS_IAT:
            return list(LAYOUTS_IAT[record_type])
        if record_type == "7":
            addenda_type = (line or "")[1:3]
            if addenda_type in LAYOUTS_IAT_ADDENDA:
                return list(LAYOUTS_IAT_ADDENDA[addenda_type])
    return list(LAYOUTS_DOMESTIC.get(record_type, []))


def field_at(record_type: str, column: int, line: str = "", sec_code: str = ""):
    """First field whose [start, end) range holds the column, or None."""
    for field in fields_for(record_type, line, sec_code):
        if field["start"] <= column < field["end"]:
            return field
    return None


def record_description(record_type: str, sec_code: str = ""):
    description = RECORD_DESCRIPTIONS.get(record_type)
    if description and sec_code and record_type in {"5", "6", "7", "8"}:
        return f"{description} ({sec_code})"
    return description


__all__ = [
    "LAYOUT_ADDENDA",
    "LAYOUT_BATCH_CONTROL",
    "LAYOUT_BATCH_HEADER",
    "LAYOUT_ENTRY_DETAIL",
    "LAYOUT_FILE_CONTROL",
    "LAYOUT_FILE_HEADER",
    "LAYOUTS_DOMESTIC",
    "PADDING_DESCRIPTION",
    "RECORD_DESCRIPTIONS",
    "IAT_MANDATORY_ADDENDA",
    "IAT_SEC_CODE",
    "LAYOUT_IAT_BATCH_HEADER",
    "LAYOUT_IAT_ENTRY_DETAIL",
    "LAYOUTS_IAT",
    "LAYOUTS_IAT_ADDENDA",
    "fields_for",
    "field_at",
    "record_description",
]
