"""NACHA ACH file validators, layouts and helpers."""
from .base import (
    DEFAULT_SEVERITIES,
    ERROR,
    HINT,
    INFORMATION,
    PADDING,
    BLANK,
    RECORD_LENGTH,
    RECORD_TYPES,
    SEVERITY_NAMES,
    WARNING,
    classify_line,
    is_padding,
    routing_check_digit,
    split_lines,
    validate_routing_number,
)

from .layouts import (
    IAT_SEC_CODE,
    LAYOUTS_DOMESTIC,
    LAYOUTS_IAT,
    LAYOUTS_IAT_ADDENDA,
    RECORD_DESCRIPTIONS,
    field_at,
    fields_for,
    record_description,
)

from .engine import (
    validate
)

from .summary import (
    summarize
)

from .describe import (
    describe_line,
    describe_position,
    sec_code_at,
    sec_codes
)

__all__ = [
    "DEFAULT_SEVERITIES",
    "ERROR",
    "HINT",
    "INFORMATION",
    "PADDING",
    "BLANK",
    "RECORD_LENGTH",
    "RECORD_TYPES",
    "SEVERITY_NAMES",
    "WARNING",
    "classify_line",
    "is_padding",
    "routing_check_digit",
    "split_lines",
    "validate_routing_number",
    "IAT_SEC_CODE",
    "LAYOUTS_DOMESTIC",
    "LAYOUTS_IAT",
    "LAYOUTS_IAT_ADDENDA",
    "RECORD_DESCRIPTIONS",
    "field_at",
    "fields_for",
    "record_description",
    "validate",
    "summarize",
    "describe_line",
    "describe_position",
    "sec_code_at",
    "sec_codes",
]
