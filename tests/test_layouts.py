import pytest

from nacha.layouts import (
    LAYOUTS_DOMESTIC,
    LAYOUTS_IAT,
    LAYOUTS_IAT_ADDENDA,
    field_at,
    fields_for,
    record_description,
)

ALL_LAYOUTS = (
    [("domestic " + k, v) for k, v in LAYOUTS_DOMESTIC.items()]
    + [("iat " + k, v) for k, v in LAYOUTS_IAT.items()]
    + [("iat addenda " + k, v) for k, v in LAYOUTS_IAT_ADDENDA.items()]
)


@pytest.mark.parametrize("name, fields", ALL_LAYOUTS, ids=[n for n, _ in ALL_LAYOUTS])
def test_layout_covers_the_whole_record(name, fields):
    assert fields[0]["start"] == 0
    assert fields[-1]["end"] == 94
    for previous, current in zip(fields, fields[1:]):
        assert previous["start"] < previous["end"]
        assert current["start"] == previous["end"]


def test_domestic_batch_header_is_used_outside_iat():
    names = [f["name"] for f in fields_for("5", sec_code="PPD")]
    assert "Company Name" in names
    assert "IAT Indicator" not in names


def test_iat_batch_header_and_entry_layouts():
    header = [f["name"] for f in fields_for("5", sec_code="IAT")]
    assert "IAT Indicator" in header
    assert "ISO Destination Currency Code" in header

    assert field_at("6", 13, sec_code="IAT")["name"] == "Number of Addenda Records"
    assert field_at("6", 13, sec_code="PPD")["name"] == "DFI Account Number"


@pytest.mark.parametrize(
    "code, field_name",
    [
        ("10", "Foreign Payment Amount"),
        ("11", "Originator Name"),
        ("12", "Originator City & State/Province"),
        ("13", "Originating DFI Name"),
        ("14", "Receiving DFI Name"),
        ("15", "Receiver Identification Number"),
        ("16", "Receiver City & State/Province"),
        ("17", "Payment Related Information"),
        ("99", "Payment Related Information"),
    ],
)
def test_iat_addenda_layout_follows_type_code(code, field_name):
    line = "7" + code + " " * 91
    names = [f["name"] for f in fields_for("7", line, "IAT")]
    assert field_name in names


def test_iat_addenda_code_ignored_outside_iat():
    names = [f["name"] for f in fields_for("7", "710" + " " * 91, "PPD")]
    assert "Foreign Payment Amount" not in names
    assert "Payment Related Information" in names


def test_field_at_positions():
    assert field_at("6", 11)["name"] == "Check Digit"
    assert field_at("1", 0)["name"] == "Record Type Code"
    assert field_at("9", 93)["name"] == "Reserved"
    assert field_at("6", 94) is None
    assert field_at("X", 0) is None
    assert fields_for("X") == []


def test_fields_for_returns_a_copy():
    fields = fields_for("1")
    fields.clear()
    assert len(fields_for("1")) == 13


def test_sec_code_is_trimmed_but_case_sensitive():
    assert field_at("5", 5, sec_code=" IAT ")["name"] == "IAT Indicator"
    assert field_at("5", 5, sec_code="iat")["name"] == "Company Name"
    assert field_at("6", 13, sec_code="iat")["name"] == "DFI Account Number"


def test_record_description():
    assert record_description("5", "IAT").endswith("(IAT)")
    assert "(IAT)" not in record_description("1", "IAT")
    assert record_description("6").startswith("Entry Detail Record")
    assert record_description("X") is None
