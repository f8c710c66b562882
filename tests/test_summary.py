import pytest

from nacha.summary import summarize


def test_summary_of_well_formed_file(well_formed_text):
    assert summarize(well_formed_text) == {
        "batches": 1,
        "entries": 1,
        "total_debit": 0.0,
        "total_credit": pytest.approx(12.34),
        "net_amount": pytest.approx(12.34),
    }


def test_summary_splits_credits_and_debits(ach):
    lines = [
        ach.file_header(),
        ach.batch_header(),
        ach.entry(tx="22", amount=10000),
        ach.entry(tx="27", amount=2550),
        ach.entry(tx="37", amount=450),
        ach.batch_control(),
        ach.batch_header(batch="0000002"),
        ach.entry(tx="32", amount=1),
        ach.batch_control(),
        ach.file_control(),
    ]
    summary = summarize("\n".join(lines))
    assert summary["batches"] == 2
    assert summary["entries"] == 4
    assert summary["total_credit"] == pytest.approx(100.01)
    assert summary["total_debit"] == pytest.approx(30.00)
    assert summary["net_amount"] == pytest.approx(70.01)


@pytest.mark.parametrize(
    "record",
    [
        "622061000104",
        "62206100010412345678901234567000000X1234",
        "6AA0610001041234567890123456700000012340",
        "6220610001041234567890123456700000000000",
    ],
)
def test_summary_ignores_unreadable_or_zero_amounts(record):
    summary = summarize(record)
    assert summary["entries"] == 1
    assert summary["total_credit"] == 0.0
    assert summary["total_debit"] == 0.0


def test_summary_of_empty_text():
    assert summarize("") == {
        "batches": 0,
        "entries": 0,
        "total_debit": 0.0,
        "total_credit": 0.0,
        "net_amount": 0.0,
    }


def test_summary_does_not_need_a_valid_file():
    summary = summarize("6270610001041234567890123456700000050000")
    assert summary["total_debit"] == pytest.approx(50.0)
    assert summary["net_amount"] == pytest.approx(-50.0)
