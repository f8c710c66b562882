from types import SimpleNamespace

import pytest


def pad(value, size):
    return str(value).ljust(size)


def num(value, size):
    return str(value).rjust(size, "0")


def file_header(priority="01", destination=" 061000104", origin="1234567890",
                date="231026", time="0900", size="094", blocking="10", format_code="1"):
    return (
        "1" + priority + destination + origin + date + time + "A" + size + blocking
        + format_code + pad("DEST BANK", 23) + pad("ORIGIN CO", 23) + pad("", 8)
    )


def batch_header(service="200", company="1234567890", sec="PPD", effective="231026",
                 status="1", odfi="06100010", batch="0000001", iat_indicator="IAT"):
    if sec == "IAT":
        return (
            "5" + service + pad(iat_indicator, 16) + "FF" + "3" + pad("", 15) + "MX"
            + company + sec + pad("PAYROLL", 10) + "USD" + "MXN" + effective + "   "
            + status + odfi + batch
        )
    return (
        "5" + service + pad("ACME CORP", 16) + pad("", 20) + company + sec
        + pad("PAYROLL", 10) + pad("", 6) + effective + "   " + status + odfi + batch
    )


def entry(tx="22", rdfi="06100010", check="4", amount=1234, indicator="0"):
    return (
        "6" + tx + rdfi + check + pad("123456789", 17) + num(amount, 10)
        + pad("ID12345", 15) + pad("INDIVIDUAL NAME", 22) + "  " + indicator
        + "061000100000001"
    )


def iat_entry(tx="22", rdfi="06100010", check="4", addenda="0007", amount=5000, indicator="1"):
    return (
        "6" + tx + rdfi + check + addenda + pad("", 13) + num(amount, 10)
        + pad("FOREIGN-ACCOUNT-123", 35) + "  " + " " + " " + indicator
        + "061000100000001"
    )


def addenda(type_code="05", info="PAYMENT INFO"):
    return "7" + type_code + pad(info, 80) + "0001" + "0000001"


def iat_addenda(type_code):
    return "7" + type_code + pad(f"IAT ADDENDA {type_code}", 84) + "0000001"


def batch_control(service="200", count=1, entry_hash=6100010, debit=0, credit=1234,
                  company="1234567890", odfi="06100010", batch="0000001"):
    return (
        "8" + service + num(count, 6) + num(entry_hash, 10) + num(debit, 12)
        + num(credit, 12) + company + pad("", 19) + pad("", 6) + odfi + batch
    )


def file_control(batches=1, blocks=1, count=1, entry_hash=6100010, debit=0, credit=1234):
    return (
        "9" + num(batches, 6) + num(blocks, 6) + num(count, 8) + num(entry_hash, 10)
        + num(debit, 12) + num(credit, 12) + pad("", 39)
    )


def well_formed_lines():
    return [file_header(), batch_header(), entry(), batch_control(), file_control()]


def iat_lines(declared="0007", addenda_types=("10", "11", "12", "13", "14", "15", "16"),
              control_count=8, blocks=2):
    return (
        [file_header(), batch_header(service="220", sec="IAT"), iat_entry(addenda=declared)]
        + [iat_addenda(code) for code in addenda_types]
        + [
            batch_control(service="220", count=control_count, credit=5000),
            file_control(blocks=blocks, count=control_count, credit=5000),
        ]
    )


@pytest.fixture
def ach():
    return SimpleNamespace(
        pad=pad,
        num=num,
        file_header=file_header,
        batch_header=batch_header,
        entry=entry,
        iat_entry=iat_entry,
        addenda=addenda,
        iat_addenda=iat_addenda,
        batch_control=batch_control,
        file_control=file_control,
        well_formed_lines=well_formed_lines,
        iat_lines=iat_lines,
    )


@pytest.fixture
def well_formed_text():
    return "\n".join(well_formed_lines())


@pytest.fixture
def iat_text():
    return "\n".join(iat_lines())
