import io

import pytest

from app import create_app
from nacha import validate


@pytest.fixture
def client():
    app = create_app({"TESTING": True})
    return app.test_client()


def upload(client, text, name="payments.ach"):
    return client.post(
        "/validate",
        data={"file": (io.BytesIO(text.encode("latin-1")), name)},
        content_type="multipart/form-data",
    )


def test_index(client):
    response = client.get("/")
    assert response.status_code == 200
    assert b"NACHA ACH file validator" in response.data


def test_validate_without_file(client):
    response = client.post("/validate", data={}, content_type="multipart/form-data")
    assert response.status_code == 400


def test_validate_clean_file(client, well_formed_text):
    response = upload(client, well_formed_text)
    assert response.status_code == 200
    assert b"No problems found" in response.data
    assert b"$ 12.34" in response.data


def test_validate_shows_field_of_each_problem(client, ach):
    lines = ach.well_formed_lines()
    lines[2] = ach.entry(check="7")
    response = upload(client, "\n".join(lines))
    assert response.status_code == 200
    assert b"Invalid Check Digit" in response.data
    assert b"(Check Digit)" in response.data
    assert b'<h2 class="error">' in response.data


def test_block_count_severity_from_config(ach, well_formed_text):
    lines = ach.well_formed_lines()
    lines[-1] = ach.file_control(blocks=5)
    text = "\n".join(lines)

    default_client = create_app({"TESTING": True}).test_client()
    assert b'<h2 class="warning">' in upload(default_client, text).data

    strict = create_app({"TESTING": True, "BLOCK_COUNT_SEVERITY": "error"}).test_client()
    data = upload(strict, text).data
    assert b'<h2 class="error">' in data
    assert b'<h2 class="warning">' not in data


def test_block_count_severity_from_environment(monkeypatch, ach):
    monkeypatch.setenv("FLASK_BLOCK_COUNT_SEVERITY", "error")
    lines = ach.well_formed_lines()
    lines[-1] = ach.file_control(blocks=5)
    client = create_app({"TESTING": True}).test_client()
    assert b'<h2 class="error">' in upload(client, "\n".join(lines)).data


def test_routing_page(client):
    assert client.get("/routing").status_code == 200

    valid = client.post("/routing", data={"routing_number": "061000104"})
    assert b"is valid" in valid.data

    wrong = client.post("/routing", data={"routing_number": "061000105"})
    assert b"Invalid check digit. Expected 4, found 5." in wrong.data


def test_annotate_fields_splits_the_upload_once(monkeypatch):
    import app as web

    calls = []
    split = web.split_lines

    def counting_split(text):
        calls.append(text)
        return split(text)

    monkeypatch.setattr(web, "split_lines", counting_split)
    text = "\n".join(["2" + "X" * 93] * 3000)
    diagnostics = validate(text)
    annotated = web.annotate_fields(text, diagnostics)

    assert len(calls) == 1
    assert len(annotated) == len(diagnostics) == 3002
    assert all(item["field"] is None for item in annotated)
    assert annotated[0]["record"] == "2" + "X" * 93


def test_annotate_fields_uses_the_batch_sec_code(ach):
    import app as web

    lines = ach.iat_lines(declared="0002")
    text = "\n".join(lines)
    annotated = web.annotate_fields(text, validate(text))
    assert [(item["line"], item["field"]) for item in annotated] == [
        (2, "Number of Addenda Records")
    ]
