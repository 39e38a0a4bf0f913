import io
from pathlib import Path

import pytest
from monday_client import MondayClient
from monday_client.core.errors import InvalidRequestError, MondayClientError
from monday_client.resources import file as file_resource


@pytest.fixture
def sample(tmp_path: Path):
    # small temp file
    f = tmp_path / "sample.txt"
    f.write_text("hello")
    return f


def test_add_file_to_column_posts_multipart(api, client, sample):
    api.respond(200, {"data": {"add_file_to_column": {"id": "99"}}})

    response = file_resource.add_file_to_column(
        client, args={"item_id": 1, "column_id": "files", "file": str(sample)}
    )

    assert response.dig("data", "add_file_to_column", "id") == "99"
    req = api.requests[0]
    assert str(req.url) == "https://api.monday.com/v2/file"
    assert "multipart/form-data" in req.headers["Content-Type"]
    assert req.headers["Authorization"] == "test-token"
    assert req.headers["API-Version"] == "2023-07"

    body = api.bodies[0]
    assert b'name="query"' in body
    assert (
        b'mutation($file: File!){add_file_to_column(item_id: 1, column_id: "files", '
        b"file: $file){id}}" in body
    )
    assert b'name="variables[file]"; filename="sample.txt"' in body
    assert b"Content-Type: text/plain" in body
    assert b"hello" in body


def test_add_file_to_update_from_file_object(api, client):
    api.respond(200, {"data": {"add_file_to_update": {"id": "5"}}})

    client.file.add_file_to_update(
        args={"update_id": 7, "file": io.BytesIO(b"raw bytes")}
    )

    body = api.bodies[0]
    assert b"add_file_to_update(update_id: 7, file: $file)" in body
    assert b'filename="upload"' in body
    assert b"raw bytes" in body


def test_file_tuple_keeps_filename(api, client):
    client.file.add_file_to_column(
        args={"item_id": 1, "column_id": "files", "file": ("report.pdf", b"%PDF")}
    )

    body = api.bodies[0]
    assert b'filename="report.pdf"' in body
    assert b"Content-Type: application/pdf" in body


def test_missing_file_raises_before_request(api, client, tmp_path: Path):
    missing = tmp_path / "nope.bin"
    with pytest.raises(MondayClientError, match="File not found"):
        client.file.add_file_to_column(
            args={"item_id": 1, "column_id": "files", "file": str(missing)}
        )
    assert api.requests == []


def test_file_argument_is_required(client):
    with pytest.raises(ValueError):
        client.file.add_file_to_column(args={"item_id": 1, "column_id": "files"})


def test_upload_errors_are_classified(api, client, sample):
    api.respond(
        200,
        {
            "errors": [
                {
                    "message": "Column not found",
                    "extensions": {"code": "InvalidColumnIdException"},
                }
            ]
        },
    )

    with pytest.raises(InvalidRequestError):
        client.file.add_file_to_column(
            args={"item_id": 1, "column_id": "nope", "file": sample}
        )


def test_make_file_request_accepts_path_objects(api, sample):
    with MondayClient(token="t") as c:
        c.make_file_request(
            "mutation($file: File!){add_file_to_update(update_id: 1, file: $file){id}}",
            {"file": sample},
        )
    assert "Authorization" in api.requests[0].headers


def test_clear_file_column(api, client):
    client.file.clear_file_column(
        args={"board_id": 123, "item_id": 456, "column_id": "files"}
    )
    assert api.last_query == (
        r'mutation{change_column_value(board_id: 123, item_id: 456, column_id: "files", '
        r'value: "{\"clear_all\":true}"){id}}'
    )
