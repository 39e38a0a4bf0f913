import pytest
from monday_client.core.payload import dig, first_error_message, get_data, get_list

BODY = {
    "data": {
        "boards": [
            {"id": "1", "items_page": {"cursor": "abc", "items": [{"id": "10"}]}},
        ],
        "create_item": {"id": "5", "name": "Task"},
    }
}


def test_dig_basic_cases():
    assert dig(BODY, "data", "boards", 0, "id") == "1"
    assert dig(BODY, "data", "boards", 0, "items_page", "cursor") == "abc"
    assert dig(BODY, "data", "boards", 3, "id") is None
    assert dig(BODY, "data", "missing", "id") is None
    assert dig(BODY, "data", "boards", "id") is None
    assert dig(None, "data") is None
    assert dig(BODY) is BODY


def test_get_data():
    assert get_data(BODY, "create_item") == {"id": "5", "name": "Task"}
    assert get_data({}, "create_item") is None
    assert get_data({"data": None}, "create_item") is None


def test_get_list_cases():
    assert get_list(BODY, "data", "boards", 0, "items_page", "items") == [{"id": "10"}]
    assert get_list(BODY, "data", "nope") == []
    assert get_list({"errors": [{"message": "x"}, "junk"]}, "errors") == [{"message": "x"}]
    with pytest.raises(ValueError):
        get_list(BODY, "data", "create_item")


def test_first_error_message():
    assert first_error_message({"errors": [{"message": "Bad"}]}) == "Bad"
    assert first_error_message({"error_message": "Oops"}) == "Oops"
    assert first_error_message({"errors": []}) is None
    assert first_error_message({}) is None
