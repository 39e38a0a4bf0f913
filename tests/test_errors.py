from monday_client.core.errors import (
    AuthorizationError,
    ComplexityError,
    InternalServerError,
    InvalidRequestError,
    MondayClientError,
    MondayError,
    MondayTimeoutError,
    MondayTransportError,
    RateLimitError,
    ResourceNotFoundError,
)
from monday_client.core.response import Response


def test_bare_error():
    err = MondayError()
    assert err.message is None
    assert err.code is None
    assert err.response is None
    assert err.error_data == {}
    assert err.graphql_errors == []
    assert str(err) == "monday.com API request failed"


def test_explicit_message_and_code():
    err = MondayError("Error message", code=500)
    assert err.message == "Error message"
    assert err.code == 500
    assert str(err) == "Error message"


def test_message_is_prefixed_with_response_message():
    response = Response(422, {"error_message": "Bad column", "status_code": 422})
    err = MondayError("Prefix", response=response)
    assert err.message == "Prefix: Bad column"
    assert err.code == 422


def test_errors_array_is_stringified_into_message():
    response = Response(200, {"errors": [{"message": "x"}]})
    err = MondayError(response=response)
    assert err.message == '[{"message": "x"}]'
    assert err.code == 200


def test_error_data_and_graphql_errors():
    body = {
        "error_data": {"item_id": 1},
        "errors": [
            {
                "message": "Column not found",
                "locations": [{"line": 1, "column": 10}],
                "path": ["change_column_value"],
                "extensions": {"code": "InvalidColumnIdException"},
            }
        ],
    }
    err = InvalidRequestError(response=Response(200, body))
    assert err.error_data == {"item_id": 1}

    (entry,) = err.graphql_errors
    assert entry.message == "Column not found"
    assert entry.code == "InvalidColumnIdException"
    assert entry.locations[0].column == 10


def test_hierarchy():
    for klass in (
        InternalServerError,
        AuthorizationError,
        RateLimitError,
        ResourceNotFoundError,
        InvalidRequestError,
    ):
        assert issubclass(klass, MondayError)
        assert issubclass(klass, MondayClientError)
    assert issubclass(ComplexityError, RateLimitError)
    assert issubclass(MondayTimeoutError, MondayTransportError)
    assert not issubclass(MondayTransportError, MondayError)
