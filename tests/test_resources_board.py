import pytest
from monday_client import EnumToken, InvalidRequestError, ItemsPage
from monday_client.resources import board


def test_query_boards(api, client):
    board.query(client)
    board.query(client, args={"ids": [123]})

    assert api.queries == [
        "query{boards{id name description}}",
        "query{boards(ids: [123]){id name description}}",
    ]


def test_create_board_with_enum(api, client):
    api.respond(200, {"data": {"create_board": {"id": "1", "name": "New"}}})

    response = client.board.create(
        args={"board_name": "New", "board_kind": EnumToken("public")}
    )

    assert api.last_query == (
        'mutation{create_board(board_name: "New", board_kind: public){id name description}}'
    )
    assert response.dig("data", "create_board", "name") == "New"


def test_duplicate_board_wraps_selection(api, client):
    board.duplicate(
        client,
        args={"board_id": 123, "duplicate_type": EnumToken("duplicate_board_with_structure")},
        select=["id"],
    )
    assert api.last_query == (
        "mutation{duplicate_board(board_id: 123, "
        "duplicate_type: duplicate_board_with_structure){board{id}}}"
    )


def test_update_board_has_no_selection(api, client):
    api.respond(200, {"data": {"update_board": '{"success":true}'}})

    response = board.update(
        client,
        args={
            "board_id": 123,
            "board_attribute": EnumToken("description"),
            "new_value": "Updated",
        },
    )

    assert api.last_query == (
        'mutation{update_board(board_id: 123, board_attribute: description, '
        'new_value: "Updated")}'
    )
    assert response.data == {"update_board": '{"success":true}'}


def test_archive_and_delete(api, client):
    board.archive(client, 123)
    board.delete(client, "123")

    assert api.queries == [
        "mutation{archive_board(board_id: 123){id}}",
        'mutation{delete_board(board_id: "123"){id}}',
    ]


def test_items_page_first_page(api, client):
    board.items_page(client, 123)
    assert api.last_query == (
        "query{boards(ids: [123]){id items_page(limit: 25){cursor items{id name}}}}"
    )


def test_items_page_with_cursor(api, client):
    board.items_page(client, [123, 456], limit=50, cursor="abc", select=["id"])
    assert api.last_query == (
        'query{boards(ids: [123, 456]){id items_page(limit: 50, cursor: "abc")'
        "{cursor items{id}}}}"
    )


def test_items_page_with_query_params(api, client):
    board.items_page(
        client,
        123,
        query_params={
            "rules": [{"column_id": "status", "compare_value": [1]}],
            "operator": EnumToken("and"),
        },
    )
    assert api.last_query == (
        "query{boards(ids: [123]){id items_page(limit: 25, query_params: "
        '{rules: [{column_id: "status", compare_value: [1]}], operator: and})'
        "{cursor items{id name}}}}"
    )


@pytest.mark.parametrize("limit", [0, 501])
def test_items_page_limit_bounds(api, client, limit):
    with pytest.raises(ValueError):
        board.items_page(client, 123, limit=limit)
    assert api.requests == []


def test_items_page_pagination_loop(api, client):
    pages = [
        {"cursor": "c1", "items": [{"id": "1", "name": "A"}]},
        {"cursor": None, "items": [{"id": "2", "name": "B"}]},
    ]
    seen, cursor = [], None
    for page_body in pages:
        api.respond(200, {"data": {"boards": [{"id": "123", "items_page": page_body}]}})
        page = ItemsPage.from_response(board.items_page(client, 123, cursor=cursor))
        seen.extend(i.name for i in page.items)
        cursor = page.cursor
        if not page.has_more:
            break

    assert seen == ["A", "B"]
    assert 'cursor: "c1"' in api.queries[1]


def test_invalid_board_id_raises(api, client):
    api.respond(
        200,
        {
            "errors": [
                {
                    "message": "Board not found",
                    "extensions": {"code": "InvalidBoardIdException"},
                }
            ]
        },
    )
    with pytest.raises(InvalidRequestError) as exc:
        board.query(client, args={"ids": [0]})
    assert exc.value.error_code == "InvalidBoardIdException"
