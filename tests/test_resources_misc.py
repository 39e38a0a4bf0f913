from monday_client import NULL, EnumToken
from monday_client.resources import (
    account,
    activity_log,
    board_view,
    folder,
    group,
    me,
    update,
    workspace,
)


def test_groups(api, client):
    group.query(client, args={"ids": 123})
    group.create(client, args={"board_id": 123, "group_name": "G"})
    group.update(
        client,
        args={
            "board_id": 123,
            "group_id": "topics",
            "group_attribute": EnumToken("title"),
            "new_value": "X",
        },
    )
    group.delete(client, args={"board_id": 123, "group_id": "topics"})
    group.archive(client, args={"board_id": 123, "group_id": "topics"})
    group.duplicate(client, args={"board_id": 123, "group_id": "topics"})
    group.move_item(client, args={"item_id": 456, "group_id": "topics"})

    assert api.queries == [
        "query{boards(ids: 123){groups{id title}}}",
        'mutation{create_group(board_id: 123, group_name: "G"){id title}}',
        'mutation{update_group(board_id: 123, group_id: "topics", '
        'group_attribute: title, new_value: "X"){id}}',
        'mutation{delete_group(board_id: 123, group_id: "topics"){id}}',
        'mutation{archive_group(board_id: 123, group_id: "topics"){id}}',
        'mutation{duplicate_group(board_id: 123, group_id: "topics"){id title}}',
        'mutation{move_item_to_group(item_id: 456, group_id: "topics"){id}}',
    ]


def test_workspaces(api, client):
    workspace.query(client)
    workspace.create(client, args={"name": "WS", "kind": EnumToken("open")})
    workspace.delete(client, 42)

    assert api.queries == [
        "query{workspaces{id name description}}",
        'mutation{create_workspace(name: "WS", kind: open){id name description}}',
        "mutation{delete_workspace(workspace_id: 42){id}}",
    ]


def test_updates(api, client):
    update.query(client, args={"limit": 5})
    update.create(client, args={"item_id": 456, "body": "Hello"})
    update.like(client, args={"update_id": 7})
    update.clear_item_updates(client, args={"item_id": 456})
    update.delete(client, args={"id": 7})

    assert api.queries == [
        "query{updates(limit: 5){id body created_at}}",
        'mutation{create_update(item_id: 456, body: "Hello"){id body created_at}}',
        "mutation{like_update(update_id: 7){id}}",
        "mutation{clear_item_updates(item_id: 456){id}}",
        "mutation{delete_update(id: 7){id}}",
    ]


def test_activity_logs(api, client):
    activity_log.query(client, [123], args={"limit": 10})
    activity_log.query(client, 123)

    assert api.queries == [
        "query{boards(ids: [123]){activity_logs(limit: 10){id event data}}}",
        "query{boards(ids: [123]){activity_logs{id event data}}}",
    ]


def test_account_and_me(api, client):
    account.query(client)
    me.query(client)
    client.me.query(select=["id", {"account": ["id"]}])

    assert api.queries == [
        "query{users{account{id name}}}",
        "query{me{id name}}",
        "query{me{id account{id}}}",
    ]


def test_folders(api, client):
    folder.query(client, args={"workspace_ids": [1]})
    folder.create(client, args={"name": "F", "workspace_id": 1})
    folder.update(client, args={"folder_id": 5, "name": "G", "parent_folder_id": NULL})
    folder.delete(client, 5)

    assert api.queries == [
        "query{folders(workspace_ids: [1]){id name}}",
        'mutation{create_folder(name: "F", workspace_id: 1){id name}}',
        'mutation{update_folder(folder_id: 5, name: "G", parent_folder_id: null)}',
        "mutation{delete_folder(folder_id: 5){id}}",
    ]


def test_board_views(api, client):
    board_view.query(client, args={"ids": 123})
    assert api.last_query == "query{boards(ids: 123){views{id name type}}}"
