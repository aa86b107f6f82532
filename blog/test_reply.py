from blog import database


def test_reply_save(client, auth_header):
    resp = client.post("/api/reply", json={"boardId": 1, "comment": "first!"}, headers=auth_header)
    assert resp.status_code == 200
    body = resp.json()["body"]
    assert body == {"id": 5, "comment": "first!", "boardId": 1, "username": "ssar"}


def test_reply_shows_in_detail(client, auth_header):
    client.post("/api/reply", json={"boardId": 1, "comment": "first!"}, headers=auth_header)
    detail = client.get("/api/board/1/detail", headers=auth_header).json()["body"]
    assert detail["replies"] == [{"id": 5, "comment": "first!", "username": "ssar", "isOwner": True}]


def test_reply_on_missing_board(client, auth_header):
    resp = client.post("/api/reply", json={"boardId": 999, "comment": "hello"}, headers=auth_header)
    assert resp.status_code == 404
    assert resp.json()["body"] is None


def test_reply_blank_comment(client, auth_header):
    resp = client.post("/api/reply", json={"boardId": 1, "comment": ""}, headers=auth_header)
    assert resp.status_code == 400


def test_reply_delete(client, auth_header, db_session):
    resp = client.delete("/api/reply/2", headers=auth_header)
    assert resp.status_code == 200
    assert resp.json()["body"] is None
    assert db_session.get(database.DBReply, 2) is None


def test_reply_delete_not_owner(client, auth_header):
    resp = client.delete("/api/reply/3", headers=auth_header)
    assert resp.status_code == 403
    assert resp.json()["msg"] == "댓글을 삭제할 권한이 없습니다"


def test_reply_delete_missing(client, auth_header):
    resp = client.delete("/api/reply/999", headers=auth_header)
    assert resp.status_code == 404
