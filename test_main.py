from fastapi.testclient import TestClient

from config import ServerConfig
from main import create_app


def make_client() -> TestClient:
    return TestClient(create_app(ServerConfig(joke_text="why did the socket close?")))


def test_health():
    with make_client() as client:
        assert client.get("/health").json() == {"status": "ok"}


def test_join_chat_and_leave_over_websocket():
    with make_client() as client:
        with client.websocket_connect("/chat/lobby") as alice:
            alice.send_json({"type": "join", "name": "alice"})
            assert alice.receive_json() == {"type": "note", "text": 'alice joined "lobby".'}

            with client.websocket_connect("/chat/lobby") as bob:
                bob.send_json({"type": "join", "name": "bob"})
                assert bob.receive_json() == {"type": "note", "text": 'bob joined "lobby".'}
                assert alice.receive_json() == {"type": "note", "text": 'bob joined "lobby".'}

                assert client.get("/api/rooms").json() == {"rooms": {"lobby": ["alice", "bob"]}}

                bob.send_json({"type": "chat", "text": "hi"})
                assert bob.receive_json() == {"name": "bob", "type": "chat", "text": "hi"}
                assert alice.receive_json() == {"name": "bob", "type": "chat", "text": "hi"}

            assert alice.receive_json() == {"type": "note", "text": "bob left lobby."}

            alice.send_json({"type": "members"})
            assert alice.receive_json() == {"name": "Members list", "type": "members", "text": "alice"}


def test_bad_messages_keep_connection_open():
    with make_client() as client:
        with client.websocket_connect("/chat/jokes") as ws:
            ws.send_text("not json")
            ws.send_json({"type": "dance"})
            ws.send_json({"type": "chat", "text": "before join"})
            ws.send_json({"type": "join", "name": "carol"})
            assert ws.receive_json() == {"type": "note", "text": 'carol joined "jokes".'}

            ws.send_json({"type": "joke"})
            assert ws.receive_json() == {
                "name": "JokeBot",
                "type": "joke",
                "text": "why did the socket close?",
            }


def test_rooms_are_isolated():
    with make_client() as client:
        with client.websocket_connect("/chat/a") as first, client.websocket_connect("/chat/b") as second:
            first.send_json({"type": "join", "name": "first"})
            second.send_json({"type": "join", "name": "second"})
            assert first.receive_json()["text"] == 'first joined "a".'
            assert second.receive_json()["text"] == 'second joined "b".'

            first.send_json({"type": "members"})
            assert first.receive_json()["text"] == "first"


def test_binary_frames_are_handled_like_text():
    with make_client() as client:
        with client.websocket_connect("/chat/bytes") as ws:
            ws.send_bytes(b"not json")
            ws.send_bytes(b'{"type": "join", "name": "dan"}')
            assert ws.receive_json() == {"type": "note", "text": 'dan joined "bytes".'}

            ws.send_bytes(b'{"type": "chat", "text": "still open"}')
            assert ws.receive_json() == {"name": "dan", "type": "chat", "text": "still open"}
