import json
import socket
import threading

import pytest

from eta.interpreter import Interpreter
from eta_server.repl_server import ReplServer


@pytest.fixture
def server():
    return ReplServer(host="127.0.0.1", port=0, interp=Interpreter(prelude=None))


def test_eval_ok(server):
    assert server.handle_request({"cmd": "eval", "code": "(+ 1 2)"}) == {"ok": True, "result": "3"}


def test_eval_error(server):
    assert server.handle_request({"cmd": "eval", "code": "(bogus)"}) == {
        "ok": False,
        "error": "Unknown symbol: bogus",
    }


def test_eval_fault(server):
    resp = server.handle_request({"cmd": "eval", "code": "(/ 1 0)"})
    assert resp["ok"] is False
    assert resp["fault"] is True
    assert resp["error"].startswith("internal fault: ")


def test_state_shared_between_requests(server):
    server.handle_request({"cmd": "eval", "code": "(def a 41)"})
    assert server.handle_request({"cmd": "eval", "code": "(+ a 1)"})["result"] == "42"


@pytest.mark.parametrize(
    "req,error",
    [
        ({"cmd": "load"}, "Unknown cmd: load"),
        ([1, 2], "Invalid request: expected a JSON object"),
        ({"cmd": "eval", "code": 5}, "Invalid request: code must be a string"),
    ],
)
def test_bad_requests(server, req, error):
    assert server.handle_request(req) == {"ok": False, "error": error}


def test_missing_code_is_a_syntax_error(server):
    assert server.handle_request({"cmd": "eval"}) == {"ok": False, "error": "Expected ("}


def test_invalid_json(server):
    resp = server.handle_line(b"{not json")
    assert resp["ok"] is False
    assert resp["error"].startswith("Invalid request: ")


def test_defaults_come_from_config(monkeypatch):
    monkeypatch.setenv("ETA_REPL_HOST", "0.0.0.0")
    monkeypatch.setenv("ETA_REPL_PORT", "9999")
    srv = ReplServer(interp=Interpreter(prelude=None))
    assert (srv.host, srv.port) == ("0.0.0.0", 9999)


def test_client_session_over_socket(server):
    client, conn = socket.socketpair()
    worker = threading.Thread(target=server._handle_client, args=(conn, ("127.0.0.1", 0)))
    worker.start()
    try:
        requests = [
            {"cmd": "eval", "code": "(def a 1)"},
            {"cmd": "eval", "code": "(+ a 1)"},
        ]
        payload = b"".join(json.dumps(r).encode("utf-8") + b"\n" for r in requests)
        # blank lines are skipped
        client.sendall(payload + b"\n")
        reader = client.makefile("rb")
        first = json.loads(reader.readline())
        second = json.loads(reader.readline())
    finally:
        client.shutdown(socket.SHUT_WR)
        worker.join(timeout=5)
        client.close()
    assert first == {"ok": True, "result": "#true"}
    assert second == {"ok": True, "result": "2"}
    assert not worker.is_alive()


def test_deeply_nested_code_is_a_fault(server):
    code = "(quote " + "(" * 3000 + ")" * 3000 + ")"
    resp = server.handle_request({"cmd": "eval", "code": code})
    assert resp["ok"] is False
    assert resp["fault"] is True
    assert resp["error"].startswith("internal fault: ")
    assert server.handle_request({"cmd": "eval", "code": "(+ 1 2)"}) == {"ok": True, "result": "3"}


def test_module_docstring_describes_protocol():
    import eta_server.repl_server as repl_server

    assert repl_server.__doc__ is not None
    assert "JSON per line" in repl_server.__doc__
