"""
Simple TCP REPL server for Eta.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(progn ...)"}
- Response: {"ok": true, "result": <rendered value>}
            {"ok": false, "error": <message>}
            {"ok": false, "fault": true, "error": "internal fault: <message>"}

All clients share one Interpreter, so definitions persist across requests
and connections. The Interpreter's lock serialises evaluations.
"""

from __future__ import annotations

import json
import logging
import socket
import threading
from typing import Any, Tuple

from eta.config import get_log_level, get_repl_address
from eta.errors import EtaError, EtaFault
from eta.interpreter import Interpreter

logger = logging.getLogger(__name__)


class ReplServer:
    def __init__(self, host: str | None = None, port: int | None = None,
                 interp: Interpreter | None = None):
        default_host, default_port = get_repl_address()
        self.host = host if host is not None else default_host
        self.port = port if port is not None else default_port
        # Keep a single interpreter to maintain session state
        self.interp = interp if interp is not None else Interpreter()

    def handle_request(self, req: Any) -> dict[str, Any]:
        """Answer one decoded request."""
        if not isinstance(req, dict):
            return {"ok": False, "error": "Invalid request: expected a JSON object"}
        if req.get("cmd") != "eval":
            return {"ok": False, "error": f"Unknown cmd: {req.get('cmd')}"}
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "Invalid request: code must be a string"}
        try:
            return {"ok": True, "result": self.interp.evaluate(code)}
        except EtaError as ex:
            return {"ok": False, "error": str(ex)}
        except EtaFault as ex:
            return {"ok": False, "fault": True, "error": f"internal fault: {ex}"}

    def handle_line(self, line: bytes) -> dict[str, Any]:
        try:
            req = json.loads(line.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        return self.handle_request(req)

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("Eta REPL server listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.info("Client connected: %s:%d", *addr)
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    resp = self.handle_line(line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        logger.info("Client disconnected: %s:%d", *addr)


def main() -> None:
    logging.basicConfig(level=get_log_level())
    ReplServer().serve_forever()


if __name__ == "__main__":
    main()
