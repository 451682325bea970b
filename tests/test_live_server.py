"""
Tests against a real uvicorn server.

Runs the application on an ephemeral port with the same HTTP protocol
the CLI runner uses, so status lines are checked as they go on the wire.
"""

import http.client
import json
import socket
import threading
import time

import pytest
import uvicorn

from healthmock.__main__ import HTTP_PROTOCOL
from healthmock.main import app

STARTUP_TIMEOUT = 10.0


@pytest.fixture(scope="module")
def server_port():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    sock.bind(("127.0.0.1", 0))
    config = uvicorn.Config(
        app, http=HTTP_PROTOCOL, lifespan="off", log_level="warning"
    )
    server = uvicorn.Server(config)
    thread = threading.Thread(
        target=server.run, kwargs={"sockets": [sock]}, daemon=True
    )
    thread.start()

    deadline = time.monotonic() + STARTUP_TIMEOUT
    while not server.started:
        if time.monotonic() > deadline:
            pytest.fail("uvicorn did not start in time")
        time.sleep(0.05)

    yield sock.getsockname()[1]

    server.should_exit = True
    thread.join(timeout=STARTUP_TIMEOUT)
    sock.close()


def _post_custom(port: int, status_code: int) -> tuple[int, bytes]:
    conn = http.client.HTTPConnection("127.0.0.1", port, timeout=5)
    conn.request(
        "POST",
        "/health/custom",
        body=json.dumps({"statusCode": status_code}),
        headers={"Content-Type": "application/json", "Connection": "close"},
    )
    response = conn.getresponse()
    try:
        return response.status, response.read()
    finally:
        conn.close()


class TestCustomStatusOnTheWire:
    """POST /health/custom served by uvicorn."""

    def test_informational_code_is_sent(self, server_port: int) -> None:
        """A 1xx code arrives as the response status instead of a dropped connection."""
        status, body = _post_custom(server_port, 150)
        assert status == 150
        assert body == b""

    def test_lower_bound_informational_code(self, server_port: int) -> None:
        status, _ = _post_custom(server_port, 199)
        assert status == 199

    def test_regular_code_keeps_json_body(self, server_port: int) -> None:
        status, body = _post_custom(server_port, 201)
        assert status == 201
        assert json.loads(body)["status"] == "Created"

    def test_unknown_upper_code(self, server_port: int) -> None:
        status, body = _post_custom(server_port, 599)
        assert status == 599
        assert json.loads(body)["status"] == "Unknown Status"
