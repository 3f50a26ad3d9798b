# ===============================================
# tests/test_endpoints.py
# HTTP surface: POST /generate plus service routes.
# Every test runs against a stub model client.
# ===============================================

import asyncio
import json
import logging

from uigen.errors import GENERIC_ERROR_MESSAGE, ProviderError

from conftest import StubModelClient, make_app, make_client


def _body(content="build a todo app", shadcn=None, turns=None):
    messages = turns if turns is not None else [{"role": "user", "content": content}]
    body = {"messages": messages}
    if shadcn is not None:
        body["shadcn"] = shadcn
    return body


# -----------------------------------------------
# Service routes
# -----------------------------------------------
def test_root_ok(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "running" in r.json()["message"]


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_healthz_reports_provider(client):
    data = client.get("/healthz").json()
    assert data["ok"] is True
    assert data["model"] == "stub"


def test_contract_lists_sections_and_components(client):
    data = client.get("/contract").json()
    assert data["max_lines"] == 150
    assert "ArrowRight" in data["icons"]
    assert "Button" in data["components"]
    assert "catalog" not in data["sections"]["default"]
    assert "catalog" in data["sections"]["shadcn"]


# -----------------------------------------------
# Success path
# -----------------------------------------------
def test_generate_streams_fragments_in_order():
    stub = StubModelClient(fragments=["import React", "", " from 'react'\n", "export default App"])
    client = make_client(stub)

    r = client.post("/generate", json=_body())

    assert r.status_code == 200
    assert r.text == "import React from 'react'\nexport default App"
    assert r.headers["content-type"].startswith("text/plain")
    assert r.headers["cache-control"] == "no-cache"


def test_generate_closes_session_after_stream(client, stub):
    client.post("/generate", json=_body())
    assert len(stub.sessions) == 1
    assert stub.sessions[0].closed


def test_generate_with_no_fragments_returns_empty_body():
    stub = StubModelClient(fragments=[])
    r = make_client(stub).post("/generate", json=_body())
    assert r.status_code == 200
    assert r.text == ""


def test_generate_keeps_unicode_fragments():
    stub = StubModelClient(fragments=["<p>", "héllo ✓", "</p>"])
    r = make_client(stub).post("/generate", json=_body())
    assert r.text == "<p>héllo ✓</p>"


def test_only_final_turn_is_sent(client, stub):
    history = [
        {"role": "user", "content": "make a landing page"},
        {"role": "assistant", "content": "export default function A() {}"},
        {"role": "user", "content": "add a footer"},
        {"role": "assistant", "content": "export default function B() {}"},
        {"role": "user", "content": "make it dark"},
    ]
    client.post("/generate", json=_body(turns=history))
    client.post("/generate", json=_body(content="make it dark"))

    assert len(stub.turns) == 2
    assert stub.turns[0] == stub.turns[1]
    assert stub.instructions[0] == stub.instructions[1]
    assert stub.turns[0].content.startswith("make it dark")
    assert "landing page" not in stub.turns[0].content


def test_shadcn_flag_adds_catalog_to_instruction(client, stub):
    client.post("/generate", json=_body(shadcn=False))
    client.post("/generate", json=_body(shadcn=True))

    plain, with_catalog = stub.instructions
    assert "<component>" not in plain
    assert with_catalog.count("<component>") == len(client.app.state.context.catalog)


# -----------------------------------------------
# Validation failures (422)
# -----------------------------------------------
def test_missing_messages_is_422_and_provider_not_called(client, stub):
    r = client.post("/generate", json={"shadcn": True})
    assert r.status_code == 422
    assert "messages" in r.text
    assert r.headers["content-type"].startswith("text/plain")
    assert stub.instructions == []
    assert stub.turns == []


def test_invalid_role_is_422(client, stub):
    r = client.post("/generate", json=_body(turns=[{"role": "system", "content": "hi"}]))
    assert r.status_code == 422
    assert "role" in r.text
    assert stub.instructions == []


def test_non_boolean_flag_is_422(client):
    r = client.post("/generate", json=_body(shadcn="yes"))
    assert r.status_code == 422
    assert "shadcn" in r.text


def test_invalid_json_is_422(client, stub):
    r = client.post("/generate", content=b"{not json", headers={"content-type": "application/json"})
    assert r.status_code == 422
    assert stub.instructions == []


def test_empty_messages_is_422(client, stub):
    r = client.post("/generate", json=_body(turns=[]))
    assert r.status_code == 422
    assert stub.instructions == []


# -----------------------------------------------
# Provider failures before the first byte (500)
# -----------------------------------------------
def test_open_failure_is_generic_500():
    stub = StubModelClient(open_error=ProviderError("invalid api key sk-secret-999"))
    r = make_client(stub).post("/generate", json=_body())

    assert r.status_code == 500
    assert r.json() == {"error": GENERIC_ERROR_MESSAGE}
    assert "sk-secret-999" not in r.text


def test_failure_before_first_fragment_is_500():
    stub = StubModelClient(fragments=["never sent"], fail_at=0)
    r = make_client(stub).post("/generate", json=_body())

    assert r.status_code == 500
    assert r.json() == {"error": GENERIC_ERROR_MESSAGE}
    assert "internal-detail-123" not in r.text
    assert stub.sessions[0].closed


def test_unexpected_start_error_is_500():
    stub = StubModelClient(stream_error=RuntimeError("quota exceeded for org-42"))
    r = make_client(stub).post("/generate", json=_body())

    assert r.status_code == 500
    assert "org-42" not in r.text
    assert stub.sessions[0].closed


def test_unexpected_open_error_is_500():
    stub = StubModelClient(open_error=RuntimeError("socket exploded"))
    r = make_client(stub, raise_server_exceptions=False).post("/generate", json=_body())

    assert r.status_code == 500
    assert r.json() == {"error": GENERIC_ERROR_MESSAGE}


# -----------------------------------------------
# Provider failure after output started
# -----------------------------------------------
def _call_app(app, body, fail_on_start=False):
    """Drive the ASGI app directly; returns the messages it sent."""
    raw = json.dumps(body).encode()
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "scheme": "http",
        "path": "/generate",
        "raw_path": b"/generate",
        "root_path": "",
        "query_string": b"",
        "headers": [(b"content-type", b"application/json"), (b"content-length", str(len(raw)).encode())],
        "client": ("testclient", 50000),
        "server": ("testserver", 80),
    }
    inbox = [{"type": "http.request", "body": raw, "more_body": False}]
    sent = []

    async def receive():
        if inbox:
            return inbox.pop(0)
        await asyncio.Event().wait()

    async def send(message):
        if fail_on_start and message["type"] == "http.response.start":
            raise OSError("client went away")
        sent.append(message)

    async def run():
        try:
            await app(scope, receive, send)
        except Exception:
            pass

    asyncio.run(run())
    return sent


def test_mid_stream_failure_keeps_single_status():
    stub = StubModelClient(fragments=["a", "b", "c"], fail_at=2)
    r = make_client(stub, raise_server_exceptions=False).post("/generate", json=_body())

    assert r.status_code == 200
    assert GENERIC_ERROR_MESSAGE not in r.text
    assert stub.sessions[0].closed


def test_mid_stream_failure_sends_no_bytes_after_failure():
    stub = StubModelClient(fragments=["a", "b", "c"], fail_at=2)
    sent = _call_app(make_app(stub), _body())

    starts = [m for m in sent if m["type"] == "http.response.start"]
    chunks = [m.get("body", b"") for m in sent if m["type"] == "http.response.body"]
    assert [m["status"] for m in starts] == [200]
    assert b"".join(chunks) == b"ab"
    assert stub.sessions[0].closed


def test_disconnect_before_first_byte_closes_session():
    stub = StubModelClient(fragments=["a", "b"])
    sent = _call_app(make_app(stub), _body(), fail_on_start=True)

    assert sent == []
    assert len(stub.sessions) == 1
    assert stub.sessions[0].closed


def test_mid_stream_failure_is_logged_once(caplog):
    stub = StubModelClient(fragments=["a", "b"], fail_at=1)
    with caplog.at_level(logging.INFO, logger="uigen"):
        make_client(stub, raise_server_exceptions=False).post("/generate", json=_body())

    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert len(errors) == 1
    assert errors[0].name == "uigen.relay"
