# ===============================================
# tests/test_generator.py
# CodeGenerator wiring and StreamRelay behaviour
# (ordering, priming, termination, cancellation).
# ===============================================

import asyncio

import pytest

from uigen.catalog import CatalogEntry
from uigen.errors import ProviderError, StreamTerminationError, ValidationError
from uigen.generate import CodeGenerator, GenerationRequest, StreamRelay, Turn
from uigen.generate.prompts import OUTPUT_SUFFIX

from conftest import StubModelClient

CATALOG = (CatalogEntry("Button", 'import { Button } from "@/components/ui/button"', "<Button />"),)


def _request(*contents, include_catalog=False):
    turns = tuple(Turn(role="user", content=c) for c in contents)
    return GenerationRequest(conversation=turns, include_catalog=include_catalog)


def _collect(relay):
    async def run():
        await relay.prime()
        return [chunk async for chunk in relay.body()]
    return asyncio.run(run())


# -----------------------------------------------
# CodeGenerator
# -----------------------------------------------
def test_start_opens_one_session_with_instruction():
    stub = StubModelClient()
    gen = CodeGenerator(model_client=stub, catalog=CATALOG)

    stream = gen.start(_request("a navbar", include_catalog=True))

    assert len(stub.sessions) == 1
    assert "<name>\nButton\n</name>" in stub.instructions[0]
    assert stream.turn.content == "a navbar" + OUTPUT_SUFFIX
    assert list(stream.fragments) == ["hello", " ", "world"]


def test_start_without_catalog_flag_omits_catalog():
    stub = StubModelClient()
    CodeGenerator(model_client=stub, catalog=CATALOG).start(_request("a navbar"))
    assert "<component>" not in stub.instructions[0]


def test_start_with_empty_conversation_never_opens_session():
    stub = StubModelClient()
    with pytest.raises(ValidationError):
        CodeGenerator(model_client=stub).start(_request())
    assert stub.instructions == []


def test_start_failure_closes_session():
    stub = StubModelClient(stream_error=ProviderError("rejected"))
    with pytest.raises(ProviderError):
        CodeGenerator(model_client=stub).start(_request("x"))
    assert stub.sessions[0].closed


# -----------------------------------------------
# StreamRelay
# -----------------------------------------------
def test_relay_forwards_every_fragment_in_order():
    stub = StubModelClient(fragments=["", "a", "", "b", "c", ""])
    relay = StreamRelay(CodeGenerator(model_client=stub).start(_request("x")))

    assert _collect(relay) == [b"a", b"b", b"c"]
    assert relay.fragments_sent == 3
    assert stub.sessions[0].closed


def test_relay_prime_surfaces_early_failure_as_provider_error():
    stub = StubModelClient(fragments=["", "never"], fail_at=1, fail_error=RuntimeError("boom"))
    relay = StreamRelay(CodeGenerator(model_client=stub).start(_request("x")))

    with pytest.raises(ProviderError):
        asyncio.run(relay.prime())
    assert stub.sessions[0].closed


def test_relay_mid_stream_failure_raises_termination():
    stub = StubModelClient(fragments=["a", "b"], fail_at=1)
    relay = StreamRelay(CodeGenerator(model_client=stub).start(_request("x")))
    received = []

    async def run():
        await relay.prime()
        async for chunk in relay.body():
            received.append(chunk)

    with pytest.raises(StreamTerminationError) as exc:
        asyncio.run(run())
    assert received == [b"a"]
    assert exc.value.fragments_sent == 1
    assert stub.sessions[0].closed


def test_relay_stops_pulling_when_consumer_goes_away():
    pulled = []

    def fragments():
        for i in range(10):
            pulled.append(i)
            yield f"chunk-{i}"

    stub = StubModelClient()
    stream = CodeGenerator(model_client=stub).start(_request("x"))
    stream.fragments = fragments()
    relay = StreamRelay(stream)

    async def run():
        await relay.prime()
        body = relay.body()
        first = await body.__anext__()
        await body.aclose()
        return first

    assert asyncio.run(run()) == b"chunk-0"
    assert pulled == [0]
    assert stub.sessions[0].closed


def test_relay_close_is_idempotent():
    stub = StubModelClient()
    relay = StreamRelay(CodeGenerator(model_client=stub).start(_request("x")))
    relay.close()
    relay.close()
    assert stub.sessions[0].closed
