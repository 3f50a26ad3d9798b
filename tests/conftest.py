# ===============================================
# tests/conftest.py
# Stub model client that records every call, plus
# helpers to build an app around it.
# ===============================================

from typing import Iterator, List, Optional

import pytest
from fastapi.testclient import TestClient

from uigen.app import AppContext, create_app
from uigen.catalog import load_catalog
from uigen.errors import ProviderError
from uigen.generate.types import OutboundTurn
from uigen.settings import Settings


class StubSession:
    def __init__(self, owner: "StubModelClient", instruction: str):
        self.owner = owner
        self.instruction = instruction
        self.closed = False

    def stream(self, turn: OutboundTurn) -> Iterator[str]:
        self.owner.turns.append(turn)
        if self.owner.stream_error is not None:
            raise self.owner.stream_error
        return self._fragments()

    def _fragments(self) -> Iterator[str]:
        for i, fragment in enumerate(self.owner.fragments):
            if self.owner.fail_at == i:
                raise self.owner.fail_error
            yield fragment
        if self.owner.fail_at == len(self.owner.fragments):
            raise self.owner.fail_error

    def close(self) -> None:
        self.closed = True


class StubModelClient:
    """Records instructions/turns; can fail on open, on start or mid-stream."""

    def __init__(
        self,
        fragments: Optional[List[str]] = None,
        open_error: Optional[Exception] = None,
        stream_error: Optional[Exception] = None,
        fail_at: Optional[int] = None,
        fail_error: Optional[Exception] = None,
    ):
        self.model = "stub"
        self.fragments = fragments if fragments is not None else ["hello", " ", "world"]
        self.open_error = open_error
        self.stream_error = stream_error
        self.fail_at = fail_at
        self.fail_error = fail_error or ProviderError("stub stream broke: internal-detail-123")
        self.instructions: List[str] = []
        self.turns: List[OutboundTurn] = []
        self.sessions: List[StubSession] = []

    def open_session(self, instruction: str) -> StubSession:
        self.instructions.append(instruction)
        if self.open_error is not None:
            raise self.open_error
        session = StubSession(self, instruction)
        self.sessions.append(session)
        return session


def make_app(model_client, catalog=None):
    cfg = Settings(PROVIDER="echo", _env_file=None)
    context = AppContext(
        settings=cfg,
        model_client=model_client,
        catalog=load_catalog() if catalog is None else tuple(catalog),
    )
    return create_app(context)


def make_client(model_client, raise_server_exceptions: bool = True, catalog=None) -> TestClient:
    return TestClient(make_app(model_client, catalog), raise_server_exceptions=raise_server_exceptions)


@pytest.fixture
def stub():
    return StubModelClient()


@pytest.fixture
def client(stub):
    return make_client(stub)
