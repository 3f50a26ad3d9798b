# Interfaces every model client follows.
#
# A client is created once per process and shared by all requests.
# A session lives for exactly one request: it is seeded with the composed
# instruction, streams one completion and is then closed.

from __future__ import annotations
from typing import Iterator, Protocol

from ..types import OutboundTurn


class GenerationSession(Protocol):
    def stream(self, turn: OutboundTurn) -> Iterator[str]:
        """Start the completion and return its text fragments, in order.

        Raises ProviderError if the provider rejects the request. The
        returned iterator can be consumed only once.
        """
        ...

    def close(self) -> None:
        ...


class ModelClient(Protocol):
    model: str

    def open_session(self, instruction: str) -> GenerationSession:
        ...
