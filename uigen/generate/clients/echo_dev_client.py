# Dummy model client for local dev and testing without API calls.
# Streams the outbound turn back word by word.

import re
from typing import Iterator, List

from ..types import OutboundTurn

_WORDS = re.compile(r"\S+\s*|\s+")


class EchoSession:
    def __init__(self, instruction: str):
        self.instruction = instruction
        self.closed = False

    def stream(self, turn: OutboundTurn) -> Iterator[str]:
        text = f"// [ECHO RESPONSE]\n{turn.content}"
        fragments: List[str] = _WORDS.findall(text)
        return iter(fragments)

    def close(self) -> None:
        self.closed = True


class EchoDevClient:
    def __init__(self):
        self.model = "echo-dev"

    def open_session(self, instruction: str) -> EchoSession:
        return EchoSession(instruction)
