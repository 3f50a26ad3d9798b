# Client for the OpenAI Chat Completions API (streaming).
# The composed instruction is sent as the system message.

import logging
from typing import Iterator, Optional

from openai import OpenAI, OpenAIError

from uigen.errors import ProviderError
from ..types import ModelParams, OutboundTurn

logger = logging.getLogger("uigen.openai")

OPENAI_ROLES = {"prompt": "user", "response": "assistant"}


class OpenAISession:
    def __init__(self, client: OpenAI, model: str, instruction: str, params: ModelParams):
        self.client = client
        self.model = model
        self.instruction = instruction
        self.params = params
        self._stream = None

    def stream(self, turn: OutboundTurn) -> Iterator[str]:
        messages = [
            {"role": "system", "content": self.instruction},
            {"role": OPENAI_ROLES[turn.role], "content": turn.content},
        ]
        try:
            self._stream = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=self.params.temperature if self.params.temperature is not None else 0.3,
                max_tokens=self.params.max_tokens or 4000,
                stream=True,
            )
        except OpenAIError as e:
            raise ProviderError(f"OpenAI rejected the request: {e}", provider="openai") from e
        return self._iter_fragments(self._stream)

    def _iter_fragments(self, stream) -> Iterator[str]:
        try:
            for chunk in stream:
                if not chunk.choices:
                    continue
                text = chunk.choices[0].delta.content
                if text:
                    yield text
        except OpenAIError as e:
            raise ProviderError(f"OpenAI stream failed: {e}", provider="openai") from e

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None


class OpenAIClient:
    def __init__(self, model: str = "gpt-4o-mini", api_key: Optional[str] = None,
                 params: Optional[ModelParams] = None):
        self.model = model
        self.params = params or ModelParams()
        self.client: Optional[OpenAI] = None
        if api_key:
            kwargs = {"api_key": api_key}
            if self.params.timeout is not None:
                kwargs["timeout"] = self.params.timeout
            self.client = OpenAI(**kwargs)
        else:
            logger.warning("OPENAI_API_KEY is not set; every generation request will fail")

    def open_session(self, instruction: str) -> OpenAISession:
        if self.client is None:
            raise ProviderError("OPENAI_API_KEY is not configured", provider="openai")
        return OpenAISession(self.client, self.model, instruction, self.params)
