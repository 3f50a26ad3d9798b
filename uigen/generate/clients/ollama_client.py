# Client for Ollama local inference (streaming /api/generate).
# Ollama answers with one JSON object per line until "done" is true.

import json
from typing import Iterator, Optional

import requests

from uigen.errors import ProviderError
from ..types import ModelParams, OutboundTurn

DEFAULT_OLLAMA_HOST = "http://localhost:11434"


class OllamaSession:
    def __init__(self, host: str, model: str, instruction: str, params: ModelParams):
        self.host = host
        self.model = model
        self.instruction = instruction
        self.params = params
        self._resp: Optional[requests.Response] = None

    def stream(self, turn: OutboundTurn) -> Iterator[str]:
        payload = {
            "model": self.model,
            "system": self.instruction,
            "prompt": turn.content,
            "stream": True,
            "options": {
                "temperature": float(self.params.temperature if self.params.temperature is not None else 0.3),
                "num_predict": int(self.params.max_tokens or 4000),
            },
        }
        url = f"{self.host}/api/generate"
        try:
            resp = requests.post(url, json=payload, stream=True, timeout=self.params.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise ProviderError(f"Ollama request failed: {e}", provider="ollama") from e
        self._resp = resp
        return self._iter_fragments(resp)

    def _iter_fragments(self, resp: requests.Response) -> Iterator[str]:
        try:
            for line in resp.iter_lines():
                if not line:
                    continue
                data = json.loads(line)
                if data.get("error"):
                    raise ProviderError(f"Ollama stream failed: {data['error']}", provider="ollama")
                text = data.get("response", "")
                if text:
                    yield text
                if data.get("done"):
                    break
        except (requests.RequestException, ValueError) as e:
            raise ProviderError(f"Ollama stream failed: {e}", provider="ollama") from e

    def close(self) -> None:
        if self._resp is not None:
            self._resp.close()
            self._resp = None


class OllamaClient:
    def __init__(self, model: str = "mistral:7b-instruct", host: str = DEFAULT_OLLAMA_HOST,
                 params: Optional[ModelParams] = None):
        self.model = model
        self.host = host.rstrip("/")
        self.params = params or ModelParams()

    def open_session(self, instruction: str) -> OllamaSession:
        return OllamaSession(self.host, self.model, instruction, self.params)
