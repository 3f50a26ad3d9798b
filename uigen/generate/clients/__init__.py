# Model clients. Pick one per process with build_model_client().

from __future__ import annotations

from ..types import ModelParams
from .base import GenerationSession, ModelClient
from .echo_dev_client import EchoDevClient

PROVIDERS = ("openai", "ollama", "echo")


def build_model_client(settings) -> ModelClient:
    """Create the process-wide client named by settings.PROVIDER."""
    provider = settings.PROVIDER.lower()
    params = ModelParams(
        temperature=settings.TEMPERATURE,
        max_tokens=settings.MAX_TOKENS,
        timeout=settings.REQUEST_TIMEOUT,
    )
    if provider == "openai":
        from .openai_client import OpenAIClient
        return OpenAIClient(model=settings.OPENAI_MODEL, api_key=settings.OPENAI_API_KEY, params=params)
    if provider == "ollama":
        from .ollama_client import OllamaClient
        return OllamaClient(model=settings.OLLAMA_MODEL, host=settings.OLLAMA_HOST, params=params)
    if provider == "echo":
        return EchoDevClient()
    raise ValueError(f"Unknown PROVIDER {settings.PROVIDER!r}; expected one of {', '.join(PROVIDERS)}")


__all__ = ["GenerationSession", "ModelClient", "EchoDevClient", "PROVIDERS", "build_model_client"]
