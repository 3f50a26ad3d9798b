# Typed data shared across the generate pipeline.

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional, Tuple

Role = Literal["user", "assistant"]
ProviderRole = Literal["prompt", "response"]


@dataclass(frozen=True)
class Turn:
    """One role-tagged message of the caller's conversation."""
    role: Role
    content: str


@dataclass(frozen=True)
class GenerationRequest:
    """Validated, normalized body of POST /generate."""
    conversation: Tuple[Turn, ...]
    include_catalog: bool = False


@dataclass(frozen=True)
class OutboundTurn:
    """The single turn sent to the provider for one request."""
    role: ProviderRole
    content: str


@dataclass
class ModelParams:
    """LLM parameters per request."""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    timeout: Optional[float] = None
