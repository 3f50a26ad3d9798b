# ============================================================
# uigen/generate/generator.py
# ------------------------------------------------------------
# CodeGenerator wires one request through the pipeline:
#   compose instruction -> adapt final turn -> open session -> stream
# It accepts any model client (OpenAI, Ollama, Echo, test stubs).
# ============================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Sequence

from uigen.catalog import CatalogEntry
from uigen.errors import ProviderError
from .adapter import adapt_conversation
from .clients.base import GenerationSession, ModelClient
from .instructions import compose_instruction
from .types import GenerationRequest, OutboundTurn

logger = logging.getLogger("uigen.generate")


@dataclass
class GenerationStream:
    """A started completion: its session and the lazy fragment iterator."""
    session: GenerationSession
    turn: OutboundTurn
    fragments: Iterator[str]


class CodeGenerator:
    def __init__(self, model_client: ModelClient, catalog: Sequence[CatalogEntry] = ()):
        self.model_client = model_client
        self.catalog = tuple(catalog)

    def build_instruction(self, request: GenerationRequest) -> str:
        return compose_instruction(request.include_catalog, self.catalog)

    def start(self, request: GenerationRequest) -> GenerationStream:
        """Open a session and start streaming.

        An empty conversation raises ValidationError before the provider is
        touched. Provider failures surface as ProviderError.
        """
        turn = adapt_conversation(request.conversation)
        instruction = self.build_instruction(request)

        session = self.model_client.open_session(instruction)
        try:
            fragments = session.stream(turn)
        except ProviderError:
            session.close()
            raise
        except Exception as e:
            session.close()
            raise ProviderError(f"Provider failed to start the stream: {e}") from e
        return GenerationStream(session=session, turn=turn, fragments=fragments)
