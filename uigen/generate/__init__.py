# Generate package

# Request-to-stream pipeline: validate -> compose -> adapt -> session -> relay.

from .generator import CodeGenerator, GenerationStream
from .relay import RelayResponse, StreamRelay
from .types import GenerationRequest, ModelParams, OutboundTurn, Turn
from .validation import parse_body, validate_request
from .clients.echo_dev_client import EchoDevClient

__all__ = [
    "CodeGenerator",
    "GenerationStream",
    "StreamRelay",
    "RelayResponse",
    "GenerationRequest",
    "ModelParams",
    "OutboundTurn",
    "Turn",
    "parse_body",
    "validate_request",
    "EchoDevClient",
]
