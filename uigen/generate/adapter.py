# Maps the caller's conversation onto the single turn sent to the provider.
#
# Only the final turn is forwarded. Earlier turns are validated but not sent:
# every generation call is stateless.

from __future__ import annotations
from typing import Dict, Sequence

from uigen.errors import ValidationError
from .prompts import OUTPUT_SUFFIX
from .types import OutboundTurn, ProviderRole, Turn

PROVIDER_ROLES: Dict[str, ProviderRole] = {
    "user": "prompt",
    "assistant": "response",
}


def adapt_turn(turn: Turn) -> OutboundTurn:
    if turn.role == "user":
        content = turn.content + OUTPUT_SUFFIX
    else:
        content = turn.content
    return OutboundTurn(role=PROVIDER_ROLES[turn.role], content=content)


def adapt_conversation(conversation: Sequence[Turn]) -> OutboundTurn:
    if not conversation:
        raise ValidationError("messages: at least one message is required")
    return adapt_turn(conversation[-1])
