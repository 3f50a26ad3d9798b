# ============================================================
# uigen/generate/validation.py
# ------------------------------------------------------------
# Checks the raw POST /generate body and turns it into a
# GenerationRequest. The first schema violation is reported as
# a ValidationError; nothing else happens here.
# ============================================================

from __future__ import annotations

import json
from typing import Any, List, Literal

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr
from pydantic import ValidationError as PydanticValidationError

from uigen.errors import ValidationError
from .types import GenerationRequest, Turn


class ChatTurn(BaseModel):
    role: Literal["user", "assistant"]
    content: StrictStr


class GenerateBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    shadcn: StrictBool = False
    messages: List[ChatTurn]


def _describe(err: PydanticValidationError) -> str:
    first = err.errors()[0]
    loc = ".".join(str(p) for p in first.get("loc", ())) or "body"
    return f"{loc}: {first.get('msg', 'invalid value')}"


def validate_request(payload: Any) -> GenerationRequest:
    try:
        body = GenerateBody.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(_describe(e)) from e

    return GenerationRequest(
        conversation=tuple(Turn(role=m.role, content=m.content) for m in body.messages),
        include_catalog=body.shadcn,
    )


def parse_body(raw: bytes) -> GenerationRequest:
    """Decode JSON bytes and validate them."""
    try:
        payload = json.loads(raw) if raw else None
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValidationError(f"body: invalid JSON ({e})") from e
    return validate_request(payload)
