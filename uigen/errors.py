# ============================================================
# uigen/errors.py
# ------------------------------------------------------------
# Error taxonomy for the generate pipeline.
#   - ValidationError         -> caller-fixable, 422, echoed verbatim
#   - ProviderError           -> provider/env fault, 500, generic body
#   - StreamTerminationError  -> fault after the first byte, connection abort
#   - CatalogError            -> broken component corpus, fails startup
# ============================================================

from __future__ import annotations

GENERIC_ERROR_MESSAGE = "Failed to generate response"


class UIGenError(Exception):
    """Base class for all service errors."""


class ValidationError(UIGenError):
    """The inbound payload does not match the request schema."""

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description


class ProviderError(UIGenError):
    """The model provider could not open a session or rejected the request."""

    def __init__(self, message: str, provider: str | None = None):
        super().__init__(message)
        self.provider = provider


class StreamTerminationError(UIGenError):
    """The provider failed after output was already sent to the caller."""

    def __init__(self, message: str, fragments_sent: int = 0):
        super().__init__(message)
        self.fragments_sent = fragments_sent


class CatalogError(UIGenError):
    """The component catalog file is missing or malformed."""
