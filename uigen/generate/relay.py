# ============================================================
# uigen/generate/relay.py
# ------------------------------------------------------------
# Forwards provider fragments to the HTTP response.
#   - one fragment in flight: the next fragment is pulled only
#     after the previous one has been handed to the response
#   - prime() runs before the status line is sent, so a failure
#     before any output can still become a 500
#   - a failure after output has started raises
#     StreamTerminationError and the server aborts the connection
#   - on normal end, failure or caller disconnect the provider
#     session is closed; RelayResponse guarantees it even when
#     the body never starts
# ============================================================

from __future__ import annotations

import logging
from typing import AsyncIterator, Optional

from starlette.concurrency import run_in_threadpool
from starlette.responses import StreamingResponse
from starlette.types import Receive, Scope, Send

from uigen.errors import ProviderError, StreamTerminationError
from .generator import GenerationStream

logger = logging.getLogger("uigen.relay")

_DONE = object()


class StreamRelay:
    def __init__(self, stream: GenerationStream):
        self.stream = stream
        self.fragments_sent = 0
        self._pending: Optional[str] = None
        self._exhausted = False
        self._closed = False

    async def _pull(self):
        if self._closed:
            return _DONE
        return await run_in_threadpool(next, self.stream.fragments, _DONE)

    async def prime(self) -> None:
        """Wait for the first non-empty fragment (or the end of the stream)."""
        try:
            while True:
                fragment = await self._pull()
                if fragment is _DONE:
                    self._exhausted = True
                    return
                if fragment:
                    self._pending = fragment
                    return
        except ProviderError:
            self.close()
            raise
        except Exception as e:
            self.close()
            raise ProviderError(f"Provider failed before the first fragment: {e}") from e

    async def body(self) -> AsyncIterator[bytes]:
        try:
            if self._pending is not None:
                fragment, self._pending = self._pending, None
                yield fragment.encode("utf-8")
                self.fragments_sent += 1

            while not self._exhausted:
                try:
                    fragment = await self._pull()
                except Exception as e:
                    logger.exception("Stream failed after %d fragment(s)", self.fragments_sent)
                    raise StreamTerminationError(
                        f"provider stream failed: {e}", fragments_sent=self.fragments_sent
                    ) from e
                if fragment is _DONE:
                    self._exhausted = True
                    break
                if fragment:
                    yield fragment.encode("utf-8")
                    self.fragments_sent += 1

            logger.info("Stream complete: %d fragment(s)", self.fragments_sent)
        finally:
            if not self._exhausted:
                logger.info("Stream stopped early after %d fragment(s)", self.fragments_sent)
            self.close()

    def close(self) -> None:
        """Stop pulling and release the provider session. Safe to call twice."""
        if self._closed:
            return
        self._closed = True
        fragments = self.stream.fragments
        close_fragments = getattr(fragments, "close", None)
        try:
            if close_fragments is not None:
                close_fragments()
        finally:
            self.stream.session.close()


class RelayResponse(StreamingResponse):
    """StreamingResponse over a primed relay.

    The relay is closed however the response ends, including when the
    caller is gone before the body iterator ever starts.
    """

    def __init__(self, relay: StreamRelay, **kwargs):
        super().__init__(relay.body(), **kwargs)
        self.relay = relay

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await super().__call__(scope, receive, send)
        finally:
            self.relay.close()
