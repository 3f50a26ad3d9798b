# ============================================================
# UI Gen FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - POST /generate: conversation -> instruction -> streamed code
#   - OpenAI, Ollama or Echo model clients (settings.PROVIDER)
#   - Error mapping: 422 for bad input, 500 before the first
#     byte, aborted connection after it
# ============================================================

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool

# --- Local imports ---
from uigen.settings import Settings, settings as default_settings
from uigen.catalog import CatalogEntry, DEFAULT_CATALOG_PATH, load_catalog
from uigen.errors import GENERIC_ERROR_MESSAGE, ProviderError, StreamTerminationError, ValidationError
from uigen.generate import CodeGenerator, RelayResponse, StreamRelay, parse_body
from uigen.generate.clients import ModelClient, build_model_client
from uigen.generate.instructions import active_sections
from uigen.generate.prompts import ICON_ALLOWLIST, INSTRUCTION_VERSION, MAX_LINES

logger = logging.getLogger("uigen")


# ------------------------------------------------------------
# 🪵 Logging
# ------------------------------------------------------------
def configure_logging(level: str = "INFO") -> None:
    if not logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(h)
    logger.setLevel(level.upper())


# ------------------------------------------------------------
# 🔧 Process-wide context: settings, model client, catalog
# ------------------------------------------------------------
@dataclass
class AppContext:
    settings: Settings
    model_client: ModelClient
    catalog: Tuple[CatalogEntry, ...]
    generator: CodeGenerator = field(init=False)

    def __post_init__(self):
        self.generator = CodeGenerator(model_client=self.model_client, catalog=self.catalog)


def build_context(cfg: Settings) -> AppContext:
    catalog = load_catalog(cfg.CATALOG_PATH or DEFAULT_CATALOG_PATH)
    model_client = build_model_client(cfg)
    logger.info(
        "Loaded %d catalog component(s); provider=%s model=%s",
        len(catalog), cfg.PROVIDER, getattr(model_client, "model", None),
    )
    return AppContext(settings=cfg, model_client=model_client, catalog=catalog)


def get_context(request: Request) -> AppContext:
    return request.app.state.context


# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
def create_app(context: Optional[AppContext] = None) -> FastAPI:
    cfg = context.settings if context else default_settings
    configure_logging(cfg.LOG_LEVEL)
    if context is None:
        context = build_context(cfg)

    app = FastAPI(title=f"{cfg.APP_NAME} API", version="0.1")
    app.state.context = context

    # --------------------------------------------------------
    # ⚠️ Error mapping
    # --------------------------------------------------------
    @app.exception_handler(ValidationError)
    async def on_validation_error(request: Request, exc: ValidationError):
        return PlainTextResponse(exc.description, status_code=422)

    @app.exception_handler(ProviderError)
    async def on_provider_error(request: Request, exc: ProviderError):
        logger.error("Provider error (%s): %s", exc.provider or "unknown", exc, exc_info=exc)
        return JSONResponse({"error": GENERIC_ERROR_MESSAGE}, status_code=500)

    @app.exception_handler(Exception)
    async def on_unhandled_error(request: Request, exc: Exception):
        if isinstance(exc, StreamTerminationError):
            # logged by the relay
            logger.debug("Stream aborted on %s: %s", request.url.path, exc)
            return JSONResponse({"error": GENERIC_ERROR_MESSAGE}, status_code=500)
        logger.error("Unhandled error on %s: %s", request.url.path, exc, exc_info=exc)
        return JSONResponse({"error": GENERIC_ERROR_MESSAGE}, status_code=500)

    # --------------------------------------------------------
    # 💬 Main generate route
    # --------------------------------------------------------
    @app.post("/generate")
    async def generate(request: Request, ctx: AppContext = Depends(get_context)):
        gen_request = parse_body(await request.body())
        logger.info(
            "Generate: turns=%d catalog=%s provider=%s",
            len(gen_request.conversation), gen_request.include_catalog, ctx.settings.PROVIDER,
        )

        stream = await run_in_threadpool(ctx.generator.start, gen_request)
        relay = StreamRelay(stream)
        await relay.prime()

        return RelayResponse(
            relay,
            media_type="text/plain",
            headers={"Cache-Control": "no-cache"},
        )

    # --------------------------------------------------------
    # 📜 Contract view
    # --------------------------------------------------------
    @app.get("/contract")
    def contract(ctx: AppContext = Depends(get_context)):
        return {
            "version": INSTRUCTION_VERSION,
            "max_lines": MAX_LINES,
            "icons": list(ICON_ALLOWLIST),
            "components": [c.name for c in ctx.catalog],
            "sections": {
                "default": active_sections(False),
                "shadcn": active_sections(True),
            },
        }

    # --------------------------------------------------------
    # 🧭 Health checks
    # --------------------------------------------------------
    @app.get("/healthz")
    def healthz(ctx: AppContext = Depends(get_context)):
        return {
            "ok": True,
            "env": ctx.settings.ENV,
            "debug": ctx.settings.DEBUG,
            "app": ctx.settings.APP_NAME,
            "provider": ctx.settings.PROVIDER,
            "model": getattr(ctx.model_client, "model", None),
        }

    @app.get("/health")
    def health(ctx: AppContext = Depends(get_context)):
        return {"status": "ok", "env": ctx.settings.ENV}

    @app.get("/")
    def hello(ctx: AppContext = Depends(get_context)):
        return {"message": f"{ctx.settings.APP_NAME} service running."}

    return app


app = create_app()
