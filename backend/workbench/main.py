"""Arduino Workbench — Backend

Slim backend responsibilities:
  1. Wiring validation (nets + per-component rules)
  2. Sketch generation (goal + circuit → wiring steps + code)
  3. Static component / board catalogue

Rendering, drag/drop and the mock simulation loop live in the frontend.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from workbench.ai.generator import SketchGenerator, create_client
from workbench.config import get_settings
from workbench.routers import catalog, generation, validation

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: build the LLM client. Shutdown: close it."""
    settings = get_settings()
    client = create_client(settings)
    app.state.generator = SketchGenerator.from_settings(client, settings)
    logger.info("LLM client ready (model=%s)", settings.llm_model)
    yield
    await client.close()


def create_app() -> FastAPI:
    settings = get_settings()

    application = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        description=(
            "Arduino Workbench backend.\n\n"
            "Checks virtual breadboard wiring and generates sketches "
            "for circuits that pass validation."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ─── Wiring validation (stateless) ───
    application.include_router(
        validation.router, prefix="/api/validation", tags=["Validation"]
    )

    # ─── Sketch generation ───
    application.include_router(
        generation.router, prefix="/api/generation", tags=["Generation"]
    )

    # ─── Component catalogue ───
    application.include_router(catalog.router, prefix="/api/catalog", tags=["Catalog"])

    @application.get("/health")
    async def health_check():
        return {"status": "ok", "service": "arduino-workbench", "version": "0.1.0"}

    return application


app = create_app()
