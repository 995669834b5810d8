"""Carousel generator HTTP adapter (FastAPI).

Turns a generation run's event stream into server-sent events for the
browser.  Authentication, subscriptions and credit deduction are handled by
the surrounding application and are not part of this adapter.

Endpoints
---------
========  ==============================  ====================================
Method    Path                            Purpose
========  ==============================  ====================================
POST      ``/api/generate-carousel``      Run a generation, stream SSE events
GET       ``/api/credits/{quality}``      Credit cost of a quality tier
GET       ``/api/health``                 Liveness check
========  ==============================  ====================================

Each SSE frame is ``data: {"type": ..., "data": {...}}`` followed by a blank
line.  When the client disconnects, the run's cancellation signal is set.

Usage
-----
CLI (installed entry point)::

    carouselgen

Direct invocation::

    python -m carouselgen.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import pydantic
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse

from carouselgen import __version__
from carouselgen.api.models import GenerateCarouselRequest
from carouselgen.clients.images import UnsplashClient
from carouselgen.clients.llm import OpenAIStructuredClient
from carouselgen.core.config import config
from carouselgen.pipeline import GenerationPipeline, PipelineError, get_credits_for_quality

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Application lifecycle: shared service clients.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the clients shared by every generation run.

    The model client is only created when an OpenAI key is configured;
    without one, generation requests are answered with 503.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    app.state.model_client = (
        OpenAIStructuredClient(config.openai_api_key, timeout=config.request_timeout)
        if config.openai_api_key
        else None
    )
    app.state.image_client = UnsplashClient(
        config.unsplash_access_key, timeout=config.request_timeout
    )
    if app.state.model_client is None:
        logger.warning("CAROUSELGEN_OPENAI_API_KEY is not set, generation is disabled")

    yield


app = FastAPI(
    title="Carousel Generator",
    description="AI carousel generation with layout validation and refinement.",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.post("/api/generate-carousel")
async def generate_carousel(req: GenerateCarouselRequest, request: Request) -> StreamingResponse:
    """Run a generation and stream its events.

    Args:
        req: Generation parameters.
        request: The incoming request, used to detect client disconnects.

    Returns:
        A ``text/event-stream`` response with one frame per pipeline event.

    Raises:
        HTTPException: 503 when no model client is configured, 422 when the
            parameters do not form a valid run.
    """
    model_client = getattr(request.app.state, "model_client", None)
    if model_client is None:
        raise HTTPException(status_code=503, detail="OpenAI API key not configured")

    try:
        pipeline_config = req.to_pipeline_config()
    except pydantic.ValidationError as e:
        raise HTTPException(
            status_code=422, detail=e.errors(include_url=False, include_context=False)
        ) from e

    pipeline = GenerationPipeline(
        None,
        pipeline_config,
        model_client=model_client,
        image_client=request.app.state.image_client,
    )

    async def event_stream() -> AsyncIterator[str]:
        run = pipeline.start()
        try:
            async for event in run:
                if await request.is_disconnected():
                    logger.info("Client disconnected, cancelling generation")
                    run.cancel()
                    break
                yield event.to_sse()
        finally:
            if not run.done:
                run.cancel()

        if run.done:
            try:
                await run.result()
            except PipelineError as e:
                logger.info(f"Generation ended without a carousel: {e}")
            except Exception:
                logger.exception("Generation failed unexpectedly")

    return StreamingResponse(
        event_stream(),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
    )


@app.get("/api/credits/{quality}")
async def get_credits(quality: str) -> dict:
    """Credit cost of a quality tier.

    Raises:
        HTTPException: 404 for an unknown tier.
    """
    try:
        credits = get_credits_for_quality(quality)  # type: ignore[arg-type]
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown quality tier: {quality}") from None
    return {"quality": quality, "credits": credits}


@app.get("/api/health")
async def health() -> dict:
    return {"status": "ok", "version": __version__}


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Configure logging and launch the uvicorn ASGI server.

    Host, port and log level come from :data:`~carouselgen.core.config.config`
    (``CAROUSELGEN_SERVER_HOST``, ``CAROUSELGEN_SERVER_PORT``,
    ``CAROUSELGEN_LOG_LEVEL``).  Registered as the ``carouselgen`` console
    script.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "carouselgen.api.main:app",
        host=config.server_host,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
