"""FastAPI application — SCP-294 drink dispenser backend.

Start with::

    uvicorn scp294.main:app --port 3000

Or::

    python -m scp294.main
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from scp294.config import settings
from scp294.middleware import BodySizeLimitMiddleware
from scp294.rate_limit import limiter
from scp294.routers import drinks
from scp294.services.fallbacks import hard_failsafe
from scp294.services.pipeline import DrinkSource

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="SCP-294 Drink Dispenser API",
    description=(
        "Relay between the game client and Mistral AI. Screens a drink "
        "request, generates a structured drink description and returns a "
        "sanitised cosmetic-effect descriptor."
    ),
    version="1.0.0",
)
app.state.limiter = limiter

# ── CORS ────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(BodySizeLimitMiddleware)


@app.exception_handler(RateLimitExceeded)
async def _rate_limited(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    # Game clients get a drink, not an error screen.
    client = request.client.host if request.client else "unknown"
    logger.warning("Rate limit exceeded for %s (%s) — dispensing failsafe", client, exc.detail)
    return JSONResponse(
        content=hard_failsafe().as_json(),
        headers={drinks.SOURCE_HEADER: DrinkSource.FAILSAFE.value},
    )


@app.exception_handler(RequestValidationError)
async def _invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    return drinks.missing_query_response()


# ── Register route modules ──────────────────────────────────────────────
app.include_router(drinks.router)


@app.on_event("startup")
async def _startup() -> None:
    settings.require_api_key()
    logger.info(
        "SCP-294 backend ready — generation model %s, effect catalog v%d",
        settings.generation_model,
        settings.effect_catalog_version,
    )


@app.get("/healthz")
async def health():
    """Liveness probe."""
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "scp294.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
