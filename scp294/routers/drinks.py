"""Drink dispenser endpoints called by the game client."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from scp294.models.drink import DrinkRequest
from scp294.rate_limit import current_limit, limiter
from scp294.services.pipeline import dispense, normalize_query

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/scp294", tags=["scp294"])

SOURCE_HEADER = "X-Drink-Source"


def missing_query_response() -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Missing query"})


@router.get("")
async def usage():
    """Browser sanity check."""
    return {"ok": True, "hint": "POST here with JSON: { query: 'lemonade' }"}


@router.post("")
@limiter.limit(current_limit)
async def dispense_drink(request: Request, body: DrinkRequest):
    """Dispense a drink for ``body.query``.

    Always answers 200 with a valid drink unless the query is missing.
    """
    query = normalize_query(body.query)
    if query is None:
        return missing_query_response()

    result = await dispense(query)
    logger.info("Dispensed %s drink (effect %s)", result.source, result.drink.effect_id)
    return JSONResponse(content=result.drink.as_json(), headers={SOURCE_HEADER: result.source.value})
