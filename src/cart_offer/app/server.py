from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cart_offer.app.api.routers import cart_router, health_router, offers_router
from cart_offer.app.factory import create_offer_store, create_segment_lookup
from cart_offer.application.errors import MalformedRequestError, SegmentLookupError
from cart_offer.application.matcher import OfferMatcher
from cart_offer.ports.offer_store import OfferStore
from cart_offer.ports.segment_lookup import SegmentLookup
from cart_offer.settings import Settings, get_settings

logger = logging.getLogger(__name__)


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"Malformed request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": jsonable_errors(exc)})


async def _handle_malformed_request(request: Request, exc: MalformedRequestError) -> JSONResponse:
    logger.warning(f"Malformed request to {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def _handle_segment_lookup_error(request: Request, exc: SegmentLookupError) -> JSONResponse:
    logger.error(f"Segment lookup failed for {request.url.path}: {exc}")
    return JSONResponse(status_code=502, content={"detail": str(exc)})


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Reduce pydantic error entries to their JSON-safe fields."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[OfferStore] = None,
    segment_lookup: Optional[SegmentLookup] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    The offer store and segment lookup are held on the returned app. Either
    can be supplied directly (tests do this); missing ones are created from
    settings. Only a lookup created here is closed on shutdown.
    """
    if store is None or segment_lookup is None:
        settings = settings or get_settings()
    if store is None:
        store = create_offer_store(settings)
    owns_segment_lookup = segment_lookup is None
    if segment_lookup is None:
        segment_lookup = create_segment_lookup(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if not app.state.owns_segment_lookup:
            return
        close = getattr(app.state.segment_lookup, "close", None)
        if callable(close):
            close()

    app = FastAPI(title="Cart Offer Service", lifespan=lifespan)
    app.state.offer_store = store
    app.state.segment_lookup = segment_lookup
    app.state.owns_segment_lookup = owns_segment_lookup
    app.state.offer_matcher = OfferMatcher(store, segment_lookup)

    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(MalformedRequestError, _handle_malformed_request)
    app.add_exception_handler(SegmentLookupError, _handle_segment_lookup_error)

    app.include_router(health_router)
    app.include_router(offers_router, prefix="/api/v1", tags=["offers"])
    app.include_router(cart_router, prefix="/api/v1", tags=["cart"])
    return app
