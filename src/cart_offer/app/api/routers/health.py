from __future__ import annotations

from fastapi import APIRouter, Depends

from cart_offer.app.api.dependencies import get_offer_store
from cart_offer.ports.offer_store import OfferStore

router = APIRouter()


@router.get("/health")
def health(store: OfferStore = Depends(get_offer_store)) -> dict:
    return {"status": "ok", "offer_count": len(store)}
