"""API routers for the cart offer service."""

from cart_offer.app.api.routers.cart import router as cart_router
from cart_offer.app.api.routers.health import router as health_router
from cart_offer.app.api.routers.offers import router as offers_router

__all__ = ["offers_router", "cart_router", "health_router"]
