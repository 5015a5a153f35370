from __future__ import annotations

from cart_offer.domain.errors import CartOfferError, MalformedRequestError

__all__ = ["CartOfferError", "MalformedRequestError", "SegmentLookupError"]


class SegmentLookupError(CartOfferError):
    """Raised when the segment of a user cannot be resolved."""

    def __init__(self, message: str, user_id: int | None = None) -> None:
        super().__init__(message)
        self.user_id = user_id
