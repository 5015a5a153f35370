from __future__ import annotations


class CartOfferError(Exception):
    pass


class MalformedRequestError(CartOfferError):
    """Raised when an offer or apply request is missing fields or carries invalid values."""
