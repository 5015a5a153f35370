from __future__ import annotations

import argparse
import json
from typing import Optional

from cart_offer.adapters.offers.in_memory_offer_store import InMemoryOfferStore
from cart_offer.adapters.offers.seed_loader import seed_store
from cart_offer.adapters.segments.static_segment_lookup import StaticSegmentLookup
from cart_offer.application.errors import CartOfferError
from cart_offer.application.matcher import OfferMatcher
from cart_offer.domain.offers.models import ApplyRequest
from cart_offer.observability.logging import configure_logging
from cart_offer.settings import get_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cart Offer CLI")
    subparsers = parser.add_subparsers(dest="command")

    apply_parser = subparsers.add_parser("apply", help="Apply offers to a cart value once")
    apply_parser.add_argument("--cart-value", required=True, type=int)
    apply_parser.add_argument("--restaurant-id", required=True, type=int)
    apply_parser.add_argument("--user-id", required=True, type=int)
    apply_parser.add_argument("--segment", help="Segment of the user (defaults to STATIC_USER_SEGMENTS)")
    apply_parser.add_argument("--offers-file", help="JSON seed file with offers (defaults to OFFERS_SEED_FILE)")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command != "apply":
        parser.print_help()
        return 2

    settings = get_settings()
    segments = dict(settings.static_user_segments)
    if args.segment:
        segments[args.user_id] = args.segment

    store = InMemoryOfferStore()
    matcher = OfferMatcher(store, StaticSegmentLookup(segments))
    offers_file = args.offers_file or settings.offers_seed_file
    try:
        if offers_file:
            seed_store(store, offers_file)
        request = ApplyRequest(
            cart_value=args.cart_value,
            restaurant_id=args.restaurant_id,
            user_id=args.user_id,
        )
        result = matcher.apply_offer_for_user(request)
    except (CartOfferError, FileNotFoundError) as e:
        print(json.dumps({"error": str(e)}))
        return 1

    print(json.dumps({"cart_value": result.cart_value}))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
