from __future__ import annotations

from typing import Mapping, Optional

from cart_offer.application.errors import SegmentLookupError
from cart_offer.domain.offers.models import SegmentResponse
from cart_offer.ports.segment_lookup import SegmentLookup


class StaticSegmentLookup(SegmentLookup):
    def __init__(self, segments: Optional[Mapping[int, str]] = None) -> None:
        self.segments = dict(segments or {})

    def resolve(self, user_id: int) -> SegmentResponse:
        segment = self.segments.get(user_id)
        if segment is None:
            raise SegmentLookupError(f"No segment configured for user {user_id}", user_id=user_id)
        return SegmentResponse(segment=segment)
