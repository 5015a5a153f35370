from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from cart_offer.application.errors import SegmentLookupError
from cart_offer.domain.offers.models import SegmentResponse
from cart_offer.ports.segment_lookup import SegmentLookup
from cart_offer.settings import Settings

logger = logging.getLogger(__name__)


class HttpSegmentLookup(SegmentLookup):
    """Resolves user segments through the remote segment service."""

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None) -> None:
        self.settings = settings
        self.path = settings.segment_service_path
        self._client = client or httpx.Client(
            base_url=settings.segment_service_url,
            timeout=settings.segment_lookup_timeout_seconds,
        )

    def resolve(self, user_id: int) -> SegmentResponse:
        logger.debug(f"Resolving segment for user {user_id}")
        try:
            response = self._client.get(self.path, params={"user_id": user_id})
            response.raise_for_status()
            payload: Any = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Segment service returned {e.response.status_code} for user {user_id}")
            raise SegmentLookupError(
                f"Segment service returned HTTP {e.response.status_code} for user {user_id}", user_id=user_id
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Segment service unreachable for user {user_id}: {e}")
            raise SegmentLookupError(f"Segment service unreachable: {e}", user_id=user_id) from e
        except ValueError as e:
            logger.error(f"Segment service returned a non-JSON body for user {user_id}")
            raise SegmentLookupError(f"Segment service returned a non-JSON body for user {user_id}", user_id=user_id) from e

        segment = payload.get("segment") if isinstance(payload, dict) else None
        if not isinstance(segment, str) or not segment:
            logger.error(f"Segment service response for user {user_id} has no segment: {payload!r}")
            raise SegmentLookupError(f"Segment service response has no segment for user {user_id}", user_id=user_id)
        return SegmentResponse(segment=segment)

    def close(self) -> None:
        self._client.close()
