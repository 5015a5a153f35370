from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional


def parse_user_segments(raw: str) -> dict[int, str]:
    """Parse ``"1:p1,2:p2"`` into ``{1: "p1", 2: "p2"}``."""

    mapping: dict[int, str] = {}
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        user_id, sep, segment = pair.partition(":")
        if not sep or not segment.strip():
            raise ValueError(f"Invalid user segment pair: {pair!r} (expected <user_id>:<segment>)")
        mapping[int(user_id.strip())] = segment.strip()
    return mapping


@dataclass(frozen=True)
class Settings:
    """Runtime settings sourced from environment variables."""

    log_level: str = "INFO"
    # Segment lookup
    segment_lookup_adapter: str = "http"
    segment_service_url: str = "http://localhost:1080"
    segment_service_path: str = "/api/v1/user_segment"
    segment_lookup_timeout_seconds: float = 5.0
    static_user_segments: dict[int, str] = field(default_factory=dict)
    # Offer seeding
    offers_seed_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            segment_lookup_adapter=os.getenv("SEGMENT_LOOKUP_ADAPTER", cls.segment_lookup_adapter).lower(),
            segment_service_url=os.getenv("SEGMENT_SERVICE_URL", cls.segment_service_url),
            segment_service_path=os.getenv("SEGMENT_SERVICE_PATH", cls.segment_service_path),
            segment_lookup_timeout_seconds=float(
                os.getenv("SEGMENT_LOOKUP_TIMEOUT_SECONDS", cls.segment_lookup_timeout_seconds)
            ),
            static_user_segments=parse_user_segments(os.getenv("STATIC_USER_SEGMENTS", "")),
            offers_seed_file=os.getenv("OFFERS_SEED_FILE") or None,
        )


def get_settings(_cache: dict[str, Settings] = {}) -> Settings:
    """Provide a simple cached settings object."""

    if "settings" not in _cache:
        _cache["settings"] = Settings.from_env()
    return _cache["settings"]
