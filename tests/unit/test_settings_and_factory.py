"""Unit tests for settings parsing and adapter construction."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cart_offer.adapters.segments.http_segment_lookup import HttpSegmentLookup
from cart_offer.adapters.segments.static_segment_lookup import StaticSegmentLookup
from cart_offer.app.factory import create_adapters, create_segment_lookup
from cart_offer.settings import Settings, parse_user_segments


def test_parse_user_segments():
    assert parse_user_segments("1:p1, 2:p2,") == {1: "p1", 2: "p2"}
    assert parse_user_segments("") == {}


def test_parse_user_segments_rejects_bad_pair():
    with pytest.raises(ValueError):
        parse_user_segments("1-p1")


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SEGMENT_LOOKUP_ADAPTER", "STATIC")
    monkeypatch.setenv("STATIC_USER_SEGMENTS", "1:p1")
    monkeypatch.setenv("SEGMENT_LOOKUP_TIMEOUT_SECONDS", "2.5")
    monkeypatch.delenv("OFFERS_SEED_FILE", raising=False)

    settings = Settings.from_env()

    assert settings.segment_lookup_adapter == "static"
    assert settings.static_user_segments == {1: "p1"}
    assert settings.segment_lookup_timeout_seconds == 2.5
    assert settings.offers_seed_file is None


def test_create_segment_lookup_variants():
    assert isinstance(create_segment_lookup(Settings(segment_lookup_adapter="static")), StaticSegmentLookup)

    http_lookup = create_segment_lookup(Settings(segment_lookup_adapter="http"))
    assert isinstance(http_lookup, HttpSegmentLookup)
    http_lookup.close()


def test_create_segment_lookup_unknown_adapter():
    with pytest.raises(ValueError, match="SEGMENT_LOOKUP_ADAPTER"):
        create_segment_lookup(Settings(segment_lookup_adapter="grpc"))


def test_create_adapters_seeds_store(tmp_path: Path):
    seed = tmp_path / "offers.json"
    seed.write_text(
        json.dumps([{"restaurant_id": 1, "offer_type": "FLATX", "offer_value": 10, "customer_segment": ["p1"]}]),
        encoding="utf-8",
    )

    store, lookup = create_adapters(
        Settings(segment_lookup_adapter="static", static_user_segments={1: "p1"}, offers_seed_file=str(seed))
    )

    assert len(store) == 1
    assert lookup.resolve(1).segment == "p1"
