"""Tests for wire shapes and Twitter date parsing."""

from datetime import datetime, timedelta, timezone

import pytest

from adapters.twitter_json import (
    MAX_RESET_TIME,
    EndSessionWire,
    TotalsWire,
    UserWire,
    deserialize,
    parse_twitter_date,
)
from core.domain.errors import MalformedResponseError


class TestParseTwitterDate:
    """Tests for parse_twitter_date."""

    def test_twitter_format(self):
        parsed = parse_twitter_date("Wed Aug 27 13:08:45 +0000 2008")
        assert parsed == datetime(2008, 8, 27, 13, 8, 45, tzinfo=timezone.utc)

    def test_offset_is_kept(self):
        parsed = parse_twitter_date("Wed Aug 27 13:08:45 -0700 2008")
        assert parsed.utcoffset() == timedelta(hours=-7)

    def test_iso_format(self):
        assert parse_twitter_date("2010-10-12T02:14:54Z") == datetime(2010, 10, 12, 2, 14, 54, tzinfo=timezone.utc)

    def test_naive_iso_assumed_utc(self):
        assert parse_twitter_date("2010-10-12 02:14:54").tzinfo is not None

    @pytest.mark.parametrize("raw", ["garbage", "", None, 42])
    def test_returns_default(self, raw):
        assert parse_twitter_date(raw, MAX_RESET_TIME) == MAX_RESET_TIME
        assert parse_twitter_date(raw) is None

    def test_max_reset_time(self):
        assert MAX_RESET_TIME.year == 9999
        assert MAX_RESET_TIME.tzinfo is timezone.utc


class TestDeserialize:
    """Tests for schema-bound deserialization."""

    def test_totals(self, totals_json):
        totals = deserialize(TotalsWire, totals_json).to_totals()
        assert (totals.favorites, totals.followers, totals.friends, totals.updates) == (3, 10, 7, 42)

    def test_unknown_fields_ignored(self):
        wire = deserialize(EndSessionWire, '{"request": "/r", "error": "boom", "extra": 1}')
        response = wire.to_hash_response()
        assert response.request == "/r"
        assert response.error == "boom"

    def test_user_transform(self, user_json):
        user = deserialize(UserWire, user_json).to_user()
        assert user.id == 15411837
        assert user.profile_background_color == "0099B9"
        assert user.status.created_at == datetime(2010, 10, 19, 17, 24, 7, tzinfo=timezone.utc)

    def test_user_bad_date_becomes_none(self):
        user = deserialize(UserWire, '{"screen_name": "jack", "created_at": "yesterday"}').to_user()
        assert user.created_at is None
        assert user.status is None

    def test_invalid_json_is_malformed(self):
        with pytest.raises(MalformedResponseError):
            deserialize(TotalsWire, "{")

    def test_wrong_top_level_is_malformed(self):
        with pytest.raises(MalformedResponseError):
            deserialize(TotalsWire, "[]")
