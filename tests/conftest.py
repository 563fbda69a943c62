"""Pytest configuration and shared fixtures."""

import json

import pytest

BASE_URL = "https://api.example.com/1/"


@pytest.fixture
def base_url():
    """Base URL used by processors and transports under test."""
    return BASE_URL


@pytest.fixture
def settings_json():
    """Settings response with a single trend location."""
    return json.dumps({
        "trend_location": [{
            "woeid": 23424977,
            "name": "United States",
            "placeType": {"code": 12, "name": "Country"},
            "country": "United States",
            "url": "http://where.yahooapis.com/v1/place/23424977",
            "countryCode": "US",
            "parentid": 1,
        }],
        "geo_enabled": True,
        "sleep_time": {"start_time": 22, "end_time": 7, "enabled": True},
        "language": "en",
        "always_use_https": True,
        "discoverable_by_email": False,
        "time_zone": {
            "name": "Mountain Time (US & Canada)",
            "tzinfo_name": "America/Denver",
            "utc_offset": -25200,
        },
    })


@pytest.fixture
def rate_limit_json():
    """Rate limit response with a well formed reset_time."""
    return json.dumps({
        "hourly_limit": 350,
        "remaining_hits": 349,
        "reset_time": "Tue Oct 12 02:14:54 +0000 2010",
        "reset_time_in_seconds": 1286849694,
    })


@pytest.fixture
def totals_json():
    """Totals response."""
    return json.dumps({"favorites": 3, "followers": 10, "friends": 7, "updates": 42})


@pytest.fixture
def user_json():
    """Verify credentials response (trimmed user object with extra wire fields)."""
    return json.dumps({
        "id": 15411837,
        "id_str": "15411837",
        "name": "Joe Mayo",
        "screen_name": "JoeMayo",
        "location": "Denver, CO",
        "description": "Author and speaker",
        "url": "http://example.com",
        "protected": False,
        "verified": False,
        "followers_count": 1018,
        "friends_count": 200,
        "listed_count": 84,
        "favourites_count": 42,
        "statuses_count": 2871,
        "created_at": "Sun Jul 13 04:35:50 +0000 2008",
        "utc_offset": -25200,
        "time_zone": "Mountain Time (US & Canada)",
        "geo_enabled": True,
        "lang": "en",
        "following": None,
        "profile_image_url": "http://a0.twimg.com/profile_images/1/joe_normal.jpg",
        "profile_background_color": "0099B9",
        "show_all_inline_media": True,
        "status": {
            "id": 28003315034,
            "id_str": "28003315034",
            "text": "Hello from the API",
            "source": "web",
            "created_at": "Tue Oct 19 17:24:07 +0000 2010",
            "retweet_count": 0,
            "favorited": False,
            "retweeted": False,
            "geo": None,
        },
    })


@pytest.fixture
def end_session_json():
    """EndSession action response."""
    return '{"request":"/1/account/end_session.json","error":null}'
