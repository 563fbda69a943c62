"""Formas JSON del cable (Twitter REST v1) y su transformación a payloads.

Por qué modelos separados del dominio:
- Los nombres y tipos del cable (fechas como texto, campos extra) no deben
  filtrarse al dominio.
- Deserializar con esquema detecta respuestas con forma incorrecta; la
  transformación posterior (`to_*`) produce el payload público campo a campo.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TypeVar

from pydantic import BaseModel, ValidationError
from pydantic.config import ConfigDict

from core.domain.errors import MalformedResponseError
from core.domain.models import HashResponse, Status, Totals, User

TWITTER_DATE_FORMAT = "%a %b %d %H:%M:%S %z %Y"

# Fecha de reset usada cuando la API devuelve algo imparseable.
MAX_RESET_TIME = datetime.max.replace(tzinfo=timezone.utc)


def parse_twitter_date(raw: str | None, default: datetime | None = None) -> datetime | None:
    """Parsea `Wed Aug 27 13:08:45 +0000 2008` o ISO-8601; nunca lanza."""

    if not raw or not isinstance(raw, str):
        return default

    text = raw.strip()
    try:
        return datetime.strptime(text, TWITTER_DATE_FORMAT)
    except ValueError:
        pass

    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return default
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class _Wire(BaseModel):
    model_config = ConfigDict(extra="ignore")


class TotalsWire(_Wire):
    favorites: int = 0
    followers: int = 0
    friends: int = 0
    updates: int = 0

    def to_totals(self) -> Totals:
        return Totals(
            favorites=self.favorites,
            followers=self.followers,
            friends=self.friends,
            updates=self.updates,
        )


class EndSessionWire(_Wire):
    request: str | None = None
    error: str | None = None

    def to_hash_response(self) -> HashResponse:
        return HashResponse(request=self.request, error=self.error)


class StatusWire(_Wire):
    id: int = 0
    id_str: str | None = None
    text: str | None = None
    source: str | None = None
    created_at: str | None = None
    truncated: bool = False
    in_reply_to_status_id_str: str | None = None
    in_reply_to_user_id_str: str | None = None
    in_reply_to_screen_name: str | None = None
    retweet_count: int = 0
    favorited: bool = False
    retweeted: bool = False

    def to_status(self) -> Status:
        data = self.model_dump(exclude={"created_at"})
        return Status(**data, created_at=parse_twitter_date(self.created_at))


class UserWire(_Wire):
    id: int = 0
    id_str: str | None = None
    name: str | None = None
    screen_name: str | None = None
    location: str | None = None
    description: str | None = None
    url: str | None = None
    protected: bool = False
    verified: bool = False
    followers_count: int = 0
    friends_count: int = 0
    listed_count: int = 0
    favourites_count: int = 0
    statuses_count: int = 0
    created_at: str | None = None
    utc_offset: int | None = None
    time_zone: str | None = None
    geo_enabled: bool = False
    lang: str | None = None
    contributors_enabled: bool = False
    is_translator: bool = False
    following: bool | None = None
    notifications: bool | None = None
    follow_request_sent: bool | None = None
    default_profile: bool = False
    default_profile_image: bool = False
    profile_image_url: str | None = None
    profile_image_url_https: str | None = None
    profile_background_color: str | None = None
    profile_background_image_url: str | None = None
    profile_background_tile: bool = False
    profile_link_color: str | None = None
    profile_sidebar_border_color: str | None = None
    profile_sidebar_fill_color: str | None = None
    profile_text_color: str | None = None
    profile_use_background_image: bool = False
    status: StatusWire | None = None

    def to_user(self) -> User:
        data = self.model_dump(exclude={"created_at", "status"})
        return User(
            **data,
            created_at=parse_twitter_date(self.created_at),
            status=self.status.to_status() if self.status else None,
        )


W = TypeVar("W", bound=_Wire)


def deserialize(shape: type[W], response_json: str) -> W:
    """Deserializa `response_json` en la forma `shape` o lanza `MalformedResponseError`."""

    try:
        return shape.model_validate_json(response_json)
    except ValidationError as exc:
        raise MalformedResponseError(
            f"Response does not match {shape.__name__}: {exc.error_count()} error(s)"
        ) from exc
