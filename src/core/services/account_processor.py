"""Procesador de peticiones para los endpoints `account/*`.

Flujo:
- `get_parameters`: predicado -> {"Type": "..."}.
- `build_url`: resuelve `AccountType` y construye la `Request`.
- `process_results` / `process_action_result`: JSON -> entidad tipada.

Dos estrategias de lectura conviven a propósito: settings y rate limit se
leen campo a campo con `JsonDocument`; verify credentials, totals y
end session se deserializan con esquema (`adapters.twitter_json`) y luego
se transforman al payload público.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import UnionType
from typing import Annotated, Any, Callable, TypeVar, Union, get_args, get_origin

from adapters.json_document import JsonDocument
from adapters.twitter_json import (
    MAX_RESET_TIME,
    EndSessionWire,
    TotalsWire,
    UserWire,
    deserialize,
    parse_twitter_date,
)
from core.domain.account_types import AccountAction, AccountType
from core.domain.errors import (
    ConfigurationError,
    InvalidOperationError,
    MalformedResponseError,
    TypeMismatchError,
)
from core.domain.models import (
    AccountEntity,
    EndSessionAccount,
    Location,
    RateLimitStatus,
    RateLimitStatusAccount,
    Settings,
    SettingsAccount,
    SleepTime,
    TimeZoneInfo,
    TotalsAccount,
    VerifyCredentialsAccount,
    empty_account,
)
from core.query.enums import parse_query_enum
from core.query.predicate import Expr, get_parameters
from core.query.request import Request, build_request, ensure_exhaustive

log = logging.getLogger(__name__)

T = TypeVar("T")

TYPE_PARAM = "Type"


def _location_from(doc: JsonDocument) -> Location:
    return Location(
        woeid=doc.get_value("woeid", int),
        name=doc.get_value("name", str),
        country=doc.get_value("country", str),
        country_code=doc.get_value("countryCode", str),
        url=doc.get_value("url", str),
        parent_id=doc.get_value("parentid", int),
        place_type_code=doc.get_value("placeType.code", int),
        place_type_name=doc.get_value("placeType.name", str),
    )


def _first_trend_location(settings: JsonDocument) -> Location | None:
    trend_location = settings.get("trend_location")
    if trend_location is None:
        return None
    if not trend_location.is_array():
        raise MalformedResponseError("trend_location must be an array")
    if len(trend_location) == 0:
        return None
    first = trend_location[0]
    if not first.is_object():
        raise MalformedResponseError("trend_location[0] must be an object")
    return _location_from(first)


def _nested_object(settings: JsonDocument, key: str) -> JsonDocument:
    nested = settings.get(key)
    if nested is None:
        return JsonDocument({})
    if not nested.is_object():
        raise MalformedResponseError(f"{key} must be an object")
    return nested


def handle_settings_response(response_json: str) -> SettingsAccount:
    settings = JsonDocument.parse(response_json).require_object()
    sleep_time = _nested_object(settings, "sleep_time")
    time_zone = _nested_object(settings, "time_zone")

    return SettingsAccount(
        settings=Settings(
            trend_location=_first_trend_location(settings),
            geo_enabled=settings.get_value("geo_enabled", bool),
            sleep_time=SleepTime(
                start_hour=sleep_time.get_value("start_time", int),
                end_hour=sleep_time.get_value("end_time", int),
                enabled=sleep_time.get_value("enabled", bool),
            ),
            language=settings.get_value("language", str),
            always_use_https=settings.get_value("always_use_https", bool),
            discoverable_by_email=settings.get_value("discoverable_by_email", bool),
            time_zone=TimeZoneInfo(
                name=time_zone.get_value("name", str),
                tz_info_name=time_zone.get_value("tzinfo_name", str),
                utc_offset=time_zone.get_value("utc_offset", int),
            ),
        )
    )


def handle_rate_limit_response(response_json: str) -> RateLimitStatusAccount:
    status = JsonDocument.parse(response_json).require_object()

    raw_reset = status.get("reset_time")
    raw_value = raw_reset.raw if raw_reset is not None else None
    reset_time = parse_twitter_date(raw_value)
    if reset_time is None:
        log.warning("Unparseable reset_time %r; using %s", raw_value, MAX_RESET_TIME)
        reset_time = MAX_RESET_TIME

    return RateLimitStatusAccount(
        rate_limit_status=RateLimitStatus(
            hourly_limit=status.get_value("hourly_limit", int),
            remaining_hits=status.get_value("remaining_hits", int),
            reset_time=reset_time,
            reset_time_in_seconds=status.get_value("reset_time_in_seconds", int),
        )
    )


def handle_verify_credentials_response(response_json: str) -> VerifyCredentialsAccount:
    user = deserialize(UserWire, response_json)
    return VerifyCredentialsAccount(user=user.to_user())


def handle_totals_response(response_json: str) -> TotalsAccount:
    totals = deserialize(TotalsWire, response_json)
    return TotalsAccount(totals=totals.to_totals())


def handle_end_session_response(response_json: str) -> EndSessionAccount:
    end_session = deserialize(EndSessionWire, response_json)
    return EndSessionAccount(end_session_status=end_session.to_hash_response())


QUERY_HANDLERS: dict[AccountType, Callable[[str], AccountEntity]] = {
    AccountType.SETTINGS: handle_settings_response,
    AccountType.VERIFY_CREDENTIALS: handle_verify_credentials_response,
    AccountType.RATE_LIMIT_STATUS: handle_rate_limit_response,
    AccountType.TOTALS: handle_totals_response,
}

ACTION_HANDLERS: dict[AccountAction, Callable[[str], EndSessionAccount]] = {
    AccountAction.END_SESSION: handle_end_session_response,
}

ensure_exhaustive(AccountType, QUERY_HANDLERS, name="QUERY_HANDLERS")
ensure_exhaustive(AccountAction, ACTION_HANDLERS, name="ACTION_HANDLERS")


def map_response(variant: AccountType, response_json: str | None) -> AccountEntity:
    """JSON de una consulta -> entidad de la variante (sin payload si está vacío)."""

    handler = QUERY_HANDLERS.get(variant) if isinstance(variant, AccountType) else None
    if handler is None:
        raise InvalidOperationError(f"No response handler registered for {variant!r}")

    if not response_json:
        log.debug("Empty %s response", variant.value)
        return empty_account(variant)

    log.debug("Mapping %s response (%d chars)", variant.value, len(response_json))
    return handler(response_json)


def map_action(action: AccountAction, response_json: str | None) -> EndSessionAccount:
    """JSON de una acción -> entidad de la acción (sin payload si está vacío)."""

    handler = ACTION_HANDLERS.get(action) if isinstance(action, AccountAction) else None
    if handler is None:
        raise InvalidOperationError(f"No action handler registered for {action!r}")

    if not response_json:
        return EndSessionAccount()
    return handler(response_json)


def _candidate_types(expected_type: Any) -> tuple[type, ...]:
    origin = get_origin(expected_type)
    if origin is Annotated:
        return _candidate_types(get_args(expected_type)[0])
    if origin in (Union, UnionType):
        members: tuple[type, ...] = ()
        for arg in get_args(expected_type):
            members += _candidate_types(arg)
        return members
    if isinstance(expected_type, type):
        return (expected_type,)
    return ()


def narrow(entity: Any, expected_type: Any) -> Any:
    """Devuelve `entity` si encaja en `expected_type`; si no, `TypeMismatchError`.

    `expected_type` puede ser una clase o una unión (`Account`, `A | B`),
    incluida la forma `Annotated[Union[...], ...]`.
    """

    if expected_type is None:
        return entity
    candidates = _candidate_types(expected_type)
    if not candidates or not isinstance(entity, candidates):
        raise TypeMismatchError(expected_type, type(entity))
    return entity


class AccountRequestProcessor:
    """Procesador de consultas y acciones de cuenta.

    La variante resuelta en `build_url` se guarda en la instancia y se usa en
    `process_results`: crear un procesador por llamada.
    """

    allowed_parameters: tuple[str, ...] = (TYPE_PARAM,)

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url
        self.type: AccountType | None = None

    def get_parameters(self, expression: Expr) -> dict[str, str]:
        return get_parameters(expression, self.allowed_parameters, required=(TYPE_PARAM,))

    def build_url(self, parameters: dict[str, str] | None) -> Request:
        if parameters is None or TYPE_PARAM not in parameters:
            raise ConfigurationError(f"You must set {TYPE_PARAM}.", parameter=TYPE_PARAM)

        self.type = parse_query_enum(AccountType, parameters[TYPE_PARAM])
        return build_request(self.base_url, self.type)

    def build_action_url(self, action: AccountAction) -> Request:
        return build_request(self.base_url, action)

    def process_results(self, response_json: str | None) -> list[AccountEntity]:
        if self.type is None:
            raise InvalidOperationError("build_url must resolve a Type before process_results runs.")
        return [map_response(self.type, response_json)]

    def process_action_result(
        self,
        response_json: str | None,
        action: Enum,
        expected_type: type[T] | None = EndSessionAccount,  # type: ignore[assignment]
    ) -> T:
        entity = map_action(action, response_json)  # type: ignore[arg-type]
        return narrow(entity, expected_type)
