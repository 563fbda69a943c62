"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los payloads son inmutables (`frozen`): se crean una vez por llamada y se
  entregan al caller.

Nota:
- Cada variante de consulta tiene su propia entidad con un único payload.
  `Account` es la unión etiquetada por `type`; nunca hay que adivinar qué
  campo está poblado.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.account_types import AccountAction, AccountType


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Location(_Frozen):
    """Ubicación de trends (WOEID de Yahoo)."""

    woeid: int = Field(default=0, description="Where On Earth ID.")
    name: str | None = Field(default=None, description="Nombre de la ubicación.")
    country: str | None = Field(default=None, description="País (vacío para ubicaciones globales).")
    country_code: str | None = Field(default=None, description="Código ISO del país.")
    url: str | None = Field(default=None, description="URL del recurso de la ubicación.")
    parent_id: int = Field(default=0, description="WOEID del padre.")
    place_type_code: int = Field(default=0, description="Código del tipo de lugar.")
    place_type_name: str | None = Field(default=None, description="Nombre del tipo de lugar (Town, Country...).")


class SleepTime(_Frozen):
    start_hour: int = Field(default=0, description="Hora de inicio de la ventana de silencio.")
    end_hour: int = Field(default=0, description="Hora de fin de la ventana de silencio.")
    enabled: bool = Field(default=False)


class TimeZoneInfo(_Frozen):
    name: str | None = Field(default=None, description="Nombre visible de la zona horaria.")
    tz_info_name: str | None = Field(default=None, description="Identificador tz database.")
    utc_offset: int = Field(default=0, description="Offset respecto a UTC en segundos.")


class Settings(_Frozen):
    """Configuración de la cuenta autenticada."""

    trend_location: Location | None = Field(default=None, description="Primera ubicación de trends configurada.")
    geo_enabled: bool = False
    sleep_time: SleepTime = Field(default_factory=SleepTime)
    language: str | None = Field(default=None, description="Código de idioma de la cuenta.")
    always_use_https: bool = False
    discoverable_by_email: bool = False
    time_zone: TimeZoneInfo = Field(default_factory=TimeZoneInfo)


class RateLimitStatus(_Frozen):
    hourly_limit: int = Field(default=0, description="Cuota de llamadas por hora.")
    remaining_hits: int = Field(default=0, description="Llamadas restantes en la ventana actual.")
    reset_time: datetime = Field(..., description="Momento de reinicio (fallback: fecha máxima).")
    reset_time_in_seconds: int = Field(default=0, description="Reinicio expresado como epoch en segundos.")


class Totals(_Frozen):
    favorites: int = 0
    followers: int = 0
    friends: int = 0
    updates: int = 0


class Status(_Frozen):
    """Último tweet embebido en el perfil."""

    id: int = 0
    id_str: str | None = None
    text: str | None = None
    source: str | None = None
    created_at: datetime | None = None
    truncated: bool = False
    in_reply_to_status_id_str: str | None = None
    in_reply_to_user_id_str: str | None = None
    in_reply_to_screen_name: str | None = None
    retweet_count: int = 0
    favorited: bool = False
    retweeted: bool = False


class User(_Frozen):
    """Perfil completo del usuario autenticado."""

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
    created_at: datetime | None = None
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
    status: Status | None = None


class HashResponse(_Frozen):
    """Eco de la petición enviada y error opcional (respuesta de acciones)."""

    request: str | None = Field(default=None, description="Ruta de la petición que ejecutó la acción.")
    error: str | None = Field(default=None, description="Mensaje de error devuelto por la API.")


class AccountEntity(_Frozen):
    @property
    def payload(self) -> Any:
        raise NotImplementedError

    @property
    def has_payload(self) -> bool:
        return self.payload is not None


class VerifyCredentialsAccount(AccountEntity):
    type: Literal[AccountType.VERIFY_CREDENTIALS] = AccountType.VERIFY_CREDENTIALS
    user: User | None = None

    @property
    def payload(self) -> User | None:
        return self.user


class RateLimitStatusAccount(AccountEntity):
    type: Literal[AccountType.RATE_LIMIT_STATUS] = AccountType.RATE_LIMIT_STATUS
    rate_limit_status: RateLimitStatus | None = None

    @property
    def payload(self) -> RateLimitStatus | None:
        return self.rate_limit_status


class TotalsAccount(AccountEntity):
    type: Literal[AccountType.TOTALS] = AccountType.TOTALS
    totals: Totals | None = None

    @property
    def payload(self) -> Totals | None:
        return self.totals


class SettingsAccount(AccountEntity):
    type: Literal[AccountType.SETTINGS] = AccountType.SETTINGS
    settings: Settings | None = None

    @property
    def payload(self) -> Settings | None:
        return self.settings


class EndSessionAccount(AccountEntity):
    """Resultado de la acción EndSession (no es una consulta)."""

    action: Literal[AccountAction.END_SESSION] = AccountAction.END_SESSION
    end_session_status: HashResponse | None = None

    @property
    def payload(self) -> HashResponse | None:
        return self.end_session_status


Account = Annotated[
    Union[VerifyCredentialsAccount, RateLimitStatusAccount, TotalsAccount, SettingsAccount],
    Field(discriminator="type"),
]

ACCOUNT_ENTITIES: dict[AccountType, type[AccountEntity]] = {
    AccountType.VERIFY_CREDENTIALS: VerifyCredentialsAccount,
    AccountType.RATE_LIMIT_STATUS: RateLimitStatusAccount,
    AccountType.TOTALS: TotalsAccount,
    AccountType.SETTINGS: SettingsAccount,
}


def empty_account(account_type: AccountType) -> AccountEntity:
    """Entidad sin payload (respuesta vacía) para `account_type`."""

    return ACCOUNT_ENTITIES[account_type]()
