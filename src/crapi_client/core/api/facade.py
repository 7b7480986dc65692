"""cr-api の各リソースを 1 メソッドずつ公開する façade。"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

import httpx

from crapi_client.core.api.errors import CrApiError, translate_transport_error
from crapi_client.infra.crapi.dto import (
    Alliance,
    Arena,
    Badge,
    Battle,
    ChestCycleList,
    Clan,
    ClanHistory,
    ClanSearch,
    ConstantCard,
    Constants,
    CountryCode,
    DetailedClan,
    Endpoints,
    PopularClan,
    PopularPlayer,
    PopularTournament,
    Profile,
    Rarity,
    TopClan,
    TopPlayer,
    Tournament,
)
from crapi_client.infra.crapi.request import (
    ClanRequest,
    ClansRequest,
    ProfileRequest,
    ProfilesRequest,
    validate_tag,
)
from crapi_client.infra.crapi.transport import (
    CrApiRetryConfig,
    CrApiTransport,
    CrApiTransportError,
    CrApiTransportProtocol,
)
from crapi_client.shared.config import AppSettings, get_settings
from crapi_client.shared.logging import get_logger

__all__ = ["CrApi", "TransportFactory", "build_api"]

R = TypeVar("R")

TransportFactory = Callable[[str, str | None], CrApiTransportProtocol]

_TRANSPORT_FAILURES = (CrApiTransportError, httpx.HTTPError, OSError)


class CrApi:
    """cr-api クライアントの公開インターフェース。

    各メソッドは引数を検証したうえでトランスポートを 1 回だけ呼び出し、
    トランスポートの失敗は `CrApiError` 系の例外へ変換する。
    引数の不備は通信前に `TypeError` / `ValueError` として送出する。
    """

    def __init__(
        self,
        base_url: str,
        developer_key: str | None = None,
        *,
        transport_factory: TransportFactory | None = None,
        logger=None,
    ) -> None:
        if base_url is None:
            msg = "base_url must not be None"
            raise TypeError(msg)
        if not base_url:
            msg = "base_url must not be empty"
            raise ValueError(msg)
        if developer_key is not None and not developer_key:
            msg = "developer_key must not be empty when given"
            raise ValueError(msg)

        self._base_url = base_url
        self._developer_key = developer_key
        factory = transport_factory or CrApiTransport
        self._transport: CrApiTransportProtocol = factory(base_url, developer_key)
        self._logger = logger or get_logger(__name__)

    @property
    def base_url(self) -> str:
        return self._base_url

    def get_version(self) -> str:
        return self._call("version", self._transport.get_version)

    def get_profile(self, tag_or_request: str | ProfileRequest) -> Profile:
        """プレイヤープロフィールを取得する。タグ文字列またはリクエストを受け付ける。"""

        request = (
            tag_or_request
            if isinstance(tag_or_request, ProfileRequest)
            else ProfileRequest.of(tag_or_request)
        )
        return self._call("profile", self._transport.get_profile, request)

    def get_profiles(
        self, tags_or_request: Sequence[str] | ProfilesRequest | None
    ) -> tuple[Profile, ...]:
        request = (
            tags_or_request
            if isinstance(tags_or_request, ProfilesRequest)
            else ProfilesRequest.of(tags_or_request)
        )
        return self._call("profiles", self._transport.get_profiles, request)

    def get_clan(self, tag_or_request: str | ClanRequest) -> Clan:
        request = (
            tag_or_request
            if isinstance(tag_or_request, ClanRequest)
            else ClanRequest.of(tag_or_request)
        )
        return self._call("clan", self._transport.get_clan, request)

    def get_clans(
        self, tags_or_request: Sequence[str] | ClansRequest | None
    ) -> tuple[DetailedClan, ...]:
        request = (
            tags_or_request
            if isinstance(tags_or_request, ClansRequest)
            else ClansRequest.of(tags_or_request)
        )
        return self._call("clans", self._transport.get_clans, request)

    def get_clan_search(self, search: ClanSearch | None = None) -> tuple[Clan, ...]:
        return self._call("clan_search", self._transport.get_clan_search, search)

    def get_top_clans(self, location: str | None = None) -> tuple[TopClan, ...]:
        """上位クランを取得する。location 未指定時は絞り込みなし。"""

        return self._call("top_clans", self._transport.get_top_clans, location)

    def get_top_players(self, location: str | None = None) -> tuple[TopPlayer, ...]:
        return self._call("top_players", self._transport.get_top_players, location)

    def get_tournaments(self, tag: str) -> Tournament:
        validate_tag(tag)
        return self._call("tournaments", self._transport.get_tournaments, tag)

    def get_constants(self) -> Constants:
        return self._call("constants", self._transport.get_constants)

    def get_alliance_constants(self) -> Alliance:
        return self._call("alliance_constants", self._transport.get_alliance_constants)

    def get_arenas_constants(self) -> tuple[Arena, ...]:
        return self._call("arenas_constants", self._transport.get_arenas_constants)

    def get_badges_constants(self) -> tuple[Badge, ...]:
        return self._call("badges_constants", self._transport.get_badges_constants)

    def get_chest_cycle_constants(self) -> ChestCycleList:
        return self._call("chest_cycle_constants", self._transport.get_chest_cycle_constants)

    def get_country_codes_constants(self) -> tuple[CountryCode, ...]:
        return self._call("country_codes_constants", self._transport.get_country_codes_constants)

    def get_rarities_constants(self) -> tuple[Rarity, ...]:
        return self._call("rarities_constants", self._transport.get_rarities_constants)

    def get_cards_constants(self) -> tuple[ConstantCard, ...]:
        return self._call("cards_constants", self._transport.get_cards_constants)

    def get_endpoints(self) -> Endpoints:
        return self._call("endpoints", self._transport.get_endpoints)

    def get_popular_clans(self) -> tuple[PopularClan, ...]:
        return self._call("popular_clans", self._transport.get_popular_clans)

    def get_popular_players(self) -> tuple[PopularPlayer, ...]:
        return self._call("popular_players", self._transport.get_popular_players)

    def get_popular_tournaments(self) -> tuple[PopularTournament, ...]:
        return self._call("popular_tournaments", self._transport.get_popular_tournaments)

    def get_clan_battles(self, tag: str) -> tuple[Battle, ...]:
        validate_tag(tag)
        return self._call("clan_battles", self._transport.get_clan_battles, tag)

    def get_clan_history(self, tag: str) -> ClanHistory:
        validate_tag(tag)
        return self._call("clan_history", self._transport.get_clan_history, tag)

    def _call(self, endpoint: str, func: Callable[..., R], *args: Any) -> R:
        self._logger.debug("crapi_call", endpoint=endpoint)
        try:
            return func(*args)
        except _TRANSPORT_FAILURES as exc:
            error: CrApiError = translate_transport_error(exc)
            self._logger.warning(
                "crapi_call_failed",
                endpoint=endpoint,
                code=getattr(error, "code", None),
                message=str(exc),
            )
            raise error from exc


def build_api(
    *,
    settings: AppSettings | None = None,
    logger=None,
) -> CrApi:
    """共有設定から façade を構築するファクトリ。"""

    app_settings = settings or get_settings()
    crapi_settings = app_settings.crapi
    developer_key = (
        crapi_settings.developer_key.get_secret_value()
        if crapi_settings.developer_key is not None
        else None
    )
    retry_config = CrApiRetryConfig(max_attempts=crapi_settings.max_attempts)

    def _transport_factory(base_url: str, key: str | None) -> CrApiTransportProtocol:
        return CrApiTransport(
            base_url,
            key,
            timeout=crapi_settings.timeout_seconds,
            retry_config=retry_config,
            logger=logger,
        )

    return CrApi(
        str(crapi_settings.base_url),
        developer_key or None,
        transport_factory=_transport_factory,
        logger=logger,
    )
