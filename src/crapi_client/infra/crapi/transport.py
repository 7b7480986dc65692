"""cr-api への HTTP 通信を担うトランスポート実装。"""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol
from urllib.parse import quote

import httpx

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
    parse_list,
)
from crapi_client.infra.crapi.request import (
    ClanRequest,
    ClansRequest,
    ProfileRequest,
    ProfilesRequest,
)
from crapi_client.shared.logging import get_logger
from crapi_client.shared.types import normalize_tag

AUTH_HEADER = "auth"
STATUS_MESSAGE_PREFIX = "crapi"


class CrApiTransportError(Exception):
    """トランスポート層の失敗。HTTP 応答起因の場合はメッセージ末尾にステータスを含む。"""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    @classmethod
    def from_status(cls, status_code: int) -> CrApiTransportError:
        return cls(f"{STATUS_MESSAGE_PREFIX}: {status_code}", status_code=status_code)


@dataclass(slots=True)
class CrApiRetryConfig:
    """リトライ・レート制御の設定。"""

    max_attempts: int = 3
    backoff_factor: float = 0.5
    retriable_statuses: tuple[int, ...] = (429, 500, 502, 503, 504)


class CrApiTransportProtocol(Protocol):
    """façade から利用するトランスポートのプロトコル。"""

    def get_version(self) -> str: ...

    def get_profile(self, request: ProfileRequest) -> Profile: ...

    def get_profiles(self, request: ProfilesRequest) -> tuple[Profile, ...]: ...

    def get_clan(self, request: ClanRequest) -> Clan: ...

    def get_clans(self, request: ClansRequest) -> tuple[DetailedClan, ...]: ...

    def get_clan_search(self, search: ClanSearch | None) -> tuple[Clan, ...]: ...

    def get_top_clans(self, location: str | None) -> tuple[TopClan, ...]: ...

    def get_top_players(self, location: str | None) -> tuple[TopPlayer, ...]: ...

    def get_tournaments(self, tag: str) -> Tournament: ...

    def get_constants(self) -> Constants: ...

    def get_alliance_constants(self) -> Alliance: ...

    def get_arenas_constants(self) -> tuple[Arena, ...]: ...

    def get_badges_constants(self) -> tuple[Badge, ...]: ...

    def get_chest_cycle_constants(self) -> ChestCycleList: ...

    def get_country_codes_constants(self) -> tuple[CountryCode, ...]: ...

    def get_rarities_constants(self) -> tuple[Rarity, ...]: ...

    def get_cards_constants(self) -> tuple[ConstantCard, ...]: ...

    def get_endpoints(self) -> Endpoints: ...

    def get_popular_clans(self) -> tuple[PopularClan, ...]: ...

    def get_popular_players(self) -> tuple[PopularPlayer, ...]: ...

    def get_popular_tournaments(self) -> tuple[PopularTournament, ...]: ...

    def get_clan_battles(self, tag: str) -> tuple[Battle, ...]: ...

    def get_clan_history(self, tag: str) -> ClanHistory: ...


def _tag_segment(tag: str) -> str:
    return quote(normalize_tag(tag), safe="")


def _tags_segment(tags: Sequence[str]) -> str:
    return ",".join(_tag_segment(tag) for tag in tags)


class CrApiTransport(CrApiTransportProtocol):
    """httpx で cr-api を呼び出し、JSON を DTO へ変換するトランスポート。"""

    def __init__(
        self,
        base_url: str,
        developer_key: str | None = None,
        *,
        timeout: float = 10.0,
        retry_config: CrApiRetryConfig | None = None,
        http_get: Callable[..., httpx.Response] = httpx.get,
        sleep_func: Callable[[float], None] = time.sleep,
        logger=None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._developer_key = developer_key
        self._timeout = timeout
        self._retry_config = retry_config or CrApiRetryConfig()
        self._http_get = http_get
        self._sleep = sleep_func
        self._logger = logger or get_logger(__name__)

    def get_version(self) -> str:
        return self._request("/version").text.strip()

    def get_profile(self, request: ProfileRequest) -> Profile:
        payload = self._get_json(
            f"/player/{_tag_segment(request.tag)}", params=request.to_query_params()
        )
        return self._map(lambda: Profile.from_dict(payload))

    def get_profiles(self, request: ProfilesRequest) -> tuple[Profile, ...]:
        payload = self._get_json(
            f"/player/{_tags_segment(request.tags)}", params=request.to_query_params()
        )
        return self._map(lambda: parse_list(payload, Profile.from_dict, "Profile"))

    def get_clan(self, request: ClanRequest) -> Clan:
        payload = self._get_json(
            f"/clan/{_tag_segment(request.tag)}", params=request.to_query_params()
        )
        return self._map(lambda: Clan.from_dict(payload))

    def get_clans(self, request: ClansRequest) -> tuple[DetailedClan, ...]:
        payload = self._get_json(
            f"/clan/{_tags_segment(request.tags)}", params=request.to_query_params()
        )
        return self._map(lambda: parse_list(payload, DetailedClan.from_dict, "DetailedClan"))

    def get_clan_search(self, search: ClanSearch | None) -> tuple[Clan, ...]:
        params = search.to_query_params() if search is not None else {}
        payload = self._get_json("/clan/search", params=params)
        return self._map(lambda: parse_list(payload, Clan.from_dict, "Clan"))

    def get_top_clans(self, location: str | None) -> tuple[TopClan, ...]:
        payload = self._get_json(self._location_path("/top/clans", location))
        return self._map(lambda: parse_list(payload, TopClan.from_dict, "TopClan"))

    def get_top_players(self, location: str | None) -> tuple[TopPlayer, ...]:
        payload = self._get_json(self._location_path("/top/players", location))
        return self._map(lambda: parse_list(payload, TopPlayer.from_dict, "TopPlayer"))

    def get_tournaments(self, tag: str) -> Tournament:
        payload = self._get_json(f"/tournaments/{_tag_segment(tag)}")
        return self._map(lambda: Tournament.from_dict(payload))

    def get_constants(self) -> Constants:
        payload = self._get_json("/constants")
        return self._map(lambda: Constants.from_dict(payload))

    def get_alliance_constants(self) -> Alliance:
        payload = self._get_json("/constants/alliance")
        return self._map(lambda: Alliance.from_dict(payload))

    def get_arenas_constants(self) -> tuple[Arena, ...]:
        payload = self._get_json("/constants/arenas")
        return self._map(lambda: parse_list(payload, Arena.from_dict, "Arena"))

    def get_badges_constants(self) -> tuple[Badge, ...]:
        payload = self._get_json("/constants/badges")
        return self._map(lambda: parse_list(payload, Badge.from_dict, "Badge"))

    def get_chest_cycle_constants(self) -> ChestCycleList:
        payload = self._get_json("/constants/chestCycle")
        return self._map(lambda: ChestCycleList.from_dict(payload))

    def get_country_codes_constants(self) -> tuple[CountryCode, ...]:
        payload = self._get_json("/constants/countryCodes")
        return self._map(lambda: parse_list(payload, CountryCode.from_dict, "CountryCode"))

    def get_rarities_constants(self) -> tuple[Rarity, ...]:
        payload = self._get_json("/constants/rarities")
        return self._map(lambda: parse_list(payload, Rarity.from_dict, "Rarity"))

    def get_cards_constants(self) -> tuple[ConstantCard, ...]:
        payload = self._get_json("/constants/cards")
        return self._map(lambda: parse_list(payload, ConstantCard.from_dict, "ConstantCard"))

    def get_endpoints(self) -> Endpoints:
        payload = self._get_json("/endpoints")
        return self._map(lambda: Endpoints.from_payload(payload))

    def get_popular_clans(self) -> tuple[PopularClan, ...]:
        payload = self._get_json("/popular/clans")
        return self._map(lambda: parse_list(payload, PopularClan.from_dict, "PopularClan"))

    def get_popular_players(self) -> tuple[PopularPlayer, ...]:
        payload = self._get_json("/popular/players")
        return self._map(lambda: parse_list(payload, PopularPlayer.from_dict, "PopularPlayer"))

    def get_popular_tournaments(self) -> tuple[PopularTournament, ...]:
        payload = self._get_json("/popular/tournaments")
        return self._map(
            lambda: parse_list(payload, PopularTournament.from_dict, "PopularTournament")
        )

    def get_clan_battles(self, tag: str) -> tuple[Battle, ...]:
        payload = self._get_json(f"/clan/{_tag_segment(tag)}/battles")
        return self._map(lambda: parse_list(payload, Battle.from_dict, "Battle"))

    def get_clan_history(self, tag: str) -> ClanHistory:
        payload = self._get_json(f"/clan/{_tag_segment(tag)}/history")
        return self._map(lambda: ClanHistory.from_dict(payload))

    @staticmethod
    def _location_path(prefix: str, location: str | None) -> str:
        if location:
            return f"{prefix}/{quote(location, safe='')}"
        return prefix

    @staticmethod
    def _map(mapper: Callable[[], Any]) -> Any:
        try:
            return mapper()
        except ValueError as exc:
            raise CrApiTransportError(f"Failed to parse cr-api response ({exc})") from exc

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._developer_key:
            headers[AUTH_HEADER] = self._developer_key
        return headers

    def _get_json(self, path: str, *, params: Mapping[str, str] | None = None) -> Any:
        response = self._request(path, params=params)
        try:
            return response.json()
        except ValueError as exc:
            raise CrApiTransportError("cr-api returned an invalid JSON body") from exc

    def _request(self, path: str, *, params: Mapping[str, str] | None = None) -> httpx.Response:
        url = f"{self._base_url}{path}"
        attempt = 0
        while True:
            attempt += 1
            try:
                self._logger.debug("crapi_request", path=path, attempt=attempt)
                response = self._http_get(
                    url,
                    params=dict(params or {}),
                    headers=self._headers(),
                    timeout=self._timeout,
                )
                response.raise_for_status()
                return response
            except httpx.HTTPStatusError as exc:
                status_code = exc.response.status_code
                if not self._should_retry(status_code, attempt):
                    self._logger.error(
                        "crapi_request_failed",
                        path=path,
                        status_code=status_code,
                        attempt=attempt,
                    )
                    raise CrApiTransportError.from_status(status_code) from exc

                self._logger.warning(
                    "crapi_request_retry",
                    path=path,
                    status_code=status_code,
                    attempt=attempt,
                )
                self._sleep(self._retry_config.backoff_factor * attempt)
            except httpx.RequestError as exc:
                if not self._should_retry(None, attempt):
                    self._logger.error(
                        "crapi_request_error",
                        path=path,
                        attempt=attempt,
                        message=str(exc),
                    )
                    msg = f"cr-api request failed ({exc.__class__.__name__})"
                    raise CrApiTransportError(msg) from exc

                self._logger.warning(
                    "crapi_request_retry",
                    path=path,
                    status_code=None,
                    attempt=attempt,
                )
                self._sleep(self._retry_config.backoff_factor * attempt)

    def _should_retry(self, status_code: int | None, attempt: int) -> bool:
        if attempt >= self._retry_config.max_attempts:
            return False
        if status_code is None:
            return True
        return status_code in self._retry_config.retriable_statuses


__all__ = [
    "AUTH_HEADER",
    "CrApiRetryConfig",
    "CrApiTransport",
    "CrApiTransportError",
    "CrApiTransportProtocol",
]
