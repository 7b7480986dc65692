"""cr-api レスポンス向け DTO およびマッピングユーティリティ。

各 DTO は JSON ドキュメントの形に 1:1 で対応する不変レコードで、
`from_dict` で camelCase のキーを snake_case のフィールドへ写像する。
任意フィールドの欠落や型違いは `None`/空タプルとして扱い、
オブジェクトであるべき箇所がそうでない場合のみ `ValueError` を送出する。
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from crapi_client.shared.types import DTO

T = TypeVar("T")


def _require_mapping(raw: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(raw, Mapping):
        msg = f"{what} payload must be an object"
        raise ValueError(msg)
    return raw


def _require_list(raw: Any, what: str) -> list[Any]:
    if not isinstance(raw, list):
        msg = f"{what} payload must be an array"
        raise ValueError(msg)
    return raw


def _str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    return value if isinstance(value, str) else None


def _int(data: Mapping[str, Any], key: str) -> int | None:
    value = data.get(key)
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _float(data: Mapping[str, Any], key: str) -> float | None:
    value = data.get(key)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    return None


def _bool(data: Mapping[str, Any], key: str) -> bool | None:
    value = data.get(key)
    return value if isinstance(value, bool) else None


def _nested(
    data: Mapping[str, Any], key: str, mapper: Callable[[Mapping[str, Any]], T]
) -> T | None:
    value = data.get(key)
    if isinstance(value, Mapping):
        return mapper(value)
    return None


def _nested_tuple(
    data: Mapping[str, Any], key: str, mapper: Callable[[Mapping[str, Any]], T]
) -> tuple[T, ...]:
    value = data.get(key)
    if not isinstance(value, list):
        return ()
    return tuple(mapper(item) for item in value if isinstance(item, Mapping))


def _str_tuple(data: Mapping[str, Any], key: str) -> tuple[str, ...]:
    value = data.get(key)
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, str))


def parse_list(payload: Any, mapper: Callable[[Mapping[str, Any]], T], what: str) -> tuple[T, ...]:
    """JSON 配列の各要素を DTO へ変換する。"""

    items = _require_list(payload, what)
    result: list[T] = []
    for item in items:
        result.append(mapper(_require_mapping(item, what)))
    return tuple(result)


# --- 共通の入れ子レコード -------------------------------------------------


@dataclass(slots=True, frozen=True)
class Badge(DTO):
    """クランバッジ。"""

    id: int | None = None
    name: str | None = None
    category: str | None = None
    image: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Badge:
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            category=_str(data, "category"),
            image=_str(data, "image"),
        )


@dataclass(slots=True, frozen=True)
class Arena(DTO):
    """アリーナ情報。"""

    name: str | None = None
    arena: str | None = None
    arena_id: int | None = None
    trophy_limit: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Arena:
        return cls(
            name=_str(data, "name"),
            arena=_str(data, "arena"),
            arena_id=_int(data, "arenaID") if "arenaID" in data else _int(data, "id"),
            trophy_limit=_int(data, "trophyLimit"),
        )


@dataclass(slots=True, frozen=True)
class Location(DTO):
    name: str | None = None
    is_country: bool | None = None
    code: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Location:
        return cls(
            name=_str(data, "name"),
            is_country=_bool(data, "isCountry"),
            code=_str(data, "code"),
        )


@dataclass(slots=True, frozen=True)
class Card(DTO):
    """プレイヤーが所持するカード。"""

    name: str | None = None
    key: str | None = None
    id: int | None = None
    level: int | None = None
    max_level: int | None = None
    count: int | None = None
    rarity: str | None = None
    elixir: int | None = None
    type: str | None = None
    required_for_upgrade: int | None = None
    left_to_upgrade: int | None = None
    icon: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Card:
        required = data.get("requiredForUpgrade")
        return cls(
            name=_str(data, "name"),
            key=_str(data, "key"),
            id=_int(data, "id"),
            level=_int(data, "level"),
            max_level=_int(data, "maxLevel"),
            count=_int(data, "count"),
            rarity=_str(data, "rarity"),
            elixir=_int(data, "elixir"),
            type=_str(data, "type"),
            # 最大レベルのカードでは "Maxed" という文字列が返る
            required_for_upgrade=required if isinstance(required, int) else None,
            left_to_upgrade=_int(data, "leftToUpgrade"),
            icon=_str(data, "icon"),
        )


@dataclass(slots=True, frozen=True)
class Popularity(DTO):
    hits: int | None = None
    hits_per_day_avg: float | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Popularity:
        return cls(hits=_int(data, "hits"), hits_per_day_avg=_float(data, "hitsPerDayAvg"))


# --- プレイヤー ------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class ProfileClan(DTO):
    """プレイヤーが所属するクランの識別情報。"""

    tag: str | None = None
    name: str | None = None
    role: str | None = None
    donations: int | None = None
    donations_received: int | None = None
    donations_delta: int | None = None
    badge: Badge | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProfileClan:
        return cls(
            tag=_str(data, "tag"),
            name=_str(data, "name"),
            role=_str(data, "role"),
            donations=_int(data, "donations"),
            donations_received=_int(data, "donationsReceived"),
            donations_delta=_int(data, "donationsDelta"),
            badge=_nested(data, "badge", Badge.from_dict),
        )


@dataclass(slots=True, frozen=True)
class ProfileStats(DTO):
    max_trophies: int | None = None
    three_crown_wins: int | None = None
    cards_found: int | None = None
    favorite_card: Card | None = None
    total_donations: int | None = None
    challenge_max_wins: int | None = None
    challenge_cards_won: int | None = None
    tournament_cards_won: int | None = None
    clan_cards_collected: int | None = None
    level: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProfileStats:
        return cls(
            max_trophies=_int(data, "maxTrophies"),
            three_crown_wins=_int(data, "threeCrownWins"),
            cards_found=_int(data, "cardsFound"),
            favorite_card=_nested(data, "favoriteCard", Card.from_dict),
            total_donations=_int(data, "totalDonations"),
            challenge_max_wins=_int(data, "challengeMaxWins"),
            challenge_cards_won=_int(data, "challengeCardsWon"),
            tournament_cards_won=_int(data, "tournamentCardsWon"),
            clan_cards_collected=_int(data, "clanCardsCollected"),
            level=_int(data, "level"),
        )


@dataclass(slots=True, frozen=True)
class ProfileGames(DTO):
    total: int | None = None
    tournament_games: int | None = None
    wins: int | None = None
    losses: int | None = None
    draws: int | None = None
    war_day_wins: int | None = None
    wins_percent: float | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProfileGames:
        return cls(
            total=_int(data, "total"),
            tournament_games=_int(data, "tournamentGames"),
            wins=_int(data, "wins"),
            losses=_int(data, "losses"),
            draws=_int(data, "draws"),
            war_day_wins=_int(data, "warDayWins"),
            wins_percent=_float(data, "winsPercent"),
        )


@dataclass(slots=True, frozen=True)
class Profile(DTO):
    """プレイヤープロフィール。"""

    tag: str | None = None
    name: str | None = None
    trophies: int | None = None
    rank: int | None = None
    exp_level: int | None = None
    arena: Arena | None = None
    clan: ProfileClan | None = None
    stats: ProfileStats | None = None
    games: ProfileGames | None = None
    deck_link: str | None = None
    current_deck: tuple[Card, ...] = ()
    cards: tuple[Card, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Profile:
        data = _require_mapping(data, "Profile")
        return cls(
            tag=_str(data, "tag"),
            name=_str(data, "name"),
            trophies=_int(data, "trophies"),
            rank=_int(data, "rank"),
            exp_level=_int(data, "expLevel"),
            arena=_nested(data, "arena", Arena.from_dict),
            clan=_nested(data, "clan", ProfileClan.from_dict),
            stats=_nested(data, "stats", ProfileStats.from_dict),
            games=_nested(data, "games", ProfileGames.from_dict),
            deck_link=_str(data, "deckLink"),
            current_deck=_nested_tuple(data, "currentDeck", Card.from_dict),
            cards=_nested_tuple(data, "cards", Card.from_dict),
        )


# --- クラン ----------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class ClanMember(DTO):
    tag: str | None = None
    name: str | None = None
    role: str | None = None
    exp_level: int | None = None
    trophies: int | None = None
    rank: int | None = None
    previous_rank: int | None = None
    donations: int | None = None
    donations_received: int | None = None
    clan_chest_crowns: int | None = None
    arena: Arena | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ClanMember:
        return cls(
            tag=_str(data, "tag"),
            name=_str(data, "name"),
            role=_str(data, "role"),
            exp_level=_int(data, "expLevel"),
            trophies=_int(data, "trophies"),
            rank=_int(data, "rank"),
            previous_rank=_int(data, "previousRank"),
            donations=_int(data, "donations"),
            donations_received=_int(data, "donationsReceived"),
            clan_chest_crowns=_int(data, "clanChestCrowns"),
            arena=_nested(data, "arena", Arena.from_dict),
        )


@dataclass(slots=True, frozen=True)
class Clan(DTO):
    """クラン情報。検索結果では members が空になる。"""

    tag: str | None = None
    name: str | None = None
    description: str | None = None
    type: str | None = None
    score: int | None = None
    member_count: int | None = None
    required_score: int | None = None
    donations: int | None = None
    badge: Badge | None = None
    location: Location | None = None
    members: tuple[ClanMember, ...] = ()

    @classmethod
    def _fields_from(cls, data: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "tag": _str(data, "tag"),
            "name": _str(data, "name"),
            "description": _str(data, "description"),
            "type": _str(data, "type"),
            "score": _int(data, "score"),
            "member_count": _int(data, "memberCount"),
            "required_score": _int(data, "requiredScore"),
            "donations": _int(data, "donations"),
            "badge": _nested(data, "badge", Badge.from_dict),
            "location": _nested(data, "location", Location.from_dict),
            "members": _nested_tuple(data, "members", ClanMember.from_dict),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Clan:
        return cls(**cls._fields_from(_require_mapping(data, "Clan")))


@dataclass(slots=True, frozen=True)
class DetailedClan(Clan):
    """複数クラン取得で返る詳細クラン情報。"""

    clan_chest_status: str | None = None
    tracking_active: bool | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DetailedClan:
        data = _require_mapping(data, "DetailedClan")
        chest = data.get("clanChest")
        tracking = data.get("tracking")
        return cls(
            **cls._fields_from(data),
            clan_chest_status=_str(chest, "status") if isinstance(chest, Mapping) else None,
            tracking_active=_bool(tracking, "active") if isinstance(tracking, Mapping) else None,
        )


@dataclass(slots=True, frozen=True)
class ClanSearch(DTO):
    """クラン検索の絞り込み条件。"""

    name: str | None = None
    score: int | None = None
    min_members: int | None = None
    max_members: int | None = None
    location_id: int | None = None

    def to_query_params(self) -> dict[str, str]:
        candidates = {
            "name": self.name,
            "score": self.score,
            "minMembers": self.min_members,
            "maxMembers": self.max_members,
            "locationId": self.location_id,
        }
        return {key: str(value) for key, value in candidates.items() if value is not None}


@dataclass(slots=True, frozen=True)
class ClanHistoryMember(DTO):
    tag: str | None = None
    name: str | None = None
    trophies: int | None = None
    donations: int | None = None
    rank: int | None = None
    exp_level: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ClanHistoryMember:
        return cls(
            tag=_str(data, "tag"),
            name=_str(data, "name"),
            trophies=_int(data, "trophies"),
            donations=_int(data, "donations"),
            rank=_int(data, "rank"),
            exp_level=_int(data, "expLevel"),
        )


@dataclass(slots=True, frozen=True)
class ClanHistoryEntry(DTO):
    """ある時点のクランのスナップショット。"""

    timestamp: str
    score: int | None = None
    donations: int | None = None
    member_count: int | None = None
    members: tuple[ClanHistoryMember, ...] = ()

    @classmethod
    def from_dict(cls, timestamp: str, data: Mapping[str, Any]) -> ClanHistoryEntry:
        return cls(
            timestamp=timestamp,
            score=_int(data, "score"),
            donations=_int(data, "donations"),
            member_count=_int(data, "memberCount"),
            members=_nested_tuple(data, "members", ClanHistoryMember.from_dict),
        )


@dataclass(slots=True, frozen=True)
class ClanHistory(DTO):
    """クラン履歴。タイムスタンプ昇順で保持する。"""

    entries: tuple[ClanHistoryEntry, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ClanHistory:
        data = _require_mapping(data, "ClanHistory")
        entries = [
            ClanHistoryEntry.from_dict(str(key), value)
            for key, value in data.items()
            if isinstance(value, Mapping)
        ]
        entries.sort(key=lambda entry: entry.timestamp)
        return cls(entries=tuple(entries))


@dataclass(slots=True, frozen=True)
class BattleMode(DTO):
    name: str | None = None
    deck: str | None = None
    card_levels: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BattleMode:
        return cls(
            name=_str(data, "name"),
            deck=_str(data, "deck"),
            card_levels=_str(data, "cardLevels"),
        )


@dataclass(slots=True, frozen=True)
class BattlePlayer(DTO):
    tag: str | None = None
    name: str | None = None
    crowns_earned: int | None = None
    start_trophies: int | None = None
    trophy_change: int | None = None
    clan: ProfileClan | None = None
    deck: tuple[Card, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BattlePlayer:
        return cls(
            tag=_str(data, "tag"),
            name=_str(data, "name"),
            crowns_earned=_int(data, "crownsEarned"),
            start_trophies=_int(data, "startTrophies"),
            trophy_change=_int(data, "trophyChange"),
            clan=_nested(data, "clan", ProfileClan.from_dict),
            deck=_nested_tuple(data, "deck", Card.from_dict),
        )


@dataclass(slots=True, frozen=True)
class Battle(DTO):
    """対戦記録。"""

    type: str | None = None
    utc_time: int | None = None
    team_size: int | None = None
    winner: int | None = None
    team_crowns: int | None = None
    opponent_crowns: int | None = None
    mode: BattleMode | None = None
    arena: Arena | None = None
    team: tuple[BattlePlayer, ...] = ()
    opponent: tuple[BattlePlayer, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Battle:
        data = _require_mapping(data, "Battle")
        return cls(
            type=_str(data, "type"),
            utc_time=_int(data, "utcTime"),
            team_size=_int(data, "teamSize"),
            winner=_int(data, "winner"),
            team_crowns=_int(data, "teamCrowns"),
            opponent_crowns=_int(data, "opponentCrowns"),
            mode=_nested(data, "mode", BattleMode.from_dict),
            arena=_nested(data, "arena", Arena.from_dict),
            team=_nested_tuple(data, "team", BattlePlayer.from_dict),
            opponent=_nested_tuple(data, "opponent", BattlePlayer.from_dict),
        )


# --- トーナメント ----------------------------------------------------------


@dataclass(slots=True, frozen=True)
class TournamentClan(DTO):
    tag: str | None = None
    name: str | None = None
    badge: Badge | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TournamentClan:
        return cls(
            tag=_str(data, "tag"),
            name=_str(data, "name"),
            badge=_nested(data, "badge", Badge.from_dict),
        )


@dataclass(slots=True, frozen=True)
class TournamentParticipant(DTO):
    """トーナメント参加者。"""

    tag: str | None = None
    name: str | None = None
    score: int | None = None
    rank: int | None = None
    clan: TournamentClan | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TournamentParticipant:
        return cls(
            tag=_str(data, "tag"),
            name=_str(data, "name"),
            score=_int(data, "score"),
            rank=_int(data, "rank"),
            clan=_nested(data, "clan", TournamentClan.from_dict),
        )


@dataclass(slots=True, frozen=True)
class Tournament(DTO):
    """トーナメント詳細。"""

    tag: str | None = None
    name: str | None = None
    description: str | None = None
    status: str | None = None
    open: bool | None = None
    max_players: int | None = None
    current_players: int | None = None
    create_time: int | None = None
    start_time: int | None = None
    end_time: int | None = None
    duration: int | None = None
    prep_time: int | None = None
    creator: TournamentParticipant | None = None
    members: tuple[TournamentParticipant, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Tournament:
        data = _require_mapping(data, "Tournament")
        return cls(
            tag=_str(data, "tag"),
            name=_str(data, "name"),
            description=_str(data, "description"),
            status=_str(data, "status"),
            open=_bool(data, "open"),
            max_players=_int(data, "maxPlayers"),
            current_players=_int(data, "currentPlayers"),
            create_time=_int(data, "createTime"),
            start_time=_int(data, "startTime"),
            end_time=_int(data, "endTime"),
            duration=_int(data, "duration"),
            prep_time=_int(data, "prepTime"),
            creator=_nested(data, "creator", TournamentParticipant.from_dict),
            members=_nested_tuple(data, "members", TournamentParticipant.from_dict),
        )


# --- ランキング・人気 ------------------------------------------------------


@dataclass(slots=True, frozen=True)
class TopClan(DTO):
    tag: str | None = None
    name: str | None = None
    rank: int | None = None
    previous_rank: int | None = None
    score: int | None = None
    member_count: int | None = None
    badge: Badge | None = None
    location: Location | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TopClan:
        return cls(
            tag=_str(data, "tag"),
            name=_str(data, "name"),
            rank=_int(data, "rank"),
            previous_rank=_int(data, "previousRank"),
            score=_int(data, "score"),
            member_count=_int(data, "memberCount"),
            badge=_nested(data, "badge", Badge.from_dict),
            location=_nested(data, "location", Location.from_dict),
        )


@dataclass(slots=True, frozen=True)
class TopPlayer(DTO):
    tag: str | None = None
    name: str | None = None
    rank: int | None = None
    previous_rank: int | None = None
    exp_level: int | None = None
    trophies: int | None = None
    clan: ProfileClan | None = None
    arena: Arena | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TopPlayer:
        return cls(
            tag=_str(data, "tag"),
            name=_str(data, "name"),
            rank=_int(data, "rank"),
            previous_rank=_int(data, "previousRank"),
            exp_level=_int(data, "expLevel"),
            trophies=_int(data, "trophies"),
            clan=_nested(data, "clan", ProfileClan.from_dict),
            arena=_nested(data, "arena", Arena.from_dict),
        )


@dataclass(slots=True, frozen=True)
class PopularClan(DTO):
    tag: str | None = None
    name: str | None = None
    score: int | None = None
    member_count: int | None = None
    badge: Badge | None = None
    location: Location | None = None
    popularity: Popularity | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PopularClan:
        return cls(
            tag=_str(data, "tag"),
            name=_str(data, "name"),
            score=_int(data, "score"),
            member_count=_int(data, "memberCount"),
            badge=_nested(data, "badge", Badge.from_dict),
            location=_nested(data, "location", Location.from_dict),
            popularity=_nested(data, "popularity", Popularity.from_dict),
        )


@dataclass(slots=True, frozen=True)
class PopularPlayer(DTO):
    tag: str | None = None
    name: str | None = None
    trophies: int | None = None
    exp_level: int | None = None
    clan: ProfileClan | None = None
    arena: Arena | None = None
    popularity: Popularity | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PopularPlayer:
        return cls(
            tag=_str(data, "tag"),
            name=_str(data, "name"),
            trophies=_int(data, "trophies"),
            exp_level=_int(data, "expLevel"),
            clan=_nested(data, "clan", ProfileClan.from_dict),
            arena=_nested(data, "arena", Arena.from_dict),
            popularity=_nested(data, "popularity", Popularity.from_dict),
        )


@dataclass(slots=True, frozen=True)
class PopularTournament(DTO):
    tag: str | None = None
    name: str | None = None
    status: str | None = None
    open: bool | None = None
    capacity: int | None = None
    max_capacity: int | None = None
    create_time: int | None = None
    popularity: Popularity | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PopularTournament:
        return cls(
            tag=_str(data, "tag"),
            name=_str(data, "name"),
            status=_str(data, "status"),
            open=_bool(data, "open"),
            capacity=_int(data, "capacity"),
            max_capacity=_int(data, "maxCapacity"),
            create_time=_int(data, "createTime"),
            popularity=_nested(data, "popularity", Popularity.from_dict),
        )


# --- 定数 ------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class AllianceRole(DTO):
    id: str | None = None
    name: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AllianceRole:
        return cls(id=_str(data, "id"), name=_str(data, "name"))


@dataclass(slots=True, frozen=True)
class AllianceType(DTO):
    id: str | None = None
    name: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AllianceType:
        return cls(id=_str(data, "id"), name=_str(data, "name"))


@dataclass(slots=True, frozen=True)
class Alliance(DTO):
    """クラン関連の定数。"""

    roles: tuple[AllianceRole, ...] = ()
    types: tuple[AllianceType, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Alliance:
        data = _require_mapping(data, "Alliance")
        return cls(
            roles=_nested_tuple(data, "roles", AllianceRole.from_dict),
            types=_nested_tuple(data, "types", AllianceType.from_dict),
        )


@dataclass(slots=True, frozen=True)
class ChestCycleList(DTO):
    """宝箱サイクルの並び。"""

    order: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ChestCycleList:
        data = _require_mapping(data, "ChestCycleList")
        return cls(order=_str_tuple(data, "order"))


@dataclass(slots=True, frozen=True)
class CountryCode(DTO):
    id: int | None = None
    name: str | None = None
    is_country: bool | None = None
    code: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CountryCode:
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            is_country=_bool(data, "isCountry"),
            code=_str(data, "code"),
        )


@dataclass(slots=True, frozen=True)
class Rarity(DTO):
    name: str | None = None
    level_count: int | None = None
    relative_level: int | None = None
    mirror_cost: int | None = None
    power_level_multiplier: tuple[int, ...] = ()
    upgrade_material_count: tuple[int, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Rarity:
        def _ints(key: str) -> tuple[int, ...]:
            value = data.get(key)
            if not isinstance(value, list):
                return ()
            return tuple(item for item in value if isinstance(item, int))

        return cls(
            name=_str(data, "name"),
            level_count=_int(data, "levelCount"),
            relative_level=_int(data, "relativeLevel"),
            mirror_cost=_int(data, "mirrorCost"),
            power_level_multiplier=_ints("powerLevelMultiplier"),
            upgrade_material_count=_ints("upgradeMaterialCount"),
        )


@dataclass(slots=True, frozen=True)
class ConstantCard(DTO):
    """カード定義。"""

    key: str | None = None
    name: str | None = None
    id: int | None = None
    elixir: int | None = None
    type: str | None = None
    rarity: str | None = None
    arena: int | None = None
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ConstantCard:
        return cls(
            key=_str(data, "key"),
            name=_str(data, "name"),
            id=_int(data, "id"),
            elixir=_int(data, "elixir"),
            type=_str(data, "type"),
            rarity=_str(data, "rarity"),
            arena=_int(data, "arena"),
            description=_str(data, "description"),
        )


@dataclass(slots=True, frozen=True)
class Constants(DTO):
    """ゲーム設定の参照データ一式。"""

    alliance: Alliance | None = None
    arenas: tuple[Arena, ...] = ()
    badges: tuple[Badge, ...] = ()
    chest_cycle: ChestCycleList | None = None
    country_codes: tuple[CountryCode, ...] = ()
    rarities: tuple[Rarity, ...] = ()
    cards: tuple[ConstantCard, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Constants:
        data = _require_mapping(data, "Constants")
        return cls(
            alliance=_nested(data, "alliance", Alliance.from_dict),
            arenas=_nested_tuple(data, "arenas", Arena.from_dict),
            badges=_nested_tuple(data, "badges", Badge.from_dict),
            chest_cycle=_nested(data, "chestCycle", ChestCycleList.from_dict),
            country_codes=_nested_tuple(data, "countryCodes", CountryCode.from_dict),
            rarities=_nested_tuple(data, "rarities", Rarity.from_dict),
            cards=_nested_tuple(data, "cards", ConstantCard.from_dict),
        )


@dataclass(slots=True, frozen=True)
class Endpoints(DTO):
    """API が公開しているエンドポイントの一覧。"""

    paths: tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, payload: Any) -> Endpoints:
        items = _require_list(payload, "Endpoints")
        return cls(paths=tuple(item for item in items if isinstance(item, str)))


__all__ = [
    "Alliance",
    "AllianceRole",
    "AllianceType",
    "Arena",
    "Badge",
    "Battle",
    "BattleMode",
    "BattlePlayer",
    "Card",
    "ChestCycleList",
    "Clan",
    "ClanHistory",
    "ClanHistoryEntry",
    "ClanHistoryMember",
    "ClanMember",
    "ClanSearch",
    "ConstantCard",
    "Constants",
    "CountryCode",
    "DetailedClan",
    "Endpoints",
    "Location",
    "PopularClan",
    "PopularPlayer",
    "PopularTournament",
    "Popularity",
    "Profile",
    "ProfileClan",
    "ProfileGames",
    "ProfileStats",
    "Rarity",
    "TopClan",
    "TopPlayer",
    "Tournament",
    "TournamentClan",
    "TournamentParticipant",
    "parse_list",
]
