"""cr-api 向け infra 層パッケージ。"""

from .dto import (
    Alliance,
    Arena,
    Badge,
    Battle,
    Card,
    ChestCycleList,
    Clan,
    ClanHistory,
    ClanMember,
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
    TournamentClan,
    TournamentParticipant,
)
from .request import ClanRequest, ClansRequest, ProfileRequest, ProfilesRequest
from .transport import (
    CrApiRetryConfig,
    CrApiTransport,
    CrApiTransportError,
    CrApiTransportProtocol,
)

__all__ = [
    "Alliance",
    "Arena",
    "Badge",
    "Battle",
    "Card",
    "ChestCycleList",
    "Clan",
    "ClanHistory",
    "ClanMember",
    "ClanRequest",
    "ClanSearch",
    "ClansRequest",
    "ConstantCard",
    "Constants",
    "CountryCode",
    "CrApiRetryConfig",
    "CrApiTransport",
    "CrApiTransportError",
    "CrApiTransportProtocol",
    "DetailedClan",
    "Endpoints",
    "PopularClan",
    "PopularPlayer",
    "PopularTournament",
    "Profile",
    "ProfileRequest",
    "ProfilesRequest",
    "Rarity",
    "TopClan",
    "TopPlayer",
    "Tournament",
    "TournamentClan",
    "TournamentParticipant",
]
