from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from crapi_client.cli.app import app
from crapi_client.core.api import ApiError, UnknownTransportError
from crapi_client.infra.crapi import (
    Clan,
    ClanMember,
    ClanSearch,
    ConstantCard,
    Endpoints,
    Profile,
    ProfileRequest,
    TopClan,
    TopPlayer,
    Tournament,
    TournamentParticipant,
)

BUILD_API_TARGETS = (
    "crapi_client.cli.app.build_api",
    "crapi_client.cli.commands.player.build_api",
    "crapi_client.cli.commands.clan.build_api",
    "crapi_client.cli.commands.top.build_api",
    "crapi_client.cli.commands.tournament.build_api",
    "crapi_client.cli.commands.constants.build_api",
)


class StubApi:
    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []
        self.error: Exception | None = None

    def _record(self, name: str, *args):
        self.calls.append((name, args))
        if self.error is not None:
            raise self.error

    def get_version(self) -> str:
        self._record("get_version")
        return "4.2.1"

    def get_profile(self, request):
        self._record("get_profile", request)
        return Profile(tag="2PP", name="Player One", trophies=4321)

    def get_clan(self, tag):
        self._record("get_clan", tag)
        return Clan(
            tag="2CCCP",
            name="Alpha",
            score=45000,
            members=(ClanMember(tag="2PP", name="Player One", rank=1, role="leader"),),
        )

    def get_clan_search(self, search):
        self._record("get_clan_search", search)
        return (Clan(tag="2CCCP", name="Alpha", score=45000, member_count=50),)

    def get_top_clans(self, location=None):
        self._record("get_top_clans", location)
        return tuple(TopClan(tag=f"T{rank}", name=f"Top {rank}", rank=rank) for rank in range(1, 4))

    def get_top_players(self, location=None):
        self._record("get_top_players", location)
        return (TopPlayer(tag="2PP", name="Player One", rank=1, trophies=6000),)

    def get_tournaments(self, tag):
        self._record("get_tournaments", tag)
        return Tournament(
            tag="2CUQ",
            name="Weekend Cup",
            status="inProgress",
            members=(TournamentParticipant(tag="2PP", name="Player One", rank=1, score=12),),
        )

    def get_cards_constants(self):
        self._record("get_cards_constants")
        return (
            ConstantCard(key="knight", name="Knight", elixir=3, rarity="Common"),
            ConstantCard(key="pekka", name="P.E.K.K.A", elixir=7, rarity="Epic"),
        )

    def get_endpoints(self):
        self._record("get_endpoints")
        return Endpoints(paths=("/version", "/constants"))


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def stub_api(monkeypatch: pytest.MonkeyPatch) -> StubApi:
    api = StubApi()
    for target in BUILD_API_TARGETS:
        monkeypatch.setattr(target, lambda **_kwargs: api)
    return api


def test_version(runner: CliRunner, stub_api: StubApi) -> None:
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "4.2.1" in result.stdout


def test_player_profile_table(runner: CliRunner, stub_api: StubApi) -> None:
    result = runner.invoke(app, ["player", "profile", "#2PP", "--key", "name"])

    assert result.exit_code == 0
    assert "Player One" in result.stdout
    name, (request,) = stub_api.calls[0]
    assert name == "get_profile"
    assert request == ProfileRequest(tag="#2PP", keys=("name",))


def test_player_profile_json(runner: CliRunner, stub_api: StubApi) -> None:
    result = runner.invoke(app, ["player", "profile", "2PP", "--output", "json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["name"] == "Player One"
    assert payload["trophies"] == 4321


def test_clan_show_lists_members(runner: CliRunner, stub_api: StubApi) -> None:
    result = runner.invoke(app, ["clan", "show", "2CCCP"])

    assert result.exit_code == 0
    assert "Alpha" in result.stdout
    assert "leader" in result.stdout
    assert stub_api.calls == [("get_clan", ("2CCCP",))]


def test_clan_search_builds_filter(runner: CliRunner, stub_api: StubApi) -> None:
    result = runner.invoke(app, ["clan", "search", "--name", "alpha", "--min-members", "10"])

    assert result.exit_code == 0
    assert "Alpha" in result.stdout
    assert stub_api.calls == [
        ("get_clan_search", (ClanSearch(name="alpha", min_members=10),)),
    ]


def test_top_clans_with_location_and_limit(runner: CliRunner, stub_api: StubApi) -> None:
    result = runner.invoke(
        app, ["top", "clans", "--location", "EU", "--limit", "2", "--output", "json"]
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [item["rank"] for item in payload] == [1, 2]
    assert stub_api.calls == [("get_top_clans", ("EU",))]


def test_top_players_without_location(runner: CliRunner, stub_api: StubApi) -> None:
    result = runner.invoke(app, ["top", "players"])

    assert result.exit_code == 0
    assert "Player One" in result.stdout
    assert stub_api.calls == [("get_top_players", (None,))]


def test_tournament_show(runner: CliRunner, stub_api: StubApi) -> None:
    result = runner.invoke(app, ["tournament", "show", "2CUQ"])

    assert result.exit_code == 0
    assert "Weekend Cup" in result.stdout


def test_constants_cards_filters_rarity(runner: CliRunner, stub_api: StubApi) -> None:
    result = runner.invoke(app, ["constants", "cards", "--rarity", "epic", "--output", "json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [item["key"] for item in payload] == ["pekka"]


def test_constants_endpoints(runner: CliRunner, stub_api: StubApi) -> None:
    result = runner.invoke(app, ["constants", "endpoints"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["/version", "/constants"]


def test_api_error_exits_with_status(runner: CliRunner, stub_api: StubApi) -> None:
    stub_api.error = ApiError(404)

    result = runner.invoke(app, ["clan", "show", "NOPE"])

    assert result.exit_code == 1
    assert "status=404" in result.stdout


def test_rate_limit_exits_with_code_two(runner: CliRunner, stub_api: StubApi) -> None:
    stub_api.error = ApiError(429)

    result = runner.invoke(app, ["version"])

    assert result.exit_code == 2
    assert "レート制限" in result.stdout


def test_unknown_transport_error(runner: CliRunner, stub_api: StubApi) -> None:
    stub_api.error = UnknownTransportError("connection reset")

    result = runner.invoke(app, ["top", "players"])

    assert result.exit_code == 1
    assert "connection reset" in result.stdout


def test_invalid_tag_is_usage_error(runner: CliRunner, stub_api: StubApi) -> None:
    stub_api.error = ValueError("tag must not be empty")

    result = runner.invoke(app, ["tournament", "show", " "])

    assert result.exit_code == 2
