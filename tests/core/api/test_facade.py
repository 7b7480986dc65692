"""CrApi façade の検証・委譲・例外変換を確認する。"""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from crapi_client.core.api import ApiError, CrApi, UnknownTransportError, build_api
from crapi_client.infra.crapi import (
    ClanRequest,
    ClanSearch,
    ClansRequest,
    CrApiTransport,
    CrApiTransportError,
    Profile,
    ProfileRequest,
    ProfilesRequest,
)
from crapi_client.shared.config import AppSettings, CrApiSettings

_SENTINEL = object()


class StubTransport:
    """トランスポートの呼び出しを記録し、設定した結果か例外を返す。"""

    def __init__(self, result: Any = _SENTINEL, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def __getattr__(self, name: str):
        if not name.startswith("get_"):
            raise AttributeError(name)

        def _method(*args: Any) -> Any:
            self.calls.append((name, args))
            if self.error is not None:
                raise self.error
            return self.result

        return _method


def _api(transport: StubTransport) -> CrApi:
    return CrApi("https://crapi.example.com", "abc", transport_factory=lambda *_: transport)


# --- 構築 ------------------------------------------------------------------


def test_constructor_passes_configuration_to_factory() -> None:
    received: list[tuple[str, str | None]] = []

    def factory(base_url: str, key: str | None) -> StubTransport:
        received.append((base_url, key))
        return StubTransport()

    api = CrApi("https://crapi.example.com", "abc", transport_factory=factory)

    assert received == [("https://crapi.example.com", "abc")]
    assert api.base_url == "https://crapi.example.com"


def test_constructor_rejects_missing_base_url() -> None:
    with pytest.raises(TypeError):
        CrApi(None, "abc")  # type: ignore[arg-type]


def test_constructor_rejects_empty_base_url() -> None:
    with pytest.raises(ValueError):
        CrApi("", "abc")


def test_constructor_rejects_empty_developer_key() -> None:
    with pytest.raises(ValueError):
        CrApi("https://crapi.example.com", "")


def test_developer_key_is_optional() -> None:
    api = CrApi("https://crapi.example.com")

    assert isinstance(api._transport, CrApiTransport)


def test_independent_clients_coexist() -> None:
    first, second = StubTransport("1.0"), StubTransport("2.0")
    api_one = CrApi("https://one.example.com", transport_factory=lambda *_: first)
    api_two = CrApi("https://two.example.com", "key", transport_factory=lambda *_: second)

    assert api_one.get_version() == "1.0"
    assert api_two.get_version() == "2.0"


# --- 引数検証 --------------------------------------------------------------

TAG_METHODS = [
    "get_profile",
    "get_clan",
    "get_tournaments",
    "get_clan_battles",
    "get_clan_history",
]


@pytest.mark.parametrize("method", TAG_METHODS)
def test_missing_tag_is_programmer_error(method: str) -> None:
    transport = StubTransport()

    with pytest.raises(TypeError):
        getattr(_api(transport), method)(None)

    assert transport.calls == []


@pytest.mark.parametrize("method", TAG_METHODS)
@pytest.mark.parametrize("tag", ["", "#", " # "])
def test_empty_tag_is_validation_error(method: str, tag: str) -> None:
    transport = StubTransport()

    with pytest.raises(ValueError):
        getattr(_api(transport), method)(tag)

    assert transport.calls == []


@pytest.mark.parametrize("method", ["get_profiles", "get_clans"])
@pytest.mark.parametrize("tags", [None, [], ()])
def test_missing_or_empty_tag_list_is_validation_error(method: str, tags) -> None:
    transport = StubTransport()

    with pytest.raises(ValueError):
        getattr(_api(transport), method)(tags)

    assert transport.calls == []


# --- 委譲 ------------------------------------------------------------------


def test_get_profile_returns_transport_result_instance() -> None:
    profile = Profile(tag="abc", name="Player")
    transport = StubTransport(profile)

    result = _api(transport).get_profile("abc")

    assert result is profile
    assert transport.calls == [("get_profile", (ProfileRequest.of("abc"),))]


@pytest.mark.parametrize(
    "method, primitive, request_object",
    [
        ("get_profile", "abc", ProfileRequest.builder().tag("abc").build()),
        ("get_profiles", ["abc", "def"], ProfilesRequest.builder().tags(["abc", "def"]).build()),
        ("get_clan", "abc", ClanRequest.builder().tag("abc").build()),
        ("get_clans", ["abc"], ClansRequest.builder().tags(["abc"]).build()),
    ],
)
def test_primitive_and_request_forms_are_equivalent(
    method: str, primitive: Any, request_object: Any
) -> None:
    result = object()
    by_primitive, by_request = StubTransport(result), StubTransport(result)

    first = getattr(_api(by_primitive), method)(primitive)
    second = getattr(_api(by_request), method)(request_object)

    assert first is second is result
    assert by_primitive.calls == by_request.calls
    assert by_request.calls[0][1][0] is request_object


def test_request_object_keeps_field_filters() -> None:
    transport = StubTransport(Profile())
    request = ProfileRequest.builder().tag("abc").keys("name").build()

    _api(transport).get_profile(request)

    assert transport.calls[0][1][0].to_query_params() == {"keys": "name"}


def test_top_lists_pass_location_through() -> None:
    transport = StubTransport(())
    api = _api(transport)

    api.get_top_clans()
    api.get_top_clans("EU")
    api.get_top_players()
    api.get_top_players("EU")

    assert transport.calls == [
        ("get_top_clans", (None,)),
        ("get_top_clans", ("EU",)),
        ("get_top_players", (None,)),
        ("get_top_players", ("EU",)),
    ]


def test_clan_search_passes_filter_through() -> None:
    transport = StubTransport(())
    api = _api(transport)
    search = ClanSearch(name="alpha")

    api.get_clan_search()
    api.get_clan_search(search)

    assert transport.calls == [("get_clan_search", (None,)), ("get_clan_search", (search,))]


@pytest.mark.parametrize(
    "method",
    [
        "get_version",
        "get_constants",
        "get_alliance_constants",
        "get_arenas_constants",
        "get_badges_constants",
        "get_chest_cycle_constants",
        "get_country_codes_constants",
        "get_rarities_constants",
        "get_cards_constants",
        "get_endpoints",
        "get_popular_clans",
        "get_popular_players",
        "get_popular_tournaments",
    ],
)
def test_parameterless_methods_delegate_once(method: str) -> None:
    result = object()
    transport = StubTransport(result)

    assert getattr(_api(transport), method)() is result
    assert transport.calls == [(method, ())]


@pytest.mark.parametrize("method", ["get_tournaments", "get_clan_battles", "get_clan_history"])
def test_tag_methods_delegate_tag(method: str) -> None:
    result = object()
    transport = StubTransport(result)

    assert getattr(_api(transport), method)("abc") is result
    assert transport.calls == [(method, ("abc",))]


# --- 例外変換 --------------------------------------------------------------

ALL_CALLS = [
    ("get_version", ()),
    ("get_profile", ("abc",)),
    ("get_profile", (ProfileRequest.of("abc"),)),
    ("get_profiles", (["abc"],)),
    ("get_profiles", (ProfilesRequest.of(["abc"]),)),
    ("get_clan", ("abc",)),
    ("get_clan", (ClanRequest.of("abc"),)),
    ("get_clans", (["abc"],)),
    ("get_clans", (ClansRequest.of(["abc"]),)),
    ("get_clan_search", ()),
    ("get_clan_search", (ClanSearch(),)),
    ("get_top_clans", ()),
    ("get_top_clans", ("EU",)),
    ("get_top_players", ()),
    ("get_top_players", ("EU",)),
    ("get_tournaments", ("abc",)),
    ("get_constants", ()),
    ("get_alliance_constants", ()),
    ("get_arenas_constants", ()),
    ("get_badges_constants", ()),
    ("get_chest_cycle_constants", ()),
    ("get_country_codes_constants", ()),
    ("get_rarities_constants", ()),
    ("get_cards_constants", ()),
    ("get_endpoints", ()),
    ("get_popular_clans", ()),
    ("get_popular_players", ()),
    ("get_popular_tournaments", ()),
    ("get_clan_battles", ("abc",)),
    ("get_clan_history", ("abc",)),
]


@pytest.mark.parametrize("method, args", ALL_CALLS)
def test_transport_failure_becomes_api_error_with_code(method: str, args: tuple) -> None:
    failure = CrApiTransportError("crapi: 400")
    transport = StubTransport(error=failure)

    with pytest.raises(ApiError) as excinfo:
        getattr(_api(transport), method)(*args)

    assert excinfo.value.code == 400
    assert excinfo.value.__cause__ is failure
    assert len(transport.calls) == 1


def test_failure_without_status_is_unknown_transport_error() -> None:
    transport = StubTransport(error=CrApiTransportError("cr-api request failed (ConnectError)"))

    with pytest.raises(UnknownTransportError):
        _api(transport).get_constants()


def test_leaked_httpx_error_is_translated() -> None:
    request = httpx.Request("GET", "https://crapi.example.com/constants")
    response = httpx.Response(503, request=request)
    transport = StubTransport(
        error=httpx.HTTPStatusError("unavailable", request=request, response=response)
    )

    with pytest.raises(ApiError) as excinfo:
        _api(transport).get_constants()

    assert excinfo.value.code == 503


@pytest.mark.parametrize(
    "failure, expected_type",
    [
        (OSError("crapi: 400"), ApiError),
        (ConnectionError("connection reset"), UnknownTransportError),
    ],
)
def test_io_failure_is_translated(failure: OSError, expected_type: type) -> None:
    transport = StubTransport(error=failure)

    with pytest.raises(expected_type) as excinfo:
        _api(transport).get_version()

    assert excinfo.value.__cause__ is failure
    if expected_type is ApiError:
        assert excinfo.value.code == 400


def test_unrelated_exceptions_propagate_untouched() -> None:
    transport = StubTransport(error=RuntimeError("bug"))

    with pytest.raises(RuntimeError, match="bug"):
        _api(transport).get_version()


# --- build_api -------------------------------------------------------------


def test_build_api_uses_settings() -> None:
    settings = AppSettings(
        crapi=CrApiSettings(
            base_url="https://crapi.example.com",
            developer_key="secret",
            timeout_seconds=3.0,
            max_attempts=1,
        )
    )

    api = build_api(settings=settings)

    transport = api._transport
    assert isinstance(transport, CrApiTransport)
    assert transport._base_url == "https://crapi.example.com"
    assert transport._developer_key == "secret"
    assert transport._timeout == 3.0
    assert transport._retry_config.max_attempts == 1
