"""リクエスト値オブジェクトとビルダーの挙動を検証する。"""

from __future__ import annotations

import pytest

from crapi_client.infra.crapi.request import (
    ClanRequest,
    ClansRequest,
    ProfileRequest,
    ProfilesRequest,
    validate_tag,
)


def test_builder_and_factory_produce_equal_requests() -> None:
    built = ProfileRequest.builder().tag("abc").build()

    assert built == ProfileRequest.of("abc")
    assert hash(built) == hash(ProfileRequest.of("abc"))
    assert {built: "cached"}[ProfileRequest.of("abc")] == "cached"


def test_profile_request_query_params() -> None:
    request = (
        ProfileRequest.builder()
        .tag("abc")
        .keys("name", "trophies")
        .excludes("cards")
        .build()
    )

    assert request.keys == ("name", "trophies")
    assert request.to_query_params() == {"keys": "name,trophies", "exclude": "cards"}
    assert ProfileRequest.of("abc").to_query_params() == {}


@pytest.mark.parametrize("request_type", [ProfileRequest, ClanRequest])
def test_single_tag_request_rejects_none_as_programmer_error(request_type) -> None:
    with pytest.raises(TypeError):
        request_type.of(None)


@pytest.mark.parametrize("request_type", [ProfileRequest, ClanRequest])
@pytest.mark.parametrize("tag", ["", "   ", "#", " # "])
def test_single_tag_request_rejects_empty_tag(request_type, tag: str) -> None:
    with pytest.raises(ValueError):
        request_type.of(tag)


def test_builder_without_tag_is_rejected() -> None:
    with pytest.raises(TypeError):
        ClanRequest.builder().build()


@pytest.mark.parametrize("request_type", [ProfilesRequest, ClansRequest])
@pytest.mark.parametrize("tags", [None, [], (), "abc", ["abc", ""], ["abc", None], ["abc", "#"]])
def test_multi_tag_request_rejects_invalid_tags(request_type, tags) -> None:
    with pytest.raises(ValueError):
        request_type.of(tags)


def test_multi_tag_request_normalizes_to_tuple() -> None:
    from_list = ProfilesRequest.of(["abc", "def"])
    built = ProfilesRequest.builder().tags(["abc"]).tag("def").build()

    assert from_list.tags == ("abc", "def")
    assert from_list == built


def test_clans_request_builder_with_keys() -> None:
    request = ClansRequest.builder().tags(["abc", "def"]).keys("name").build()

    assert request.tags == ("abc", "def")
    assert request.to_query_params() == {"keys": "name"}


def test_requests_are_immutable() -> None:
    request = ClanRequest.of("abc")

    with pytest.raises(AttributeError):
        request.tag = "def"  # type: ignore[misc]


def test_validate_tag_returns_value() -> None:
    assert validate_tag("#2PP") == "#2PP"


def test_single_field_name_is_not_split_into_characters() -> None:
    request = ProfileRequest(tag="abc", keys="name", excludes="cards")  # type: ignore[arg-type]

    assert request.keys == ("name",)
    assert request.to_query_params() == {"keys": "name", "exclude": "cards"}
