"""cr-api へのリクエストパラメータを表す値オブジェクトとビルダー。"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from crapi_client.shared.types import ValueObject, normalize_tag


def validate_tag(tag: str | None) -> str:
    if tag is None:
        msg = "tag must not be None"
        raise TypeError(msg)
    if not isinstance(tag, str):
        msg = f"tag must be a str, got {type(tag).__name__}"
        raise TypeError(msg)
    if not normalize_tag(tag):
        msg = "tag must not be empty"
        raise ValueError(msg)
    return tag


def _validate_tags(tags: Sequence[str] | None) -> tuple[str, ...]:
    if tags is None or isinstance(tags, str):
        msg = "tags must be a non-empty sequence of tags"
        raise ValueError(msg)
    values = tuple(tags)
    if not values:
        msg = "tags must not be empty"
        raise ValueError(msg)
    for tag in values:
        if not isinstance(tag, str) or not normalize_tag(tag):
            msg = "tags must not contain empty or None entries"
            raise ValueError(msg)
    return values


def _field_names(names: Iterable[str] | str) -> tuple[str, ...]:
    # 単独の文字列は 1 フィールド名として扱う
    if isinstance(names, str):
        names = (names,)
    return tuple(name for name in names if name)


def _query_params(keys: tuple[str, ...], excludes: tuple[str, ...]) -> dict[str, str]:
    params: dict[str, str] = {}
    if keys:
        params["keys"] = ",".join(keys)
    if excludes:
        params["exclude"] = ",".join(excludes)
    return params


@dataclass(slots=True, frozen=True)
class ProfileRequest(ValueObject):
    """単一プレイヤーのプロフィール取得リクエスト。"""

    tag: str
    keys: tuple[str, ...] = ()
    excludes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        validate_tag(self.tag)
        object.__setattr__(self, "keys", _field_names(self.keys))
        object.__setattr__(self, "excludes", _field_names(self.excludes))

    @classmethod
    def of(cls, tag: str) -> ProfileRequest:
        return cls(tag=tag)

    @classmethod
    def builder(cls) -> ProfileRequestBuilder:
        return ProfileRequestBuilder()

    def to_query_params(self) -> dict[str, str]:
        return _query_params(self.keys, self.excludes)


@dataclass(slots=True, frozen=True)
class ProfilesRequest(ValueObject):
    """複数プレイヤーのプロフィール取得リクエスト。"""

    tags: tuple[str, ...]
    keys: tuple[str, ...] = ()
    excludes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", _validate_tags(self.tags))
        object.__setattr__(self, "keys", _field_names(self.keys))
        object.__setattr__(self, "excludes", _field_names(self.excludes))

    @classmethod
    def of(cls, tags: Sequence[str] | None) -> ProfilesRequest:
        return cls(tags=tags)  # type: ignore[arg-type]

    @classmethod
    def builder(cls) -> ProfilesRequestBuilder:
        return ProfilesRequestBuilder()

    def to_query_params(self) -> dict[str, str]:
        return _query_params(self.keys, self.excludes)


@dataclass(slots=True, frozen=True)
class ClanRequest(ValueObject):
    """単一クランの取得リクエスト。"""

    tag: str
    keys: tuple[str, ...] = ()
    excludes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        validate_tag(self.tag)
        object.__setattr__(self, "keys", _field_names(self.keys))
        object.__setattr__(self, "excludes", _field_names(self.excludes))

    @classmethod
    def of(cls, tag: str) -> ClanRequest:
        return cls(tag=tag)

    @classmethod
    def builder(cls) -> ClanRequestBuilder:
        return ClanRequestBuilder()

    def to_query_params(self) -> dict[str, str]:
        return _query_params(self.keys, self.excludes)


@dataclass(slots=True, frozen=True)
class ClansRequest(ValueObject):
    """複数クランの取得リクエスト。"""

    tags: tuple[str, ...]
    keys: tuple[str, ...] = ()
    excludes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", _validate_tags(self.tags))
        object.__setattr__(self, "keys", _field_names(self.keys))
        object.__setattr__(self, "excludes", _field_names(self.excludes))

    @classmethod
    def of(cls, tags: Sequence[str] | None) -> ClansRequest:
        return cls(tags=tags)  # type: ignore[arg-type]

    @classmethod
    def builder(cls) -> ClansRequestBuilder:
        return ClansRequestBuilder()

    def to_query_params(self) -> dict[str, str]:
        return _query_params(self.keys, self.excludes)


class _FieldFilterBuilder:
    """keys/excludes を扱うビルダーの共通部分。"""

    def __init__(self) -> None:
        self._keys: list[str] = []
        self._excludes: list[str] = []

    def keys(self, *names: str):
        self._keys.extend(name for name in names if name)
        return self

    def excludes(self, *names: str):
        self._excludes.extend(name for name in names if name)
        return self


class ProfileRequestBuilder(_FieldFilterBuilder):
    def __init__(self) -> None:
        super().__init__()
        self._tag: str | None = None

    def tag(self, tag: str) -> ProfileRequestBuilder:
        self._tag = tag
        return self

    def build(self) -> ProfileRequest:
        return ProfileRequest(
            tag=self._tag,  # type: ignore[arg-type]
            keys=tuple(self._keys),
            excludes=tuple(self._excludes),
        )


class ProfilesRequestBuilder(_FieldFilterBuilder):
    def __init__(self) -> None:
        super().__init__()
        self._tags: list[str] = []

    def tags(self, tags: Iterable[str]) -> ProfilesRequestBuilder:
        self._tags.extend(tags)
        return self

    def tag(self, tag: str) -> ProfilesRequestBuilder:
        self._tags.append(tag)
        return self

    def build(self) -> ProfilesRequest:
        return ProfilesRequest(
            tags=tuple(self._tags),
            keys=tuple(self._keys),
            excludes=tuple(self._excludes),
        )


class ClanRequestBuilder(_FieldFilterBuilder):
    def __init__(self) -> None:
        super().__init__()
        self._tag: str | None = None

    def tag(self, tag: str) -> ClanRequestBuilder:
        self._tag = tag
        return self

    def build(self) -> ClanRequest:
        return ClanRequest(
            tag=self._tag,  # type: ignore[arg-type]
            keys=tuple(self._keys),
            excludes=tuple(self._excludes),
        )


class ClansRequestBuilder(_FieldFilterBuilder):
    def __init__(self) -> None:
        super().__init__()
        self._tags: list[str] = []

    def tags(self, tags: Iterable[str]) -> ClansRequestBuilder:
        self._tags.extend(tags)
        return self

    def tag(self, tag: str) -> ClansRequestBuilder:
        self._tags.append(tag)
        return self

    def build(self) -> ClansRequest:
        return ClansRequest(
            tags=tuple(self._tags),
            keys=tuple(self._keys),
            excludes=tuple(self._excludes),
        )


__all__ = [
    "validate_tag",
    "ClanRequest",
    "ClanRequestBuilder",
    "ClansRequest",
    "ClansRequestBuilder",
    "ProfileRequest",
    "ProfileRequestBuilder",
    "ProfilesRequest",
    "ProfilesRequestBuilder",
]
