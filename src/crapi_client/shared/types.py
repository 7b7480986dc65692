"""共有型・ユーティリティ。"""

from __future__ import annotations

from dataclasses import asdict, dataclass, is_dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class ValueObject:
    """DTO や VO のベースクラス。生成後は変更できない。"""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True, frozen=True)
class DTO(ValueObject):
    """データ転送オブジェクト用ベース。"""


def dto_dict(instance: Any) -> dict[str, Any]:
    """DTO/VO、または任意の dataclass を dict 化する。"""

    if isinstance(instance, ValueObject):
        return instance.to_dict()
    if is_dataclass(instance):
        return asdict(instance)
    msg = "dto_dict expects a dataclass or ValueObject instance"
    raise TypeError(msg)


def normalize_tag(tag: str) -> str:
    """先頭の `#` と前後の空白を取り除いたタグを返す。"""

    return tag.strip().lstrip("#")


__all__ = [
    "ValueObject",
    "DTO",
    "dto_dict",
    "normalize_tag",
]
