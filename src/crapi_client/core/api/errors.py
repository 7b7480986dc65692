"""façade が送出するアプリケーション例外とステータスコード抽出。"""

from __future__ import annotations

import re

import httpx

from crapi_client.shared.exceptions import BaseAppError

__all__ = [
    "ApiError",
    "CrApiError",
    "UnknownTransportError",
    "parse_status_code",
    "translate_transport_error",
]


# "crapi: 400" のように末尾がコロン区切りの数値で終わるメッセージのみ受け付ける
_STATUS_PATTERN = re.compile(r"^.*:\s*(\d+)\s*$", re.DOTALL)


class CrApiError(BaseAppError):
    """cr-api 呼び出しに起因する例外の基底。"""

    default_message = "cr-api call failed"


class ApiError(CrApiError):
    """ステータスコードを伴う cr-api 呼び出しの失敗。"""

    def __init__(self, code: int, message: str | None = None) -> None:
        super().__init__(message or f"cr-api call failed with status {code}")
        self.code = code


class UnknownTransportError(CrApiError):
    """ステータスコードを特定できないトランスポートの失敗。"""

    default_message = "cr-api transport failed without a status code"


def parse_status_code(message: str) -> int | None:
    """失敗メッセージ末尾のステータスコードを取り出す。該当しなければ None。"""

    match = _STATUS_PATTERN.match(message)
    if match is None:
        return None
    return int(match.group(1))


def translate_transport_error(exc: Exception) -> CrApiError:
    """トランスポート例外を façade の例外へ変換する。"""

    message = str(exc)
    if isinstance(exc, httpx.HTTPStatusError):
        return ApiError(exc.response.status_code, message)

    code = parse_status_code(message)
    if code is None:
        return UnknownTransportError(message or None)
    return ApiError(code, message)
