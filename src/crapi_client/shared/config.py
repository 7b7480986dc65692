"""アプリケーション全体で共有する設定ローダー。"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

EnvName = Literal["local", "test", "staging", "production"]


class CrApiSettings(BaseModel):
    """cr-api への接続設定。"""

    base_url: AnyHttpUrl = Field("https://api.cr-api.com", description="cr-api のベース URL")
    developer_key: SecretStr | None = Field(None, description="auth ヘッダへ載せる開発者キー")
    timeout_seconds: float = Field(10.0, gt=0, description="1 リクエストあたりのタイムアウト秒数")
    max_attempts: int = Field(
        3,
        ge=1,
        description="429/5xx 応答時にトランスポートが試行する最大回数",
    )


class AppSettings(BaseSettings):
    """共有設定。`.env` 読み込みと環境変数バリデーションを担う。"""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: EnvName = Field("local", description="実行環境識別子")
    log_level: str = Field("INFO", description="ルートロガーのログレベル")
    crapi: CrApiSettings = Field(default_factory=CrApiSettings)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """設定をロードし、再利用する。

    LRU キャッシュによりプロセス内での重複読み込みを防ぎ、
    `pytest` などから `get_settings.cache_clear()` を呼び出すことで再読込できる。
    """

    try:
        return AppSettings()
    except ValidationError as exc:  # pragma: no cover - ValidationError carries context
        raise ConfigurationError(str(exc)) from exc


__all__ = [
    "AppSettings",
    "CrApiSettings",
    "EnvName",
    "get_settings",
]
