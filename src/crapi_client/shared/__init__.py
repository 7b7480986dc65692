"""共有レイヤの公開インターフェース。"""

from .config import AppSettings, CrApiSettings, get_settings
from .exceptions import BaseAppError, ConfigurationError
from .logging import configure_logging, get_logger
from .types import DTO, ValueObject, dto_dict, normalize_tag

__all__ = [
    "AppSettings",
    "CrApiSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "BaseAppError",
    "ConfigurationError",
    "DTO",
    "ValueObject",
    "dto_dict",
    "normalize_tag",
]
