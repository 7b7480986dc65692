"""cr-api façade の公開インターフェース。"""

from .errors import (
    ApiError,
    CrApiError,
    UnknownTransportError,
    parse_status_code,
    translate_transport_error,
)
from .facade import CrApi, TransportFactory, build_api

__all__ = [
    "ApiError",
    "CrApi",
    "CrApiError",
    "TransportFactory",
    "UnknownTransportError",
    "build_api",
    "parse_status_code",
    "translate_transport_error",
]
