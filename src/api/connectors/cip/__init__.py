"""Acesso à API CIP: dispatcher, modelo de erro e opções de request."""

from api.connectors.cip.dispatcher import (
    DEFAULT_HEADERS,
    ApiDispatcher,
    RequestOptions,
    build_dispatcher,
    dispatch,
    get_dispatcher,
    merge_headers,
    set_dispatcher,
)
from api.connectors.cip.errors import ApiClientError, ApiErrorPayload, parse_error_payload

__all__ = [
    "DEFAULT_HEADERS",
    "ApiClientError",
    "ApiDispatcher",
    "ApiErrorPayload",
    "RequestOptions",
    "build_dispatcher",
    "dispatch",
    "get_dispatcher",
    "merge_headers",
    "parse_error_payload",
    "set_dispatcher",
]
