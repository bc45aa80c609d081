"""Core fetch engine for restconnector."""

from restconnector.core.context import FetchContext
from restconnector.core.executor import prepare_request, request_data
from restconnector.core.http import HttpxTransport, Transport, get_timeout_config
from restconnector.core.orchestrator import RestFetcher, fetch_paths, get_data
from restconnector.core.query import (
    attach_query,
    build_query_string,
    compose_query,
    compose_request,
    resolve_url,
)
from restconnector.core.recovery import handle_error, recover
from restconnector.core.response import ResponseHandler, passthrough_handler

__all__ = [
    # query
    "resolve_url",
    "compose_query",
    "compose_request",
    "build_query_string",
    "attach_query",
    # http
    "Transport",
    "HttpxTransport",
    "get_timeout_config",
    # response
    "ResponseHandler",
    "passthrough_handler",
    # executor
    "FetchContext",
    "prepare_request",
    "request_data",
    # recovery
    "handle_error",
    "recover",
    # orchestrator
    "get_data",
    "fetch_paths",
    "RestFetcher",
]
