"""Harvest v2 API client: request pipeline, errors, pagination and endpoints."""

from .client import Client, check_response, decode_body
from .context import Context
from .errors import (
    AuthError,
    Canceled,
    ConfigurationError,
    ContextError,
    DeadlineExceeded,
    DecodeError,
    ErrorResponse,
    HarvestError,
    MissingContextError,
    SerializationError,
    TransportError,
)
from .options import ListOptions
from .response import JSONDestination, Pagination, RawSink, Response
from .time_entries import TimeEntriesListOptions, TimeEntriesService

__all__ = [
    'Client', 'check_response', 'decode_body', 'Context',
    'AuthError', 'Canceled', 'ConfigurationError', 'ContextError', 'DeadlineExceeded',
    'DecodeError', 'ErrorResponse', 'HarvestError', 'MissingContextError',
    'SerializationError', 'TransportError',
    'ListOptions', 'JSONDestination', 'Pagination', 'RawSink', 'Response',
    'TimeEntriesListOptions', 'TimeEntriesService',
]
