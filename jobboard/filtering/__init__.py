"""Listing filter parsing and URL construction."""

from .form import (
    FILTER_FIELDS,
    FilterValidationError,
    build_query_params,
    build_redirect_target,
    handle_filter_submission,
    parse_filter,
)

__all__ = [
    "FILTER_FIELDS",
    "FilterValidationError",
    "parse_filter",
    "build_query_params",
    "build_redirect_target",
    "handle_filter_submission",
]
