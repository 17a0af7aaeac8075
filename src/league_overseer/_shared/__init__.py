# Area: Shared
"""
Shared utilities used by the officiating core and the command gate.

This package contains:
- Logging configuration
- Form-encoding helpers for league service requests
- A reference HTTP job transport for hosts
- Classification of league service response bodies
"""

from .logging_config import (
    setup_logging,
    level_for_debug,
    log_and_terminate,
    MATCH_DATA_LOGGER,
)
from .form_encoding import escape, join_identities, encode_form, FORM_CONTENT_TYPE
from .http_jobs import HttpJobRunner
from .response_text import looks_like_json, looks_like_markup

__all__ = [
    "setup_logging",
    "level_for_debug",
    "log_and_terminate",
    "MATCH_DATA_LOGGER",
    "escape",
    "join_identities",
    "encode_form",
    "FORM_CONTENT_TYPE",
    "HttpJobRunner",
    "looks_like_json",
    "looks_like_markup",
]
