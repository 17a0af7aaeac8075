# Area: Shared
"""
league_overseer._shared.form_encoding — Form POST body helpers
===============================================================

Builds ``application/x-www-form-urlencoded`` bodies for the league
service. Field order is preserved because the league site logs raw
bodies and operators compare them by eye.
"""

from typing import Iterable, List, Tuple
from urllib.parse import quote

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def escape(value) -> str:
    """Escape one value for transport; every reserved character is encoded."""
    return quote(str(value), safe="")


def join_identities(identities: Iterable[str]) -> str:
    """
    Comma-join identities, escaping each one individually.

    Empty identities are skipped so the league site never receives an
    empty token; the result has no trailing comma.
    """
    return ",".join(escape(identity) for identity in identities if identity)


def encode_form(fields: List[Tuple[str, str]]) -> str:
    """
    Encode (name, value) pairs in order.

    Values must already be escaped; use escape() or join_identities().
    """
    return "&".join(f"{name}={value}" for name, value in fields)
