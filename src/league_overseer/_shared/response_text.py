# Area: Shared
"""
league_overseer._shared.response_text — League service response bodies
=======================================================================

Classifies the text the league site sends back. Anything carrying HTML
or XML tags (full pages, PHP error fragments like ``<br /><b>Warning</b>``)
is markup and must never reach players or the team label cache.
"""

import json
import re

_TAG = re.compile(r"<\s*[a-zA-Z!?/][^>]*>")


def looks_like_markup(text: str) -> bool:
    return _TAG.search(text) is not None


def looks_like_json(text: str) -> bool:
    """True for a JSON object or array body."""
    if text[:1] not in ("{", "["):
        return False
    try:
        json.loads(text)
    except ValueError:
        return False
    return True
