"""
Query string parsing for proxy events.
"""

from typing import Dict, List, Optional, Tuple
from urllib.parse import parse_qsl, urlsplit


def _query_pairs(url: str) -> List[Tuple[str, str]]:
    # "+" decodes to a space and bare keys ("?flag") map to "".
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)


def parse_query_string_parameters(url: str) -> Optional[Dict[str, str]]:
    """
    Single-value query parameters.

    A repeated key keeps its last value. Returns None when the URL carries
    no parameters.
    """
    params = dict(_query_pairs(url))
    return params or None


def parse_multi_value_query_string_parameters(url: str) -> Dict[str, List[str]]:
    """Every value of every query key in order; an empty dict when there is no query."""
    params: Dict[str, List[str]] = {}
    for key, value in _query_pairs(url):
        params.setdefault(key, []).append(value)
    return params
