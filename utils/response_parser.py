"""
Response parsing utilities for Elasticsearch.
"""

from typing import Dict, Any, List, Optional


def is_acknowledged(response: Any) -> bool:
    """The `acknowledged` flag of an index management response."""
    return bool(response.body.get("acknowledged", False))


def first_source(hits: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """_source of the first hit, or None when there are no hits."""
    if not hits:
        return None
    return hits[0].get("_source")
