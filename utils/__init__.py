"""
Utility functions for the Elasticsearch CRUD harness.
"""

from .connection import get_elasticsearch_client, resolve_client, check_connection
from .validation import (
    validate_index_name,
    validate_document_id,
    clamp_value,
)
from .query_builder import (
    build_term_query,
)
from .response_parser import (
    is_acknowledged,
    first_source,
)

__all__ = [
    # Connection
    "get_elasticsearch_client",
    "resolve_client",
    "check_connection",
    # Validation
    "validate_index_name",
    "validate_document_id",
    "clamp_value",
    # Query building
    "build_term_query",
    # Response parsing
    "is_acknowledged",
    "first_source",
]
