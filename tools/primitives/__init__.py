"""
Primitive tools for low-level Elasticsearch operations.
"""

from .indices import create_index, delete_index, check_index_exists, recreate_index
from .documents import index_document, update_document, delete_document, get_document
from .search import search_documents, search_by_term

__all__ = [
    # Index lifecycle
    "create_index",
    "delete_index",
    "check_index_exists",
    "recreate_index",
    # Document writes
    "index_document",
    "update_document",
    "delete_document",
    "get_document",
    # Search operations
    "search_documents",
    "search_by_term",
]
