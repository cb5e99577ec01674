"""
Configuration management for the Elasticsearch CRUD harness.
"""

from .indices import (
    INDEX_REGISTRY,
    DEFAULT_INDEX,
    get_index_config,
    get_index_name,
    find_index_config,
    harness_index_config,
)
from .environments import (
    get_elasticsearch_config,
    get_logging_config,
)

__all__ = [
    "INDEX_REGISTRY",
    "DEFAULT_INDEX",
    "get_index_config",
    "get_index_name",
    "find_index_config",
    "harness_index_config",
    "get_elasticsearch_config",
    "get_logging_config",
]
