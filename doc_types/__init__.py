"""
Type definitions for the Elasticsearch CRUD harness.
"""

from .primitives import (
    RefreshPolicy,
    WriteOutcome,
    WriteResult,
    ElasticResponse,
    SearchQuery,
)

from .domain import DataRecord

from .flows import CheckResult, CheckReport

__all__ = [
    # Primitives
    "RefreshPolicy",
    "WriteOutcome",
    "WriteResult",
    "ElasticResponse",
    "SearchQuery",
    # Domain
    "DataRecord",
    # Flows
    "CheckResult",
    "CheckReport",
]
