"""
Flows composed from the primitive operations.
"""

from .crud_checks import (
    CheckFailedError,
    prepare_index,
    check_insert,
    check_query,
    check_update,
    check_delete,
    run_crud_checks,
)

__all__ = [
    "CheckFailedError",
    "prepare_index",
    "check_insert",
    "check_query",
    "check_update",
    "check_delete",
    "run_crud_checks",
]
