"""
CRUD verification flow against a live Elasticsearch index.

Each check writes its own record with an immediate refresh, reads the
result back and compares status codes, hit counts and sources with
what was written. A mismatch raises CheckFailedError; errors raised
by the client propagate unchanged.
"""

import logging
from typing import Any, Callable, List, Optional, Tuple

from elasticsearch import Elasticsearch

from config.indices import get_index_name, harness_index_config
from doc_types.domain import DataRecord
from doc_types.flows import CheckReport, CheckResult
from tools.primitives.documents import delete_document, index_document, update_document
from tools.primitives.indices import recreate_index
from tools.primitives.search import search_by_term
from utils.connection import resolve_client
from utils.response_parser import first_source


logger = logging.getLogger(__name__)

HTTP_OK = 200
HTTP_CREATED = 201

INSERT_RECORD = DataRecord("1", "测试数据01")
QUERY_RECORD = DataRecord("2", "测试数据02")
UPDATE_RECORD = DataRecord("3", "测试数据03")
UPDATED_NAME = "测试数据被更新"
DELETE_RECORD = DataRecord("4", "测试数据04")


class CheckFailedError(AssertionError):
    """A check observed a value different from the expected one."""

    def __init__(self, check: str, what: str, expected: Any, actual: Any):
        self.check = check
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(f"{check}: expected {what} {expected!r}, got {actual!r}")


def _expect(check: str, what: str, expected: Any, actual: Any) -> None:
    if expected != actual:
        raise CheckFailedError(check, what, expected, actual)


def _id_field(index: str) -> str:
    return harness_index_config(index)["id_field"]


def prepare_index(index: Optional[str] = None, es: Optional[Elasticsearch] = None) -> str:
    """Drop and recreate the harness index. Returns the index name."""
    index = index or get_index_name()
    recreate_index(index, es=es)
    return index


def insert_record(index: str, record: DataRecord, es: Optional[Elasticsearch] = None) -> None:
    """Index a new record and expect 201 Created."""
    result = index_document(index, record, es=es)
    _expect("insert", "status", HTTP_CREATED, result.status)


def query_record(index: str, record: DataRecord, es: Optional[Elasticsearch] = None) -> None:
    """Term-search the record's id and expect exactly it back."""
    response = search_by_term(index, _id_field(index), record.id, es=es)
    _expect("query", "status", HTTP_OK, response.status)
    _expect("query", "total hits", 1, response.total)
    _expect("query", "source", record.to_document(), first_source(response.hits))


def check_insert(index: str, es: Optional[Elasticsearch] = None) -> None:
    insert_record(index, INSERT_RECORD, es=es)


def check_query(index: str, es: Optional[Elasticsearch] = None) -> None:
    insert_record(index, QUERY_RECORD, es=es)
    query_record(index, QUERY_RECORD, es=es)


def check_update(index: str, es: Optional[Elasticsearch] = None) -> None:
    record = DataRecord(UPDATE_RECORD.id, UPDATE_RECORD.name)
    insert_record(index, record, es=es)

    record.name = UPDATED_NAME
    result = update_document(index, record, es=es)
    _expect("update", "status", HTTP_OK, result.status)

    query_record(index, record, es=es)


def check_delete(index: str, es: Optional[Elasticsearch] = None) -> None:
    insert_record(index, DELETE_RECORD, es=es)

    result = delete_document(index, DELETE_RECORD.id, es=es)
    _expect("delete", "status", HTTP_OK, result.status)

    response = search_by_term(index, _id_field(index), DELETE_RECORD.id, es=es)
    _expect("delete", "status", HTTP_OK, response.status)
    _expect("delete", "total hits", 0, response.total)


CHECKS: List[Tuple[str, Callable[..., None]]] = [
    ("insert", check_insert),
    ("query", check_query),
    ("update", check_update),
    ("delete", check_delete),
]


def run_crud_checks(
    index: Optional[str] = None,
    es: Optional[Elasticsearch] = None,
) -> CheckReport:
    """
    Recreate the index and run every check in order.
    
    A failed check is recorded in the report and the run continues
    with the next one. Client errors abort the run.
    
    Args:
        index: Index to run against (defaults to the registry's test index)
        es: Client to use (a new one is created if not given)
        
    Returns:
        CheckReport with one result per check
    """
    es = resolve_client(es)
    index = prepare_index(index, es=es)
    report = CheckReport(index=index)
    
    for name, check in CHECKS:
        try:
            check(index, es=es)
        except CheckFailedError as e:
            logger.warning("check %s failed: %s", name, e)
            report.results.append(CheckResult(name=name, passed=False, detail=str(e)))
            continue
        report.results.append(CheckResult(name=name, passed=True))
        
    return report
