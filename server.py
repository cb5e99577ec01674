"""
FastMCP Elasticsearch CRUD harness server.

This server exposes the harness operations as tools:
- health: Check Elasticsearch connectivity
- create_test_index / delete_test_index: Index lifecycle
- index_record / update_record / delete_record: Document writes (immediate refresh)
- search_records_by_term: Exact-match search
- run_crud_suite: Recreate the index and run the insert/query/update/delete checks
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastmcp import FastMCP
from dotenv import load_dotenv

from config import (
    get_elasticsearch_config,
    get_index_name,
    harness_index_config,
    get_logging_config,
)
from doc_types import DataRecord
from tools.flows import run_crud_checks
from tools.primitives import (
    create_index,
    delete_index,
    index_document,
    update_document,
    delete_document,
    search_by_term,
)
from utils import check_connection

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

# Initialize MCP server
mcp = FastMCP("es-crud-harness")


def configure_logging() -> None:
    """Configure process-wide logging from LOG_LEVEL and LOG_FORMAT."""
    config = get_logging_config()
    level = getattr(logging, config["level"].upper(), logging.INFO)
    # stdout carries the MCP stdio protocol, so logs go to stderr
    logging.basicConfig(level=level, format=config["format"], stream=sys.stderr)


# ========== HEALTH TOOL ==========

def health() -> Dict[str, Any]:
    """
    Check connectivity and configuration of the Elasticsearch cluster.
    """
    connected = check_connection()
    return {
        "overall_status": "healthy" if connected else "degraded",
        "services": {
            "elasticsearch": {
                "service": "elasticsearch",
                "connected": connected,
                "url": get_elasticsearch_config()["url"],
            }
        },
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ========== PRIMITIVE TOOLS ==========

def create_test_index(index: Optional[str] = None) -> Dict[str, Any]:
    """
    Create the harness index (5 shards, 1 replica, text mapping on name).

    Args:
        index: Index name (defaults to the configured test index)
    """
    index = index or get_index_name()
    config = harness_index_config(index)
    acknowledged = create_index(
        index, settings=config["settings"], mappings=config["mappings"]
    )
    return {"index": index, "acknowledged": acknowledged}


def delete_test_index(index: Optional[str] = None) -> Dict[str, Any]:
    """
    Delete the harness index. Deleting a missing index reports acknowledged=false.

    Args:
        index: Index name (defaults to the configured test index)
    """
    index = index or get_index_name()
    return {"index": index, "acknowledged": delete_index(index)}


def index_record(record_id: str, name: str, index: Optional[str] = None) -> Dict[str, Any]:
    """
    Index a record with an immediate refresh.

    Args:
        record_id: Record id, also used as the document id
        name: Record name
        index: Index name (defaults to the configured test index)
    """
    result = index_document(index or get_index_name(), DataRecord(id=record_id, name=name))
    return _write_result_dict(result)


def update_record(record_id: str, name: str, index: Optional[str] = None) -> Dict[str, Any]:
    """
    Update a record's name with an immediate refresh.

    Args:
        record_id: Record id
        name: New name
        index: Index name (defaults to the configured test index)
    """
    result = update_document(index or get_index_name(), DataRecord(id=record_id, name=name))
    return _write_result_dict(result)


def delete_record(record_id: str, index: Optional[str] = None) -> Dict[str, Any]:
    """
    Delete a record with an immediate refresh.

    Args:
        record_id: Record id
        index: Index name (defaults to the configured test index)
    """
    result = delete_document(index or get_index_name(), record_id)
    return _write_result_dict(result)


def search_records_by_term(
    field: str,
    value: str,
    index: Optional[str] = None,
    size: int = 10,
) -> Dict[str, Any]:
    """
    Exact-match search on a field's indexed value.

    Args:
        field: Field name (e.g. "id")
        value: Value to match
        index: Index name (defaults to the configured test index)
        size: Number of results (1-10000)
    """
    response = search_by_term(index or get_index_name(), field, value, size=size)
    return {
        "status": response.status,
        "took": response.took,
        "timed_out": response.timed_out,
        "total": response.total,
        "records": response.sources(),
    }


# ========== FLOW TOOLS ==========

def run_crud_suite(index: Optional[str] = None) -> Dict[str, Any]:
    """
    Recreate the index and run the insert, query, update and delete checks.

    Args:
        index: Index name (defaults to the configured test index)

    Returns:
        Per-check pass/fail report
    """
    return run_crud_checks(index).to_dict()


def _write_result_dict(result) -> Dict[str, Any]:
    return {
        "index": result.index,
        "id": result.id,
        "result": result.result.value,
        "status": result.status,
        "version": result.version,
    }


for _tool in (
    health,
    create_test_index,
    delete_test_index,
    index_record,
    update_record,
    delete_record,
    search_records_by_term,
    run_crud_suite,
):
    mcp.tool()(_tool)


if __name__ == "__main__":
    configure_logging()
    logger.info("Starting es-crud-harness against %s", get_elasticsearch_config()["url"])
    mcp.run()
