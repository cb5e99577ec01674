"""
Pytest configuration and fixtures for the Elasticsearch CRUD harness tests.
"""

import pytest
import os
import sys
from unittest.mock import Mock, patch
from typing import Dict, Any, List, Optional

from elastic_transport import ApiResponseMeta, HttpHeaders, NodeConfig, ObjectApiResponse
from elasticsearch import NotFoundError

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def _meta(status: int) -> ApiResponseMeta:
    return ApiResponseMeta(
        status=status,
        http_version="1.1",
        headers=HttpHeaders(),
        duration=0.0,
        node=NodeConfig("http", "localhost", 9200),
    )


def make_response(body: Dict[str, Any], status: int = 200) -> ObjectApiResponse:
    """Build a client response carrying body and HTTP status."""
    return ObjectApiResponse(body=body, meta=_meta(status))


def make_not_found(message: str = "index_not_found_exception") -> NotFoundError:
    """Build the error the client raises for a 404."""
    return NotFoundError(message, _meta(404), {"error": {"type": message}, "status": 404})


def write_response(
    doc_id: str,
    result: str,
    status: int,
    index: str = "test_index",
    version: int = 1,
) -> ObjectApiResponse:
    """Response of an index/update/delete call."""
    return make_response(
        {
            "_index": index,
            "_id": doc_id,
            "_version": version,
            "result": result,
            "_shards": {"total": 2, "successful": 1, "failed": 0},
        },
        status=status,
    )


def search_response(sources: Optional[List[Dict[str, Any]]] = None, status: int = 200) -> ObjectApiResponse:
    """Response of a search call with one hit per source."""
    sources = sources or []
    return make_response(
        {
            "took": 2,
            "timed_out": False,
            "hits": {
                "total": {"value": len(sources), "relation": "eq"},
                "hits": [
                    {"_index": "test_index", "_id": source.get("id"), "_source": source}
                    for source in sources
                ],
            },
        },
        status=status,
    )


@pytest.fixture
def mock_elasticsearch():
    """Mock Elasticsearch client for testing."""
    mock_es = Mock()
    
    mock_es.info.return_value = make_response(
        {"cluster_name": "test", "version": {"number": "8.15.0"}}
    )
    mock_es.indices.create.return_value = make_response(
        {"acknowledged": True, "shards_acknowledged": True, "index": "test_index"}
    )
    mock_es.indices.delete.return_value = make_response({"acknowledged": True})
    mock_es.indices.exists.return_value = True
    mock_es.index.return_value = write_response("1", "created", 201)
    mock_es.update.return_value = write_response("1", "updated", 200, version=2)
    mock_es.delete.return_value = write_response("1", "deleted", 200, version=2)
    mock_es.search.return_value = search_response([{"id": "1", "name": "test"}])
    
    return mock_es


@pytest.fixture
def mock_es_client(mock_elasticsearch):
    """Patch client construction so every new client is the mock."""
    with patch('utils.connection.Elasticsearch', return_value=mock_elasticsearch):
        yield mock_elasticsearch


@pytest.fixture
def test_environment_config():
    """Test Elasticsearch configuration."""
    return {
        "url": "http://localhost:9200",
        "username": None,
        "password": None,
        "api_key": None,
        "timeout_ms": 5000,
        "max_retries": 0,
        "verify_certs": False,
        "ca_certs": None,
    }


@pytest.fixture
def patch_environment(test_environment_config):
    """Patch Elasticsearch configuration for testing."""
    with patch('utils.connection.get_elasticsearch_config', return_value=test_environment_config):
        yield test_environment_config


@pytest.fixture(autouse=True)
def default_index_name(request, monkeypatch):
    """Mocked tests always see the registry's default index name."""
    if request.node.get_closest_marker("manual") is None:
        monkeypatch.delenv("ELASTIC_TEST_INDEX", raising=False)
