"""
Unit tests for the CRUD check flow.
"""

import pytest
from elasticsearch import ConnectionError as ESConnectionError

from tools.flows.crud_checks import (
    CheckFailedError,
    DELETE_RECORD,
    QUERY_RECORD,
    UPDATE_RECORD,
    UPDATED_NAME,
    check_delete,
    check_insert,
    check_query,
    check_update,
    prepare_index,
    run_crud_checks,
)
from conftest import make_not_found, search_response, write_response


class TestChecks:
    """Each check against a mocked client."""

    def test_prepare_index_tolerates_missing_index(self, mock_elasticsearch):
        mock_elasticsearch.indices.delete.side_effect = make_not_found()
        
        assert prepare_index(es=mock_elasticsearch) == "test_index"
        mock_elasticsearch.indices.create.assert_called_once()

    def test_insert_expects_created(self, mock_elasticsearch):
        check_insert("test_index", es=mock_elasticsearch)
        
        assert mock_elasticsearch.index.call_args[1]["id"] == "1"
        assert mock_elasticsearch.index.call_args[1]["refresh"] == "true"

    def test_insert_overwrite_fails(self, mock_elasticsearch):
        mock_elasticsearch.index.return_value = write_response("1", "updated", 200, version=2)
        
        with pytest.raises(CheckFailedError) as excinfo:
            check_insert("test_index", es=mock_elasticsearch)
        
        assert excinfo.value.check == "insert"
        assert excinfo.value.what == "status"
        assert excinfo.value.expected == 201
        assert excinfo.value.actual == 200

    def test_query_matches_inserted_record(self, mock_elasticsearch):
        mock_elasticsearch.search.return_value = search_response([QUERY_RECORD.to_document()])
        
        check_query("test_index", es=mock_elasticsearch)
        
        assert mock_elasticsearch.search.call_args[1]["query"] == {"term": {"id": "2"}}

    def test_query_wrong_hit_count(self, mock_elasticsearch):
        mock_elasticsearch.search.return_value = search_response([])
        
        with pytest.raises(CheckFailedError, match="total hits"):
            check_query("test_index", es=mock_elasticsearch)

    def test_query_source_mismatch(self, mock_elasticsearch):
        mock_elasticsearch.search.return_value = search_response([{"id": "2", "name": "other"}])
        
        with pytest.raises(CheckFailedError, match="source"):
            check_query("test_index", es=mock_elasticsearch)

    def test_update_then_query_updated_record(self, mock_elasticsearch):
        updated = {"id": UPDATE_RECORD.id, "name": UPDATED_NAME}
        mock_elasticsearch.search.return_value = search_response([updated])
        
        check_update("test_index", es=mock_elasticsearch)
        
        assert mock_elasticsearch.update.call_args[1]["doc"] == updated
        # The shared record constant is left untouched
        assert UPDATE_RECORD.name == "测试数据03"

    def test_delete_expects_no_hits(self, mock_elasticsearch):
        mock_elasticsearch.search.return_value = search_response([])
        
        check_delete("test_index", es=mock_elasticsearch)
        
        mock_elasticsearch.delete.assert_called_once_with(
            index="test_index", id=DELETE_RECORD.id, refresh="true"
        )

    def test_delete_still_visible(self, mock_elasticsearch):
        mock_elasticsearch.search.return_value = search_response([DELETE_RECORD.to_document()])
        
        with pytest.raises(CheckFailedError, match="expected total hits 0, got 1"):
            check_delete("test_index", es=mock_elasticsearch)

    def test_check_failed_is_assertion_error(self):
        assert issubclass(CheckFailedError, AssertionError)


class TestRunCrudChecks:
    """The full run against a mocked client."""

    def _searches(self):
        return [
            search_response([QUERY_RECORD.to_document()]),
            search_response([{"id": UPDATE_RECORD.id, "name": UPDATED_NAME}]),
            search_response([]),
        ]

    def test_all_checks_pass(self, mock_es_client):
        mock_es_client.search.side_effect = self._searches()
        
        report = run_crud_checks()
        
        assert report.index == "test_index"
        assert report.passed is True
        assert [r.name for r in report.results] == ["insert", "query", "update", "delete"]
        mock_es_client.indices.delete.assert_called_once_with(index="test_index")
        assert mock_es_client.index.call_count == 4

    def test_failed_check_does_not_stop_run(self, mock_es_client):
        searches = self._searches()
        searches[0] = search_response([])
        mock_es_client.search.side_effect = searches
        
        report = run_crud_checks("crud_index")
        
        assert report.passed is False
        assert [r.name for r in report.failed] == ["query"]
        assert "total hits" in report.failed[0].detail
        assert len(report.results) == 4

    def test_unregistered_index_gets_harness_settings(self, mock_es_client):
        mock_es_client.search.side_effect = self._searches()
        
        run_crud_checks("crud_index")
        
        kwargs = mock_es_client.indices.create.call_args[1]
        assert kwargs["index"] == "crud_index"
        assert kwargs["settings"] == {
            "index.number_of_shards": 5,
            "index.number_of_replicas": 1,
        }
        assert kwargs["mappings"] == {"properties": {"name": {"type": "text"}}}
        assert mock_es_client.search.call_args_list[0][1]["query"] == {"term": {"id": "2"}}

    def test_client_errors_abort_run(self, mock_es_client):
        mock_es_client.index.side_effect = ESConnectionError("Connection refused")
        
        with pytest.raises(ESConnectionError):
            run_crud_checks()
