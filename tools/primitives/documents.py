"""
Primitive document write operations for Elasticsearch.
"""

from typing import Optional, Union

from elasticsearch import Elasticsearch, NotFoundError

from doc_types.domain import DataRecord
from doc_types.primitives import RefreshPolicy, WriteResult
from utils.connection import resolve_client
from utils.validation import validate_document_id, validate_index_name


RefreshArg = Union[RefreshPolicy, str]


def _refresh_value(refresh: RefreshArg) -> str:
    return RefreshPolicy(refresh).value


def index_document(
    index: str,
    record: DataRecord,
    refresh: RefreshArg = RefreshPolicy.IMMEDIATE,
    es: Optional[Elasticsearch] = None,
) -> WriteResult:
    """
    Index a record under its own id.
    
    Args:
        index: Target index
        record: Record to store; record.id becomes the document id
        refresh: Refresh policy of the write
        es: Client to use (a new one is created if not given)
        
    Returns:
        WriteResult (status 201 for a new document, 200 for an overwrite)
    """
    validate_index_name(index)
    validate_document_id(record.id)
    
    response = resolve_client(es).index(
        index=index,
        id=record.id,
        document=record.to_document(),
        refresh=_refresh_value(refresh),
    )
    return WriteResult.from_response(response)


def update_document(
    index: str,
    record: DataRecord,
    refresh: RefreshArg = RefreshPolicy.IMMEDIATE,
    es: Optional[Elasticsearch] = None,
) -> WriteResult:
    """
    Apply a partial update with the record's fields.
    
    Args:
        index: Target index
        record: Record carrying the new field values
        refresh: Refresh policy of the write
        es: Client to use (a new one is created if not given)
        
    Returns:
        WriteResult (status 200)
        
    Raises:
        NotFoundError: If no document with record.id exists
    """
    validate_index_name(index)
    validate_document_id(record.id)
    
    response = resolve_client(es).update(
        index=index,
        id=record.id,
        doc=record.to_document(),
        refresh=_refresh_value(refresh),
    )
    return WriteResult.from_response(response)


def delete_document(
    index: str,
    doc_id: str,
    refresh: RefreshArg = RefreshPolicy.IMMEDIATE,
    es: Optional[Elasticsearch] = None,
) -> WriteResult:
    """
    Delete a document by id.
    
    Raises:
        NotFoundError: If no document with doc_id exists
    """
    validate_index_name(index)
    validate_document_id(doc_id)
    
    response = resolve_client(es).delete(
        index=index,
        id=doc_id,
        refresh=_refresh_value(refresh),
    )
    return WriteResult.from_response(response)


def get_document(
    index: str,
    doc_id: str,
    es: Optional[Elasticsearch] = None,
) -> Optional[DataRecord]:
    """
    Fetch a record by document id.
    
    Returns:
        The stored record, or None if the document does not exist
    """
    validate_index_name(index)
    validate_document_id(doc_id)
    
    try:
        response = resolve_client(es).get(index=index, id=doc_id)
    except NotFoundError:
        return None
    return DataRecord.from_document(response.body.get("_source", {}))
