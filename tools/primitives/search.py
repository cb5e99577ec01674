"""
Primitive search operations for Elasticsearch.
"""

from typing import Dict, Any, List, Optional, Union

from elasticsearch import Elasticsearch

from doc_types.primitives import SearchQuery, ElasticResponse
from utils.connection import resolve_client
from utils.query_builder import build_term_query
from utils.validation import validate_index_name, clamp_value


def search_documents(
    index: str,
    query: Dict[str, Any],
    size: int = 10,
    from_: int = 0,
    sort: Optional[List[Dict[str, Any]]] = None,
    es: Optional[Elasticsearch] = None,
) -> ElasticResponse:
    """
    Execute an Elasticsearch search query.
    
    This is the search primitive the term search builds upon. Total
    hits are always tracked exactly so counts can be asserted on.
    
    Args:
        index: Index to search
        query: Elasticsearch Query DSL query
        size: Number of results to return (1-10000)
        from_: Offset for pagination
        sort: Sort criteria
        es: Client to use (a new one is created if not given)
        
    Returns:
        ElasticResponse with search results and HTTP status
        
    Raises:
        ValueError: If parameters are invalid
    """
    validate_index_name(index)
    size = clamp_value(size, min_value=1, max_value=10000)
    from_ = max(0, from_)
    
    search_query = SearchQuery(
        index=index,
        query=query,
        size=size,
        from_=from_,
        sort=sort,
    )
    
    response = resolve_client(es).search(**search_query.to_kwargs())
    return ElasticResponse.from_response(response)


def search_by_term(
    index: str,
    field: str,
    value: Union[str, int, bool],
    size: int = 10,
    es: Optional[Elasticsearch] = None,
) -> ElasticResponse:
    """
    Find documents whose field exactly matches value.
    
    The term query targets the field itself rather than a .keyword
    sub-field, so it matches the field's indexed token.
    
    Args:
        index: Index to search
        field: Field name (e.g. "id")
        value: Value to match
        size: Number of results to return
        es: Client to use (a new one is created if not given)
        
    Returns:
        ElasticResponse with matching documents
    """
    if not field:
        raise ValueError("Field name cannot be empty")
    return search_documents(
        index=index,
        query=build_term_query(field, value),
        size=size,
        es=es,
    )
