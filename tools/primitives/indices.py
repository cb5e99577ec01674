"""
Primitive index lifecycle operations for Elasticsearch.
"""

import logging
from typing import Dict, Any, Optional

from elasticsearch import Elasticsearch, NotFoundError

from config.indices import find_index_config, harness_index_config
from utils.connection import resolve_client
from utils.response_parser import is_acknowledged
from utils.validation import validate_index_name


logger = logging.getLogger(__name__)


def create_index(
    index: str,
    settings: Optional[Dict[str, Any]] = None,
    mappings: Optional[Dict[str, Any]] = None,
    es: Optional[Elasticsearch] = None,
) -> bool:
    """
    Create an index.
    
    Settings and mappings not given explicitly are taken from the
    index registry when the index is a registered harness index.
    
    Args:
        index: Index name
        settings: Index settings (e.g. shard and replica counts)
        mappings: Field mappings
        es: Client to use (a new one is created if not given)
        
    Returns:
        The acknowledged flag of the response
    """
    validate_index_name(index)
    
    registered = find_index_config(index) or {}
    if settings is None:
        settings = registered.get("settings")
    if mappings is None:
        mappings = registered.get("mappings")
    
    params: Dict[str, Any] = {"index": index}
    if settings:
        params["settings"] = settings
    if mappings:
        params["mappings"] = mappings
    
    response = resolve_client(es).indices.create(**params)
    acknowledged = is_acknowledged(response)
    logger.info("create index %s response: %s", index, acknowledged)
    return acknowledged


def delete_index(
    index: str,
    es: Optional[Elasticsearch] = None,
) -> bool:
    """
    Delete an index.
    
    A missing index is not an error: the failure is logged and
    False is returned. Every other failure propagates.
    
    Args:
        index: Index name
        es: Client to use (a new one is created if not given)
        
    Returns:
        The acknowledged flag, or False if the index did not exist
    """
    validate_index_name(index)
    
    try:
        response = resolve_client(es).indices.delete(index=index)
    except NotFoundError as e:
        logger.info("delete index %s failed: %s", index, e)
        return False
        
    acknowledged = is_acknowledged(response)
    logger.info("delete index %s response: %s", index, acknowledged)
    return acknowledged


def check_index_exists(
    index: str,
    es: Optional[Elasticsearch] = None,
) -> bool:
    """
    Check if an index exists.
    
    Args:
        index: Index name
        es: Client to use (a new one is created if not given)
        
    Returns:
        True if the index exists
    """
    validate_index_name(index)
    return bool(resolve_client(es).indices.exists(index=index))


def recreate_index(
    index: str,
    es: Optional[Elasticsearch] = None,
) -> bool:
    """
    Drop the index if present, then create it with the harness
    settings and mappings (registered or default).
    """
    config = harness_index_config(index)
    es = resolve_client(es)
    delete_index(index, es=es)
    return create_index(
        index,
        settings=config["settings"],
        mappings=config["mappings"],
        es=es,
    )
