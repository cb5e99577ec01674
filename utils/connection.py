"""
Elasticsearch connection management.
"""

import logging
from typing import Optional

from elasticsearch import ApiError, Elasticsearch, TransportError

from config.environments import get_elasticsearch_config


logger = logging.getLogger(__name__)


def get_elasticsearch_client() -> Elasticsearch:
    """
    Create an Elasticsearch client from the configured connection settings.
    
    Returns:
        Configured Elasticsearch client
    """
    config = get_elasticsearch_config()
    
    # Build connection parameters
    params = {
        "hosts": [config["url"]],
        "request_timeout": config["timeout_ms"] / 1000.0,
        "verify_certs": config.get("verify_certs", True),
        "max_retries": config.get("max_retries", 0),
    }
    
    # Add CA certificates if provided
    if config.get("ca_certs"):
        params["ca_certs"] = config["ca_certs"]
    
    # Add authentication
    if config.get("api_key"):
        params["api_key"] = config["api_key"]
    elif config.get("username") and config.get("password"):
        params["basic_auth"] = (config["username"], config["password"])
    
    return Elasticsearch(**params)


def resolve_client(es: Optional[Elasticsearch] = None) -> Elasticsearch:
    """Return the given client, or a new one built from configuration."""
    return es if es is not None else get_elasticsearch_client()


def check_connection(es: Optional[Elasticsearch] = None) -> bool:
    """
    Test Elasticsearch connection.
    
    Args:
        es: Client to test (a new one is created if not given)
        
    Returns:
        True if the cluster answered
    """
    try:
        response = resolve_client(es).info()
        return "version" in response.body
    except (ApiError, TransportError) as e:
        logger.info("Elasticsearch connection check failed: %s", e)
        return False
