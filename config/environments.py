"""
Environment configuration management.

Values are read from environment variables each time they are requested,
so a .env file loaded at startup is picked up.
"""

import os
from typing import Dict, Any


DEFAULT_URL = "http://localhost:9200"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("true", "1", "yes")


def get_elasticsearch_config() -> Dict[str, Any]:
    """
    Get Elasticsearch configuration.
    
    Returns:
        Elasticsearch configuration dictionary
    """
    return {
        "url": os.getenv("ELASTIC_URL", os.getenv("ELASTICSEARCH_URL", DEFAULT_URL)),
        "username": os.getenv("ELASTIC_USERNAME", os.getenv("ELASTICSEARCH_USERNAME")),
        "password": os.getenv("ELASTIC_PASSWORD", os.getenv("ELASTICSEARCH_PASSWORD")),
        "api_key": os.getenv("ELASTIC_API_KEY", os.getenv("ELASTICSEARCH_API_KEY")),
        "timeout_ms": int(os.getenv("ELASTIC_TIMEOUT", os.getenv("ELASTICSEARCH_TIMEOUT", "30000"))),
        "max_retries": int(os.getenv("ELASTIC_MAX_RETRIES", "0")),
        "verify_certs": _bool_env("ELASTIC_VERIFY_CERTS", True),
        "ca_certs": os.getenv("ELASTIC_CA_CERTS"),
    }


def get_logging_config() -> Dict[str, str]:
    """Logging level and format for the server process."""
    return {
        "level": os.getenv("LOG_LEVEL", "INFO"),
        "format": os.getenv("LOG_FORMAT", DEFAULT_LOG_FORMAT),
    }
