"""
Index configuration registry for the harness indices.
"""

import copy
import os
from typing import Dict, Any, Optional


# Settings and mappings used when the harness creates its indices
INDEX_REGISTRY: Dict[str, Dict[str, Any]] = {
    "test_index": {
        "name": "test_index",
        "settings": {
            "index.number_of_shards": 5,
            "index.number_of_replicas": 1,
        },
        "mappings": {
            "properties": {
                "name": {
                    "type": "text"
                }
            }
        },
        # Field the term checks match documents on
        "id_field": "id",
    },
}

DEFAULT_INDEX = "test_index"


def get_index_config(
    index_type: str = DEFAULT_INDEX,
    override_name: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Get index configuration for a registered harness index.
    
    Args:
        index_type: Registry key (e.g. "test_index")
        override_name: Optional concrete index name
        
    Returns:
        Index configuration dictionary
        
    Raises:
        KeyError: If index_type is not registered
    """
    index_config = INDEX_REGISTRY.get(index_type)
    if not index_config:
        raise KeyError(f"Unknown index type: {index_type}")
        
    # Deep copy so callers can't mutate the registry's nested dicts
    config = copy.deepcopy(index_config)
    
    # Environment variable override, then explicit override
    env_name = os.getenv(f"ELASTIC_{index_type.upper()}")
    if env_name:
        config["name"] = env_name
    if override_name:
        config["name"] = override_name
        
    return config


def get_index_name(index_type: str = DEFAULT_INDEX) -> str:
    """Concrete index name for a registry key, after env overrides."""
    return get_index_config(index_type)["name"]


def find_index_config(index_name: str) -> Optional[Dict[str, Any]]:
    """
    Look up the registry entry whose concrete name is index_name.
    
    Args:
        index_name: Concrete index name
        
    Returns:
        Index configuration or None if the name is not a harness index
    """
    for index_type in INDEX_REGISTRY:
        config = get_index_config(index_type)
        if config["name"] == index_name:
            return config
    return None


def harness_index_config(index_name: str) -> Dict[str, Any]:
    """
    Configuration the harness creates index_name with.
    
    Unregistered names get the default harness index's settings,
    mappings and term field under their own name.
    """
    return find_index_config(index_name) or get_index_config(
        DEFAULT_INDEX, override_name=index_name
    )
