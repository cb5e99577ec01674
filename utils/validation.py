"""
Input validation utilities.
"""

import re
from typing import Any


# Characters Elasticsearch rejects in index names
_INVALID_INDEX_CHARS = re.compile(r'[\\/*?"<>| ,#:]')


def validate_index_name(name: str) -> None:
    """
    Validate a concrete Elasticsearch index name.
    
    Args:
        name: Index name to validate
        
    Raises:
        ValueError: If name is invalid
    """
    if not name:
        raise ValueError("Index name cannot be empty")
        
    if name in (".", ".."):
        raise ValueError(f"Index name cannot be '{name}'")
        
    if name[0] in "_-+":
        raise ValueError("Index name cannot start with '_', '-' or '+'")
        
    if name != name.lower():
        raise ValueError("Index name must be lowercase")
        
    invalid_chars = _INVALID_INDEX_CHARS.findall(name)
    if invalid_chars:
        raise ValueError(f"Invalid characters in index name: {invalid_chars}")
        
    if len(name.encode("utf-8")) > 255:
        raise ValueError("Index name cannot be longer than 255 bytes")


def validate_document_id(doc_id: str) -> None:
    """
    Validate a document id.
    
    Raises:
        ValueError: If the id is empty
    """
    if doc_id is None or str(doc_id) == "":
        raise ValueError("Document id cannot be empty")


def clamp_value(value: Any, min_value: Any, max_value: Any) -> Any:
    """
    Clamp a value between min and max.
    
    Args:
        value: Value to clamp
        min_value: Minimum allowed value
        max_value: Maximum allowed value
        
    Returns:
        Clamped value
    """
    return max(min_value, min(value, max_value))
