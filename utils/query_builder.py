"""
Query building utilities for Elasticsearch.
"""

from typing import Dict, Any, Union


def build_term_query(
    field: str,
    value: Union[str, int, bool],
    use_keyword: bool = False,
) -> Dict[str, Any]:
    """
    Build a term query for exact matching.
    
    Args:
        field: Field name
        value: Value to match
        use_keyword: Whether to target the .keyword sub-field of a text field
        
    Returns:
        Term query dict
    """
    if use_keyword and isinstance(value, str):
        field = f"{field}.keyword"
        
    return {"term": {field: value}}
