"""
Domain-specific type definitions.
"""

import json
from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass
class DataRecord:
    """The record the harness writes to and reads back from the index."""
    id: str
    name: str
    
    def to_document(self) -> Dict[str, Any]:
        """Document body sent to Elasticsearch."""
        return asdict(self)
    
    def to_json(self) -> str:
        """Compact JSON form, non-ASCII characters kept as-is."""
        return json.dumps(self.to_document(), ensure_ascii=False, separators=(",", ":"))
    
    @classmethod
    def from_document(cls, source: Dict[str, Any]) -> "DataRecord":
        """
        Create from a hit's _source.
        
        Raises:
            ValueError: If id or name is missing
        """
        missing = [name for name in ("id", "name") if source.get(name) is None]
        if missing:
            raise ValueError(f"Document is missing field(s): {', '.join(missing)}")
        return cls(id=str(source["id"]), name=str(source["name"]))
