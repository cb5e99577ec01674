"""
Primitive layer type definitions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from enum import Enum


class RefreshPolicy(str, Enum):
    """Refresh behaviour of a write request."""
    NONE = "false"
    IMMEDIATE = "true"
    WAIT_UNTIL = "wait_for"


class WriteOutcome(str, Enum):
    """The `result` field of a document write response."""
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    NOOP = "noop"
    NOT_FOUND = "not_found"


@dataclass
class WriteResult:
    """Result of an index, update or delete call."""
    index: str
    id: str
    result: WriteOutcome
    status: int
    version: Optional[int] = None
    
    @classmethod
    def from_response(cls, response: Any) -> "WriteResult":
        """Create from a client API response (body plus HTTP metadata)."""
        body = response.body
        return cls(
            index=body.get("_index", ""),
            id=body.get("_id", ""),
            result=WriteOutcome(body.get("result", "noop")),
            status=response.meta.status,
            version=body.get("_version"),
        )


@dataclass
class ElasticResponse:
    """Elasticsearch search response."""
    took: int
    timed_out: bool
    total: int
    hits: List[Dict[str, Any]]
    status: int = 200
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any], status: int = 200) -> "ElasticResponse":
        """Create from Elasticsearch response dict."""
        hits_data = data.get("hits", {})
        total = hits_data.get("total", 0)
        if isinstance(total, dict):
            total = total.get("value", 0)
            
        return cls(
            took=data.get("took", 0),
            timed_out=data.get("timed_out", False),
            total=total,
            hits=[hit for hit in hits_data.get("hits", [])],
            status=status,
        )
    
    @classmethod
    def from_response(cls, response: Any) -> "ElasticResponse":
        """Create from a client API response (body plus HTTP metadata)."""
        return cls.from_dict(response.body, status=response.meta.status)
    
    def sources(self) -> List[Dict[str, Any]]:
        """The _source of every hit, in hit order."""
        return [hit.get("_source", {}) for hit in self.hits]


@dataclass
class SearchQuery:
    """Query structure for a document search."""
    index: str
    query: Dict[str, Any] = field(default_factory=lambda: {"match_all": {}})
    size: int = 10
    from_: int = 0
    sort: Optional[List[Dict[str, Any]]] = None
    track_total_hits: bool = True
    
    def to_kwargs(self) -> Dict[str, Any]:
        """Convert to keyword arguments for Elasticsearch.search."""
        kwargs: Dict[str, Any] = {
            "index": self.index,
            "query": self.query,
            "size": self.size,
            "from_": self.from_,
            "track_total_hits": self.track_total_hits,
        }
        
        if self.sort:
            kwargs["sort"] = self.sort
            
        return kwargs
