"""
Flow layer type definitions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class CheckResult:
    """Outcome of one CRUD check."""
    name: str
    passed: bool
    detail: str = ""


@dataclass
class CheckReport:
    """Outcome of a full CRUD check run against one index."""
    index: str
    results: List[CheckResult] = field(default_factory=list)
    
    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)
    
    @property
    def failed(self) -> List[CheckResult]:
        return [result for result in self.results if not result.passed]
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return {
            "index": self.index,
            "passed": self.passed,
            "checks": [
                {"name": r.name, "passed": r.passed, "detail": r.detail}
                for r in self.results
            ],
        }
