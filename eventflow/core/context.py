import time
from typing import Any, Dict, List, Optional


class PipelineContext:
    """Shared state passed between pipeline steps.

    Keys are only ever added or overwritten, never removed.
    """
    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self.data: Dict[str, Any] = dict(initial or {})
        self.history: List[str] = []
        self.trace: List[Dict[str, Any]] = []

    def set(self, key: str, value: Any):
        self.data[key] = value

    def update(self, values: Dict[str, Any]):
        self.data.update(values)

    def get(self, key: str, default=None):
        return self.data.get(key, default)

    def require(self, step_name: str, *keys: str) -> List[Any]:
        """Return the values for `keys`, raising ValueError naming the step if any is missing."""
        missing = [k for k in keys if k not in self.data]
        if missing:
            raise ValueError(f"{step_name} step requires {', '.join(repr(k) for k in missing)} in context")
        return [self.data[k] for k in keys]

    def __contains__(self, key: str) -> bool:
        return key in self.data

    def add_trace(self, step_name: str, duration: float, status: str, error: str = None):
        self.trace.append({
            "step": step_name,
            "duration": round(duration, 3),
            "status": status,
            "error": error,
            "timestamp": time.time()
        })
