"""Request-scoped data containers.

Nothing here outlives a single invocation.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

LogFn = Callable[[str], Any]

@dataclass
class Invocation:
    method: str
    body: Any = None
    # Logging callbacks of the hosting runtime. None -> package logger.
    log: Optional[LogFn] = None
    error: Optional[LogFn] = None

@dataclass
class ChatRequest:
    system_prompt: str
    user_message: str
    max_tokens: int = 1000

@dataclass
class Envelope:
    success: Optional[bool] = None
    data: Optional[str] = None
    message: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for key in ("success", "message", "data", "error"):
            v = getattr(self, key)
            if v is not None:
                out[key] = v
        return out

@dataclass
class HandlerResponse:
    status_code: int
    envelope: Envelope = field(default_factory=Envelope)

    def as_tuple(self) -> Tuple[int, Dict[str, Any]]:
        return self.status_code, self.envelope.to_dict()
