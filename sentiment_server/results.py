"""
Typed outcome shared by the classifier gateway and the record writer.

Failures are returned as values carrying an ``ErrorKind`` tag and the HTTP
status the route should answer with.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    UPSTREAM_ERROR = "upstream_error"
    UNAVAILABLE = "unavailable"
    UNEXPECTED = "unexpected"
    PERSISTENCE = "persistence"


@dataclass
class OperationError:
    kind: ErrorKind
    message: str
    status: int
    details: Any = None
    errors: Dict[str, List[str]] = field(default_factory=dict)


@dataclass
class Classification:
    label: str
    original_text: str


@dataclass
class Result:
    value: Any = None
    error: Optional[OperationError] = None

    @property
    def ok(self):
        return self.error is None

    @classmethod
    def success(cls, value=None):
        return cls(value=value)

    @classmethod
    def failure(cls, kind, message, status, details=None, errors=None):
        return cls(error=OperationError(kind, message, status, details, errors or {}))
