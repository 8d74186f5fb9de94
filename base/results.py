from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ActionResult:
    """
    Outcome of a domain operation.

    Services return an ActionResult instead of raising for expected failures
    (empty cart, unknown zone, invalid transition...). `error` is a message
    that is safe to show to the caller. Exceptions are left for failures the
    caller cannot do anything about, such as the database being unreachable.
    """
    success: bool
    data: Any = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data=None) -> "ActionResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "ActionResult":
        return cls(success=False, error=error)
