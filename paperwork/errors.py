"""
Paperwork errors — the closed set of ways an authorization step can fail.

Every failure is raised as a single exception type, ``PaperworkError``, that
carries an ``ErrorKind``. Callers match on the kind instead of on a class
hierarchy. The core never retries, translates or swallows these errors; the
reporting wrappers on ``Bureaucrat`` turn them into ``ActionReport`` values
for callers that prefer a result over an exception.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from paperwork.catalog.schema import ExecutionOutcome


class ErrorKind(str, enum.Enum):
    """Reason an authorization step was refused."""

    GRADE_TOO_HIGH = "grade_too_high"
    GRADE_TOO_LOW = "grade_too_low"
    FORM_NOT_SIGNED = "form_not_signed"
    FORM_NOT_FOUND = "form_not_found"


DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.GRADE_TOO_HIGH: "grade is too high",
    ErrorKind.GRADE_TOO_LOW: "grade is too low",
    ErrorKind.FORM_NOT_SIGNED: "form is not signed",
    ErrorKind.FORM_NOT_FOUND: "form not found",
}


class PaperworkError(Exception):
    """Raised when a grade, form or factory request breaks the rules."""

    def __init__(self, kind: ErrorKind, message: str | None = None) -> None:
        self.kind = kind
        self.message = message or DEFAULT_MESSAGES[kind]
        super().__init__(self.message)

    def __reduce__(self):
        return type(self), (self.kind, self.message)

    def __repr__(self) -> str:
        return f"PaperworkError({self.kind.value!r}, {self.message!r})"


class ActionVerb(str, enum.Enum):
    """Steps a bureaucrat can take on a form."""

    SIGN = "sign"
    EXECUTE = "execute"


@dataclass
class ActionReport:
    """Result of a sign or execute attempt made through a reporting wrapper."""

    action: ActionVerb
    actor_name: str
    form_name: str
    allowed: bool
    reason: str
    error_kind: ErrorKind | None = None
    outcome: ExecutionOutcome | None = None

    @property
    def is_allowed(self) -> bool:
        return self.allowed
