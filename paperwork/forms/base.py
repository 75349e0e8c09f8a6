"""
Base Form — the foundation class for every form in the office.

Every form carries two grade thresholds fixed at construction:

- sign_grade: the largest grade still allowed to sign it
- execute_grade: the largest grade still allowed to execute it

and a signed flag that moves one way only: Unsigned → Signed.

Execution is gated twice. An unsigned form refuses execution before any
grade is looked at; a signed form then checks the executor's grade. Only
when both gates pass does the subclass's ``perform_action`` run.

Signing re-checks the signer's grade on every call. A form that is already
signed still refuses a signer without enough authority, and keeps its
signed flag untouched when it does.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from paperwork.catalog.schema import FORM_SPECS, ExecutionOutcome, FormKind
from paperwork.errors import ErrorKind, PaperworkError
from paperwork.governance.grades import check_grade, meets_threshold

if TYPE_CHECKING:
    from paperwork.governance.actor import Bureaucrat

logger = logging.getLogger(__name__)


class Form(ABC):
    """
    Abstract form with sign and execute gates.

    Subclasses set ``kind`` and implement ``perform_action``.
    """

    kind: ClassVar[FormKind]

    def __init__(self, name: str, sign_grade: int, execute_grade: int) -> None:
        """
        Initialize a form.

        Args:
            name: Display name of the form.
            sign_grade: Largest grade allowed to sign (1..150).
            execute_grade: Largest grade allowed to execute (1..150).

        Raises:
            PaperworkError: GRADE_TOO_HIGH / GRADE_TOO_LOW for a threshold
                outside 1..150.
        """
        self._name = name
        self._sign_grade = check_grade(sign_grade)
        self._execute_grade = check_grade(execute_grade)
        self._signed = False
        self._lock = threading.Lock()

    @classmethod
    def thresholds_for(cls, kind: FormKind) -> tuple[str, int, int]:
        """Name and thresholds the catalog fixes for ``kind``."""
        spec = FORM_SPECS[kind]
        return spec.name, spec.sign_grade, spec.execute_grade

    # ── Read-only state ────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    @property
    def sign_grade(self) -> int:
        return self._sign_grade

    @property
    def execute_grade(self) -> int:
        return self._execute_grade

    @property
    def signed(self) -> bool:
        return self._signed

    # ── Gates ──────────────────────────────────────────────────

    def sign(self, actor: Bureaucrat) -> None:
        """
        Sign the form on behalf of ``actor``.

        Raises:
            PaperworkError: GRADE_TOO_LOW if the actor's grade is above
                ``sign_grade``, whether or not the form is already signed.
        """
        with self._lock:
            if not meets_threshold(actor.grade, self._sign_grade):
                raise PaperworkError(
                    ErrorKind.GRADE_TOO_LOW,
                    f"grade is too low: {actor.name} holds grade {actor.grade}, "
                    f"{self._name} requires {self._sign_grade} to sign",
                )
            already_signed = self._signed
            self._signed = True

        logger.info(
            "Form signed: form='%s' actor=%s grade=%d resigned=%s",
            self._name, actor.name, actor.grade, already_signed,
        )

    def execute(self, actor: Bureaucrat) -> ExecutionOutcome:
        """
        Execute the form on behalf of ``actor``.

        Returns:
            The ExecutionOutcome reported by ``perform_action``.

        Raises:
            PaperworkError: FORM_NOT_SIGNED if the form is unsigned (checked
                first), GRADE_TOO_LOW if the actor's grade is above
                ``execute_grade``.
        """
        with self._lock:
            if not self._signed:
                raise PaperworkError(
                    ErrorKind.FORM_NOT_SIGNED,
                    f"form is not signed: {self._name} must be signed before execution",
                )
            if not meets_threshold(actor.grade, self._execute_grade):
                raise PaperworkError(
                    ErrorKind.GRADE_TOO_LOW,
                    f"grade is too low: {actor.name} holds grade {actor.grade}, "
                    f"{self._name} requires {self._execute_grade} to execute",
                )

        logger.info(
            "Form executing: form='%s' actor=%s grade=%d",
            self._name, actor.name, actor.grade,
        )
        return self.perform_action()

    @abstractmethod
    def perform_action(self) -> ExecutionOutcome:
        """Carry out what the form authorizes. Called only by ``execute``."""

    def __str__(self) -> str:
        return (
            f"{self._name}, signed: {'yes' if self._signed else 'no'}, "
            f"grade required to sign: {self._sign_grade}, "
            f"grade required to execute: {self._execute_grade}"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, signed={self._signed}, "
            f"sign_grade={self._sign_grade}, execute_grade={self._execute_grade})"
        )


class TargetedForm(Form):
    """A catalog form acting on a named target."""

    def __init__(self, target: str) -> None:
        name, sign_grade, execute_grade = self.thresholds_for(self.kind)
        super().__init__(name, sign_grade, execute_grade)
        self._target = target

    @property
    def target(self) -> str:
        return self._target

    def _outcome(self, message: str, succeeded: bool = True, **extra) -> ExecutionOutcome:
        return ExecutionOutcome(
            form_name=self.name,
            kind=self.kind,
            target=self._target,
            succeeded=succeeded,
            message=message,
            **extra,
        )
