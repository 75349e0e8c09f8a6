"""
Bureaucrat — a named actor holding a clearance grade.

Grade 1 is the highest authority and 150 the lowest. Promotion
(``increment_grade``) makes the number smaller; demotion
(``decrement_grade``) makes it larger. Every change is re-validated and a
refused change leaves the grade as it was.

A bureaucrat signs and executes forms by delegating to the form. The plain
``sign`` / ``execute`` calls let every ``PaperworkError`` through to the
caller. The ``sign_form`` / ``execute_form`` wrappers report refusals as
``ActionReport`` values and log them instead.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from paperwork.catalog.schema import HIGHEST_GRADE, LOWEST_GRADE
from paperwork.errors import ActionReport, ActionVerb, ErrorKind, PaperworkError
from paperwork.governance.grades import check_grade

if TYPE_CHECKING:
    from paperwork.catalog.schema import ExecutionOutcome
    from paperwork.forms.base import Form

logger = logging.getLogger(__name__)


class Bureaucrat:
    """A named actor with a grade in 1..150."""

    def __init__(self, name: str, grade: int) -> None:
        """
        Initialize a bureaucrat.

        Raises:
            PaperworkError: GRADE_TOO_HIGH for a grade below 1,
                GRADE_TOO_LOW for a grade above 150.
        """
        self._name = name
        self._grade = check_grade(grade)
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def grade(self) -> int:
        return self._grade

    def increment_grade(self) -> int:
        """Promote by one step (grade - 1). Returns the new grade."""
        with self._lock:
            new_grade = self._grade - 1
            if new_grade < HIGHEST_GRADE:
                raise PaperworkError(
                    ErrorKind.GRADE_TOO_HIGH,
                    f"grade is too high: {self._name} is already at grade {self._grade}",
                )
            self._grade = new_grade
        logger.info("Grade incremented: %s now grade %d", self._name, self._grade)
        return self._grade

    def decrement_grade(self) -> int:
        """Demote by one step (grade + 1). Returns the new grade."""
        with self._lock:
            new_grade = self._grade + 1
            if new_grade > LOWEST_GRADE:
                raise PaperworkError(
                    ErrorKind.GRADE_TOO_LOW,
                    f"grade is too low: {self._name} is already at grade {self._grade}",
                )
            self._grade = new_grade
        logger.info("Grade decremented: %s now grade %d", self._name, self._grade)
        return self._grade

    # ── Delegation to forms ────────────────────────────────────

    def sign(self, form: Form) -> None:
        """Sign ``form``. Errors propagate unchanged."""
        form.sign(self)

    def execute(self, form: Form) -> ExecutionOutcome:
        """Execute ``form``. Errors propagate unchanged."""
        return form.execute(self)

    def sign_form(self, form: Form) -> ActionReport:
        """Sign ``form`` and report the result instead of raising."""
        try:
            self.sign(form)
        except PaperworkError as e:
            logger.warning("%s couldn't sign %s because %s", self._name, form.name, e.message)
            return ActionReport(
                action=ActionVerb.SIGN,
                actor_name=self._name,
                form_name=form.name,
                allowed=False,
                reason=e.message,
                error_kind=e.kind,
            )

        logger.info("%s signed %s", self._name, form.name)
        return ActionReport(
            action=ActionVerb.SIGN,
            actor_name=self._name,
            form_name=form.name,
            allowed=True,
            reason=f"{self._name} signed {form.name}",
        )

    def execute_form(self, form: Form) -> ActionReport:
        """
        Execute ``form`` and report the result instead of raising.

        Only ``PaperworkError`` is turned into a refusal; a failing
        collaborator (for example an artifact writer) still raises.
        """
        try:
            outcome = self.execute(form)
        except PaperworkError as e:
            logger.warning("%s couldn't execute %s because %s", self._name, form.name, e.message)
            return ActionReport(
                action=ActionVerb.EXECUTE,
                actor_name=self._name,
                form_name=form.name,
                allowed=False,
                reason=e.message,
                error_kind=e.kind,
            )

        logger.info("%s executed %s", self._name, form.name)
        return ActionReport(
            action=ActionVerb.EXECUTE,
            actor_name=self._name,
            form_name=form.name,
            allowed=True,
            reason=outcome.message,
            outcome=outcome,
        )

    def __str__(self) -> str:
        return f"{self._name}, bureaucrat grade {self._grade}."

    def __repr__(self) -> str:
        return f"Bureaucrat(name={self._name!r}, grade={self._grade})"


Actor = Bureaucrat
