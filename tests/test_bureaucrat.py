"""
Tests for bureaucrats and grade validation.

Validates:
- Grade range 1..150 at construction
- Promotion and demotion bounds
- Delegation of sign / execute to forms
- Reporting wrappers that return ActionReport instead of raising
"""

from __future__ import annotations

import pytest

from paperwork.errors import ActionVerb, ErrorKind, PaperworkError
from paperwork.forms.pardon import PresidentialPardonForm
from paperwork.forms.shrubbery import ShrubberyCreationForm
from paperwork.governance.actor import Actor, Bureaucrat
from paperwork.governance.grades import check_grade, meets_threshold


class TestCheckGrade:
    """Test the shared grade validator."""

    @pytest.mark.parametrize("grade", [1, 2, 75, 149, 150])
    def test_valid_grades_pass_through(self, grade):
        assert check_grade(grade) == grade

    @pytest.mark.parametrize("grade", [0, -1, -150])
    def test_below_one_is_too_high(self, grade):
        with pytest.raises(PaperworkError) as exc_info:
            check_grade(grade)
        assert exc_info.value.kind == ErrorKind.GRADE_TOO_HIGH

    @pytest.mark.parametrize("grade", [151, 1000])
    def test_above_150_is_too_low(self, grade):
        with pytest.raises(PaperworkError) as exc_info:
            check_grade(grade)
        assert exc_info.value.kind == ErrorKind.GRADE_TOO_LOW

    def test_non_integer_rejected(self):
        with pytest.raises(TypeError):
            check_grade("5")
        with pytest.raises(TypeError):
            check_grade(True)

    def test_meets_threshold_is_inclusive(self):
        assert meets_threshold(45, 45)
        assert meets_threshold(1, 45)
        assert not meets_threshold(46, 45)


class TestBureaucratConstruction:
    """Test building bureaucrats."""

    def test_valid_bureaucrat(self):
        b = Bureaucrat("Alice", 30)
        assert b.name == "Alice"
        assert b.grade == 30

    def test_grade_zero_too_high(self):
        with pytest.raises(PaperworkError) as exc_info:
            Bureaucrat("Zero", 0)
        assert exc_info.value.kind == ErrorKind.GRADE_TOO_HIGH

    def test_grade_151_too_low(self):
        with pytest.raises(PaperworkError) as exc_info:
            Bureaucrat("Intern", 151)
        assert exc_info.value.kind == ErrorKind.GRADE_TOO_LOW

    def test_actor_alias(self):
        assert Actor is Bureaucrat

    def test_str(self):
        assert str(Bureaucrat("Alice", 30)) == "Alice, bureaucrat grade 30."

    def test_grade_is_read_only(self):
        b = Bureaucrat("Alice", 30)
        with pytest.raises(AttributeError):
            b.grade = 1


class TestGradeChanges:
    """Test promotion (increment) and demotion (decrement)."""

    def test_increment_lowers_number(self):
        b = Bureaucrat("Alice", 30)
        assert b.increment_grade() == 29
        assert b.grade == 29

    def test_decrement_raises_number(self):
        b = Bureaucrat("Alice", 30)
        assert b.decrement_grade() == 31
        assert b.grade == 31

    def test_increment_at_top_fails(self):
        b = Bureaucrat("Top", 1)
        with pytest.raises(PaperworkError) as exc_info:
            b.increment_grade()
        assert exc_info.value.kind == ErrorKind.GRADE_TOO_HIGH
        assert b.grade == 1

    def test_decrement_at_bottom_fails(self):
        b = Bureaucrat("Bottom", 150)
        with pytest.raises(PaperworkError) as exc_info:
            b.decrement_grade()
        assert exc_info.value.kind == ErrorKind.GRADE_TOO_LOW
        assert b.grade == 150

    def test_climb_to_top(self):
        b = Bureaucrat("Climber", 3)
        b.increment_grade()
        b.increment_grade()
        assert b.grade == 1
        with pytest.raises(PaperworkError):
            b.increment_grade()


class TestDelegation:
    """Test that bureaucrats pass sign / execute through to the form."""

    def test_sign_sets_flag(self):
        form = PresidentialPardonForm("Ford")
        Bureaucrat("Zaphod", 1).sign(form)
        assert form.signed

    def test_sign_error_propagates(self):
        form = PresidentialPardonForm("Ford")
        with pytest.raises(PaperworkError) as exc_info:
            Bureaucrat("Bob", 100).sign(form)
        assert exc_info.value.kind == ErrorKind.GRADE_TOO_LOW

    def test_execute_returns_outcome(self):
        form = PresidentialPardonForm("Ford")
        zaphod = Bureaucrat("Zaphod", 1)
        zaphod.sign(form)
        outcome = zaphod.execute(form)
        assert outcome.message == "Ford has been pardoned by Zaphod Beeblebrox."


class TestReportingWrappers:
    """Test sign_form / execute_form, which report instead of raising."""

    def test_sign_form_allowed(self):
        form = PresidentialPardonForm("Ford")
        report = Bureaucrat("Zaphod", 1).sign_form(form)
        assert report.is_allowed
        assert report.action == ActionVerb.SIGN
        assert report.error_kind is None
        assert form.signed

    def test_sign_form_refused(self):
        form = PresidentialPardonForm("Ford")
        report = Bureaucrat("Bob", 100).sign_form(form)
        assert not report.is_allowed
        assert report.error_kind == ErrorKind.GRADE_TOO_LOW
        assert report.reason.startswith("grade is too low")
        assert not form.signed

    def test_execute_form_unsigned(self):
        form = PresidentialPardonForm("Ford")
        report = Bureaucrat("Zaphod", 1).execute_form(form)
        assert not report.is_allowed
        assert report.action == ActionVerb.EXECUTE
        assert report.error_kind == ErrorKind.FORM_NOT_SIGNED
        assert report.outcome is None

    def test_execute_form_allowed_carries_outcome(self):
        form = PresidentialPardonForm("Ford")
        zaphod = Bureaucrat("Zaphod", 1)
        zaphod.sign_form(form)
        report = zaphod.execute_form(form)
        assert report.is_allowed
        assert report.outcome is not None
        assert report.reason == report.outcome.message

    def test_execute_form_lets_collaborator_errors_through(self, failing_writer):
        form = ShrubberyCreationForm("garden", artifact_writer=failing_writer)
        dave = Bureaucrat("Dave", 1)
        dave.sign(form)
        with pytest.raises(OSError):
            dave.execute_form(form)
