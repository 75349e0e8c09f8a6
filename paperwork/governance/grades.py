"""Grade validation shared by bureaucrats and forms."""

from __future__ import annotations

from paperwork.catalog.schema import HIGHEST_GRADE, LOWEST_GRADE
from paperwork.errors import ErrorKind, PaperworkError


def check_grade(grade: int) -> int:
    """
    Validate a grade against the 1..150 range.

    Returns:
        The grade unchanged.

    Raises:
        PaperworkError: GRADE_TOO_HIGH below 1, GRADE_TOO_LOW above 150.
        TypeError: If the grade is not an integer.
    """
    # bool is an int subclass; True must not pass as grade 1
    if isinstance(grade, bool) or not isinstance(grade, int):
        raise TypeError(f"Grade must be an integer, got {type(grade).__name__}")

    if grade < HIGHEST_GRADE:
        raise PaperworkError(
            ErrorKind.GRADE_TOO_HIGH,
            f"grade is too high: {grade} is above the highest grade {HIGHEST_GRADE}",
        )
    if grade > LOWEST_GRADE:
        raise PaperworkError(
            ErrorKind.GRADE_TOO_LOW,
            f"grade is too low: {grade} is below the lowest grade {LOWEST_GRADE}",
        )
    return grade


def meets_threshold(grade: int, threshold: int) -> bool:
    """True when ``grade`` carries at least the authority ``threshold`` demands."""
    return grade <= threshold
