"""
Form Catalog — Pydantic models and enums for every form the office knows.

These models are the canonical data structures shared by bureaucrats, forms,
the factory and the desk CLI. The catalog is closed: a form kind that is not
listed here cannot be created, signed or executed.

Grades run from 1 (highest authority) to 150 (lowest). A threshold is the
numerically largest grade still allowed to perform the gated step, so a
smaller threshold means a stricter form.
"""

from __future__ import annotations

import enum
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


# ════════════════════════════════════════════════════════════════
# Grade bounds
# ════════════════════════════════════════════════════════════════

HIGHEST_GRADE = 1
LOWEST_GRADE = 150


# ════════════════════════════════════════════════════════════════
# Enumerations
# ════════════════════════════════════════════════════════════════


class FormKind(str, enum.Enum):
    """Form kinds accepted by the factory. Values are the factory keys."""

    SHRUBBERY_CREATION = "shrubbery creation"
    ROBOTOMY_REQUEST = "robotomy request"
    PRESIDENTIAL_PARDON = "presidential pardon"


# ════════════════════════════════════════════════════════════════
# Models
# ════════════════════════════════════════════════════════════════


class FormSpec(BaseModel):
    """Fixed name and grade thresholds of one form kind."""

    model_config = ConfigDict(frozen=True)

    kind: FormKind
    name: str
    sign_grade: int = Field(
        ge=HIGHEST_GRADE, le=LOWEST_GRADE,
        description="Maximum grade (inclusive) allowed to sign",
    )
    execute_grade: int = Field(
        ge=HIGHEST_GRADE, le=LOWEST_GRADE,
        description="Maximum grade (inclusive) allowed to execute",
    )


class ExecutionOutcome(BaseModel):
    """
    What a form reports after its action has been performed.

    A robotomy that fails is still an outcome (``succeeded=False``); only
    authorization problems are raised as errors.
    """

    form_name: str
    kind: FormKind
    target: str
    succeeded: bool = True
    message: str
    artifact_key: str | None = None
    performed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# ════════════════════════════════════════════════════════════════
# Fixed catalog
# ════════════════════════════════════════════════════════════════

FORM_SPECS: dict[FormKind, FormSpec] = {
    FormKind.SHRUBBERY_CREATION: FormSpec(
        kind=FormKind.SHRUBBERY_CREATION,
        name="Shrubbery Creation Form",
        sign_grade=145,
        execute_grade=137,
    ),
    FormKind.ROBOTOMY_REQUEST: FormSpec(
        kind=FormKind.ROBOTOMY_REQUEST,
        name="Robotomy Request Form",
        sign_grade=72,
        execute_grade=45,
    ),
    FormKind.PRESIDENTIAL_PARDON: FormSpec(
        kind=FormKind.PRESIDENTIAL_PARDON,
        name="Presidential Pardon Form",
        sign_grade=25,
        execute_grade=5,
    ),
}
