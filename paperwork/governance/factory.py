"""
Form Factory — turns a form key into a freshly built form.

The factory is the only place that knows every form class. Keys are the
``FormKind`` values ("shrubbery creation", "robotomy request",
"presidential pardon"), matched case-sensitively with no aliases. Anything
else, the empty string included, is refused with FORM_NOT_FOUND.

Collaborators given to the factory (artifact writer, random source) are
passed on to the forms that need them. The factory keeps no reference to
the forms it hands out.
"""

from __future__ import annotations

import logging
from typing import Callable

from paperwork.catalog.schema import FormKind
from paperwork.errors import ErrorKind, PaperworkError
from paperwork.forms.base import Form
from paperwork.forms.pardon import PresidentialPardonForm
from paperwork.forms.robotomy import RobotomyRequestForm
from paperwork.forms.shrubbery import ShrubberyCreationForm
from paperwork.integrations.artifacts import ArtifactWriter
from paperwork.integrations.randomness import RandomSource

logger = logging.getLogger(__name__)


class FormFactory:
    """Builds catalog forms by key."""

    def __init__(
        self,
        artifact_writer: ArtifactWriter | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        """
        Initialize the factory.

        Args:
            artifact_writer: Writer handed to shrubbery forms. Defaults to
                the settings-driven file writer chosen by the form itself.
            random_source: Source handed to robotomy forms. Defaults to the
                process-wide source.
        """
        self.artifact_writer = artifact_writer
        self.random_source = random_source
        self._builders = self._builder_table()
        missing = set(FormKind) - set(self._builders)
        if missing:
            raise RuntimeError(
                f"No builder for form kinds: {sorted(k.value for k in missing)}"
            )

    def _builder_table(self) -> dict[FormKind, Callable[[str], Form]]:
        return {
            FormKind.SHRUBBERY_CREATION: self._build_shrubbery,
            FormKind.ROBOTOMY_REQUEST: self._build_robotomy,
            FormKind.PRESIDENTIAL_PARDON: self._build_pardon,
        }

    @staticmethod
    def available_kinds() -> list[str]:
        """Factory keys in catalog order."""
        return [kind.value for kind in FormKind]

    def create(self, kind: FormKind | str, target: str) -> Form:
        """
        Build a new form of ``kind`` aimed at ``target``.

        Raises:
            PaperworkError: FORM_NOT_FOUND for an unknown key.
        """
        form_kind = self._resolve(kind)
        form = self._builders[form_kind](target)
        logger.info("Intern creates %s: target=%s", form_kind.value, target)
        return form

    make_form = create

    def _resolve(self, kind: FormKind | str) -> FormKind:
        if isinstance(kind, FormKind):
            return kind
        if isinstance(kind, str):
            for candidate in FormKind:
                if candidate.value == kind:
                    return candidate

        logger.warning("Form \"%s\" does not exist", kind)
        raise PaperworkError(
            ErrorKind.FORM_NOT_FOUND,
            f"form not found: {kind!r} is not one of {self.available_kinds()}",
        )

    # ── Builders ───────────────────────────────────────────────

    def _build_shrubbery(self, target: str) -> Form:
        return ShrubberyCreationForm(target, artifact_writer=self.artifact_writer)

    def _build_robotomy(self, target: str) -> Form:
        return RobotomyRequestForm(target, random_source=self.random_source)

    def _build_pardon(self, target: str) -> Form:
        return PresidentialPardonForm(target)


Intern = FormFactory
