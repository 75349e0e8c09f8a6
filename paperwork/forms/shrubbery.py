"""Shrubbery Creation Form — plants ASCII trees at the target."""

from __future__ import annotations

import logging

from paperwork.catalog.schema import ExecutionOutcome, FormKind
from paperwork.forms.base import TargetedForm
from paperwork.integrations.artifacts import ArtifactWriter, FileArtifactWriter

logger = logging.getLogger(__name__)

SHRUBBERY_PATTERN = "\n".join([
    "       ^",
    "      ^^^",
    "     ^^^^^",
    "    ^^^^^^^",
    "   ^^^^^^^^^",
    "  ^^^^^^^^^^^",
    " ^^^^^^^^^^^^^",
    "^^^^^^^^^^^^^^^",
    "       |||",
    "       |||",
    "",
    "      /\\",
    "     /  \\",
    "    /____\\",
    "   /      \\",
    "  /        \\",
    " /__________\\",
    "      ||",
    "      ||",
    "",
    "    🌲🌳🌲",
    "   🌳🌲🌳🌲",
    "  🌲🌳🌲🌳🌲",
    "     |||",
]) + "\n"


class ShrubberyCreationForm(TargetedForm):
    """Sign 145, execute 137. Writes one shrubbery artifact keyed by the target."""

    kind = FormKind.SHRUBBERY_CREATION

    def __init__(self, target: str, artifact_writer: ArtifactWriter | None = None) -> None:
        super().__init__(target)
        if artifact_writer is None:
            artifact_writer = FileArtifactWriter()
        self.artifact_writer = artifact_writer

    def perform_action(self) -> ExecutionOutcome:
        # Writer errors propagate as-is
        self.artifact_writer.write(self.target, SHRUBBERY_PATTERN)
        logger.info("Shrubbery planted: target=%s", self.target)
        return self._outcome(
            f"Shrubbery has been planted at {self.target}",
            artifact_key=self.target,
        )
