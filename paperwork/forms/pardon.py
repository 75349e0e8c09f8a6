"""Presidential Pardon Form."""

from __future__ import annotations

import logging

from paperwork.catalog.schema import ExecutionOutcome, FormKind
from paperwork.forms.base import TargetedForm

logger = logging.getLogger(__name__)


class PresidentialPardonForm(TargetedForm):
    """Sign 25, execute 5. Always pardons the target."""

    kind = FormKind.PRESIDENTIAL_PARDON

    def perform_action(self) -> ExecutionOutcome:
        logger.info("Pardon granted: target=%s", self.target)
        return self._outcome(f"{self.target} has been pardoned by Zaphod Beeblebrox.")
