"""Robotomy Request Form — a coin toss decides whether the robotomy works."""

from __future__ import annotations

import logging

from paperwork.catalog.schema import ExecutionOutcome, FormKind
from paperwork.forms.base import TargetedForm
from paperwork.integrations.randomness import RandomSource, default_random_source

logger = logging.getLogger(__name__)

DRILLING_NOISE = "* DRILLING NOISES * BZZZZZZT * WHIRRRRR * CLANK *"


class RobotomyRequestForm(TargetedForm):
    """
    Sign 72, execute 45.

    Each execution draws one boolean from the injected random source. A
    failed robotomy is reported in the outcome, not raised.
    """

    kind = FormKind.ROBOTOMY_REQUEST

    def __init__(self, target: str, random_source: RandomSource | None = None) -> None:
        super().__init__(target)
        if random_source is None:
            random_source = default_random_source()
        self.random_source = random_source

    def perform_action(self) -> ExecutionOutcome:
        logger.info(DRILLING_NOISE)
        if self.random_source.next_boolean():
            logger.info("Robotomy succeeded: target=%s", self.target)
            return self._outcome(f"{self.target} has been robotomized successfully!")

        logger.info("Robotomy failed: target=%s", self.target)
        return self._outcome(f"Robotomy of {self.target} has failed!", succeeded=False)
