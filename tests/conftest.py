"""Shared test collaborators: a recording artifact writer and a scripted random source."""

from __future__ import annotations

import pytest


class RecordingArtifactWriter:
    """Keeps every write in memory instead of touching the filesystem."""

    def __init__(self, fail_with: Exception | None = None) -> None:
        self.writes: list[tuple[str, str]] = []
        self.fail_with = fail_with

    def write(self, key: str, content: str) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.writes.append((key, content))


class FixedRandomSource:
    """Replays a fixed sequence of draws, cycling when it runs out."""

    def __init__(self, *draws: bool) -> None:
        self.draws = list(draws) or [True]
        self.calls = 0

    def next_boolean(self) -> bool:
        value = self.draws[self.calls % len(self.draws)]
        self.calls += 1
        return value


@pytest.fixture
def recording_writer() -> RecordingArtifactWriter:
    return RecordingArtifactWriter()


@pytest.fixture
def failing_writer() -> RecordingArtifactWriter:
    return RecordingArtifactWriter(fail_with=OSError("disk full"))


@pytest.fixture
def heads() -> FixedRandomSource:
    return FixedRandomSource(True)


@pytest.fixture
def tails() -> FixedRandomSource:
    return FixedRandomSource(False)
