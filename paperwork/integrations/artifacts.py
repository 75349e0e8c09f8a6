"""
Artifact writers — where shrubbery forms put what they plant.

A writer receives a key derived from the form's target and the textual
content to persist. Failures are raised to the form, which lets them
propagate to whoever executed it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from paperwork.config import settings

logger = logging.getLogger(__name__)


class ArtifactWriter(Protocol):
    """Persists a textual artifact under a key."""

    def write(self, key: str, content: str) -> object:
        """Persist ``content`` under ``key``. Raises on failure; the return value is unused."""


class FileArtifactWriter:
    """
    Writes each artifact to ``<directory>/<key><suffix>``.

    An existing file with the same name is overwritten.
    """

    def __init__(self, directory: str | Path | None = None, suffix: str | None = None) -> None:
        self.directory = Path(directory if directory is not None else settings.artifact_dir)
        self.suffix = settings.artifact_suffix if suffix is None else suffix

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}{self.suffix}"

    def write(self, key: str, content: str) -> Path:
        path = self.path_for(key)
        path.write_text(content, encoding="utf-8")
        logger.info("Artifact written: key=%s path=%s bytes=%d", key, path, len(content))
        return path
