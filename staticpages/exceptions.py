"""Exceptions raised by :func:`staticpages.builder.build`.

Every failure of a build reaches the caller as a :class:`BuildError`, chained to the underlying exception. Nothing is
retried and nothing is rolled back, so a failed build may leave a partially written output directory behind.
"""

from pathlib import Path


class BuildError(Exception):
    """Base class for every failure surfaced by a build."""


class ConfigurationError(BuildError):
    """The destination or assets directory (or a CLI target) can't be used."""


class PageError(BuildError):
    def __init__(self, path: str | Path, message: str):
        self.path = str(path)
        super().__init__(f"{self.path}: {message}")


class RenderError(PageError):
    """A page's content function or its serialization raised."""


class OutputError(PageError):
    """Creating the directories for a page or writing its file failed."""
