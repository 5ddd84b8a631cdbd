"""Errors raised by autotag-bot.

Every error is terminal: the run stops where it is raised and nothing
created before that point is cleaned up.
"""

from __future__ import annotations


class AutotagError(Exception):
    """Base class for all failures of a run."""


class MissingFileError(AutotagError):
    """The source file does not exist."""


class PatternNotFoundError(AutotagError):
    """The version pattern is invalid or does not match the source file."""


class MissingCaptureGroupError(AutotagError):
    """The pattern matched but yielded no ``version`` group."""


class TagFetchError(AutotagError):
    """Listing the repository tags failed."""


class ChangelogError(AutotagError):
    """Comparing commits for the changelog failed."""


class MissingCommitError(AutotagError):
    """No commit SHA is available to tag."""


class TagCreationError(AutotagError):
    """Creating the annotated tag object failed."""


class ReferenceCreationError(AutotagError):
    """Creating the ``refs/tags/<name>`` reference failed."""


class ReleaseCreationError(AutotagError):
    """Creating the GitHub release failed."""
