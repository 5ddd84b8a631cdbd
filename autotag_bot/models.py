"""Data models for autotag-bot.

These Pydantic models carry the values threaded through a single run:
the action inputs, the execution context, the tags seen on the remote
and the outputs reported back to the workflow.
"""

from __future__ import annotations

from pydantic import BaseModel

DEFAULT_TAG_FORMAT = "{version}"


class ActionInputs(BaseModel):
    """User-supplied configuration for one run.

    Attributes:
        api_token: Token used to authenticate against the GitHub API.
        source_file: Path of the file holding the version string.
        version_pattern: Regex with a named group called ``version``.
        tag_format: Template for the tag and release name. Must contain
                    ``{version}`` and may contain ``{revision}``.
    """

    api_token: str
    source_file: str
    version_pattern: str
    tag_format: str = DEFAULT_TAG_FORMAT


class RunContext(BaseModel):
    """The repository and commit the workflow was triggered for."""

    repository: str
    sha: str | None = None


class TagInfo(BaseModel):
    """A tag as listed by the GitHub API."""

    name: str
    commit_sha: str


class TagCandidate(BaseModel):
    """An existing tag whose name matched the tag pattern.

    Attributes:
        name: Tag name exactly as returned by the API (not normalized).
        commit_sha: Commit the tag points at.
        revision: Revision captured from the name. Only set when the tag
                  format contains ``{revision}``.
    """

    name: str
    commit_sha: str
    revision: int | None = None


class DesiredTag(BaseModel):
    name: str
    revision: int


class ChangelogEntry(BaseModel):
    message: str
    author_login: str | None = None


class RunOutputs(BaseModel):
    """Values reported as step outputs.

    Only ``version`` is always set; the tag fields stay ``None`` unless a
    tag and release were created.
    """

    version: str
    tag_name: str | None = None
    tag_revision: int | None = None
    tag_sha: str | None = None
    tag_uri: str | None = None
    release_uri: str | None = None

    def as_step_outputs(self) -> dict[str, str]:
        """Render every output as a string, empty when unset."""
        return {
            name: "" if value is None else str(value)
            for name, value in self.model_dump().items()
        }


class CreatedTag(BaseModel):
    """An annotated tag object created through the API."""

    name: str
    sha: str


class CreatedReference(BaseModel):
    ref: str
    url: str


class CreatedRelease(BaseModel):
    url: str
