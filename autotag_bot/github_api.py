"""Thin wrapper around the GitHub REST API.

Exposes only the five calls a run needs and converts API and network
failures into the matching autotag-bot error. Nothing is retried.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import requests
from github import Auth, Github, GithubException

from .errors import (
    AutotagError,
    ChangelogError,
    ReferenceCreationError,
    ReleaseCreationError,
    TagCreationError,
    TagFetchError,
)
from .models import (
    ChangelogEntry,
    CreatedReference,
    CreatedRelease,
    CreatedTag,
    TagInfo,
)

TAGS_PAGE_SIZE = 100


@contextmanager
def _api_call(error: type[AutotagError], what: str) -> Iterator[None]:
    try:
        yield
    except (GithubException, requests.RequestException) as exc:
        raise error(f"{what}: {exc}") from exc


class GitHubClient:
    """Access to a single repository through PyGithub.

    Args:
        token: API token (usually the workflow's GITHUB_TOKEN).
        repository: Repository in "owner/name" form.
        api_url: Base URL of the API, for GitHub Enterprise Server.
    """

    def __init__(self, token: str, repository: str, api_url: str | None = None):
        kwargs = {"base_url": api_url} if api_url else {}
        # lazy: no request until the first real call
        self._github = Github(
            auth=Auth.Token(token),
            per_page=TAGS_PAGE_SIZE,
            retry=None,
            lazy=True,
            **kwargs,
        )
        self._repo = self._github.get_repo(repository)

    def list_tags(self) -> list[TagInfo]:
        """Return up to the 100 most recent tags, newest first."""
        with _api_call(TagFetchError, "could not fetch repository tags"):
            page = self._repo.get_tags().get_page(0)
            return [TagInfo(name=tag.name, commit_sha=tag.commit.sha) for tag in page]

    def compare_commits(self, base: str, head: str) -> list[ChangelogEntry]:
        """Return the commits in ``base...head``, oldest first."""
        with _api_call(ChangelogError, "could not generate changelog"):
            comparison = self._repo.compare(base, head)
            entries: list[ChangelogEntry] = []
            for commit in comparison.commits:
                if commit is None:
                    continue
                author = commit.author
                entries.append(
                    ChangelogEntry(
                        message=commit.commit.message,
                        author_login=author.login if author else None,
                    )
                )
            return entries

    def create_tag(self, name: str, message: str, sha: str) -> CreatedTag:
        """Create an annotated tag object pointing at commit ``sha``."""
        with _api_call(TagCreationError, f"could not create tag {name}"):
            tag = self._repo.create_git_tag(
                tag=name, message=message, object=sha, type="commit"
            )
            return CreatedTag(name=tag.tag, sha=tag.sha)

    def create_ref(self, ref: str, sha: str) -> CreatedReference:
        with _api_call(ReferenceCreationError, f"could not create reference {ref}"):
            git_ref = self._repo.create_git_ref(ref=ref, sha=sha)
            return CreatedReference(ref=git_ref.ref, url=git_ref.url)

    def create_release(
        self, tag_name: str, name: str, body: str, prerelease: bool
    ) -> CreatedRelease:
        with _api_call(ReleaseCreationError, f"could not create release {name}"):
            release = self._repo.create_git_release(
                tag=tag_name,
                name=name,
                message=body,
                draft=False,
                prerelease=prerelease,
            )
            return CreatedRelease(url=release.url)
