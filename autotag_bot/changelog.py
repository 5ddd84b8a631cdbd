"""Changelog rendering for tag messages and release bodies."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from .models import ChangelogEntry

if TYPE_CHECKING:
    from .github_api import GitHubClient

INITIAL_TAG_MESSAGE = "Initial tag"


def render_changelog(entries: Sequence[ChangelogEntry]) -> str:
    """Render commits as a bullet list, one line per commit.

    Example:
        * fix: handle empty files (octocat)
        * docs: update README
    """
    if not entries:
        return INITIAL_TAG_MESSAGE

    lines: list[str] = []
    for entry in entries:
        line = f"* {entry.message}"
        if entry.author_login:
            line += f" ({entry.author_login})"
        lines.append(line)
    return "\n".join(lines).strip()


def build_changelog(
    client: GitHubClient, from_ref: str | None, to_ref: str | None
) -> str:
    """Build the changelog for the commits in ``from_ref...to_ref``.

    Falls back to "Initial tag" when either end is missing (e.g. the
    repository has no tags yet) or the range holds no commits.

    Raises:
        ChangelogError: If the comparison cannot be fetched.
    """
    if not from_ref or not to_ref:
        return INITIAL_TAG_MESSAGE
    return render_changelog(client.compare_commits(from_ref, to_ref))
