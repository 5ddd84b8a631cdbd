"""Tests for autotag_bot.changelog."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from autotag_bot.changelog import INITIAL_TAG_MESSAGE, build_changelog, render_changelog
from autotag_bot.errors import ChangelogError
from autotag_bot.models import ChangelogEntry


class TestRenderChangelog:
    def test_empty_is_initial_tag(self) -> None:
        assert render_changelog([]) == "Initial tag"

    def test_bullets_with_and_without_author(self) -> None:
        entries = [
            ChangelogEntry(message="feat: add thing", author_login="octocat"),
            ChangelogEntry(message="fix: typo"),
        ]
        assert render_changelog(entries) == "* feat: add thing (octocat)\n* fix: typo"

    def test_keeps_api_order(self) -> None:
        entries = [ChangelogEntry(message="first"), ChangelogEntry(message="second")]
        assert render_changelog(entries).splitlines() == ["* first", "* second"]

    def test_strips_trailing_whitespace(self) -> None:
        entries = [ChangelogEntry(message="multi\nline body\n")]
        assert render_changelog(entries) == "* multi\nline body"


class TestBuildChangelog:
    @pytest.mark.parametrize("from_ref,to_ref", [(None, "abc123"), ("v1.0.0", None)])
    def test_missing_endpoint(self, from_ref: str | None, to_ref: str | None) -> None:
        client = MagicMock()

        assert build_changelog(client, from_ref, to_ref) == INITIAL_TAG_MESSAGE
        client.compare_commits.assert_not_called()

    def test_no_commits_in_range(self) -> None:
        client = MagicMock()
        client.compare_commits.return_value = []

        assert build_changelog(client, "v1.0.0", "abc123") == INITIAL_TAG_MESSAGE
        client.compare_commits.assert_called_once_with("v1.0.0", "abc123")

    def test_renders_commits(self) -> None:
        client = MagicMock()
        client.compare_commits.return_value = [
            ChangelogEntry(message="bump version", author_login="dev")
        ]

        assert build_changelog(client, "v1.0.0", "abc123") == "* bump version (dev)"

    def test_propagates_errors(self) -> None:
        client = MagicMock()
        client.compare_commits.side_effect = ChangelogError("could not generate changelog")

        with pytest.raises(ChangelogError):
            build_changelog(client, "v1.0.0", "abc123")
