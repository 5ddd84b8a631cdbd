"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from autotag_bot.github_api import GitHubClient
from autotag_bot.models import (
    ActionInputs,
    CreatedReference,
    CreatedRelease,
    CreatedTag,
)

VERSION_PATTERN = r'"version"\s*:\s*"(?<version>[0-9.]+)"'


@pytest.fixture
def package_json(tmp_path: Path) -> Path:
    """Create a package.json declaring version 2.3.0."""
    path = tmp_path / "package.json"
    path.write_text('{\n  "name": "demo",\n  "version": "2.3.0"\n}\n')
    return path


@pytest.fixture
def inputs(package_json: Path) -> ActionInputs:
    return ActionInputs(
        api_token="token",
        source_file=str(package_json),
        version_pattern=VERSION_PATTERN,
        tag_format="v{version}",
    )


@pytest.fixture
def output_file(tmp_path: Path) -> Path:
    """Empty file standing in for $GITHUB_OUTPUT."""
    path = tmp_path / "github_output"
    path.write_text("")
    return path


@pytest.fixture
def client() -> MagicMock:
    """A GitHubClient double with no tags and successful create calls."""
    mock = MagicMock(spec=GitHubClient)
    mock.list_tags.return_value = []
    mock.compare_commits.return_value = []
    mock.create_tag.side_effect = lambda name, message, sha: CreatedTag(
        name=name, sha="tagsha1"
    )
    mock.create_ref.side_effect = lambda ref, sha: CreatedReference(
        ref=ref, url=f"https://api.github.com/repos/o/r/git/{ref}"
    )
    mock.create_release.side_effect = lambda **kwargs: CreatedRelease(
        url=f"https://api.github.com/repos/o/r/releases/{kwargs['name']}"
    )
    return mock
