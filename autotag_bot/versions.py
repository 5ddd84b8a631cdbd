"""Version extraction and classification.

The version is pulled out of a source file with a user-supplied pattern
and is otherwise treated as an opaque string. semver is only consulted to
decide whether a release should be flagged as a prerelease.
"""

from __future__ import annotations

import re
from pathlib import Path

import semver

from .errors import MissingCaptureGroupError, MissingFileError, PatternNotFoundError

ZERO_VERSIONS = frozenset({"0", "0.0", "0.0.0"})

# (?<name>...) as written for JavaScript/PCRE engines, but not (?<=...), (?<!...)
# or an escaped literal \(?<
_ANGLE_GROUP = re.compile(r"(?<!\\)\(\?<(?![=!])")


def compile_version_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a version pattern in multiline mode.

    Accepts both ``(?P<version>...)`` and ``(?<version>...)`` group syntax.

    Raises:
        PatternNotFoundError: If the pattern is not a valid regex.
    """
    try:
        return re.compile(_ANGLE_GROUP.sub("(?P<", pattern), re.MULTILINE)
    except re.error as exc:
        raise PatternNotFoundError(
            f"Invalid version pattern {pattern!r}: {exc}"
        ) from exc


def extract_version(source_file: str | Path, pattern: str) -> str:
    """Read a file and return the text captured by the ``version`` group.

    Only the first match in the file is considered.

    Raises:
        MissingFileError: If ``source_file`` is not a readable file.
        PatternNotFoundError: If the pattern does not match anywhere.
        MissingCaptureGroupError: If the match has no (or an empty)
            ``version`` group.
    """
    path = Path(source_file)
    if not path.is_file():
        raise MissingFileError(f"Could not find source file: {source_file}")

    try:
        # undecodable bytes become U+FFFD instead of failing the run
        contents = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise MissingFileError(
            f"Could not read source file {source_file}: {exc}"
        ) from exc

    match = compile_version_pattern(pattern).search(contents)
    if not match:
        raise PatternNotFoundError(
            f"Could not find version pattern in source file: {pattern}"
        )
    version = match.groupdict().get("version")
    if not version:
        raise MissingCaptureGroupError(
            f"Could not find named capture group 'version' in pattern: {pattern}"
        )
    return version


def is_zero_version(version: str) -> bool:
    """True for the all-zero versions that mean "not released yet"."""
    return version in ZERO_VERSIONS


def is_prerelease(version: str) -> bool:
    """Decide whether a release for this version is a prerelease.

    Examples:
        "0.4.1" → True (major version zero)
        "2.0.0-beta.1" → True
        "2.0.0" → False
        "2.0" → False (not a full semantic version)
    """
    try:
        parsed = semver.Version.parse(version)
    except ValueError:
        return False
    return parsed.major == 0 or parsed.prerelease is not None
