"""Tag matching and revision resolution.

Tag names are produced from a template such as ``v{version}`` or
``v{version}-{revision}``. The same template is turned into an anchored
pattern that recognises tags already created for the current version.
Matching is case-insensitive and ignores surrounding whitespace.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .models import DesiredTag, TagCandidate, TagInfo

VERSION_PLACEHOLDER = "{version}"
REVISION_PLACEHOLDER = "{revision}"

_PLACEHOLDERS = re.compile(r"(\{version\}|\{revision\})")


def has_revision(tag_format: str) -> bool:
    return REVISION_PLACEHOLDER in tag_format


def build_tag_pattern(tag_format: str, version: str) -> re.Pattern[str]:
    """Build the anchored pattern matching tags for ``version``.

    Literal parts of the template and the version itself are escaped, so
    characters like ``.`` or ``+`` only match themselves. The first
    ``{revision}`` captures a decimal group named ``revision``; any later
    ones must repeat the same digits.

    Examples:
        ("v{version}", "1.0.0") → ^v1\\.0\\.0$
        ("v{version}-{revision}", "1.0.0") → ^v1\\.0\\.0\\-(?P<revision>[0-9]+)$
    """
    parts: list[str] = []
    revision_seen = False
    for segment in _PLACEHOLDERS.split(tag_format):
        if segment == VERSION_PLACEHOLDER:
            parts.append(re.escape(version.lower()))
        elif segment == REVISION_PLACEHOLDER:
            parts.append("(?P=revision)" if revision_seen else "(?P<revision>[0-9]+)")
            revision_seen = True
        elif segment:
            parts.append(re.escape(segment.lower()))
    return re.compile("^" + "".join(parts) + "$")


def find_matching_tag(
    tags: Iterable[TagInfo], pattern: re.Pattern[str]
) -> TagCandidate | None:
    """Return the first tag whose normalized name matches ``pattern``.

    Tags are searched in the order given. The GitHub tags endpoint lists
    the most recent tags first, so the first hit is the latest one for the
    current version.
    """
    for tag in tags:
        match = pattern.match(tag.name.strip().lower())
        if not match:
            continue
        revision = None
        if "revision" in pattern.groupindex:
            revision = int(match.group("revision"))
        return TagCandidate(name=tag.name, commit_sha=tag.commit_sha, revision=revision)
    return None


def render_tag_name(tag_format: str, version: str, revision: int) -> str:
    """Substitute the placeholders of the template, keeping its case."""
    return tag_format.replace(VERSION_PLACEHOLDER, version).replace(
        REVISION_PLACEHOLDER, str(revision)
    )


def next_revision(tag_format: str, candidate: TagCandidate | None) -> int:
    """Return the revision the new tag should carry.

    Starts at 1 and only counts up when the template has a ``{revision}``
    placeholder and the matching tag carried one.
    """
    if candidate is None or not has_revision(tag_format) or candidate.revision is None:
        return 1
    return candidate.revision + 1


def resolve_desired_tag(
    tag_format: str, version: str, candidate: TagCandidate | None
) -> DesiredTag:
    revision = next_revision(tag_format, candidate)
    return DesiredTag(name=render_tag_name(tag_format, version, revision), revision=revision)


def points_at_commit(candidate: TagCandidate | None, sha: str | None) -> bool:
    """True when the matching tag already tags the current commit."""
    return candidate is not None and bool(sha) and candidate.commit_sha == sha


def is_already_named(candidate: TagCandidate | None, desired: DesiredTag) -> bool:
    """True when the matching tag already carries the desired name."""
    return candidate is not None and candidate.name == desired.name
