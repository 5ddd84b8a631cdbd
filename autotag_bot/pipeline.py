"""Tag pipeline: extract → match → resolve → changelog → publish.

This module orchestrates a single autotag-bot run:
1. Extract the version from the source file
2. Stop if the version is all zeros (nothing released yet)
3. Find the latest existing tag for this version
4. Stop if that tag already points at the current commit
5. Work out the next revision and the desired tag name
6. Stop if the matching tag already has the desired name
7. Build a changelog since the latest tag in the repository
8. Create the tag object, its reference and a GitHub release

Every remote call is made in sequence. A failure aborts the run without
undoing earlier calls, so a tag object may be left without a reference.
"""

from __future__ import annotations

from .changelog import build_changelog
from .errors import MissingCommitError
from .github_api import GitHubClient
from .models import ActionInputs, DesiredTag, RunContext, RunOutputs
from .shell import info, step, write_outputs
from .tags import (
    build_tag_pattern,
    find_matching_tag,
    is_already_named,
    points_at_commit,
    resolve_desired_tag,
)
from .versions import extract_version, is_prerelease, is_zero_version


def tag_message(tag_name: str, changelog: str) -> str:
    return f"{tag_name}\n\n{changelog}"


def publish(
    client: GitHubClient,
    version: str,
    desired: DesiredTag,
    changelog: str,
    sha: str,
) -> RunOutputs:
    """Create the tag object, the tag reference and the release.

    The tag object and its reference are two separate API calls. If the
    reference cannot be created the tag object is left behind.

    Returns:
        RunOutputs describing everything that was created.

    Raises:
        TagCreationError, ReferenceCreationError, ReleaseCreationError:
            On the first call that fails.
    """
    step(f"Creating tag {desired.name}")

    tag = client.create_tag(desired.name, tag_message(desired.name, changelog), sha)
    info(f"Created tag [{tag.name}] at [{sha}]")

    ref = client.create_ref(f"refs/tags/{tag.name}", tag.sha)
    info(f"Created reference [{ref.ref}] at [{ref.url}]")

    prerelease = is_prerelease(version)
    release = client.create_release(
        tag_name=desired.name, name=desired.name, body=changelog, prerelease=prerelease
    )
    kind = "prerelease" if prerelease else "release"
    info(f"Created {kind} [{release.url}]")

    return RunOutputs(
        version=version,
        tag_name=desired.name,
        tag_revision=desired.revision,
        tag_sha=tag.sha,
        tag_uri=ref.url,
        release_uri=release.url,
    )


def run_autotag(
    inputs: ActionInputs,
    context: RunContext,
    client: GitHubClient,
    output_path: str | None = None,
) -> RunOutputs:
    """Execute one run and report its step outputs.

    Args:
        inputs: Source file, version pattern and tag format.
        context: Repository and commit the run was triggered for.
        client: API client for ``context.repository``.
        output_path: Where to write step outputs; defaults to $GITHUB_OUTPUT.

    Returns:
        The outputs of the run. Only ``version`` is set when the run
        stopped early because there was nothing to do.
    """
    step("Extracting version")
    version = extract_version(inputs.source_file, inputs.version_pattern)
    outputs = RunOutputs(version=version)
    write_outputs({"version": version}, output_path)
    info(f"Extracted version from {inputs.source_file}: {version}")

    if is_zero_version(version):
        info(f"Nothing to do: version [{version}] is all zeros")
        return outputs

    step("Searching for existing tags")
    pattern = build_tag_pattern(inputs.tag_format, version)
    info(f"Tag pattern: {pattern.pattern}")

    tags = client.list_tags()
    candidate = find_matching_tag(tags, pattern)
    info(f"Matching tag: {candidate.name if candidate else '<none>'}")

    if points_at_commit(candidate, context.sha):
        info(
            f"Nothing to do: tag [{candidate.name}] points to current commit "
            f"[{context.sha}]"
        )
        return outputs

    desired = resolve_desired_tag(inputs.tag_format, version, candidate)
    info(f"Desired tag: {desired.name} (revision {desired.revision})")

    if is_already_named(candidate, desired):
        info(f"Nothing to do: tag [{candidate.name}] already matches desired tag")
        return outputs

    if not context.sha:
        raise MissingCommitError("Can not create new tag as commit SHA is missing")

    step("Generating changelog")
    # Changelog starts at the latest tag overall, not the matching one
    changelog_from = tags[0].name if tags else None
    info(f"Range: [{changelog_from or '<none>'}] to [{context.sha}]")
    changelog = build_changelog(client, changelog_from, context.sha)
    print(changelog)

    outputs = publish(client, version, desired, changelog, context.sha)
    tag_outputs = outputs.as_step_outputs()
    del tag_outputs["version"]
    write_outputs(tag_outputs, output_path)

    print(f"\n{'=' * 60}\nTagged {context.sha} as {desired.name}\n{'=' * 60}")
    return outputs
