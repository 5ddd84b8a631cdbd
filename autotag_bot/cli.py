"""CLI entry point for autotag-bot."""

from __future__ import annotations

import click
from tomlkit.exceptions import ParseError

from autotag_bot.errors import AutotagError
from autotag_bot.github_api import GitHubClient
from autotag_bot.models import DEFAULT_TAG_FORMAT, ActionInputs, RunContext
from autotag_bot.pipeline import run_autotag
from autotag_bot.toml import load_defaults


@click.group()
@click.version_option(package_name="autotag-bot")
def cli() -> None:
    """Tag and release commits from the version in a source file."""


@cli.command()
@click.option(
    "--api-token",
    envvar=["INPUT_API_TOKEN", "GITHUB_TOKEN"],
    help="Token for the GitHub API. [env: INPUT_API_TOKEN, GITHUB_TOKEN]",
)
@click.option(
    "--source-file",
    envvar="INPUT_SOURCE_FILE",
    help="File to read the version from. [env: INPUT_SOURCE_FILE]",
)
@click.option(
    "--version-pattern",
    envvar="INPUT_VERSION_PATTERN",
    help="Regex with a named group 'version'. [env: INPUT_VERSION_PATTERN]",
)
@click.option(
    "--tag-format",
    envvar="INPUT_TAG_FORMAT",
    help="Tag name template using {version} and {revision}. "
    f"[default: {DEFAULT_TAG_FORMAT}] [env: INPUT_TAG_FORMAT]",
)
@click.option(
    "--repository",
    envvar="GITHUB_REPOSITORY",
    required=True,
    help="Repository as owner/name. [env: GITHUB_REPOSITORY]",
)
@click.option(
    "--sha",
    envvar="GITHUB_SHA",
    help="Commit to tag. [env: GITHUB_SHA]",
)
@click.option(
    "--api-url",
    envvar="GITHUB_API_URL",
    help="GitHub API base URL. [env: GITHUB_API_URL]",
)
@click.option(
    "--github-output",
    envvar="GITHUB_OUTPUT",
    type=click.Path(dir_okay=False),
    help="File to append step outputs to. [env: GITHUB_OUTPUT]",
)
def run(
    api_token: str | None,
    source_file: str | None,
    version_pattern: str | None,
    tag_format: str | None,
    repository: str,
    sha: str | None,
    api_url: str | None,
    github_output: str | None,
) -> None:
    """Tag the current commit if its version has no tag yet (usually called from CI).

    Options not given on the command line or in the environment are read
    from [tool.autotag] in ./pyproject.toml.
    """
    defaults: dict[str, str] = {}
    if not (source_file and version_pattern and tag_format):
        try:
            defaults = load_defaults()
        except ParseError as exc:
            raise click.ClickException(f"Invalid pyproject.toml: {exc}") from exc
    source_file = source_file or defaults.get("source_file")
    version_pattern = version_pattern or defaults.get("version_pattern")
    tag_format = tag_format or defaults.get("tag_format") or DEFAULT_TAG_FORMAT

    for name, value in (
        ("--api-token", api_token),
        ("--source-file", source_file),
        ("--version-pattern", version_pattern),
    ):
        if not value:
            raise click.UsageError(f"Missing option '{name}'.")

    inputs = ActionInputs(
        api_token=api_token,
        source_file=source_file,
        version_pattern=version_pattern,
        tag_format=tag_format,
    )
    context = RunContext(repository=repository, sha=sha)

    try:
        client = GitHubClient(inputs.api_token, context.repository, api_url=api_url)
        run_autotag(inputs, context, client, output_path=github_output)
    except AutotagError as exc:
        raise click.ClickException(str(exc)) from exc
