"""Console and workflow output helpers.

Progress goes to stdout as plain prints, which the GitHub Actions log
shows as-is. Step outputs go to the file named by $GITHUB_OUTPUT.
"""

from __future__ import annotations

import os
import uuid
from collections.abc import Mapping


def step(msg: str) -> None:
    """Print a visually distinct step header."""
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")


def info(msg: str) -> None:
    print(f"  {msg}")


def _format_output(name: str, value: str) -> str:
    if "\n" not in value:
        return f"{name}={value}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


def write_outputs(outputs: Mapping[str, str], output_path: str | None = None) -> None:
    """Append step outputs to $GITHUB_OUTPUT, or print them when unset.

    Args:
        outputs: Output names and their string values.
        output_path: Explicit output file; defaults to $GITHUB_OUTPUT.
    """
    output_path = output_path or os.environ.get("GITHUB_OUTPUT")
    rendered = "".join(_format_output(name, value) for name, value in outputs.items())
    if not output_path:
        print(rendered, end="")
        return
    with open(output_path, "a") as fh:
        fh.write(rendered)
