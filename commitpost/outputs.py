"""Reporting of run results.

Inside GitHub Actions, outputs are appended to the $GITHUB_OUTPUT file and a
markdown job summary to $GITHUB_STEP_SUMMARY. Elsewhere the CLI prints them.
"""

import uuid
from pathlib import Path
from typing import Mapping, Optional

from commitpost.pipeline import PipelineResult


def in_github_actions(environ: Mapping[str, str]) -> bool:
    return environ.get("GITHUB_ACTIONS") == "true"


def result_outputs(result: PipelineResult) -> dict[str, str]:
    """Output names and values reported for a run."""
    return {
        "generated-post": result.generated_post,
        "post-id": result.post_id,
        "post-url": result.post_url,
        "community-id": result.community_id,
    }


def _escape_command_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def workflow_command(command: str, message: str) -> str:
    """Format a workflow command line such as ``::notice::message``."""
    return f"::{command}::{_escape_command_data(message)}"


def format_output(name: str, value: str) -> str:
    """Format one entry for the $GITHUB_OUTPUT file.

    Multi-line values use the heredoc form with a random delimiter.
    """
    if "\n" not in value and "\r" not in value:
        return f"{name}={value}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


def write_outputs(result: PipelineResult, output_file: Path) -> None:
    """Append all result outputs to the Actions output file."""
    with open(output_file, "a", encoding="utf-8") as f:
        for name, value in result_outputs(result).items():
            f.write(format_output(name, value))


def render_job_summary(result: PipelineResult) -> str:
    """Markdown shown on the workflow run page after a post is published."""
    footer = (
        f"Posted at {result.post_url}"
        if result.post_url
        else "Publication succeeded without a retrievable URL."
    )
    return f"## AI generated X post\n{result.generated_post}\n{footer}\n"


def write_job_summary(result: PipelineResult, summary_file: Path) -> None:
    with open(summary_file, "a", encoding="utf-8") as f:
        f.write(render_job_summary(result))


def skip_message(result: PipelineResult) -> str:
    return f"No commits found between {result.from_id} and {result.to_id}. Skipping X post."


def report_result(result: PipelineResult, environ: Mapping[str, str]) -> list[str]:
    """Write the result to the Actions files that are configured.

    Args:
        result: The finished run.
        environ: Environment holding GITHUB_OUTPUT / GITHUB_STEP_SUMMARY.

    Returns:
        Lines the caller should print, e.g. workflow commands.
    """
    lines: list[str] = []
    output_file: Optional[str] = environ.get("GITHUB_OUTPUT")
    summary_file: Optional[str] = environ.get("GITHUB_STEP_SUMMARY")

    if output_file:
        write_outputs(result, Path(output_file))

    if result.skipped:
        if in_github_actions(environ):
            lines.append(workflow_command("notice", skip_message(result)))
        return lines

    if summary_file:
        write_job_summary(result, Path(summary_file))

    return lines
