"""Main CLI command: generate and publish a post for a commit range."""

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

import typer

from commitpost import __version__
from commitpost.config import ConfigError, load_config_file, load_settings
from commitpost.git import GitCommitSource, GitError
from commitpost.llm import LLMError, get_provider
from commitpost.outputs import in_github_actions, report_result, result_outputs, workflow_command
from commitpost.pipeline import PostPipeline
from commitpost.publish import PublishError, XPublisher


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )


def _report_error(message: str) -> None:
    typer.echo(message, err=True)
    if in_github_actions(os.environ):
        typer.echo(workflow_command("error", message))


def main_command(
    from_ref: Optional[str] = typer.Option(
        None,
        "--from",
        envvar="INPUT_FROM",
        help="Start of the commit range (excluded unless --include-start-commit)",
    ),
    to_ref: Optional[str] = typer.Option(
        None,
        "--to",
        envvar="INPUT_TO",
        help="End of the commit range (default: HEAD)",
    ),
    include_start_commit: Optional[bool] = typer.Option(
        None,
        "--include-start-commit/--exclude-start-commit",
        envvar="INPUT_INCLUDE_START_COMMIT",
        help="Also summarize the start commit",
    ),
    paths: Optional[List[str]] = typer.Option(
        None,
        "--path",
        "-p",
        envvar="INPUT_PATHS",
        help="Limit diffs to this path (repeatable)",
    ),
    max_diff_chars: Optional[str] = typer.Option(
        None,
        "--max-diff-chars",
        envvar="INPUT_MAX_DIFF_CHARS",
        help="Maximum diff characters per commit, 0 for unlimited (default: 2000)",
    ),
    max_output_tokens: Optional[str] = typer.Option(
        None,
        "--max-output-tokens",
        envvar="INPUT_MAX_OUTPUT_TOKENS",
        help="Maximum tokens the model may generate (default: 400)",
    ),
    temperature: Optional[str] = typer.Option(
        None,
        "--temperature",
        envvar="INPUT_TEMPERATURE",
        help="Sampling temperature between 0 and 2 (default: 0.2)",
    ),
    provider: Optional[str] = typer.Option(
        None,
        "--provider",
        envvar="INPUT_PROVIDER",
        help="Completion endpoint (github-models, openai, openrouter)",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        envvar="INPUT_MODEL",
        help="Model identifier (default: openai/gpt-4o-mini)",
    ),
    system_prompt: Optional[str] = typer.Option(
        None,
        "--system-prompt",
        envvar="INPUT_SYSTEM_PROMPT",
        help="Replace the default copywriter persona",
    ),
    extra_instructions: Optional[str] = typer.Option(
        None,
        "--extra-instructions",
        envvar="INPUT_EXTRA_INSTRUCTIONS",
        help="Instructions appended after the commit context",
    ),
    prompt: Optional[str] = typer.Option(
        None,
        "--prompt",
        envvar="INPUT_PROMPT",
        help="Full prompt override; skips automatic prompt composition",
    ),
    tone: Optional[str] = typer.Option(
        None,
        "--tone",
        envvar="INPUT_TONE",
        help="Tone of voice, e.g. playful",
    ),
    call_to_action: Optional[str] = typer.Option(
        None,
        "--call-to-action",
        envvar="INPUT_CALL_TO_ACTION",
        help="Closing line the post should end with",
    ),
    community: Optional[str] = typer.Option(
        None,
        "--community",
        envvar="INPUT_COMMUNITY",
        help="X community id to post into (default: main timeline)",
    ),
    hashtags: Optional[str] = typer.Option(
        None,
        "--hashtags",
        envvar="INPUT_HASHTAGS",
        help="Comma or space separated hashtags",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML file with default values for the options above",
    ),
    repo: Optional[Path] = typer.Option(
        None,
        "--repo",
        help="Repository to read commits from (default: current directory)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output, including every git command",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
    ),
) -> None:
    """Summarize a commit range into an AI-written X post and publish it."""
    if version:
        typer.echo(f"commitpost {__version__}")
        raise typer.Exit(0)

    _configure_logging(verbose)

    cli_values = {
        "from": from_ref,
        "to": to_ref,
        "include_start_commit": include_start_commit,
        "paths": paths,
        "max_diff_chars": max_diff_chars,
        "max_output_tokens": max_output_tokens,
        "temperature": temperature,
        "provider": provider,
        "model": model,
        "system_prompt": system_prompt,
        "extra_instructions": extra_instructions,
        "prompt": prompt,
        "tone": tone,
        "call_to_action": call_to_action,
        "community": community,
        "hashtags": hashtags,
    }

    try:
        # Step 1: Merge config file values with CLI options and validate
        values = load_config_file(config_file) if config_file else {}
        values.update(
            {name: value for name, value in cli_values.items() if value not in (None, [])}
        )
        settings = load_settings(values, os.environ)

        # Step 2: Run the pipeline
        pipeline = PostPipeline(
            settings=settings,
            commit_source=GitCommitSource(repo),
            provider=get_provider(settings),
            publisher=XPublisher(settings.x_bearer_token),
        )
        result = pipeline.run()

    except ConfigError as e:
        _report_error(f"Error: {e}")
        raise typer.Exit(1)
    except GitError as e:
        _report_error(f"Git error: {e}")
        raise typer.Exit(1)
    except LLMError as e:
        _report_error(f"LLM error: {e}")
        raise typer.Exit(1)
    except PublishError as e:
        _report_error(f"Publish error: {e}")
        raise typer.Exit(1)

    # Step 3: Report outputs
    for line in report_result(result, os.environ):
        typer.echo(line)

    if not os.environ.get("GITHUB_OUTPUT"):
        for name, value in result_outputs(result).items():
            typer.echo(f"{name}: {value}")
