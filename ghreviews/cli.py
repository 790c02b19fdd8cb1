"""Typer CLI for the review request notifier."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import httpx
import typer

from ghreviews.config import ConfigError, default_config_path, load_config
from ghreviews.fetcher import fetch_pull_requests
from ghreviews.github_client import GitHubApiError, build_github_client
from ghreviews.observability import setup_logging
from ghreviews.output import notify
from ghreviews.review_filter import filter_review_requests
from ghreviews.schema import RepositoryMap

app = typer.Typer(help="Print open GitHub pull requests awaiting your review.")

logger = logging.getLogger("ghreviews.cli")


def _fail(message: str, error: BaseException) -> typer.Exit:
    typer.echo(f"{message}: {error}", err=True)
    return typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to config file."),
    ] = None,
    timeout_seconds: Annotated[
        int, typer.Option(help="GitHub API timeout in seconds for each query.")
    ] = 20,
    trust_env: Annotated[
        bool,
        typer.Option(
            "--trust-env/--no-trust-env",
            help="Use proxy/SSL environment variables from the current shell.",
        ),
    ] = True,
    verbose: Annotated[bool, typer.Option(help="Log progress to stderr.")] = False,
) -> None:
    """Fetch open pull requests and list the ones requesting your review."""
    if ctx.invoked_subcommand is not None:
        return

    setup_logging("DEBUG" if verbose else None)

    try:
        config = load_config(config_path or default_config_path())
        token, token_source = config.resolve_token()
    except ConfigError as error:
        raise _fail("encountered error", error) from error
    logger.debug("Using GitHub token from %s", token_source)

    repo_map: RepositoryMap = {}
    try:
        with build_github_client(
            token, timeout_seconds=timeout_seconds, trust_env=trust_env
        ) as client:
            for repo in config.repos:
                logger.debug("Fetching open pull requests for %s", repo.full_name)
                fetch_pull_requests(
                    client=client,
                    repository_name=repo.name,
                    owner_name=repo.owner,
                    repo_map=repo_map,
                )
    except (GitHubApiError, httpx.HTTPError) as error:
        raise _fail("error encountered", error) from error
    except ImportError as error:
        typer.echo(
            "error encountered: proxy transport dependency is missing. "
            "Try `ghreviews --no-trust-env`, or install `httpx[socks]`.",
            err=True,
        )
        raise typer.Exit(code=1) from error

    notify(filter_review_requests(config.username, repo_map))


@app.command("init")
def init_command() -> None:
    """Create a config file interactively (placeholder command)."""
    typer.echo("running setup TBD")


@app.command("config")
def config_command() -> None:
    """Edit the existing config file (placeholder command)."""
    typer.echo("running configure TBD")
