"""Plain-text review request notification rendering."""

from __future__ import annotations

import typer

from ghreviews.schema import ReviewRequestMap

NOTIFICATION_BANNER = "Your review is requested for the following PRs"


def render_notification(requests: ReviewRequestMap) -> str:
    """Render the report body grouped by repository."""
    lines: list[str] = []
    for repository_name, uris in requests.items():
        lines.append(f"{repository_name}:")
        lines.extend(f"\t- {uri}" for uri in uris)
    return "".join(f"{line}\n" for line in lines)


def notify(requests: ReviewRequestMap) -> None:
    """Print the review request report; prints nothing when there are no requests."""
    if not requests:
        return
    typer.echo(NOTIFICATION_BANNER)
    typer.echo(render_notification(requests))
