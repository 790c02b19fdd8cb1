"""GitHub GraphQL client and auth helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import httpx
from dotenv import load_dotenv

GITHUB_API_BASE_URL = "https://api.github.com"
GITHUB_GRAPHQL_ENDPOINT = "/graphql"

logger = logging.getLogger("ghreviews.github_client")


class GitHubAuthError(RuntimeError):
    """Raised when required GitHub authentication is missing."""


class GitHubApiError(RuntimeError):
    """Raised when a GitHub API request fails."""

    def __init__(self, message: str, *, status_code: int, endpoint: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.endpoint = endpoint


class GitHubQueryError(GitHubApiError):
    """Raised when a GraphQL response carries errors instead of data."""

    def __init__(
        self,
        message: str,
        *,
        endpoint: str,
        errors: tuple[str, ...] = (),
        status_code: int = 200,
    ) -> None:
        super().__init__(message, status_code=status_code, endpoint=endpoint)
        self.errors = errors


def _ensure_mapping(value: object, *, context: str) -> dict[str, Any]:
    """Ensure a response fragment is a JSON object."""
    if not isinstance(value, dict):
        raise GitHubApiError(
            f"Expected JSON object for {context}.",
            status_code=500,
            endpoint=context,
        )
    return value


def _raise_http_error(response: httpx.Response, endpoint: str) -> None:
    """Raise a typed error for a non-success GitHub API response."""
    message = f"GitHub API request failed with status {response.status_code} for '{endpoint}'."
    raise GitHubApiError(
        message,
        status_code=response.status_code,
        endpoint=endpoint,
    )


def _error_messages(errors: object) -> tuple[str, ...]:
    """Collect human-readable messages from a GraphQL errors array."""
    if not isinstance(errors, list):
        return (str(errors),)
    messages: list[str] = []
    for error in errors:
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            messages.append(error["message"])
        else:
            messages.append(str(error))
    return tuple(messages)


def execute_query(
    client: httpx.Client,
    query: str,
    variables: dict[str, Any],
) -> dict[str, Any]:
    """Run one GraphQL query and return its `data` object."""
    endpoint = GITHUB_GRAPHQL_ENDPOINT
    response = client.post(endpoint, json={"query": query, "variables": variables})
    if response.status_code >= 400:
        _raise_http_error(response, endpoint)

    try:
        decoded_body = response.json()
    except ValueError as error:
        raise GitHubApiError(
            f"GitHub API returned invalid JSON for '{endpoint}'.",
            status_code=response.status_code,
            endpoint=endpoint,
        ) from error

    payload = _ensure_mapping(decoded_body, context=endpoint)
    errors = payload.get("errors")
    if errors:
        messages = _error_messages(errors)
        raise GitHubQueryError(
            f"GitHub GraphQL query failed: {'; '.join(messages)}",
            endpoint=endpoint,
            errors=messages,
        )

    data = payload.get("data")
    if data is None:
        raise GitHubQueryError(
            "GitHub GraphQL response did not include data.",
            endpoint=endpoint,
        )
    return _ensure_mapping(data, context=endpoint)


def get_github_token_with_source(configured_token: str | None = None) -> tuple[str, str]:
    """Resolve GitHub token and return token value with its source."""
    if configured_token:
        return configured_token, "config file"

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    github_token = os.getenv("GITHUB_TOKEN")
    if github_token:
        return github_token, "GITHUB_TOKEN"

    gh_token = os.getenv("GH_TOKEN")
    if gh_token:
        return gh_token, "GH_TOKEN"

    message = "Missing GitHub token. Set 'token' in the config file, or GITHUB_TOKEN / GH_TOKEN."
    raise GitHubAuthError(message)


def build_github_client(
    token: str,
    timeout_seconds: int = 20,
    *,
    trust_env: bool = True,
) -> httpx.Client:
    """Build an authenticated GitHub HTTP client."""
    headers = {
        "Accept": "application/json",
        "Authorization": f"Bearer {token}",
    }
    logger.debug("Building GitHub client with %ss timeout", timeout_seconds)
    return httpx.Client(
        base_url=GITHUB_API_BASE_URL,
        headers=headers,
        timeout=timeout_seconds,
        trust_env=trust_env,
    )
