"""Open pull request fetching per repository."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from ghreviews.github_client import GITHUB_GRAPHQL_ENDPOINT, GitHubQueryError, execute_query
from ghreviews.schema import PullRequestsQueryData, RepositoryMap

MAX_OPEN_PULL_REQUESTS = 50
MAX_REVIEW_REQUESTS = 10

PULL_REQUESTS_QUERY = f"""
query OpenPullRequests($owner: String!, $name: String!) {{
  repository(owner: $owner, name: $name) {{
    name
    pullRequests(states: [OPEN], last: {MAX_OPEN_PULL_REQUESTS}) {{
      nodes {{
        url
        reviewRequests(last: {MAX_REVIEW_REQUESTS}) {{
          nodes {{
            requestedReviewer {{
              ... on User {{
                login
              }}
            }}
          }}
        }}
      }}
    }}
  }}
}}
"""

logger = logging.getLogger("ghreviews.fetcher")


def fetch_pull_requests(
    *,
    client: httpx.Client,
    repository_name: str,
    owner_name: str,
    repo_map: RepositoryMap,
) -> None:
    """Fetch open pull requests for one repository into `repo_map`.

    The entry for `repository_name` is replaced only after the query succeeds
    and decodes; any failure propagates and leaves `repo_map` untouched.
    """
    variables = {"owner": owner_name, "name": repository_name}
    data = execute_query(client, PULL_REQUESTS_QUERY, variables)

    try:
        decoded = PullRequestsQueryData.model_validate(data)
    except ValidationError as error:
        raise GitHubQueryError(
            f"Unexpected pull request payload for {owner_name}/{repository_name}: {error}",
            endpoint=GITHUB_GRAPHQL_ENDPOINT,
        ) from error

    if decoded.repository is None:
        raise GitHubQueryError(
            f"Could not resolve to a Repository with the name '{owner_name}/{repository_name}'.",
            endpoint=GITHUB_GRAPHQL_ENDPOINT,
        )

    pull_requests = decoded.repository.to_pull_requests()
    repo_map[repository_name] = pull_requests
    logger.debug(
        "Fetched %d open pull requests for %s/%s",
        len(pull_requests),
        owner_name,
        repository_name,
    )
