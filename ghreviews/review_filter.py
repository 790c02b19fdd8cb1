"""Selection of pull requests awaiting one user's review."""

from __future__ import annotations

from ghreviews.schema import RepositoryMap, ReviewRequestMap


def filter_review_requests(username: str, repo_map: RepositoryMap) -> ReviewRequestMap:
    """Return PR URIs per repository where `username` is a requested reviewer.

    Matching is exact and case-sensitive. A pull request that lists the user
    more than once yields its URI once per listing. Repositories without a
    match are left out.
    """
    requests: ReviewRequestMap = {}
    for repository_name, pull_requests in repo_map.items():
        for pull_request in pull_requests:
            for reviewer in pull_request.requested_reviewers:
                if reviewer == username:
                    requests.setdefault(repository_name, []).append(pull_request.uri)
    return requests
