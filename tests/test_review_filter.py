"""Unit tests for review request filtering."""

from __future__ import annotations

import pytest
from ghreviews.review_filter import filter_review_requests
from ghreviews.schema import PullRequest, RepositoryMap


def make_repo_map() -> RepositoryMap:
    """Build a repository map spanning several repositories."""
    return {
        "svc": [
            PullRequest(uri="u1", requested_reviewers=("alice", "bob")),
            PullRequest(uri="u2", requested_reviewers=("bob",)),
        ],
        "web": [PullRequest(uri="u3", requested_reviewers=())],
        "api": [
            PullRequest(uri="u4", requested_reviewers=("carol", "alice")),
            PullRequest(uri="u5", requested_reviewers=("alice",)),
        ],
    }


@pytest.mark.unit
def test_filter_selects_only_matching_pull_requests() -> None:
    repo_map = {
        "svc": [
            PullRequest(uri="u1", requested_reviewers=("alice", "bob")),
            PullRequest(uri="u2", requested_reviewers=("bob",)),
        ]
    }
    assert filter_review_requests("alice", repo_map) == {"svc": ["u1"]}


@pytest.mark.unit
def test_filter_output_is_subset_of_input() -> None:
    repo_map = make_repo_map()
    result = filter_review_requests("alice", repo_map)

    for repository_name, uris in result.items():
        for uri in uris:
            assert any(
                pull_request.uri == uri and "alice" in pull_request.requested_reviewers
                for pull_request in repo_map[repository_name]
            )
    assert result == {"svc": ["u1"], "api": ["u4", "u5"]}


@pytest.mark.unit
def test_filter_preserves_repository_order() -> None:
    result = filter_review_requests("alice", make_repo_map())
    assert list(result) == ["svc", "api"]


@pytest.mark.unit
def test_filter_returns_empty_mapping_without_matches() -> None:
    assert filter_review_requests("dave", make_repo_map()) == {}


@pytest.mark.unit
def test_filter_is_case_sensitive() -> None:
    assert filter_review_requests("Alice", make_repo_map()) == {}


@pytest.mark.unit
def test_filter_with_empty_username_matches_nothing() -> None:
    assert filter_review_requests("", make_repo_map()) == {}


@pytest.mark.unit
def test_filter_is_repeatable() -> None:
    repo_map = make_repo_map()
    assert filter_review_requests("alice", repo_map) == filter_review_requests("alice", repo_map)


@pytest.mark.unit
def test_filter_repeats_uri_for_duplicate_reviewer_entries() -> None:
    repo_map = {"svc": [PullRequest(uri="u1", requested_reviewers=("alice", "alice"))]}
    assert filter_review_requests("alice", repo_map) == {"svc": ["u1", "u1"]}
