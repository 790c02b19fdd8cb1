"""Pull request data model and GraphQL response schema."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True, slots=True)
class PullRequest:
    """Open pull request with its pending user review requests."""

    uri: str
    requested_reviewers: tuple[str, ...] = ()


# Repository name -> open pull requests, in configured repository order.
RepositoryMap = dict[str, list[PullRequest]]

# Repository name -> pull request URIs awaiting the configured user's review.
ReviewRequestMap = dict[str, list[str]]


class RequestedReviewerNode(BaseModel):
    """Requested reviewer; `login` is only present for user reviewers."""

    model_config = ConfigDict(extra="ignore")

    login: str | None = None


class ReviewRequestNode(BaseModel):
    """One pending review request."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    requested_reviewer: RequestedReviewerNode | None = Field(
        default=None, alias="requestedReviewer"
    )


class ReviewRequestConnection(BaseModel):
    model_config = ConfigDict(extra="ignore")

    nodes: list[ReviewRequestNode | None] = Field(default_factory=list)


class PullRequestNode(BaseModel):
    """One pull request in the repository query response."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    url: str = Field(min_length=1)
    review_requests: ReviewRequestConnection = Field(
        default_factory=ReviewRequestConnection, alias="reviewRequests"
    )

    def reviewer_logins(self) -> tuple[str, ...]:
        """Return user reviewer logins in response order, skipping team reviewers."""
        logins: list[str] = []
        for node in self.review_requests.nodes:
            if node is None or node.requested_reviewer is None:
                continue
            login = node.requested_reviewer.login
            if login:
                logins.append(login)
        return tuple(logins)


class PullRequestConnection(BaseModel):
    model_config = ConfigDict(extra="ignore")

    nodes: list[PullRequestNode | None] = Field(default_factory=list)


class RepositoryNode(BaseModel):
    """Repository fragment of the pull requests query."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str
    pull_requests: PullRequestConnection = Field(
        default_factory=PullRequestConnection, alias="pullRequests"
    )

    def to_pull_requests(self) -> list[PullRequest]:
        """Map the decoded response into internal pull request values."""
        return [
            PullRequest(uri=node.url, requested_reviewers=node.reviewer_logins())
            for node in self.pull_requests.nodes
            if node is not None
        ]


class PullRequestsQueryData(BaseModel):
    """Top-level `data` object of the pull requests query."""

    model_config = ConfigDict(extra="ignore")

    repository: RepositoryNode | None = None
