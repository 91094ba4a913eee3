"""Typed tokens produced by the GitHub autolink tokenizers.

Uses NamedTuples for token representation, providing:
- Immutability by default (a token lives for one tokenize/render pair)
- Equality by value, so equal tokens always render identically
- Tuple unpacking and pattern matching support

Every token carries ``raw``, the exact prefix of the input it consumed,
and a ``type`` property naming the extension that produced it. Payload
fields are exactly the pattern's capture groups; nothing is inferred.

Thread Safety:
All tokens are immutable and safe to share across threads.

Usage:
    >>> token = MentionToken(raw="@octocat", username="octocat")
    >>> match token:
    ...     case MentionToken(username=name):
    ...         print(name)
    octocat

"""

from __future__ import annotations

from typing import Literal, NamedTuple, TypeAlias


class MentionToken(NamedTuple):
    """``@username`` mention.

    Attributes:
        raw: Matched text including the ``@``.
        username: User or team name without the ``@``.

    """

    raw: str
    username: str

    @property
    def type(self) -> Literal["github_mentions"]:
        """Token type identifier for dispatch."""
        return "github_mentions"


class IssueUrlToken(NamedTuple):
    """Full ``https://github.com/owner/repo/issues/N`` URL."""

    raw: str
    owner: str
    repo: str
    number: str
    url: str

    @property
    def type(self) -> Literal["github_issue_url"]:
        """Token type identifier for dispatch."""
        return "github_issue_url"


class PullRequestUrlToken(NamedTuple):
    """Full ``https://github.com/owner/repo/pull/N`` URL."""

    raw: str
    owner: str
    repo: str
    number: str
    url: str

    @property
    def type(self) -> Literal["github_pull_request_url"]:
        """Token type identifier for dispatch."""
        return "github_pull_request_url"


class IssueReferenceToken(NamedTuple):
    """Bare ``#N`` reference, relative to the bound repository.

    Attributes:
        raw: Matched text, e.g. ``#26``.
        number: Issue or pull request number as captured.
        repository: ``owner/repo`` bound at construction, or None.

    """

    raw: str
    number: str
    repository: str | None

    @property
    def type(self) -> Literal["github_issue_reference"]:
        """Token type identifier for dispatch."""
        return "github_issue_reference"


class GHReferenceToken(NamedTuple):
    """``GH-N`` reference (any case), relative to the bound repository."""

    raw: str
    number: str
    repository: str | None

    @property
    def type(self) -> Literal["github_gh_reference"]:
        """Token type identifier for dispatch."""
        return "github_gh_reference"


class CrossRepoReferenceToken(NamedTuple):
    """Self-contained ``owner/repo#N`` reference."""

    raw: str
    owner: str
    repo: str
    number: str

    @property
    def type(self) -> Literal["github_cross_repo_reference"]:
        """Token type identifier for dispatch."""
        return "github_cross_repo_reference"


class CommitUrlToken(NamedTuple):
    """Full ``https://github.com/owner/repo/commit/<40 hex>`` URL."""

    raw: str
    owner: str
    repo: str
    sha: str
    url: str

    @property
    def type(self) -> Literal["github_commit_url"]:
        """Token type identifier for dispatch."""
        return "github_commit_url"


class CommitShaToken(NamedTuple):
    """Bare 7 to 40 character commit SHA."""

    raw: str
    sha: str
    repository: str | None

    @property
    def type(self) -> Literal["github_commit_sha"]:
        """Token type identifier for dispatch."""
        return "github_commit_sha"


class UserCommitToken(NamedTuple):
    """``user@sha`` commit reference on a fork of the bound repository."""

    raw: str
    user: str
    sha: str
    repository: str | None

    @property
    def type(self) -> Literal["github_user_commit"]:
        """Token type identifier for dispatch."""
        return "github_user_commit"


class RepoCommitToken(NamedTuple):
    """Self-contained ``owner/repo@sha`` commit reference."""

    raw: str
    owner: str
    repo: str
    sha: str

    @property
    def type(self) -> Literal["github_repo_commit"]:
        """Token type identifier for dispatch."""
        return "github_repo_commit"


# Type alias for all autolink tokens
Token: TypeAlias = (
    MentionToken
    | IssueUrlToken
    | PullRequestUrlToken
    | IssueReferenceToken
    | GHReferenceToken
    | CrossRepoReferenceToken
    | CommitUrlToken
    | CommitShaToken
    | UserCommitToken
    | RepoCommitToken
)


__all__ = [
    "CommitShaToken",
    "CommitUrlToken",
    "CrossRepoReferenceToken",
    "GHReferenceToken",
    "IssueReferenceToken",
    "IssueUrlToken",
    "MentionToken",
    "PullRequestUrlToken",
    "RepoCommitToken",
    "Token",
    "UserCommitToken",
]
