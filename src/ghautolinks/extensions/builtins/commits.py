"""Commit extensions.

References to a commit SHA become links to the commit, shown with the SHA
abbreviated to 7 characters while the link keeps the full SHA:
- github_commit_url: https://github.com/owner/repo/commit/<40 hex>
- github_commit_sha: a5c3785ed8d6a35868bc169f07e40e889087fd2e (needs a repository)
- github_user_commit: user@a5c3785 (needs a repository)
- github_repo_commit: owner/repo@a5c3785

Hex digits match in either case.

"""

from __future__ import annotations

import re

from ghautolinks.extensions.spec import ExtensionSpec
from ghautolinks.renderers.html import github_url, html_escape, render_link, short_sha
from ghautolinks.repository import SEGMENT, SEGMENT_START
from ghautolinks.tokens import (
    CommitShaToken,
    CommitUrlToken,
    RepoCommitToken,
    UserCommitToken,
)
from ghautolinks.utils.logger import get_logger

logger = get_logger(__name__)

SHA = r"[a-fA-F0-9]{7,40}"
FULL_SHA = r"[a-fA-F0-9]{40}"

COMMIT_URL_PATTERN = re.compile(
    rf"https?://github\.com/({SEGMENT})/({SEGMENT})/commit/({FULL_SHA})", re.ASCII
)
# A bare SHA must be followed by whitespace (any Unicode space) or the end of input
COMMIT_SHA_PATTERN = re.compile(rf"({SHA})(?=\s|\Z)")
USER_COMMIT_PATTERN = re.compile(rf"{SEGMENT_START}({SEGMENT})@({SHA})", re.ASCII)
REPO_COMMIT_PATTERN = re.compile(
    rf"{SEGMENT_START}({SEGMENT})/({SEGMENT})@({SHA})", re.ASCII
)


def _make_commit_url(match: re.Match[str], repository: str | None) -> CommitUrlToken:
    owner, repo, sha = match.groups()
    return CommitUrlToken(raw=match.group(0), owner=owner, repo=repo, sha=sha, url=match.group(0))


def _make_commit_sha(match: re.Match[str], repository: str | None) -> CommitShaToken:
    return CommitShaToken(raw=match.group(0), sha=match.group(1), repository=repository)


def _make_user_commit(match: re.Match[str], repository: str | None) -> UserCommitToken:
    user, sha = match.groups()
    return UserCommitToken(raw=match.group(0), user=user, sha=sha, repository=repository)


def _make_repo_commit(match: re.Match[str], repository: str | None) -> RepoCommitToken:
    owner, repo, sha = match.groups()
    return RepoCommitToken(raw=match.group(0), owner=owner, repo=repo, sha=sha)


def render_commit_url(token: CommitUrlToken) -> str:
    return render_link(token.url, short_sha(token.sha))


def render_commit_sha(token: CommitShaToken) -> str:
    """Render a bare SHA against the bound repository, or as raw text."""
    if not token.repository:
        logger.debug("No repository bound, leaving %r unlinked", token.raw)
        return html_escape(token.raw)
    return render_link(github_url(token.repository, "commit", token.sha), short_sha(token.sha))


def render_user_commit(token: UserCommitToken) -> str:
    """Render ``user@sha`` against the bound repository, or as raw text."""
    if not token.repository:
        logger.debug("No repository bound, leaving %r unlinked", token.raw)
        return html_escape(token.raw)
    return render_link(
        github_url(token.repository, "commit", token.sha),
        f"{token.user}@{short_sha(token.sha)}",
    )


def render_repo_commit(token: RepoCommitToken) -> str:
    return render_link(
        github_url(token.owner, token.repo, "commit", token.sha),
        f"{token.owner}/{token.repo}@{short_sha(token.sha)}",
    )


COMMIT_URL = ExtensionSpec(
    name="github_commit_url",
    pattern=COMMIT_URL_PATTERN,
    make_token=_make_commit_url,
    renderer=render_commit_url,
    description="https://github.com/owner/repo/commit/<sha>",
)

COMMIT_SHA = ExtensionSpec(
    name="github_commit_sha",
    pattern=COMMIT_SHA_PATTERN,
    make_token=_make_commit_sha,
    renderer=render_commit_sha,
    requires_repository=True,
    description="a5c3785ed8d6a35868bc169f07e40e889087fd2e",
)

USER_COMMIT = ExtensionSpec(
    name="github_user_commit",
    pattern=USER_COMMIT_PATTERN,
    make_token=_make_user_commit,
    renderer=render_user_commit,
    requires_repository=True,
    description="user@a5c3785",
)

REPO_COMMIT = ExtensionSpec(
    name="github_repo_commit",
    pattern=REPO_COMMIT_PATTERN,
    make_token=_make_repo_commit,
    renderer=render_repo_commit,
    description="owner/repo@a5c3785",
)
