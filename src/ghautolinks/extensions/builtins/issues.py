"""Issue and pull request extensions.

Provides recognizers for every way GitHub text points at an issue or PR:
- github_issue_url: https://github.com/owner/repo/issues/26
- github_pull_request_url: https://github.com/owner/repo/pull/26
- github_issue_reference: #26 (needs a repository)
- github_gh_reference: GH-26 (needs a repository)
- github_cross_repo_reference: owner/repo#26

Bare ``#26`` and ``GH-26`` are relative to the current repository. Without
one bound they render as the escaped raw text, because the same body may be
previewed outside any repository page. ``owner/repo#26`` names its own
repository and always links.

"""

from __future__ import annotations

import re

from ghautolinks.extensions.spec import ExtensionSpec
from ghautolinks.renderers.html import github_url, html_escape, render_link
from ghautolinks.repository import SEGMENT, SEGMENT_START
from ghautolinks.tokens import (
    CrossRepoReferenceToken,
    GHReferenceToken,
    IssueReferenceToken,
    IssueUrlToken,
    PullRequestUrlToken,
)
from ghautolinks.utils.logger import get_logger

logger = get_logger(__name__)

ISSUE_URL_PATTERN = re.compile(
    rf"https?://github\.com/({SEGMENT})/({SEGMENT})/issues/(\d+)", re.ASCII
)
PULL_REQUEST_URL_PATTERN = re.compile(
    rf"https?://github\.com/({SEGMENT})/({SEGMENT})/pull/(\d+)", re.ASCII
)
ISSUE_REFERENCE_PATTERN = re.compile(r"#(\d+)", re.ASCII)
GH_REFERENCE_PATTERN = re.compile(r"GH-(\d+)", re.ASCII | re.IGNORECASE)
CROSS_REPO_REFERENCE_PATTERN = re.compile(
    rf"{SEGMENT_START}({SEGMENT})/({SEGMENT})#(\d+)", re.ASCII
)


def _make_issue_url(match: re.Match[str], repository: str | None) -> IssueUrlToken:
    owner, repo, number = match.groups()
    return IssueUrlToken(
        raw=match.group(0), owner=owner, repo=repo, number=number, url=match.group(0)
    )


def _make_pull_request_url(match: re.Match[str], repository: str | None) -> PullRequestUrlToken:
    owner, repo, number = match.groups()
    return PullRequestUrlToken(
        raw=match.group(0), owner=owner, repo=repo, number=number, url=match.group(0)
    )


def _make_issue_reference(match: re.Match[str], repository: str | None) -> IssueReferenceToken:
    return IssueReferenceToken(raw=match.group(0), number=match.group(1), repository=repository)


def _make_gh_reference(match: re.Match[str], repository: str | None) -> GHReferenceToken:
    return GHReferenceToken(raw=match.group(0), number=match.group(1), repository=repository)


def _make_cross_repo_reference(
    match: re.Match[str], repository: str | None
) -> CrossRepoReferenceToken:
    owner, repo, number = match.groups()
    return CrossRepoReferenceToken(raw=match.group(0), owner=owner, repo=repo, number=number)


def render_issue_url(token: IssueUrlToken | PullRequestUrlToken) -> str:
    """Render a full issue or PR URL as ``#N`` linking to the URL itself."""
    return render_link(token.url, f"#{token.number}")


def render_relative_reference(token: IssueReferenceToken | GHReferenceToken) -> str:
    """Render ``#N`` or ``GH-N`` against the bound repository.

    Falls back to the raw text when no repository is bound.
    """
    if not token.repository:
        logger.debug("No repository bound, leaving %r unlinked", token.raw)
        return html_escape(token.raw)
    return render_link(github_url(token.repository, "issues", token.number), token.raw)


def render_cross_repo_reference(token: CrossRepoReferenceToken) -> str:
    """Render ``owner/repo#N`` as a link to that repository's issue."""
    return render_link(github_url(token.owner, token.repo, "issues", token.number), token.raw)


ISSUE_URL = ExtensionSpec(
    name="github_issue_url",
    pattern=ISSUE_URL_PATTERN,
    make_token=_make_issue_url,
    renderer=render_issue_url,
    description="https://github.com/owner/repo/issues/26",
)

PULL_REQUEST_URL = ExtensionSpec(
    name="github_pull_request_url",
    pattern=PULL_REQUEST_URL_PATTERN,
    make_token=_make_pull_request_url,
    renderer=render_issue_url,
    description="https://github.com/owner/repo/pull/26",
)

ISSUE_REFERENCE = ExtensionSpec(
    name="github_issue_reference",
    pattern=ISSUE_REFERENCE_PATTERN,
    make_token=_make_issue_reference,
    renderer=render_relative_reference,
    requires_repository=True,
    description="#26",
)

GH_REFERENCE = ExtensionSpec(
    name="github_gh_reference",
    pattern=GH_REFERENCE_PATTERN,
    make_token=_make_gh_reference,
    renderer=render_relative_reference,
    requires_repository=True,
    description="GH-26",
)

CROSS_REPO_REFERENCE = ExtensionSpec(
    name="github_cross_repo_reference",
    pattern=CROSS_REPO_REFERENCE_PATTERN,
    make_token=_make_cross_repo_reference,
    renderer=render_cross_repo_reference,
    description="owner/repo#26",
)
