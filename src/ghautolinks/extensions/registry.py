"""Registry of GitHub autolink extensions.

EXTENSION_SPECS is the single source of truth for which GitHub shorthand
syntaxes exist, and its order is the registration order hosts must keep.
Each recognizer also has an explicit accessor returning a one-extension
bundle; github_autolinks() returns all of them bound to one repository.

Thread Safety:
The mapping is read-only and the specs are frozen. Safe to share.

Example:
    >>> bundle = github_autolinks("octo/hello-world")
    >>> len(bundle)
    10
    >>> github_mentions().names
    ('github_mentions',)

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from ghautolinks.config import normalize_include
from ghautolinks.errors import ExtensionNotFoundError
from ghautolinks.extensions.builtins import (
    COMMIT_SHA,
    COMMIT_URL,
    CROSS_REPO_REFERENCE,
    GH_REFERENCE,
    ISSUE_REFERENCE,
    ISSUE_URL,
    MENTIONS,
    PULL_REQUEST_URL,
    REPO_COMMIT,
    USER_COMMIT,
)
from ghautolinks.extensions.factory import ExtensionBundle, create_bundle
from ghautolinks.extensions.spec import ExtensionSpec

# Registration order is precedence order; keep it stable
EXTENSION_SPECS: Mapping[str, ExtensionSpec] = MappingProxyType(
    {
        spec.name: spec
        for spec in (
            MENTIONS,
            ISSUE_URL,
            PULL_REQUEST_URL,
            ISSUE_REFERENCE,
            GH_REFERENCE,
            CROSS_REPO_REFERENCE,
            COMMIT_URL,
            COMMIT_SHA,
            USER_COMMIT,
            REPO_COMMIT,
        )
    }
)


def get_spec(name: str) -> ExtensionSpec:
    """Get a registered spec by name.

    Raises:
        ExtensionNotFoundError: If name is not registered
    """
    if name not in EXTENSION_SPECS:
        raise ExtensionNotFoundError(name, EXTENSION_SPECS)
    return EXTENSION_SPECS[name]


def github_autolinks(
    repository: str | None = None, *, include: str | Iterable[str] | None = None
) -> ExtensionBundle:
    """Build the full set of extensions bound to one repository context.

    Args:
        repository: ``owner/repo`` used to resolve relative references
        include: Optional subset of extension names. Registration order is
            kept regardless of the order given here. A single name may be
            passed as a plain string.

    Returns:
        ExtensionBundle in registration order

    Raises:
        InvalidRepositoryFormat: If repository is present but malformed
        ExtensionNotFoundError: If include names an unknown extension
    """
    if include is None:
        return create_bundle(EXTENSION_SPECS.values(), repository)

    wanted = {get_spec(name).name for name in normalize_include(include)}
    return create_bundle(
        (spec for name, spec in EXTENSION_SPECS.items() if name in wanted), repository
    )


def github_mentions(repository: str | None = None) -> ExtensionBundle:
    """``@octocat``"""
    return create_bundle((MENTIONS,), repository)


def github_issue_url(repository: str | None = None) -> ExtensionBundle:
    """``https://github.com/owner/repo/issues/26``"""
    return create_bundle((ISSUE_URL,), repository)


def github_pull_request_url(repository: str | None = None) -> ExtensionBundle:
    """``https://github.com/owner/repo/pull/26``"""
    return create_bundle((PULL_REQUEST_URL,), repository)


def github_issue_reference(repository: str | None = None) -> ExtensionBundle:
    """``#26``, linked only when a repository is given."""
    return create_bundle((ISSUE_REFERENCE,), repository)


def github_gh_reference(repository: str | None = None) -> ExtensionBundle:
    """``GH-26``, linked only when a repository is given."""
    return create_bundle((GH_REFERENCE,), repository)


def github_cross_repo_reference(repository: str | None = None) -> ExtensionBundle:
    """``owner/repo#26``"""
    return create_bundle((CROSS_REPO_REFERENCE,), repository)


def github_commit_url(repository: str | None = None) -> ExtensionBundle:
    """``https://github.com/owner/repo/commit/<40 hex>``"""
    return create_bundle((COMMIT_URL,), repository)


def github_commit_sha(repository: str | None = None) -> ExtensionBundle:
    """Bare SHA, linked only when a repository is given."""
    return create_bundle((COMMIT_SHA,), repository)


def github_user_commit(repository: str | None = None) -> ExtensionBundle:
    """``user@sha``, linked only when a repository is given."""
    return create_bundle((USER_COMMIT,), repository)


def github_repo_commit(repository: str | None = None) -> ExtensionBundle:
    """``owner/repo@sha``"""
    return create_bundle((REPO_COMMIT,), repository)


__all__ = [
    "EXTENSION_SPECS",
    "get_spec",
    "github_autolinks",
    "github_commit_sha",
    "github_commit_url",
    "github_cross_repo_reference",
    "github_gh_reference",
    "github_issue_reference",
    "github_issue_url",
    "github_mentions",
    "github_pull_request_url",
    "github_repo_commit",
    "github_user_commit",
]
