"""
ghautolinks — GitHub autolinked references for Markdown inline parsers

Recognizes GitHub shorthand in inline text and renders it as links:
mentions (@octocat), issue and pull request references (#26, GH-26,
owner/repo#26), full issue/PR/commit URLs, and commit SHAs (bare,
user@sha, owner/repo@sha). Each syntax is an extension exposing the
start/tokenizer/renderer triad a host Markdown parser calls at its
inline extension point.

Quick Start:
    >>> from ghautolinks import GitHubAutolinks
    >>> md = GitHubAutolinks("octo/hello-world")
    >>> md("Fixes #26")
    'Fixes <a href="https://github.com/octo/hello-world/issues/26">#26</a>'

    >>> # Register with a host parser
    >>> from ghautolinks import github_autolinks
    >>> for ext in github_autolinks("octo/hello-world"):
    ...     host.register_inline(ext.name, ext.start, ext.tokenizer, ext.renderer)

Output is not sanitized. Run the final document through an allow-list
HTML sanitizer before display.

Installation:
    pip install ghautolinks          # zero runtime dependencies
"""

from collections.abc import Iterable

from ghautolinks.config import (
    AutolinkConfig,
    autolink_config_context,
    get_autolink_config,
    normalize_include,
    reset_autolink_config,
    set_autolink_config,
)
from ghautolinks.errors import (
    ExtensionNotFoundError,
    GitHubAutolinkError,
    InvalidRepositoryFormat,
)
from ghautolinks.extensions import (
    EXTENSION_SPECS,
    AutolinkExtension,
    ExtensionBundle,
    ExtensionSpec,
    InlineExtension,
    create_bundle,
    create_extension,
    get_spec,
    github_autolinks,
    github_commit_sha,
    github_commit_url,
    github_cross_repo_reference,
    github_gh_reference,
    github_issue_reference,
    github_issue_url,
    github_mentions,
    github_pull_request_url,
    github_repo_commit,
    github_user_commit,
)
from ghautolinks.inline import InlineScanner, Segment, render_inline
from ghautolinks.repository import RepositoryContext, validate_repository
from ghautolinks.tokens import (
    CommitShaToken,
    CommitUrlToken,
    CrossRepoReferenceToken,
    GHReferenceToken,
    IssueReferenceToken,
    IssueUrlToken,
    MentionToken,
    PullRequestUrlToken,
    RepoCommitToken,
    Token,
    UserCommitToken,
)

__version__ = "0.1.0"


class GitHubAutolinks:
    """High-level autolinker combining extensions and the inline driver.

    Usage:
        >>> md = GitHubAutolinks("octo/hello-world")
        >>> md("See GH-26")
        'See <a href="https://github.com/octo/hello-world/issues/26">GH-26</a>'

        >>> # Only some syntaxes
        >>> md = GitHubAutolinks(include=["github_mentions"])
        >>> md("@octocat #26")
        '<a href="https://github.com/octocat">@octocat</a> #26'

    Thread Safety:
        Extensions are built once in __init__ and are immutable. Safe to
        call one instance concurrently from different threads.

    """

    __slots__ = ("_bundle", "_config", "_scanner")

    def __init__(
        self,
        repository: str | None = None,
        *,
        include: str | Iterable[str] | None = None,
    ) -> None:
        """Initialize autolinker.

        Args:
            repository: ``owner/repo`` used to resolve relative references
            include: Names of the extensions to enable (None enables all)

        Raises:
            InvalidRepositoryFormat: If repository is present but malformed
            ExtensionNotFoundError: If include names an unknown extension
        """
        self._config = AutolinkConfig(
            repository=repository,
            include=normalize_include(include),
        )
        self._bundle = github_autolinks(self._config.repository, include=self._config.include)
        self._scanner = InlineScanner(self._bundle)

    @classmethod
    def from_config(cls, config: AutolinkConfig) -> "GitHubAutolinks":
        return cls(config.repository, include=config.include)

    @property
    def config(self) -> AutolinkConfig:
        return self._config

    @property
    def extensions(self) -> ExtensionBundle:
        """Extensions for registering with a host parser."""
        return self._bundle

    def __call__(self, text: str) -> str:
        """Autolink text and return the HTML fragment."""
        return self._scanner.render(text)

    def render(self, text: str) -> str:
        return self._scanner.render(text)


__all__ = [
    # High-level API
    "GitHubAutolinks",
    "render_inline",
    "InlineScanner",
    "Segment",
    # Registry and factory
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
    "create_bundle",
    "create_extension",
    "AutolinkExtension",
    "ExtensionBundle",
    "ExtensionSpec",
    "InlineExtension",
    # Repository context
    "RepositoryContext",
    "validate_repository",
    # Configuration
    "AutolinkConfig",
    "autolink_config_context",
    "get_autolink_config",
    "normalize_include",
    "reset_autolink_config",
    "set_autolink_config",
    # Errors
    "ExtensionNotFoundError",
    "GitHubAutolinkError",
    "InvalidRepositoryFormat",
    # Tokens
    "Token",
    "CommitShaToken",
    "CommitUrlToken",
    "CrossRepoReferenceToken",
    "GHReferenceToken",
    "IssueReferenceToken",
    "IssueUrlToken",
    "MentionToken",
    "PullRequestUrlToken",
    "RepoCommitToken",
    "UserCommitToken",
]
