"""Exception classes for ghautolinks.

Tokenizers and renderers never raise on body text: input that does not fit
a pattern is simply not matched. The errors below are configuration errors,
raised while extensions are being constructed.
"""

from __future__ import annotations

from collections.abc import Iterable


class GitHubAutolinkError(Exception):
    """Base exception for all ghautolinks errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidRepositoryFormat(GitHubAutolinkError, ValueError):
    """Repository context is present but not of the form ``owner/repo``.

    Raised at extension-construction time, before any text is tokenized.
    """

    def __init__(self, repository: str) -> None:
        """Initialize with the offending repository string.

        Args:
            repository: The value that failed validation
        """
        self.repository = repository
        super().__init__(
            f'Repository must be in format "owner/repository", got {repository!r}'
        )


class ExtensionNotFoundError(GitHubAutolinkError, KeyError):
    """Requested extension name is not registered."""

    def __init__(self, name: str, available: Iterable[str]) -> None:
        """Initialize extension lookup error.

        Args:
            name: The unknown extension name
            available: Names that are registered
        """
        self.name = name
        self.available = tuple(sorted(available))
        self.message = f"Unknown extension: {name!r}. Available: {', '.join(self.available)}"
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.message
