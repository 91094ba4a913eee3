"""Repository context for resolving relative GitHub references.

Bare references such as ``#26``, ``GH-26``, a bare commit SHA, or
``user@sha`` only become links when the extensions know which repository
the text belongs to. That context is an ``owner/repo`` string, validated
once when extensions are built and immutable afterwards.

Thread Safety:
RepositoryContext is a frozen dataclass. Safe to share across threads.

"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ghautolinks.errors import InvalidRepositoryFormat

# Owner and repository segments: word characters, dot, hyphen
SEGMENT = r"[\w.-]+"
# A segment that begins a run, so unanchored searches stay linear on long words
SEGMENT_START = r"(?<![\w.-])"

REPOSITORY_PATTERN = re.compile(rf"({SEGMENT})/({SEGMENT})", re.ASCII)


@dataclass(frozen=True, slots=True)
class RepositoryContext:
    """A validated ``owner/repo`` pair.

    Attributes:
        owner: User or organization name
        repo: Repository name

    """

    owner: str
    repo: str

    @classmethod
    def parse(cls, value: str) -> RepositoryContext:
        """Parse an ``owner/repo`` string.

        Raises:
            InvalidRepositoryFormat: If value does not have the expected shape
        """
        match = REPOSITORY_PATTERN.fullmatch(value)
        if match is None:
            raise InvalidRepositoryFormat(value)
        return cls(owner=match.group(1), repo=match.group(2))

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"

    def __str__(self) -> str:
        return self.slug


def validate_repository(repository: str | None) -> RepositoryContext | None:
    """Validate an optional repository context.

    ``None`` and the empty string both mean "no repository" and are valid.

    Args:
        repository: Repository string in ``owner/repo`` form, or None

    Returns:
        Parsed RepositoryContext, or None when no repository was given

    Raises:
        InvalidRepositoryFormat: If a non-empty value has the wrong shape

    Example:
        >>> validate_repository("octo/hello-world")
        RepositoryContext(owner='octo', repo='hello-world')
        >>> validate_repository(None) is None
        True
    """
    if not repository:
        return None
    return RepositoryContext.parse(repository)


__all__ = [
    "REPOSITORY_PATTERN",
    "RepositoryContext",
    "validate_repository",
]
