"""Extension factory: bind specs to a repository context.

The factory turns an ExtensionSpec into an AutolinkExtension, the object a
host parser registers. The repository context is validated here, once,
before anything is tokenized, and then threaded explicitly into every
tokenizer call.

Thread Safety:
AutolinkExtension and ExtensionBundle are frozen. A bundle built once can
be shared by any number of concurrent parse calls.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from ghautolinks.errors import ExtensionNotFoundError
from ghautolinks.repository import RepositoryContext, validate_repository
from ghautolinks.utils.logger import get_logger

if TYPE_CHECKING:
    from ghautolinks.extensions.spec import ExtensionSpec
    from ghautolinks.tokens import Token

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class AutolinkExtension:
    """A spec bound to an optional, already-validated repository.

    Implements the InlineExtension protocol.

    Attributes:
        spec: The recognizer definition
        repository: Validated repository context, or None

    """

    spec: ExtensionSpec
    repository: RepositoryContext | None = None

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def level(self) -> Literal["inline"]:
        return "inline"

    def start(self, src: str) -> int | None:
        """Offset of the earliest possible match in src, or None."""
        return self.spec.scan(src)

    def tokenizer(self, src: str) -> Token | None:
        """Tokenize at the start of src with the bound repository."""
        repository = self.repository.slug if self.repository else None
        return self.spec.tokenizer(src, repository)

    def renderer(self, token: Token) -> str:
        return self.spec.renderer(token)


def create_extension(spec: ExtensionSpec, repository: str | None = None) -> AutolinkExtension:
    """Build an extension from a spec and an optional repository.

    Only specs that resolve relative references validate the repository;
    the others never look at it.

    Args:
        spec: Recognizer definition
        repository: ``owner/repo`` string, or None

    Returns:
        Extension ready to register with a host parser

    Raises:
        InvalidRepositoryFormat: If the spec requires a repository and a
            non-empty value does not have the ``owner/repo`` shape
    """
    if not spec.requires_repository:
        return AutolinkExtension(spec)
    return AutolinkExtension(spec, validate_repository(repository))


class ExtensionBundle:
    """Immutable, ordered set of extensions sharing one repository context.

    Registration order is precedence order: when two extensions can match
    at the same offset, the host tries them in this order and the first
    one wins.

    Usage:
        >>> bundle = create_bundle([MENTIONS, ISSUE_REFERENCE], "octo/hello-world")
        >>> [ext.name for ext in bundle]
        ['github_mentions', 'github_issue_reference']

    Thread Safety:
        Immutable after creation. Safe to share across threads.

    """

    __slots__ = ("_by_name", "_extensions", "_repository")

    def __init__(
        self,
        extensions: tuple[AutolinkExtension, ...],
        repository: str | None = None,
    ) -> None:
        """Initialize bundle with pre-built extensions.

        Use create_bundle() to build instances.
        """
        self._extensions = extensions
        self._by_name = {ext.name: ext for ext in extensions}
        self._repository = repository or None

    @property
    def extensions(self) -> tuple[AutolinkExtension, ...]:
        """Extensions in registration order."""
        return self._extensions

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._by_name)

    @property
    def repository(self) -> str | None:
        """Repository string the bundle was built with."""
        return self._repository

    def get(self, name: str) -> AutolinkExtension:
        """Get an extension by name.

        Raises:
            ExtensionNotFoundError: If the bundle has no such extension
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise ExtensionNotFoundError(name, self._by_name) from None

    def __iter__(self) -> Iterator[AutolinkExtension]:
        return iter(self._extensions)

    def __len__(self) -> int:
        return len(self._extensions)

    def __contains__(self, name: object) -> bool:
        """Support 'name in bundle' syntax."""
        return name in self._by_name

    def __repr__(self) -> str:
        return f"ExtensionBundle(names={self.names!r}, repository={self._repository!r})"


def create_bundle(
    specs: Iterable[ExtensionSpec], repository: str | None = None
) -> ExtensionBundle:
    """Bind every spec to the same repository context.

    Validation runs before any extension is returned, so a malformed
    repository fails the whole bundle.

    Raises:
        InvalidRepositoryFormat: If a spec requires a repository and the
            value does not have the ``owner/repo`` shape
    """
    extensions = tuple(create_extension(spec, repository) for spec in specs)
    logger.debug("Built %d autolink extension(s), repository=%r", len(extensions), repository)
    return ExtensionBundle(extensions, repository)


__all__ = [
    "AutolinkExtension",
    "ExtensionBundle",
    "create_bundle",
    "create_extension",
]
