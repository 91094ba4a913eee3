"""InlineExtension protocol: what a host Markdown parser calls.

The host walks inline text and, for every registered extension, asks:

1. ``start(src)``: earliest offset where this syntax may begin, or None.
   The host flushes literal text up to the minimum across all extensions
   (and its own rules) before trying to tokenize.
2. ``tokenizer(src)``: consume a token anchored at offset 0, or None.
3. ``renderer(token)``: HTML fragment for a token this extension produced.

Thread Safety:
Implementations must be stateless. Multiple threads may call the same
extension instance concurrently.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ghautolinks.tokens import Token


@runtime_checkable
class InlineExtension(Protocol):
    """Protocol for inline-level host parser extensions.

    Attributes:
        name: Extension identifier, equal to the ``type`` of its tokens
        level: Always ``"inline"``

    """

    @property
    def name(self) -> str:
        """Extension identifier."""
        ...

    @property
    def level(self) -> Literal["inline"]:
        """Parser level this extension operates at."""
        ...

    def start(self, src: str) -> int | None:
        """Return the earliest offset this syntax occurs at in src."""
        ...

    def tokenizer(self, src: str) -> Token | None:
        """Consume a token at the start of src, or return None."""
        ...

    def renderer(self, token: Token) -> str:
        """Render a token to an HTML fragment."""
        ...


__all__ = ["InlineExtension"]
