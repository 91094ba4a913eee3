"""ExtensionSpec: the immutable definition of one GitHub shorthand syntax.

A spec pairs a single compiled pattern with a token builder and a renderer.
The same pattern object answers both host questions:

- ``scan``: where is the earliest occurrence? (``pattern.search``)
- ``tokenizer``: does it occur exactly here? (``pattern.match``)

Because both steps share one regex, a scan that reports offset 0 always
means the tokenizer succeeds on that input, and vice versa.

Thread Safety:
Specs are frozen and defined once at import time. Safe to share.

"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ghautolinks.tokens import Token


@dataclass(frozen=True, slots=True)
class ExtensionSpec:
    """Definition of one autolink recognizer.

    Attributes:
        name: Unique extension name, also the ``type`` of its tokens
        pattern: Compiled, non-anchored pattern for the syntax
        make_token: Builds a token from a successful match and the bound
            repository slug (or None)
        renderer: Pure function from a token to an HTML fragment
        requires_repository: True when references are relative to a
            repository and can only be linked with one bound
        description: Human-readable summary with an example

    """

    name: str
    pattern: re.Pattern[str]
    make_token: Callable[[re.Match[str], str | None], Token]
    renderer: Callable[[Any], str]
    requires_repository: bool = False
    description: str = ""

    def scan(self, src: str) -> int | None:
        """Return the offset of the earliest match in src, or None."""
        match = self.pattern.search(src)
        return match.start() if match else None

    def tokenizer(self, src: str, repository: str | None = None) -> Token | None:
        """Tokenize a match anchored at the start of src.

        Returns None when src does not begin with this syntax. Never raises
        on body text.
        """
        match = self.pattern.match(src)
        if match is None:
            return None
        return self.make_token(match, repository)


__all__ = ["ExtensionSpec"]
