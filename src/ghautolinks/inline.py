"""Reference inline driver for GitHub autolink extensions.

Host Markdown parsers own the inline walk; this module implements the same
contract for callers that only need autolinking of a text run, and for
exercising extensions end to end:

1. At the current position, try each extension's tokenizer in registration
   order. The first token wins and its ``raw`` is consumed.
2. Otherwise ask every extension where its syntax starts next and flush the
   literal text up to the nearest offset (at least one character), or to
   the end of input when nothing else can match.

Thread Safety:
InlineScanner holds only an immutable tuple of extensions. Per-call state
lives in local variables, so one scanner may serve many threads.

"""

from collections.abc import Iterable, Iterator
from typing import TypeAlias

from ghautolinks.config import get_autolink_config
from ghautolinks.extensions.protocol import InlineExtension
from ghautolinks.extensions.registry import github_autolinks
from ghautolinks.renderers.html import html_escape
from ghautolinks.tokens import Token

# A literal text run, or a token with the extension that produced it
Segment: TypeAlias = str | tuple[InlineExtension, Token]


class InlineScanner:
    """Drive a set of inline extensions over a text run.

    Usage:
        >>> scanner = InlineScanner(github_autolinks("octo/hello-world"))
        >>> scanner.render("Fixes #26")
        'Fixes <a href="https://github.com/octo/hello-world/issues/26">#26</a>'

    """

    __slots__ = ("_extensions",)

    def __init__(self, extensions: Iterable[InlineExtension]) -> None:
        self._extensions = tuple(extensions)

    @property
    def extensions(self) -> tuple[InlineExtension, ...]:
        return self._extensions

    def scan(self, text: str) -> Iterator[Segment]:
        """Split text into literal runs and tokens, left to right."""
        pos = 0
        text_len = len(text)
        extensions = self._extensions

        while pos < text_len:
            src = text[pos:]

            for ext in extensions:
                token = ext.tokenizer(src)
                if token is not None:
                    yield ext, token
                    pos += len(token.raw)
                    break
            else:
                next_start = self._next_start(src)
                if next_start is None:
                    yield src
                    return
                yield src[:next_start]
                pos += next_start

    def _next_start(self, src: str) -> int | None:
        """Nearest offset any extension reports, never less than 1."""
        nearest: int | None = None
        for ext in self._extensions:
            offset = ext.start(src)
            if offset is None:
                continue
            offset = max(offset, 1)
            if nearest is None or offset < nearest:
                nearest = offset
        return nearest

    def render(self, text: str) -> str:
        """Render text to HTML: literal runs escaped, tokens linked."""
        parts: list[str] = []
        parts_append = parts.append
        for segment in self.scan(text):
            if isinstance(segment, str):
                parts_append(html_escape(segment))
            else:
                ext, token = segment
                parts_append(ext.renderer(token))
        return "".join(parts)


def render_inline(
    text: str,
    repository: str | None = None,
    *,
    extensions: Iterable[InlineExtension] | None = None,
) -> str:
    """Autolink GitHub references in a text run.

    Args:
        text: Inline text (no Markdown block structure)
        repository: ``owner/repo`` for relative references
        extensions: Explicit extensions; overrides repository and config

    Returns:
        HTML fragment. Not sanitized.

    Raises:
        InvalidRepositoryFormat: If repository is present but malformed

    Example:
        >>> render_inline("cc @octocat")
        'cc <a href="https://github.com/octocat">@octocat</a>'

    """
    if extensions is None:
        if repository is None:
            config = get_autolink_config()
            extensions = github_autolinks(config.repository, include=config.include)
        else:
            extensions = github_autolinks(repository)
    return InlineScanner(extensions).render(text)


__all__ = [
    "InlineScanner",
    "Segment",
    "render_inline",
]
