"""HTML fragment building for autolink renderers.

Renderers only ever emit an anchor with an ``href`` or plain text. All
interpolated values are escaped here, but the output is not sanitized:
callers run the final document through their own allow-list sanitizer.

Thread Safety:
Pure functions, no shared state.
"""

import html

GITHUB_URL = "https://github.com"

SHORT_SHA_LENGTH = 7


def html_escape(s: str) -> str:
    """Escape HTML special characters.

    CommonMark-compliant: escapes <, >, &, " but NOT single quotes.
    Python's html.escape() escapes ' to &#x27; which CommonMark doesn't require.
    """
    return html.escape(s, quote=False).replace('"', "&quot;")


def github_url(*segments: str) -> str:
    """Build an absolute github.com URL from path segments.

    Example:
        >>> github_url("octo", "hello-world", "issues", "26")
        'https://github.com/octo/hello-world/issues/26'
    """
    return "/".join((GITHUB_URL, *segments))


def short_sha(sha: str) -> str:
    """Abbreviate a commit SHA for display."""
    return sha[:SHORT_SHA_LENGTH]


def render_link(href: str, text: str) -> str:
    """Render an anchor with escaped href and text."""
    return f'<a href="{html_escape(href)}">{html_escape(text)}</a>'
