"""HTML fragment helpers shared by the autolink renderers."""

from ghautolinks.renderers.html import (
    GITHUB_URL,
    github_url,
    html_escape,
    render_link,
    short_sha,
)

__all__ = [
    "GITHUB_URL",
    "github_url",
    "html_escape",
    "render_link",
    "short_sha",
]
