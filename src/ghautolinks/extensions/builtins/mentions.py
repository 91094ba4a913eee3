"""Mention extension: ``@username`` links to the user's profile.

Example:
Thanks @octocat for the review.

"""

from __future__ import annotations

import re

from ghautolinks.extensions.spec import ExtensionSpec
from ghautolinks.renderers.html import github_url, render_link
from ghautolinks.tokens import MentionToken

MENTION_PATTERN = re.compile(r"@([\w.-]+)", re.ASCII)


def _make_mention(match: re.Match[str], repository: str | None) -> MentionToken:
    return MentionToken(raw=match.group(0), username=match.group(1))


def render_mention(token: MentionToken) -> str:
    """Render ``@user`` as a link to https://github.com/user."""
    return render_link(github_url(token.username), token.raw)


MENTIONS = ExtensionSpec(
    name="github_mentions",
    pattern=MENTION_PATTERN,
    make_token=_make_mention,
    renderer=render_mention,
    description="@octocat",
)
