"""Built-in GitHub autolink extension specs.

Available specs:
- MENTIONS: @octocat
- ISSUE_URL, PULL_REQUEST_URL: full issue and pull request URLs
- ISSUE_REFERENCE, GH_REFERENCE: #26 and GH-26 (need a repository)
- CROSS_REPO_REFERENCE: owner/repo#26
- COMMIT_URL: full commit URL
- COMMIT_SHA, USER_COMMIT: bare SHA and user@sha (need a repository)
- REPO_COMMIT: owner/repo@sha

"""

from ghautolinks.extensions.builtins.commits import (
    COMMIT_SHA,
    COMMIT_URL,
    REPO_COMMIT,
    USER_COMMIT,
)
from ghautolinks.extensions.builtins.issues import (
    CROSS_REPO_REFERENCE,
    GH_REFERENCE,
    ISSUE_REFERENCE,
    ISSUE_URL,
    PULL_REQUEST_URL,
)
from ghautolinks.extensions.builtins.mentions import MENTIONS

__all__ = [
    "COMMIT_SHA",
    "COMMIT_URL",
    "CROSS_REPO_REFERENCE",
    "GH_REFERENCE",
    "ISSUE_REFERENCE",
    "ISSUE_URL",
    "MENTIONS",
    "PULL_REQUEST_URL",
    "REPO_COMMIT",
    "USER_COMMIT",
]
