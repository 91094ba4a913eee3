"""Extension system for ghautolinks.

Key components:
- ExtensionSpec: immutable recognizer definition (pattern, token builder,
  renderer, repository requirement)
- AutolinkExtension: a spec bound to a repository, implementing the
  InlineExtension protocol a host parser consumes
- ExtensionBundle: ordered extensions sharing one repository context
- EXTENSION_SPECS: the registry, in precedence order

Thread Safety:
All components are immutable after creation and safe to share.

"""

from ghautolinks.extensions.factory import (
    AutolinkExtension,
    ExtensionBundle,
    create_bundle,
    create_extension,
)
from ghautolinks.extensions.protocol import InlineExtension
from ghautolinks.extensions.registry import (
    EXTENSION_SPECS,
    get_spec,
    github_autolinks,
    github_commit_sha,
    github_commit_url,
    github_cross_repo_reference,
    github_gh_reference,
    github_issue_reference,
    github_issue_url,
    github_mentions,
    github_pull_request_url,
    github_repo_commit,
    github_user_commit,
)
from ghautolinks.extensions.spec import ExtensionSpec

__all__ = [
    "EXTENSION_SPECS",
    "AutolinkExtension",
    "ExtensionBundle",
    "ExtensionSpec",
    "InlineExtension",
    "create_bundle",
    "create_extension",
    "get_spec",
    "github_autolinks",
    "github_commit_sha",
    "github_commit_url",
    "github_cross_repo_reference",
    "github_gh_reference",
    "github_issue_reference",
    "github_issue_url",
    "github_mentions",
    "github_pull_request_url",
    "github_repo_commit",
    "github_user_commit",
]
