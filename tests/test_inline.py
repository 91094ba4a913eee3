"""End-to-end tests for the reference inline driver.

Exercises the host contract: flushing literal text up to the nearest
start offset, registration-order precedence, and escaping of text that no
extension claims.
"""

import re
import time

import pytest

from ghautolinks import (
    AutolinkConfig,
    ExtensionSpec,
    GitHubAutolinks,
    InlineScanner,
    InvalidRepositoryFormat,
    MentionToken,
    autolink_config_context,
    create_bundle,
    github_autolinks,
    github_mentions,
    render_inline,
)
from ghautolinks.extensions.builtins import ISSUE_REFERENCE

SHA = "a5c3785ed8d6a35868bc169f07e40e889087fd2e"
REPO = "octo/hello-world"


@pytest.fixture
def md() -> GitHubAutolinks:
    return GitHubAutolinks(REPO)


class TestInlineScanner:
    def test_segments(self) -> None:
        scanner = InlineScanner(github_mentions())
        segments = list(scanner.scan("hi @octocat!"))
        assert segments[0] == "hi "
        ext, token = segments[1]
        assert ext.name == "github_mentions"
        assert token == MentionToken(raw="@octocat", username="octocat")
        assert segments[2] == "!"

    def test_plain_text_is_one_segment(self) -> None:
        scanner = InlineScanner(github_autolinks(REPO))
        assert list(scanner.scan("nothing to link here")) == ["nothing to link here"]

    def test_empty_text(self) -> None:
        assert InlineScanner(github_autolinks()).render("") == ""

    def test_no_extensions(self) -> None:
        assert InlineScanner(()).render("a <b> @c") == "a &lt;b&gt; @c"

    def test_literal_text_is_escaped(self) -> None:
        scanner = InlineScanner(github_mentions())
        assert scanner.render('<script>"x"</script> @octocat') == (
            '&lt;script&gt;&quot;x&quot;&lt;/script&gt; '
            '<a href="https://github.com/octocat">@octocat</a>'
        )

    def test_registration_order_decides_ties(self) -> None:
        # Both specs claim "#1"; only the order differs
        shadow = ExtensionSpec(
            name="shadow_hash",
            pattern=re.compile(r"#\d+"),
            make_token=lambda match, repository: MentionToken(raw=match.group(0), username=""),
            renderer=lambda token: "<shadow>",
        )
        first = InlineScanner(create_bundle([ISSUE_REFERENCE, shadow], REPO))
        second = InlineScanner(create_bundle([shadow, ISSUE_REFERENCE], REPO))
        assert "issues/1" in first.render("#1")
        assert second.render("#1") == "<shadow>"


class TestRenderPipeline:
    def test_mention(self, md: GitHubAutolinks) -> None:
        assert md("@octocat rest") == '<a href="https://github.com/octocat">@octocat</a> rest'

    def test_issue_reference(self, md: GitHubAutolinks) -> None:
        assert md("Fixes #26.") == (
            'Fixes <a href="https://github.com/octo/hello-world/issues/26">#26</a>.'
        )

    def test_issue_reference_without_repository(self) -> None:
        assert GitHubAutolinks()("Fixes #26") == "Fixes #26"

    def test_cross_repo_reference(self, md: GitHubAutolinks) -> None:
        assert md("see octo/other#3") == (
            'see <a href="https://github.com/octo/other/issues/3">octo/other#3</a>'
        )

    def test_commit_url_wins_over_bare_sha(self, md: GitHubAutolinks) -> None:
        url = f"https://github.com/octo/hello-world/commit/{SHA}"
        assert md(f"landed in {url}") == f'landed in <a href="{url}">a5c3785</a>'

    def test_issue_url(self, md: GitHubAutolinks) -> None:
        url = "https://github.com/octo/other/issues/9"
        assert md(f"dup of {url}") == f'dup of <a href="{url}">#9</a>'

    def test_bare_sha(self, md: GitHubAutolinks) -> None:
        assert md(f"reverts {SHA}") == (
            f'reverts <a href="https://github.com/octo/hello-world/commit/{SHA}">a5c3785</a>'
        )

    def test_user_commit_wins_over_mention(self, md: GitHubAutolinks) -> None:
        assert md(f"from jlord@{SHA}") == (
            f'from <a href="https://github.com/octo/hello-world/commit/{SHA}">'
            "jlord@a5c3785</a>"
        )

    def test_repo_commit_wins_over_user_commit(self, md: GitHubAutolinks) -> None:
        assert md(f"see jlord/sheetsee.js@{SHA}") == (
            f'see <a href="https://github.com/jlord/sheetsee.js/commit/{SHA}">'
            "jlord/sheetsee.js@a5c3785</a>"
        )

    def test_gh_reference(self, md: GitHubAutolinks) -> None:
        assert md("GH-5 and gh-6") == (
            '<a href="https://github.com/octo/hello-world/issues/5">GH-5</a> and '
            '<a href="https://github.com/octo/hello-world/issues/6">gh-6</a>'
        )

    def test_multiple_references(self, md: GitHubAutolinks) -> None:
        html = md("@a, @b: #1 #2")
        assert html.count("<a ") == 4

    def test_idempotent(self, md: GitHubAutolinks) -> None:
        text = f"@octocat fixed #26 in {SHA} (see octo/x#1, GH-2)"
        assert md(text) == md(text)
        assert GitHubAutolinks(REPO)(text) == md(text)

    def test_include_subset(self) -> None:
        md = GitHubAutolinks(REPO, include=["github_mentions"])
        assert md("@octocat #26") == '<a href="https://github.com/octocat">@octocat</a> #26'
        assert md.config.include == ("github_mentions",)

    def test_include_single_name_string(self) -> None:
        md = GitHubAutolinks(REPO, include="github_mentions")
        assert md.config.include == ("github_mentions",)
        assert md("@octocat #26") == '<a href="https://github.com/octocat">@octocat</a> #26'

    def test_malformed_repository(self) -> None:
        with pytest.raises(InvalidRepositoryFormat):
            GitHubAutolinks("not-a-valid-repo-string")

    def test_from_config(self) -> None:
        md = GitHubAutolinks.from_config(AutolinkConfig(repository=REPO))
        assert md.extensions.repository == REPO
        assert md.render("#1") == md("#1")


class TestRenderInline:
    def test_explicit_repository(self) -> None:
        assert render_inline("#1", REPO) == (
            '<a href="https://github.com/octo/hello-world/issues/1">#1</a>'
        )

    def test_uses_context_config(self) -> None:
        with autolink_config_context(AutolinkConfig(repository=REPO)):
            assert "href" in render_inline("#1")
        assert render_inline("#1") == "#1"

    def test_context_include(self) -> None:
        config = AutolinkConfig(include=("github_issue_reference",))
        with autolink_config_context(config):
            assert render_inline("@octocat") == "@octocat"

    def test_explicit_extensions_override(self) -> None:
        with autolink_config_context(AutolinkConfig(repository=REPO)):
            assert render_inline("#1 @x", extensions=github_mentions()) == (
                '#1 <a href="https://github.com/x">@x</a>'
            )


class TestLongWords:
    """Unbroken runs of segment characters must not make scanning quadratic."""

    @pytest.mark.parametrize("text", ["a" * 50_000, "a.b-" * 12_500])
    def test_long_run_renders_quickly(self, text: str) -> None:
        md = GitHubAutolinks()
        started = time.perf_counter()
        html = md(text)
        elapsed = time.perf_counter() - started
        assert html == text
        assert elapsed < 5.0

    def test_prefix_reference_after_long_run(self) -> None:
        text = "x" * 20_000 + " octo/other#3"
        html = GitHubAutolinks()(text)
        assert html.endswith('<a href="https://github.com/octo/other/issues/3">octo/other#3</a>')
