"""Property-based tests for the autolink extensions using Hypothesis.

These tests verify invariants that should hold for any input text:
1. Tokenizers never raise, and only match at the start of their input
2. A token's raw text is a non-empty prefix of the input
3. start() and tokenizer() agree: offset 0 if and only if a token
4. Rendering is deterministic and the full pipeline is idempotent
"""

import re

from hypothesis import given, settings
from hypothesis import strategies as st

from ghautolinks import EXTENSION_SPECS, GitHubAutolinks, InlineScanner, github_autolinks

REPO = "octo/hello-world"
ANCHOR_MARKUP = re.compile(r"<a href=\"[^\"<>]*\">|</a>")

spec_names = st.sampled_from(list(EXTENSION_SPECS))
repositories = st.sampled_from([None, REPO])

# Text biased toward the characters GitHub shorthand is made of
fragments = st.sampled_from(
    [
        "@",
        "#",
        "/",
        "GH-",
        "gh-",
        "https://github.com/",
        "/issues/",
        "/pull/",
        "/commit/",
        "octo",
        "hello-world",
        "a5c3785",
        "ed8d6a35868bc169f07e40e889087fd2e",
        "26",
        " ",
        "\n",
        ".",
        "-",
        "<",
        "&",
    ]
)
shorthand_text = st.lists(fragments, max_size=12).map("".join)
any_text = st.one_of(st.text(max_size=60), shorthand_text)


class TestTokenizerProperties:
    @given(name=spec_names, src=any_text, repository=repositories)
    @settings(max_examples=300)
    def test_raw_is_non_empty_prefix(self, name: str, src: str, repository: str | None) -> None:
        token = EXTENSION_SPECS[name].tokenizer(src, repository)
        if token is not None:
            assert token.raw
            assert src.startswith(token.raw)
            assert token.type == name

    @given(name=spec_names, src=any_text)
    @settings(max_examples=300)
    def test_start_and_tokenizer_agree(self, name: str, src: str) -> None:
        ext = github_autolinks(REPO).get(name)
        offset = ext.start(src)
        token = ext.tokenizer(src)
        assert (offset == 0) == (token is not None)
        if offset is not None:
            assert ext.tokenizer(src[offset:]) is not None

    @given(name=spec_names, src=any_text, repository=repositories)
    @settings(max_examples=200)
    def test_render_is_deterministic(self, name: str, src: str, repository: str | None) -> None:
        spec = EXTENSION_SPECS[name]
        token = spec.tokenizer(src, repository)
        if token is not None:
            assert spec.renderer(token) == spec.renderer(token._replace())


class TestPipelineProperties:
    @given(text=any_text, repository=repositories)
    @settings(max_examples=200)
    def test_segments_reassemble_input(self, text: str, repository: str | None) -> None:
        scanner = InlineScanner(github_autolinks(repository))
        parts = [s if isinstance(s, str) else s[1].raw for s in scanner.scan(text)]
        assert "".join(parts) == text

    @given(text=any_text, repository=repositories)
    @settings(max_examples=200)
    def test_render_is_idempotent(self, text: str, repository: str | None) -> None:
        assert GitHubAutolinks(repository)(text) == GitHubAutolinks(repository)(text)

    @given(text=any_text)
    @settings(max_examples=200)
    def test_only_anchor_markup_is_emitted(self, text: str) -> None:
        html = GitHubAutolinks(REPO)(text)
        stripped = ANCHOR_MARKUP.sub("", html)
        assert "<" not in stripped
        assert ">" not in stripped
