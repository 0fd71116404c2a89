"""Unit tests for paragraphs, containers, quotes, code blocks and breaks."""

import pytest
from utils import md, raw_md


@pytest.mark.unit
class TestParagraphs:
    """Test paragraph and container framing."""

    def test_paragraph(self):
        assert raw_md("<p>Hello</p>") == "\n\nHello\n\n"

    def test_consecutive_paragraphs(self):
        assert md("<p>a</p><p>b</p>") == "a\n\nb\n\n"

    def test_empty_paragraph(self):
        assert md("<p> </p>") == ""

    @pytest.mark.parametrize("tag", ["div", "article", "section"])
    def test_containers(self, tag):
        assert raw_md(f"<{tag}>x</{tag}>") == "\n\nx\n\n"

    def test_empty_container(self):
        assert md("<div></div>") == ""

    def test_newlines_in_source_kept(self):
        assert md("<p>a\n   b</p>") == "a\nb\n\n"

    def test_wrap_joins_lines(self):
        assert md("<p>a\n   b</p>", wrap=True) == "a b\n\n"

    def test_wrap_width(self):
        assert md("<p>one two three four</p>", wrap=True, wrap_width=9) == "one two\nthree\nfour\n\n"

    def test_wrap_keeps_hard_breaks(self):
        assert md("<p>aaa bbb<br>ccc</p>", wrap=True, wrap_width=3) == "aaa\nbbb  \nccc\n\n"

    def test_wrap_keeps_consecutive_hard_breaks(self):
        html = "<p>a<br><br>b</p>"
        assert raw_md(html, wrap=True, wrap_width=20) == raw_md(html) == "\n\na  \n  \nb\n\n"

    def test_wrap_does_not_apply_to_divs(self):
        assert md("<div>one two three four</div>", wrap=True, wrap_width=9) == "one two three four\n\n"


@pytest.mark.unit
class TestBlockquotes:
    """Test blockquote prefixes."""

    def test_simple(self):
        assert raw_md("<blockquote>Hello</blockquote>") == "\n> Hello\n\n"

    def test_nested(self):
        html = "<blockquote>And she was like <blockquote>Hello</blockquote></blockquote>"
        assert raw_md(html) == "\n> And she was like\n> > Hello\n\n"

    def test_blank_lines_get_bare_marker(self):
        output = md("<blockquote><p>a</p><p>b</p></blockquote>")
        lines = output.rstrip("\n").split("\n")
        assert lines[0] == "> a"
        assert lines[-1] == "> b"
        assert all(line.startswith(">") for line in lines)
        assert all(line == ">" for line in lines[1:-1])

    def test_empty(self):
        assert raw_md("<blockquote>  </blockquote>") == "\n"


@pytest.mark.unit
class TestBreaksAndRules:
    """Test line breaks and horizontal rules."""

    def test_br_spaces(self):
        assert md("<p>a<br>b</p>") == "a  \nb\n\n"

    def test_br_backslash(self):
        assert md("<p>a<br>b</p>", newline_style="backslash") == "a\\\nb\n\n"

    def test_hr(self):
        assert md("<p>a</p><hr><p>b</p>") == "a\n\n---\n\nb\n\n"


@pytest.mark.unit
class TestCodeBlocks:
    """Test fenced code blocks."""

    def test_language_class(self):
        assert raw_md('<pre><code class="language-go">code</code></pre>') == "\n\n```go\ncode\n```\n\n"

    def test_lang_class(self):
        assert md('<pre><code class="highlight lang-py">x</code></pre>') == "```py\nx\n```\n\n"

    def test_default_language(self):
        assert md("<pre>x</pre>", code_language="text") == "```text\nx\n```\n\n"

    def test_callback(self):
        html = '<pre data-lang="rust">x</pre>'
        assert md(html, code_language_callback=lambda el: el.get("data-lang")) == "```rust\nx\n```\n\n"

    def test_callback_none_falls_back(self):
        assert md("<pre>x</pre>", code_language="sh", code_language_callback=lambda el: None) == "```sh\nx\n```\n\n"

    def test_class_wins_over_callback(self):
        html = '<pre><code class="language-go">x</code></pre>'
        assert md(html, code_language_callback=lambda el: "rust") == "```go\nx\n```\n\n"

    def test_whitespace_and_characters_preserved(self):
        assert md("<pre>a  *b*\n  c_d</pre>") == "```\na  *b*\n  c_d\n```\n\n"

    def test_empty(self):
        assert md("<pre></pre>") == ""

    def test_code_block_between_paragraphs(self):
        assert md("<p>a</p><pre>x</pre><p>b</p>") == "a\n\n```\nx\n```\n\nb\n\n"


@pytest.mark.unit
class TestBlockWhitespace:
    """Test the shared block-boundary whitespace set."""

    def test_walker_and_formatters_share_one_definition(self):
        from htmlmark import constants, converter
        from htmlmark.formatters import blocks

        assert converter.BLOCK_WHITESPACE is constants.BLOCK_WHITESPACE
        assert blocks.BLOCK_WHITESPACE is constants.BLOCK_WHITESPACE

    def test_tabs_and_carriage_returns_trimmed_around_pre(self):
        assert md("<div>a\t\r\n<pre>code</pre>\t\r\nb</div>") == "a\n\n```\ncode\n```\n\nb\n\n"
