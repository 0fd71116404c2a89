"""Integration tests converting complete HTML documents."""

import pytest

from htmlmark import HtmlOptions, HtmlToMarkdownConverter, html_to_markdown

RELEASE_NOTES = """<h1>Release notes</h1>
<p>Version <b>2.0</b> adds <a href="https://example.com/docs">new docs</a>.</p>
<h2>Changes</h2>
<ul>
  <li>Faster parsing</li>
  <li>Better <em>tables</em></li>
</ul>
<pre><code class="language-python">print("hi")</code></pre>
<table>
  <tr><th>Name</th><th>Value</th></tr>
  <tr><td>a_b</td><td>1</td></tr>
</table>
"""

RELEASE_NOTES_MARKDOWN = (
    "Release notes\n"
    "=============\n"
    "\n"
    "Version **2.0** adds [new docs](https://example.com/docs).\n"
    "\n"
    "Changes\n"
    "-------\n"
    "\n"
    "* Faster parsing\n"
    "* Better *tables*\n"
    "\n"
    "```python\n"
    'print("hi")\n'
    "```\n"
    "\n"
    "| Name | Value |\n"
    "| --- | --- |\n"
    "| a\\_b | 1 |\n"
    "\n"
)

ARTICLE = """<!DOCTYPE html>
<html><head><style>body { color: red; }</style><script>track();</script></head><body>
<article>
<h2>Quoting</h2>
<blockquote><p>First line</p><ul><li>point</li></ul></blockquote>
<p>See <a href="https://example.com" title="Example">https://example.com</a><br>for more.</p>
<hr>
<ol start="3"><li>three</li><li>four<ol><li>nested</li></ol></li></ol>
</article>
</body></html>"""


@pytest.mark.integration
class TestDocuments:
    """Full-document conversions."""

    def test_release_notes(self):
        assert html_to_markdown(RELEASE_NOTES) == RELEASE_NOTES_MARKDOWN

    def test_release_notes_atx(self):
        markdown = html_to_markdown(RELEASE_NOTES, heading_style="atx")
        assert markdown.startswith("# Release notes\n\nVersion")
        assert "\n## Changes\n" in markdown

    def test_article(self):
        markdown = html_to_markdown(ARTICLE, heading_style="atx", strip_document="strip")
        assert markdown == (
            "## Quoting\n"
            "\n"
            "> First line\n"
            ">\n"
            ">\n"
            ">\n"
            "> * point\n"
            "\n"
            "See [https://example.com](https://example.com)  \n"
            "for more.\n"
            "\n"
            "---\n"
            "\n"
            "3. three\n"
            "4. four\n"
            "   1. nested"
        )

    def test_head_content_dropped(self):
        markdown = html_to_markdown(ARTICLE)
        assert "color" not in markdown
        assert "track" not in markdown

    def test_no_triple_newlines(self):
        for html in (RELEASE_NOTES, ARTICLE):
            assert "\n\n\n" not in html_to_markdown(html)

    def test_converter_reuse_is_stable(self):
        converter = HtmlToMarkdownConverter(HtmlOptions(heading_style="atx_closed"))
        first = converter.convert(RELEASE_NOTES)
        second = converter.convert(RELEASE_NOTES)
        assert first == second
        assert first.startswith("# Release notes #\n\n")

    def test_path_input(self, temp_dir):
        path = temp_dir / "notes.html"
        path.write_text(RELEASE_NOTES, encoding="utf-8")
        assert html_to_markdown(path) == RELEASE_NOTES_MARKDOWN
