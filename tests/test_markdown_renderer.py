from quiz_player.core.markdown_renderer import MarkdownRenderer, renderer


def test_empty_fragment_has_placeholder():
    assert renderer.render_fragment("   ") == "<p><em>No content provided.</em></p>"
    assert renderer.render_fragment(None) == "<p><em>No content provided.</em></p>"


def test_fragment_renders_markdown():
    html = renderer.render_fragment("Some *emphasis* and `code`")
    assert "<em>emphasis</em>" in html
    assert "<code>code</code>" in html


def test_inline_has_no_paragraph():
    assert renderer.render_inline("**B**") == "<strong>B</strong>"


def test_raw_html_is_escaped_by_default():
    assert "<b>" not in MarkdownRenderer().render_fragment("<b>x</b>")


def test_wrap_document_escapes_title_and_inlines_assets():
    document = renderer.wrap_document("<p>x</p>", title="A <b> title", stylesheet="p{}", script="var a;")
    assert "<title>A &lt;b&gt; title</title>" in document
    assert "<style>p{}</style>" in document
    assert "<script>var a;</script>" in document
