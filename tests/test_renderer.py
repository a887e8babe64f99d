from notegraph.services.markdown_renderer import MarkdownRenderer


def test_wikilinks_become_note_links():
    html_out = MarkdownRenderer().render_fragment("See [[My Note]]")
    assert 'href="note://My%20Note"' in html_out
    assert 'class="note-link"' in html_out
    assert ">My Note</a>" in html_out


def test_scripts_are_stripped():
    html_out = MarkdownRenderer().render_fragment("hi <script>alert(1)</script>")
    assert "<script>" not in html_out


def test_page_wraps_body():
    page = MarkdownRenderer().render_page("# Title")
    assert page.startswith("<html>")
    assert "<h1>Title</h1>" in page
