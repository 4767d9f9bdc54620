from __future__ import annotations

from pathlib import Path
import sys

test_dir = Path(__file__).resolve().parent
project_root = test_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from glossgen.render import render_index_page, render_term_page  # noqa: E402


def test_term_page_skeleton():
    html = render_term_page("dog", "A loyal animal, see cat", {"cat", "dog"})
    assert html.startswith("<html>\n<head>\n<title>dog</title>\n</head>")
    assert '<font color="red">dog</font>' in html
    assert 'see <a href="cat.html">cat</a>' in html
    assert '<a href="index.html">index</a>.' in html
    assert html.endswith("</body>\n</html>\n")


def test_term_page_without_other_terms_has_only_index_link():
    html = render_term_page("cat", "A small animal.", {"cat", "dog"})
    assert html.count("<a href=") == 1
    assert '<a href="index.html">' in html


def test_term_page_links_to_itself():
    html = render_term_page("loop", "see loop", {"loop"})
    assert 'see <a href="loop.html">loop</a>' in html


def test_index_page_lists_terms_in_given_order():
    html = render_index_page(["cat", "dog"])
    assert "<title>Glossary</title>" in html
    assert "<h3>Index</h3>" in html
    cat = html.index('<li><a href="cat.html">cat</a></li>')
    dog = html.index('<li><a href="dog.html">dog</a></li>')
    assert cat < dog


def test_index_page_empty_and_custom_title():
    html = render_index_page([], title="Terms")
    assert "<h2>Terms</h2>" in html
    assert "<li>" not in html
    assert "<ul>\n</ul>" in html
