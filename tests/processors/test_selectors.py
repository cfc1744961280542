import pytest
from bs4 import BeautifulSoup

from newsscraper.processors.selectors import SelectorError, parse_selector


def _soup(html):
    return BeautifulSoup(html, "html.parser")


def test_parse_selector_keeps_source_and_caches():
    sel = parse_selector('article, .post, div.story, [class*="story"], [datetime]')

    assert sel.source == 'article, .post, div.story, [class*="story"], [datetime]'
    assert parse_selector('article, .post, div.story, [class*="story"], [datetime]') is sel


def test_class_selector_matches_whole_tokens_only():
    soup = _soup('<div class="postscript">a</div><div class="big post">b</div>')

    found = parse_selector(".post").find_all(soup)

    assert [n.get_text() for n in found] == ["b"]


def test_class_substring_selector_matches_inside_tokens():
    soup = _soup('<div class="featured-article-card">a</div><div class="other">b</div>')

    found = parse_selector('[class*="article"]').find_all(soup)

    assert [n.get_text() for n in found] == ["a"]


def test_find_first_uses_document_order_across_alternatives():
    soup = _soup('<div><span class="headline">first</span><h2>second</h2></div>')

    node = parse_selector("h2, .headline").find_first(soup)

    assert node.get_text() == "first"


def test_find_all_respects_limit():
    soup = _soup("".join(f"<article>{i}</article>" for i in range(10)))

    found = parse_selector("article").find_all(soup, limit=3)

    assert [n.get_text() for n in found] == ["0", "1", "2"]


def test_find_first_searches_descendants_only():
    soup = _soup("<article><div>body</div></article>")
    article = soup.find("article")

    assert parse_selector("article").find_first(article) is None


def test_attribute_operators():
    soup = _soup('<a href="https://x.test/a.html">1</a><a href="/b">2</a><a>3</a>')

    assert [n.get_text() for n in parse_selector("a[href]").find_all(soup)] == ["1", "2"]
    assert [n.get_text() for n in parse_selector('[href^="https"]').find_all(soup)] == ["1"]
    assert [n.get_text() for n in parse_selector("[href$='.html']").find_all(soup)] == ["1"]
    assert [n.get_text() for n in parse_selector('[href="/b"]').find_all(soup)] == ["2"]


def test_commas_inside_attribute_values_do_not_split():
    soup = _soup('<span data-x="a,b">1</span><span data-x="a">2</span><p>3</p>')

    found = parse_selector('[data-x="a,b"], p').find_all(soup)

    assert [n.get_text() for n in found] == ["1", "3"]


def test_combinators_and_pseudo_classes_match():
    soup = _soup(
        '<div class="list"><div><h2>one</h2></div><div><h2>two</h2></div></div>'
        "<div><h2>outside</h2></div>"
    )

    assert [n.get_text() for n in parse_selector(".list > div").find_all(soup)] == ["one", "two"]
    assert [n.get_text() for n in parse_selector(".list h2").find_all(soup)] == ["one", "two"]
    assert parse_selector(".list > div:nth-child(2) h2").find_first(soup).get_text() == "two"


@pytest.mark.parametrize("text", ["", "   ", "p,,a", '[class*="x"', "div >", "h2:bogus-state"])
def test_invalid_selectors_raise(text):
    with pytest.raises(SelectorError):
        parse_selector(text)


def test_selector_error_is_a_value_error():
    assert issubclass(SelectorError, ValueError)
