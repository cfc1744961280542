import pytest

from newsscraper.output.formatter import filter_articles, format_articles, sort_articles


@pytest.fixture
def records(make_record):
    return [
        make_record("Harbour festival returns this weekend", id=1, source="b.example.com",
                    published_at="2024-05-01T08:00:00.000Z", summary="Boats and music."),
        make_record("Council approves the new city budget", id=2, source="a.example.com",
                    published_at="2024-05-01T11:00:00.000Z", summary="Spending rises."),
        make_record("Rail strike called off after late talks", id=3, source="b.example.com",
                    published_at="2024-04-30T23:00:00.000Z", summary="Music to commuters' ears."),
    ]


def test_filter_matches_title_or_summary_case_insensitively(records):
    assert [r.id for r in filter_articles(records, "MUSIC")] == [1, 3]
    assert [r.id for r in filter_articles(records, "budget")] == [2]


def test_empty_filter_returns_everything(records):
    assert filter_articles(records, "") == records
    assert filter_articles(records, None) == records


def test_relevance_sort_keeps_extraction_order(records):
    assert sort_articles(records, "relevance") == records


def test_date_sort_is_newest_first(records):
    assert [r.id for r in sort_articles(records, "date")] == [2, 1, 3]


def test_source_sort_is_stable(records):
    assert [r.id for r in sort_articles(records, "source")] == [2, 1, 3]


def test_unknown_sort_mode_raises(records):
    with pytest.raises(ValueError):
        sort_articles(records, "popularity")


def test_format_articles_lists_each_record(records):
    text = format_articles(records[:1], total=3, source="www.example.com")

    assert text.splitlines()[0] == "1 of 3 article(s) from www.example.com"
    assert "[General] Harbour festival returns this weekend" in text
    assert format_articles([], total=0, source="x") == "0 of 0 article(s) from x"
