import pytest

from docsearch.core.exceptions import InvalidInput
from docsearch.services.indexer import index_document
from docsearch.services.search_cache import SearchCache
from docsearch.services.search_engine import search_query


@pytest.mark.parametrize("query", [None, "", "   "])
async def test_empty_query_is_invalid(db, query) -> None:
    with pytest.raises(InvalidInput):
        await search_query(db, query)


async def test_search_engine_query_on_sample_corpus(db, sample_docs) -> None:
    result = await search_query(db, "search engine")
    titles = [doc.title for doc in result.results]

    assert result.cached is False
    assert "Search Engines" in titles
    assert result.scores[sample_docs["Search Engines"].id] > 0
    # No shared term with the query
    assert "TF-IDF Ranking" not in titles
    assert sample_docs["TF-IDF Ranking"].id not in result.scores

    ranked_scores = [result.scores[doc.id] for doc in result.results]
    assert ranked_scores == sorted(ranked_scores, reverse=True)


async def test_more_specific_query_ranks_search_engines_first(db, sample_docs) -> None:
    result = await search_query(db, "web search engines")

    assert result.results[0].title == "Search Engines"
    assert result.scores[result.results[0].id] > 0


async def test_no_matching_terms_is_not_cached(db, sample_docs) -> None:
    first = await search_query(db, "xylophone zebra")
    second = await search_query(db, "xylophone zebra")

    for result in (first, second):
        assert result.results == []
        assert result.scores == {}
        assert result.cached is False
    assert await SearchCache(db).get("xylophone zebra") is None


async def test_repeat_query_is_served_from_cache(db, sample_docs) -> None:
    first = await search_query(db, "information retrieval")
    second = await search_query(db, "information retrieval")

    assert first.cached is False
    assert second.cached is True
    assert [d.id for d in second.results] == [d.id for d in first.results]
    assert second.scores == first.scores


async def test_cached_results_miss_new_documents(db, sample_docs) -> None:
    first = await search_query(db, "web search engines")
    new_doc = await index_document(db, "Web Crawlers", "Web crawlers feed web search engines with web pages.")

    second = await search_query(db, "web search engines")
    assert second.cached is True
    assert new_doc.id not in [d.id for d in second.results]
    assert [d.id for d in second.results] == [d.id for d in first.results]


async def test_cached_ids_of_removed_documents_are_dropped(db, sample_docs) -> None:
    first = await search_query(db, "search engine")
    removed = sample_docs["Search Engines"]
    await db.delete(removed)
    await db.commit()

    second = await search_query(db, "search engine")
    assert second.cached is True
    assert [d.id for d in second.results] == [d.id for d in first.results if d.id != removed.id]


async def test_empty_document_never_matches(db, sample_docs) -> None:
    empty = await index_document(db, "Empty", "")
    result = await search_query(db, "information search engine query")

    assert empty.id not in result.scores
    assert empty.id not in [d.id for d in result.results]
