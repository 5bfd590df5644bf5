import math
from types import SimpleNamespace

import pytest

from docsearch.services.calculation import rank_by_score
from docsearch.services.indexer import build_inverted_index
from docsearch.services.relevance import calculate_relevance, find_candidates, score_documents


def _doc(id, terms):
    tf = {}
    for t in terms:
        tf[t] = tf.get(t, 0) + 1
    return SimpleNamespace(id=id, terms=terms, term_frequency=tf)


DOCS = [
    _doc(1, ["alpha", "beta", "beta"]),
    _doc(2, ["beta", "gamma"]),
    _doc(3, ["delta"]),
    _doc(4, ["delta", "epsilon"]),
]


def test_candidates_are_union_of_postings() -> None:
    index = build_inverted_index(DOCS)

    assert find_candidates(["alpha", "gamma"], index) == {1, 2}
    assert find_candidates(["unknown"], index) == set()
    assert find_candidates([], index) == set()


def test_scores_are_length_normalized_tf_idf() -> None:
    index = build_inverted_index(DOCS)
    scores = score_documents(["alpha", "beta"], DOCS[:2], index)

    idf_alpha = math.log(4 / 2)
    idf_beta = math.log(4 / 3)
    assert scores[1] == pytest.approx((1 * idf_alpha + 2 * idf_beta) / 3)
    assert scores[2] == pytest.approx((1 * idf_beta) / 2)


def test_unseen_query_terms_contribute_nothing() -> None:
    index = build_inverted_index(DOCS)
    with_unknown = score_documents(["alpha", "zzz"], DOCS[:1], index)
    without = score_documents(["alpha"], DOCS[:1], index)

    assert with_unknown == without


def test_document_without_terms_divides_by_one() -> None:
    empty = _doc(9, [])
    index = build_inverted_index(DOCS + [empty])

    assert score_documents(["alpha"], [empty], index) == {9: 0.0}


def test_negative_scores_are_kept() -> None:
    docs = [_doc(i, ["common"]) for i in range(1, 4)]
    index = build_inverted_index(docs)
    scores = score_documents(["common"], docs, index)

    assert all(score < 0 for score in scores.values())


def test_ranking_breaks_ties_by_id() -> None:
    scores = {7: 0.5, 3: 0.5, 5: 0.9, 1: -0.2}
    assert rank_by_score(scores) == [5, 3, 7, 1]


async def test_calculate_relevance_without_candidates(db, sample_docs) -> None:
    from docsearch.services.indexer import load_inverted_index

    index = await load_inverted_index(db)
    assert await calculate_relevance(db, ["xylophon"], index) == {}
