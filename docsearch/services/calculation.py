import math

from typing import Dict, Iterable, Mapping

def compute_idf(df: int, N: int) -> float:
    # df + 1 keeps the ratio finite; terms in most documents go negative
    return math.log(N / (df + 1)) if N > 0 else 0.0

def compute_tf_idf_score(
    query_terms: Iterable[str],
    term_frequency: Mapping[str, int],
    idf_values: Mapping[str, float]
) -> float:
    return sum(term_frequency.get(term, 0) * idf_values.get(term, 0.0) for term in query_terms)

def normalize_by_length(score: float, term_count: int) -> float:
    return score / (term_count or 1)

def rank_by_score(scores: Dict[int, float]):
    """Document ids by descending score, ascending id among equal scores."""
    return sorted(scores, key=lambda doc_id: (-scores[doc_id], doc_id))
