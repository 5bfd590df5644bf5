"""Text normalization shared by document ingest and query parsing.

Every term stored on a document and every term looked up at query time goes
through :class:`TextNormalizer`, so the two sides always agree.
"""
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, FrozenSet, List

from nltk.corpus import stopwords
from nltk.stem import PorterStemmer
from nltk.tokenize import RegexpTokenizer

from docsearch.services.nltk_data import ensure_nltk_data

TERM_PATTERN = re.compile(r"^[a-z0-9]+$", re.IGNORECASE)
MIN_TERM_LENGTH = 2

# Splits on anything that is not a latin/cyrillic letter, digit or underscore
WORD_TOKENIZER = RegexpTokenizer(r"[^A-Za-zА-Яа-я0-9_]+", gaps=True)

@dataclass(frozen=True)
class TextNormalizer:
    stop_words: FrozenSet[str]
    stemmer: PorterStemmer = field(default_factory=lambda: PorterStemmer(mode=PorterStemmer.ORIGINAL_ALGORITHM))

    def tokenize(self, text: str) -> List[str]:
        tokens = WORD_TOKENIZER.tokenize(text.lower())
        return [t for t in tokens if len(t) >= MIN_TERM_LENGTH and TERM_PATTERN.match(t)]

    def normalize(self, text: str) -> List[str]:
        if not text:
            return []
        tokens = [t for t in self.tokenize(text) if t not in self.stop_words]
        return [self.stemmer.stem(t) for t in tokens]

@lru_cache(maxsize=None)
def get_normalizer(language: str = "english") -> TextNormalizer:
    ensure_nltk_data()
    return TextNormalizer(stop_words=frozenset(stopwords.words(language)))

def preprocess_text(text: str) -> List[str]:
    return get_normalizer().normalize(text)

def calculate_term_frequency(terms: List[str]) -> Dict[str, int]:
    term_frequency = {}
    for term in terms:
        term_frequency[term] = term_frequency.get(term, 0) + 1
    return term_frequency
