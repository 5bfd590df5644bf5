import logging

import nltk
from nltk.data import find

from docsearch.core.config import NLTK_DATA_AUTO_DOWNLOAD

logger = logging.getLogger(__name__)

# (download id, resource path) pairs the normalizer depends on
REQUIRED_DATA = [
    ("stopwords", "corpora/stopwords"),
]

def ensure_nltk_data():
    for alias, resource in REQUIRED_DATA:
        try:
            find(resource)
        except LookupError:
            if not NLTK_DATA_AUTO_DOWNLOAD:
                raise
            logger.info("Downloading NLTK data: %s", alias)
            nltk.download(alias, quiet=True)
