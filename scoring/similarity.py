"""
TF-IDF vector similarity between a resume and a job description.

Term frequency is count / document length. IDF uses a two-document form,
IDF(t) = ln(2 / (1 + c)), where c is the number of the two documents
containing t. Cosine similarity is taken over the union vocabulary of both
documents.
"""
import logging
import math
from collections import Counter
from typing import Dict, List, Sequence, Set, Tuple, Union

import numpy as np
from sklearn.metrics.pairwise import cosine_similarity as pairwise_cosine_similarity

from utils.config import DOCUMENT_COUNT
from utils.validators import ensure_document

logger = logging.getLogger(__name__)

Document = Union[str, Sequence[str]]


def tokenize(document: Document) -> List[str]:
    """Whitespace tokenization of already-normalized text, lowercased."""
    ensure_document(document, "document")

    if isinstance(document, str):
        return document.lower().split()

    return ' '.join(map(str, document)).lower().split()


def term_frequency(tokens: Sequence[str]) -> Dict[str, float]:
    """Fraction of the document's tokens equal to each term."""
    if not tokens:
        return {}

    total = len(tokens)
    return {term: count / total for term, count in Counter(tokens).items()}


class TfidfSimilarity:
    """Two-document TF-IDF vectorizer and cosine scorer."""

    def __init__(self, document_count: int = DOCUMENT_COUNT):
        self.document_count = document_count

    def inverse_document_frequency(
        self,
        vocabulary: Set[str],
        *frequencies: Dict[str, float]
    ) -> Dict[str, float]:
        """IDF of each vocabulary term across the given documents."""
        idf = {}
        for term in vocabulary:
            containing = sum(1 for tf in frequencies if term in tf)
            idf[term] = math.log(self.document_count / (1.0 + containing))
        return idf

    def vectorize(
        self,
        doc_a: Document,
        doc_b: Document
    ) -> Tuple[Dict[str, float], Dict[str, float], Set[str]]:
        """
        Build TF-IDF vectors for a pair of normalized documents.

        Args:
            doc_a: First normalized document (text or tokens)
            doc_b: Second normalized document (text or tokens)

        Returns:
            Tuple of (vector_a, vector_b, vocabulary); both vectors carry
            every vocabulary term, with 0.0 for terms a document lacks
        """
        tokens_a = tokenize(doc_a)
        tokens_b = tokenize(doc_b)

        vocabulary = set(tokens_a) | set(tokens_b)

        tf_a = term_frequency(tokens_a)
        tf_b = term_frequency(tokens_b)
        idf = self.inverse_document_frequency(vocabulary, tf_a, tf_b)

        vector_a = {term: tf_a.get(term, 0.0) * idf[term] for term in vocabulary}
        vector_b = {term: tf_b.get(term, 0.0) * idf[term] for term in vocabulary}

        return vector_a, vector_b, vocabulary

    def cosine_similarity(self, text_a: Document, text_b: Document) -> float:
        """
        Cosine similarity of the TF-IDF vectors of two normalized texts.

        Returns:
            Similarity in [0, 1]; 0.0 when either document is empty or
            either vector has zero magnitude. Rounded to 12 decimal places
        """
        vector_a, vector_b, vocabulary = self.vectorize(text_a, text_b)

        if not vocabulary:
            return 0.0

        terms = sorted(vocabulary)
        array_a = np.array([vector_a[t] for t in terms], dtype=float)
        array_b = np.array([vector_b[t] for t in terms], dtype=float)

        if np.linalg.norm(array_a) == 0.0 or np.linalg.norm(array_b) == 0.0:
            logger.debug("Zero-magnitude TF-IDF vector, similarity is 0")
            return 0.0

        sim = pairwise_cosine_similarity(
            array_a.reshape(1, -1),
            array_b.reshape(1, -1)
        )[0][0]

        # Identical documents score exactly 1.0
        return round(max(0.0, min(1.0, float(sim))), 12)


_default_similarity = TfidfSimilarity()


def vectorize(doc_a: Document, doc_b: Document) -> Tuple[Dict[str, float], Dict[str, float], Set[str]]:
    """TF-IDF vectors of two normalized documents over their union vocabulary."""
    return _default_similarity.vectorize(doc_a, doc_b)


def cosine_similarity(text_a: Document, text_b: Document) -> float:
    """Cosine similarity of two normalized documents in [0, 1]."""
    return _default_similarity.cosine_similarity(text_a, text_b)
