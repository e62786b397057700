"""
BM25 scorer over the corpus index.

Formula:
    idf(t)      = log10(1 + (N - n_t + 0.5) / (n_t + 0.5))
    score(t, d) = idf(t) × (f × (k1 + 1)) / (f + k1 × (1 - b + b × dl/avgdl))

Where:
    N     = index.doc_count
    n_t   = number of documents containing t (0 gives a positive baseline idf)
    f     = frequency of t in d
    dl    = length of d in tokens
    avgdl = sum of all document lengths / N

The summed score is returned as a fixed-point integer (× 1000, rounded half
away from zero) so it can be used as a sort key without float comparisons.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .models import CorpusIndex, Document

SCORE_SCALE = 1000


def to_fixed_point(score: float) -> int:
    """
    Examples:
        >>> to_fixed_point(0.4139)
        414
        >>> to_fixed_point(0.0125)
        13
    """
    return int(math.copysign(math.floor(abs(score) * SCORE_SCALE + 0.5), score))


@dataclass
class CorpusStats:
    """Corpus-wide values shared by every document scored for one query"""
    doc_count: int
    avgdl: float
    _document_frequencies: Dict[str, int] = field(default_factory=dict)
    
    @classmethod
    def from_index(cls, index: CorpusIndex) -> "CorpusStats":
        avgdl = index.total_length() / index.doc_count if index.doc_count else 0.0
        return cls(doc_count=index.doc_count, avgdl=avgdl)
    
    def document_frequency(self, term: str, index: CorpusIndex) -> int:
        if term not in self._document_frequencies:
            self._document_frequencies[term] = sum(
                1 for doc in index.documents.values() if term in doc.term_counts
            )
        return self._document_frequencies[term]


class BM25Scorer:
    """
    BM25 with corpus statistics taken from the persisted index.
    """
    
    def __init__(self, k1: float = 1.2, b: float = 0.75):
        """
        Args:
            k1: Term frequency saturation parameter (default: 1.2)
            b: Length normalization parameter (default: 0.75)
        """
        self.k1 = k1
        self.b = b
    
    def idf(self, term: str, index: CorpusIndex, stats: Optional[CorpusStats] = None) -> float:
        if stats is None:
            stats = CorpusStats.from_index(index)
        n_t = stats.document_frequency(term, index)
        return math.log10(1 + (stats.doc_count - n_t + 0.5) / (n_t + 0.5))
    
    def score(
        self,
        document: Document,
        query_terms: List[str],
        index: CorpusIndex,
        stats: Optional[CorpusStats] = None
    ) -> int:
        """
        Score one document against normalized query terms.
        
        Args:
            document: Document to score
            query_terms: Output of the tokenizer (repeated terms count twice)
            index: Index the document belongs to
            stats: Precomputed corpus statistics; computed here when omitted
        
        Returns:
            Fixed-point score (0 when no query term occurs in the document)
        """
        if not query_terms:
            return 0
        
        if stats is None:
            stats = CorpusStats.from_index(index)
        
        length_ratio = document.length / stats.avgdl if stats.avgdl else 0.0
        norm = self.k1 * (1 - self.b + self.b * length_ratio)
        
        score = 0.0
        for term in query_terms:
            tf = document.term_counts.get(term, 0)
            if tf == 0:
                continue
            score += self.idf(term, index, stats) * (tf * (self.k1 + 1)) / (tf + norm)
        
        return to_fixed_point(score)
