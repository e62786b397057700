"""
Ranking assembler - tokenizes the query, refreshes the index and ranks
every document by BM25 score.

Each search runs load → scan → save on the persisted index. A module-level
lock serializes that sequence between threads so two concurrent searches
cannot drop each other's newly scanned documents.
"""

import heapq
import logging
import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..config import Settings
from .cache import IndexCache
from .models import CorpusIndex
from .scanner import ScanResult, scan_directory
from .scorer import BM25Scorer, CorpusStats
from .tokenizer import normalize_query

logger = logging.getLogger(__name__)

_index_lock = threading.Lock()


@dataclass(frozen=True)
class SearchHit:
    doc_id: str
    score: int


def rank(scored: Iterable[SearchHit], top_k: Optional[int] = None) -> List[SearchHit]:
    """
    Order hits by descending score, ties by ascending document id.
    
    With top_k only a heap of k entries is kept while consuming the input.
    """
    if top_k is not None:
        return heapq.nsmallest(top_k, scored, key=lambda hit: (-hit.score, hit.doc_id))
    
    heap = [(-hit.score, hit.doc_id, hit) for hit in scored]
    heapq.heapify(heap)
    return [heapq.heappop(heap)[2] for _ in range(len(heap))]


class ArticleSearch:
    """Full-text search over the article directory"""
    
    def __init__(
        self,
        articles_dir: Union[str, Path],
        cache: IndexCache,
        scorer: Optional[BM25Scorer] = None,
    ):
        # No Path() normalization: "./articles" must stay "./articles" to match cached ids
        self.articles_dir = os.fspath(articles_dir)
        self.cache = cache
        self.scorer = scorer or BM25Scorer()
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "ArticleSearch":
        return cls(
            articles_dir=settings.articles_dir,
            cache=IndexCache(settings.index_path),
            scorer=BM25Scorer(k1=settings.k1, b=settings.b),
        )
    
    def refresh_index(self) -> ScanResult:
        """
        Load the persisted index, add unseen articles and persist it again.
        
        Raises:
            IndexIOError: cache file cannot be created or opened
            NotFoundError: article directory cannot be listed
        """
        with _index_lock:
            index = self.cache.load()
            result = scan_directory(self.articles_dir, index)
            self.cache.save(result.index)
        return result
    
    def score_all(self, query_terms: List[str], index: CorpusIndex) -> List[SearchHit]:
        stats = CorpusStats.from_index(index)
        return [
            SearchHit(doc_id=doc_id, score=self.scorer.score(document, query_terms, index, stats))
            for doc_id, document in index.documents.items()
        ]
    
    def search(self, raw_query_terms: Iterable[str], top_k: Optional[int] = None) -> List[SearchHit]:
        """
        Rank every indexed article against the query.
        
        Args:
            raw_query_terms: Query already split on whitespace by the caller
            top_k: Keep only the best k hits (default: all documents)
        
        Returns:
            Hits in descending score order, ties ordered by document id
        """
        query_terms = normalize_query(raw_query_terms)
        result = self.refresh_index()
        
        hits = rank(self.score_all(query_terms, result.index), top_k)
        
        logger.info(
            f"Search {query_terms}: {len(result.index.documents)} documents scored, "
            f"{len(result.warnings)} skipped during scan"
        )
        return hits
