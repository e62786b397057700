"""
Full-text search over the article directory.

Components:
- tokenizer: whitespace split + lowercase + Snowball stemming
- scanner: adds unseen articles to the index
- cache: persisted JSON index (load with fallback, atomic best-effort save)
- scorer: BM25 with corpus statistics from the index
- ranking: query → refresh index → score all → ranked hits
"""

from .tokenizer import normalize, normalize_query
from .stemmer import stem
from .models import CorpusIndex, Document
from .scanner import ScanResult, ScanWarning, scan_directory
from .cache import IndexCache
from .scorer import BM25Scorer, CorpusStats
from .ranking import ArticleSearch, SearchHit

__all__ = [
    "normalize",
    "normalize_query",
    "stem",
    "CorpusIndex",
    "Document",
    "ScanResult",
    "ScanWarning",
    "scan_directory",
    "IndexCache",
    "BM25Scorer",
    "CorpusStats",
    "ArticleSearch",
    "SearchHit",
]
