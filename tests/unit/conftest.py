"""Unit test configuration"""

import pytest

from blogsearch.search import CorpusIndex, Document


@pytest.fixture
def two_doc_index():
    """
    Index of the reference corpus:
        doc_a.md: "rust rust go"
        doc_b.md: "go go go"
    """
    return CorpusIndex(
        documents={
            "articles/doc_a.md": Document(term_counts={"rust": 2, "go": 1}, length=3),
            "articles/doc_b.md": Document(term_counts={"go": 3}, length=3),
        },
        doc_count=2,
    )
