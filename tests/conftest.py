"""Shared pytest configuration"""

import sys
from pathlib import Path

import pytest

# Add project root to path for blogsearch imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from blogsearch.search import ArticleSearch, IndexCache


@pytest.fixture
def articles_dir(tmp_path):
    """Empty article directory (the index cache lives next to it, not inside)"""
    path = tmp_path / "articles"
    path.mkdir()
    return path


@pytest.fixture
def write_article(articles_dir):
    """Create or overwrite an article: write_article("doc_a.md", "rust rust go")"""
    def _write(name: str, content: str) -> Path:
        path = articles_dir / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def index_path(tmp_path):
    return tmp_path / "cache" / "data.json"


@pytest.fixture
def article_search(articles_dir, index_path):
    return ArticleSearch(articles_dir=articles_dir, cache=IndexCache(index_path))
