"""Integration test configuration - app wired to temporary directories"""

import pytest
from fastapi.testclient import TestClient

from blogsearch.config import Settings
from blogsearch.main import create_app


@pytest.fixture
def settings(articles_dir, index_path):
    return Settings(articles_dir=str(articles_dir), index_path=index_path, log_file=None)


@pytest.fixture
def client(settings):
    """Test client without lifespan (global logging stays untouched)"""
    return TestClient(create_app(settings))
