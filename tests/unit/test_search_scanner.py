"""
Unit tests for the corpus scanner.
"""

import pytest

from blogsearch.errors import NotFoundError
from blogsearch.search.models import CorpusIndex, Document
from blogsearch.search.scanner import build_document, scan_directory


class TestBuildDocument:
    """Test per-article term counting"""
    
    def test_counts_and_length(self):
        doc = build_document("Rust rust go")
        assert doc.term_counts == {"rust": 2, "go": 1}
        assert doc.length == 3
    
    def test_keys_are_stemmed(self):
        """Test that only tokenizer output becomes a term key"""
        doc = build_document("Searching searched")
        assert doc.term_counts == {"search": 2}
    
    def test_empty_text(self):
        doc = build_document("")
        assert doc.term_counts == {}
        assert doc.length == 0


class TestScanDirectory:
    """Test directory scanning into the index"""
    
    def test_indexes_new_files(self, articles_dir, write_article):
        path_a = write_article("doc_a.md", "rust rust go")
        path_b = write_article("doc_b.md", "go go go")
        
        result = scan_directory(articles_dir, CorpusIndex.empty())
        
        assert set(result.index.documents) == {str(path_a), str(path_b)}
        assert result.index.documents[str(path_b)].term_counts == {"go": 3}
        assert result.added == [str(path_a), str(path_b)]
        assert result.index.doc_count == 2
        assert result.warnings == []
    
    def test_updates_index_in_place(self, articles_dir, write_article):
        write_article("doc_a.md", "rust")
        index = CorpusIndex.empty()
        
        result = scan_directory(articles_dir, index)
        
        assert result.index is index
        assert len(index.documents) == 1
    
    def test_known_documents_not_rescanned(self, articles_dir, write_article):
        """Test that an indexed article keeps its counts after the file changes"""
        path = write_article("doc_a.md", "rust rust go")
        index = scan_directory(articles_dir, CorpusIndex.empty()).index
        
        write_article("doc_a.md", "python python python python")
        result = scan_directory(articles_dir, index)
        
        assert result.added == []
        assert index.documents[str(path)].term_counts == {"rust": 2, "go": 1}
    
    def test_only_missing_entries_added(self, articles_dir, write_article):
        path_a = write_article("doc_a.md", "rust")
        stale = Document(term_counts={"old": 1}, length=1)
        index = CorpusIndex(documents={str(path_a): stale}, doc_count=1)
        path_b = write_article("doc_b.md", "go")
        
        result = scan_directory(articles_dir, index)
        
        assert result.added == [str(path_b)]
        assert index.documents[str(path_a)] == stale
    
    def test_doc_count_includes_directories(self, articles_dir, write_article):
        """Test N counts every visited entry, not only indexed documents"""
        write_article("doc_a.md", "rust")
        (articles_dir / "drafts").mkdir()
        
        result = scan_directory(articles_dir, CorpusIndex.empty())
        
        assert len(result.index.documents) == 1
        assert result.index.doc_count == 2
    
    def test_doc_count_reassigned_each_scan(self, articles_dir, write_article):
        write_article("doc_a.md", "rust")
        index = CorpusIndex(documents={}, doc_count=40)
        
        scan_directory(articles_dir, index)
        
        assert index.doc_count == 1
    
    def test_unreadable_file_skipped_with_warning(self, articles_dir, write_article):
        """Test that undecodable content is skipped and reported, not raised"""
        write_article("doc_a.md", "rust")
        bad = articles_dir / "binary.md"
        bad.write_bytes(b"\xff\xfe\xfa")
        
        result = scan_directory(articles_dir, CorpusIndex.empty())
        
        assert str(bad) not in result.index.documents
        assert [w.path for w in result.warnings] == [str(bad)]
        assert result.index.doc_count == 2
    
    def test_empty_directory(self, articles_dir):
        result = scan_directory(articles_dir, CorpusIndex.empty())
        assert result.index.documents == {}
        assert result.index.doc_count == 0
    
    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(NotFoundError):
            scan_directory(tmp_path / "nope", CorpusIndex.empty())
    
    def test_not_recursive(self, articles_dir, write_article):
        write_article("doc_a.md", "rust")
        nested = articles_dir / "nested"
        nested.mkdir()
        (nested / "inner.md").write_text("go", encoding="utf-8")
        
        result = scan_directory(articles_dir, CorpusIndex.empty())
        
        assert all("inner.md" not in doc_id for doc_id in result.index.documents)
