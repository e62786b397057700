"""Unit tests for the article store"""

import pytest

from blogsearch.articles import ArticleStore, article_title, make_preview
from blogsearch.errors import NotFoundError


class TestArticleStore:
    """Test listing and reading articles"""
    
    def test_list_sorted_by_name(self, articles_dir, write_article):
        write_article("2024-03-b.md", "b")
        write_article("2023-01-a.md", "a")
        (articles_dir / "drafts").mkdir()
        
        assert ArticleStore(articles_dir).list_articles() == ["2023-01-a.md", "2024-03-b.md"]
    
    def test_list_missing_directory(self, tmp_path):
        with pytest.raises(NotFoundError):
            ArticleStore(tmp_path / "missing").list_articles()
    
    def test_read_article(self, articles_dir, write_article):
        write_article("hello.md", "# Hello\n\nrust")
        
        assert ArticleStore(articles_dir).read_article("hello.md") == "# Hello\n\nrust"
    
    def test_read_missing_article(self, articles_dir):
        with pytest.raises(NotFoundError):
            ArticleStore(articles_dir).read_article("nope.md")
    
    def test_read_outside_directory_rejected(self, tmp_path, articles_dir):
        """Test that a traversal name cannot reach files next to the articles"""
        (tmp_path / "secret.txt").write_text("secret", encoding="utf-8")
        
        with pytest.raises(NotFoundError):
            ArticleStore(articles_dir).read_article("../secret.txt")
    
    def test_read_document_by_id(self, articles_dir, write_article):
        path = write_article("doc_a.md", "rust rust go")
        
        assert ArticleStore(articles_dir).read_document(str(path)) == "rust rust go"
    
    def test_read_undecodable_article(self, articles_dir):
        (articles_dir / "binary.md").write_bytes(b"\xff\xfe\xfa")
        
        with pytest.raises(NotFoundError):
            ArticleStore(articles_dir).read_article("binary.md")


class TestArticleTitle:
    """Test display names derived from file names"""
    
    def test_extension_dropped_and_underscores_spaced(self):
        assert article_title("my_first_post.md") == "my first post"
    
    def test_only_last_extension_dropped(self):
        assert article_title("notes.v2.md") == "notes.v2"
    
    def test_no_extension(self):
        assert article_title("README") == "README"


class TestMakePreview:
    def test_truncated_to_200_characters(self):
        assert make_preview("a" * 500) == "a" * 200 + "..."
    
    def test_short_content_still_marked(self):
        assert make_preview("short") == "short..."


class TestMiniArticle:
    """Test summaries read through the document id"""
    
    def test_from_document_id(self, articles_dir, write_article):
        path = write_article("rust_tips.md", "rust rust go")
        
        mini = ArticleStore(articles_dir).mini_article(str(path))
        
        assert (mini.name, mini.title, mini.preview) == ("rust_tips.md", "rust tips", "rust rust go...")
    
    def test_unreadable_document_has_no_preview(self, articles_dir):
        mini = ArticleStore(articles_dir).mini_article(str(articles_dir / "gone.md"))
        
        assert mini.title == "gone"
        assert mini.preview is None
    
    def test_list_mini_articles_sorted(self, articles_dir, write_article):
        write_article("b_post.md", "second")
        write_article("a_post.md", "first")
        
        minis = ArticleStore(articles_dir).list_mini_articles()
        
        assert [m.title for m in minis] == ["a post", "b post"]
        assert [m.preview for m in minis] == ["first...", "second..."]
